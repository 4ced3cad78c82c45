"""SQLAlchemy repositories for categories, owners and types."""

from pokemon_review.features.catalog.models import Category, Owner, Type
from pokemon_review.features.catalog.repositories.sqlalchemy_repository import (
    NamedSqlAlchemyRepository,
)


class SqlAlchemyCategoryRepository(NamedSqlAlchemyRepository[Category]):
    model = Category


class SqlAlchemyOwnerRepository(NamedSqlAlchemyRepository[Owner]):
    model = Owner


class SqlAlchemyTypeRepository(NamedSqlAlchemyRepository[Type]):
    model = Type
