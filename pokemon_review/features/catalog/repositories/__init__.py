"""Catalog repositories package."""

from .pokemon_repository import SqlAlchemyPokemonRepository
from .protocols import (
    EntityRepository,
    NamedEntityRepository,
    PokemonRepository,
    ReviewRepository,
)
from .reference_repositories import (
    SqlAlchemyCategoryRepository,
    SqlAlchemyOwnerRepository,
    SqlAlchemyTypeRepository,
)
from .review_repositories import (
    SqlAlchemyReviewerRepository,
    SqlAlchemyReviewRepository,
)
from .sqlalchemy_repository import SessionFactory

__all__ = [
    # SQLAlchemy implementations
    "SqlAlchemyPokemonRepository",
    "SqlAlchemyCategoryRepository",
    "SqlAlchemyOwnerRepository",
    "SqlAlchemyTypeRepository",
    "SqlAlchemyReviewRepository",
    "SqlAlchemyReviewerRepository",
    "SessionFactory",
    # Protocols
    "EntityRepository",
    "NamedEntityRepository",
    "PokemonRepository",
    "ReviewRepository",
]
