"""FastAPI dependencies providing the catalog repositories.

Route modules build their use cases from these providers, so tests can swap
the whole store by overriding them in ``app.dependency_overrides``.
"""

from pokemon_review.db.session import get_db_session
from pokemon_review.features.catalog.repositories import (
    SqlAlchemyCategoryRepository,
    SqlAlchemyOwnerRepository,
    SqlAlchemyPokemonRepository,
    SqlAlchemyReviewerRepository,
    SqlAlchemyReviewRepository,
    SqlAlchemyTypeRepository,
)


async def get_pokemon_repository() -> SqlAlchemyPokemonRepository:
    """Dependency injection for the pokemon repository."""
    return SqlAlchemyPokemonRepository(get_db_session=get_db_session)


async def get_category_repository() -> SqlAlchemyCategoryRepository:
    """Dependency injection for the category repository."""
    return SqlAlchemyCategoryRepository(get_db_session=get_db_session)


async def get_owner_repository() -> SqlAlchemyOwnerRepository:
    """Dependency injection for the owner repository."""
    return SqlAlchemyOwnerRepository(get_db_session=get_db_session)


async def get_type_repository() -> SqlAlchemyTypeRepository:
    """Dependency injection for the type repository."""
    return SqlAlchemyTypeRepository(get_db_session=get_db_session)


async def get_review_repository() -> SqlAlchemyReviewRepository:
    """Dependency injection for the review repository."""
    return SqlAlchemyReviewRepository(get_db_session=get_db_session)


async def get_reviewer_repository() -> SqlAlchemyReviewerRepository:
    """Dependency injection for the reviewer repository."""
    return SqlAlchemyReviewerRepository(get_db_session=get_db_session)
