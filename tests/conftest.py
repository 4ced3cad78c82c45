"""Pytest configuration and shared fixtures for all tests.

This module provides function-scoped fixtures for:
- A fresh in-memory SQLite store per test (engine, tables, session factory)
- Seeded reference rows (categories, owners, types, reviewers)
- Repository instances bound to the test store
"""

from collections.abc import AsyncGenerator
from datetime import date

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from pokemon_review.db.session import (
    create_all_tables,
    create_engine,
    create_session_maker,
)

# Import all models to ensure they are registered with Base.metadata
from pokemon_review.features.catalog import models  # noqa: F401
from pokemon_review.features.catalog.models import (
    Category,
    Owner,
    Pokemon,
    Review,
    Reviewer,
    Type,
)
from pokemon_review.features.catalog.repositories import (
    SqlAlchemyCategoryRepository,
    SqlAlchemyOwnerRepository,
    SqlAlchemyPokemonRepository,
    SqlAlchemyReviewerRepository,
    SqlAlchemyReviewRepository,
    SqlAlchemyTypeRepository,
)
from tests.catalog_tests_utils import SeededCatalog

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def async_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Provide a fresh in-memory database with all tables created.

    Every test gets its own engine, so nothing leaks between tests.
    """
    engine = create_engine(TEST_DATABASE_URL, poolclass=StaticPool)
    await create_all_tables(engine)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_maker(async_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Provide the session factory handed to repositories."""
    return create_session_maker(async_engine)


@pytest_asyncio.fixture
async def seeded_catalog(
    session_maker: async_sessionmaker[AsyncSession],
) -> SeededCatalog:
    """Insert the reference rows; ids start at 1 in a fresh database."""
    async with session_maker() as session:
        async with session.begin():
            mouse = Category(name="Mouse")
            seed = Category(name="Seed")
            ash = Owner(name="Ash Ketchum", gym="Pallet Town")
            misty = Owner(name="Misty", gym="Cerulean City")
            electric = Type(name="Electric")
            grass = Type(name="Grass")
            reviewers = [
                Reviewer(first_name="Teddy", last_name="Smith"),
                Reviewer(first_name="Taylor", last_name="Jones"),
                Reviewer(first_name="Jessica", last_name="McGregor"),
            ]
            session.add_all([mouse, seed, ash, misty, electric, grass, *reviewers])

    return SeededCatalog(
        mouse_category_id=mouse.id,
        seed_category_id=seed.id,
        ash_owner_id=ash.id,
        misty_owner_id=misty.id,
        electric_type_id=electric.id,
        grass_type_id=grass.id,
        reviewer_ids=[reviewer.id for reviewer in reviewers],
    )


@pytest.fixture
def pokemon_repository(
    session_maker: async_sessionmaker[AsyncSession],
) -> SqlAlchemyPokemonRepository:
    return SqlAlchemyPokemonRepository(get_db_session=session_maker)


@pytest.fixture
def category_repository(
    session_maker: async_sessionmaker[AsyncSession],
) -> SqlAlchemyCategoryRepository:
    return SqlAlchemyCategoryRepository(get_db_session=session_maker)


@pytest.fixture
def owner_repository(
    session_maker: async_sessionmaker[AsyncSession],
) -> SqlAlchemyOwnerRepository:
    return SqlAlchemyOwnerRepository(get_db_session=session_maker)


@pytest.fixture
def type_repository(
    session_maker: async_sessionmaker[AsyncSession],
) -> SqlAlchemyTypeRepository:
    return SqlAlchemyTypeRepository(get_db_session=session_maker)


@pytest.fixture
def review_repository(
    session_maker: async_sessionmaker[AsyncSession],
) -> SqlAlchemyReviewRepository:
    return SqlAlchemyReviewRepository(get_db_session=session_maker)


@pytest.fixture
def reviewer_repository(
    session_maker: async_sessionmaker[AsyncSession],
) -> SqlAlchemyReviewerRepository:
    return SqlAlchemyReviewerRepository(get_db_session=session_maker)


@pytest_asyncio.fixture
async def pikachu(
    seeded_catalog: SeededCatalog,
    pokemon_repository: SqlAlchemyPokemonRepository,
) -> Pokemon:
    """Store Pikachu (Mouse, Ash, Electric) with three reviews rated 5, 5 and 1."""
    pokemon = Pokemon(
        name="Pikachu",
        birth_date=date(1903, 1, 1),
        reviews=[
            Review(
                title="Pikachu",
                text="Pikachu is the best pokemon, because it is electric",
                rating=5,
                reviewer_id=seeded_catalog.reviewer_ids[0],
            ),
            Review(
                title="Pikachu",
                text="Pikachu is the best at killing rocks",
                rating=5,
                reviewer_id=seeded_catalog.reviewer_ids[1],
            ),
            Review(
                title="Pikachu",
                text="Pikachu, pikachu, pikachu",
                rating=1,
                reviewer_id=seeded_catalog.reviewer_ids[2],
            ),
        ],
    )
    created = await pokemon_repository.create(
        pokemon,
        seeded_catalog.mouse_category_id,
        seeded_catalog.ash_owner_id,
        seeded_catalog.electric_type_id,
    )
    assert created
    return pokemon
