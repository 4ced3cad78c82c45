"""Seed the catalog with the reference rows and a first pokemon.

Categories, owners, types and reviewers are inserted directly; the pokemon
goes through the create pokemon use case like any API request.
"""

import argparse
import asyncio
from datetime import date

from sqlalchemy import select

from pokemon_review.core.settings import get_settings
from pokemon_review.db.session import (
    create_all_tables,
    create_engine,
    create_session_maker,
)
from pokemon_review.features.catalog.dtos import (
    CreatePokemonRequest,
    ReviewPlaceholder,
)
from pokemon_review.features.catalog.models import Category, Owner, Reviewer, Type
from pokemon_review.features.catalog.repositories import (
    SqlAlchemyCategoryRepository,
    SqlAlchemyOwnerRepository,
    SqlAlchemyPokemonRepository,
    SqlAlchemyTypeRepository,
)
from pokemon_review.features.catalog.usecases import CreatePokemonUseCaseImpl


async def seed_catalog(database_url: str) -> None:
    """Insert the fixture rows unless a category already exists."""
    engine = create_engine(database_url)
    session_maker = create_session_maker(engine)

    try:
        await create_all_tables(engine)

        async with session_maker() as session:
            async with session.begin():
                already_seeded = (
                    await session.execute(select(Category).limit(1))
                ).scalar_one_or_none()
                if already_seeded is not None:
                    print("Catalog already seeded, nothing to do.")
                    return

                category = Category(name="Mouse")
                owner = Owner(name="Ash Ketchum", gym="Pallet Town")
                pokemon_type = Type(name="Electric")
                reviewers = [
                    Reviewer(first_name="Teddy", last_name="Smith"),
                    Reviewer(first_name="Taylor", last_name="Jones"),
                    Reviewer(first_name="Jessica", last_name="McGregor"),
                ]
                session.add_all([category, owner, pokemon_type, *reviewers])

        use_case = CreatePokemonUseCaseImpl(
            pokemon_repository=SqlAlchemyPokemonRepository(session_maker),
            category_repository=SqlAlchemyCategoryRepository(session_maker),
            owner_repository=SqlAlchemyOwnerRepository(session_maker),
            type_repository=SqlAlchemyTypeRepository(session_maker),
        )
        outcome = await use_case.execute(
            CreatePokemonRequest(
                name="Pikachu",
                birth_date=date(1903, 1, 1),
                category_id=category.id,
                owner_id=owner.id,
                type_id=pokemon_type.id,
                reviews=[
                    ReviewPlaceholder(
                        title="Pikachu",
                        text="Pikachu is the best pokemon, because it is electric",
                        rating=5,
                        reviewer_id=reviewers[0].id,
                    ),
                    ReviewPlaceholder(
                        title="Pikachu",
                        text="Pikachu is the best at killing rocks",
                        rating=5,
                        reviewer_id=reviewers[1].id,
                    ),
                    ReviewPlaceholder(
                        title="Pikachu",
                        text="Pikachu, pikachu, pikachu",
                        rating=1,
                        reviewer_id=reviewers[2].id,
                    ),
                ],
            )
        )
        if outcome.is_success:
            print(f"Seeded catalog, created pokemon {outcome.value}")
        else:
            print(f"Seeding pokemon failed: {outcome.kind.value} {outcome.detail}")
    finally:
        await engine.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the pokemon review catalog")
    parser.add_argument(
        "--database-url",
        default=None,
        help="SQLAlchemy URL; defaults to the configured database",
    )
    args = parser.parse_args()

    asyncio.run(seed_catalog(args.database_url or get_settings().database_url))
