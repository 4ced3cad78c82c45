"""SQLAlchemy repository for pokemons."""

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from pokemon_review.features.catalog.models import (
    Pokemon,
    PokemonCategory,
    PokemonOwner,
    PokemonType,
    Review,
)
from pokemon_review.features.catalog.repositories.sqlalchemy_repository import (
    NamedSqlAlchemyRepository,
)

logger = logging.getLogger(__name__)


class SqlAlchemyPokemonRepository(NamedSqlAlchemyRepository[Pokemon]):
    """Pokemon store with atomic creation of the pokemon and its links."""

    model = Pokemon

    async def create(
        self, pokemon: Pokemon, category_id: int, owner_id: int, type_id: int
    ) -> bool:
        """Insert the pokemon, its join rows and attached reviews in one transaction.

        Args:
            pokemon: Transient pokemon, optionally with reviews attached
            category_id: Category to link
            owner_id: Owner to link
            type_id: Type to link

        Returns:
            True when the transaction committed, False when it was rolled back
        """
        async with self.get_db_session() as session:
            try:
                async with session.begin():
                    session.add(pokemon)
                    await session.flush()

                    session.add_all(
                        [
                            PokemonCategory(
                                pokemon_id=pokemon.id, category_id=category_id
                            ),
                            PokemonOwner(pokemon_id=pokemon.id, owner_id=owner_id),
                            PokemonType(pokemon_id=pokemon.id, type_id=type_id),
                        ]
                    )
            except SQLAlchemyError:
                logger.exception("Rolled back creation of pokemon %r", pokemon.name)
                return False

        logger.info("Created pokemon %r with id %s", pokemon.name, pokemon.id)
        return True

    async def get_rating(self, pokemon_id: int) -> float:
        async with self.get_db_session() as session:
            result = await session.execute(
                select(func.avg(Review.rating)).where(Review.pokemon_id == pokemon_id)
            )
            average = result.scalar()
            return float(average) if average is not None else 0.0

    async def list_by_category(self, category_id: int) -> list[Pokemon]:
        async with self.get_db_session() as session:
            result = await session.execute(
                select(Pokemon)
                .join(PokemonCategory, PokemonCategory.pokemon_id == Pokemon.id)
                .where(PokemonCategory.category_id == category_id)
                .order_by(Pokemon.id)
            )
            return list(result.scalars().all())

    async def list_by_owner(self, owner_id: int) -> list[Pokemon]:
        async with self.get_db_session() as session:
            result = await session.execute(
                select(Pokemon)
                .join(PokemonOwner, PokemonOwner.pokemon_id == Pokemon.id)
                .where(PokemonOwner.owner_id == owner_id)
                .order_by(Pokemon.id)
            )
            return list(result.scalars().all())

    async def list_by_type(self, type_id: int) -> list[Pokemon]:
        async with self.get_db_session() as session:
            result = await session.execute(
                select(Pokemon)
                .join(PokemonType, PokemonType.pokemon_id == Pokemon.id)
                .where(PokemonType.type_id == type_id)
                .order_by(Pokemon.id)
            )
            return list(result.scalars().all())
