"""Protocol definitions for catalog repository operations."""

from typing import Protocol, TypeVar

from pokemon_review.features.catalog.models import Pokemon, Review

ModelT = TypeVar("ModelT")


class EntityRepository(Protocol[ModelT]):
    """Protocol for a store of entities identified by an integer id."""

    async def exists(self, entity_id: int) -> bool:
        """Check whether an entity with this id exists."""
        ...

    async def get(self, entity_id: int) -> ModelT | None:
        """Get an entity by id, or None when it does not exist."""
        ...

    async def list_all(self) -> list[ModelT]:
        """List every entity ordered by id."""
        ...


class NamedEntityRepository(EntityRepository[ModelT], Protocol[ModelT]):
    """Protocol for a store whose entities also carry a unique name.

    Name matching is exact and case-sensitive.
    """

    async def exists_by_name(self, name: str) -> bool:
        """Check whether an entity with exactly this name exists."""
        ...

    async def get_by_name(self, name: str) -> ModelT | None:
        """Get an entity by exact name, or None when it does not exist."""
        ...


class PokemonRepository(NamedEntityRepository[Pokemon], Protocol):
    """Protocol for the pokemon store."""

    async def create(
        self, pokemon: Pokemon, category_id: int, owner_id: int, type_id: int
    ) -> bool:
        """Persist a pokemon with its category, owner and type links.

        The pokemon row, its join rows and any attached reviews are committed
        together. On failure nothing is committed.

        Returns:
            True when committed, False when no changes were made
        """
        ...

    async def get_rating(self, pokemon_id: int) -> float:
        """Average review rating of a pokemon, 0.0 without reviews."""
        ...

    async def list_by_category(self, category_id: int) -> list[Pokemon]:
        """List pokemons linked to a category."""
        ...

    async def list_by_owner(self, owner_id: int) -> list[Pokemon]:
        """List pokemons linked to an owner."""
        ...

    async def list_by_type(self, type_id: int) -> list[Pokemon]:
        """List pokemons linked to a type."""
        ...


class ReviewRepository(EntityRepository[Review], Protocol):
    """Protocol for the review store."""

    async def list_by_pokemon(self, pokemon_id: int) -> list[Review]:
        """List reviews of a pokemon."""
        ...

    async def list_by_reviewer(self, reviewer_id: int) -> list[Review]:
        """List reviews written by a reviewer."""
        ...
