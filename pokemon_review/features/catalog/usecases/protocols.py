"""Protocols for the catalog use cases, as consumed by the route handlers."""

from typing import Protocol, TypeVar

from pokemon_review.core.outcomes import Outcome
from pokemon_review.features.catalog.dtos import (
    CreatePokemonRequest,
    PokemonDto,
    PokemonRatingDto,
)

DtoT_co = TypeVar("DtoT_co", covariant=True)


class CreatePokemonUseCase(Protocol):
    """Protocol for the create pokemon use case."""

    async def execute(
        self, request: CreatePokemonRequest | None
    ) -> Outcome[PokemonDto]:
        """Validate and create a pokemon."""
        ...


class GetPokemonRatingUseCase(Protocol):
    """Protocol for the get pokemon rating use case."""

    async def execute(self, pokemon_id: int) -> Outcome[PokemonRatingDto]:
        """Average rating of a pokemon."""
        ...


class GetEntityUseCase(Protocol[DtoT_co]):
    """Protocol for use cases that get one entity by id."""

    async def execute(self, entity_id: int) -> Outcome[DtoT_co]:
        """Get an entity by id."""
        ...


class GetEntityByNameUseCase(Protocol[DtoT_co]):
    """Protocol for use cases that get one entity by name."""

    async def execute(self, name: str) -> Outcome[DtoT_co]:
        """Get an entity by name."""
        ...


class ListEntitiesUseCase(Protocol[DtoT_co]):
    """Protocol for use cases that list a whole entity family."""

    async def execute(self) -> Outcome[list[DtoT_co]]:
        """List entities."""
        ...


class ListRelatedUseCase(Protocol[DtoT_co]):
    """Protocol for use cases that list the children of a parent entity."""

    async def execute(self, parent_id: int) -> Outcome[list[DtoT_co]]:
        """List entities related to a parent."""
        ...
