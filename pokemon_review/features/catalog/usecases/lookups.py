"""Read-only use cases shared by every catalog entity family.

Each use case is parameterized with a repository and the DTO class used to
translate the stored entity into its transport representation.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from pokemon_review.core.outcomes import Outcome
from pokemon_review.features.catalog.models import MAX_ID
from pokemon_review.features.catalog.repositories import (
    EntityRepository,
    NamedEntityRepository,
)

logger = logging.getLogger(__name__)

DtoT = TypeVar("DtoT", bound=BaseModel)

INVALID_ID = f"The id must be between 1 and {MAX_ID}."
BLANK_NAME = "The name must not be blank."


class GetEntityUseCaseImpl(Generic[DtoT]):
    """Get one entity by id."""

    def __init__(self, repository: EntityRepository[Any], dto_type: type[DtoT]):
        self.repository = repository
        self.dto_type = dto_type

    async def execute(self, entity_id: int) -> Outcome[DtoT]:
        if not 1 <= entity_id <= MAX_ID:
            return Outcome.invalid_request(INVALID_ID)

        if not await self.repository.exists(entity_id):
            return Outcome.not_found()

        entity = await self.repository.get(entity_id)
        if entity is None:
            # Removed between the existence check and the read
            return Outcome.not_found()

        return Outcome.success(self.dto_type.model_validate(entity))


class GetEntityByNameUseCaseImpl(Generic[DtoT]):
    """Get one entity by its exact, case-sensitive name."""

    def __init__(self, repository: NamedEntityRepository[Any], dto_type: type[DtoT]):
        self.repository = repository
        self.dto_type = dto_type

    async def execute(self, name: str) -> Outcome[DtoT]:
        if not name or not name.strip():
            return Outcome.invalid_request(BLANK_NAME)

        if not await self.repository.exists_by_name(name):
            return Outcome.not_found()

        entity = await self.repository.get_by_name(name)
        if entity is None:
            return Outcome.not_found()

        return Outcome.success(self.dto_type.model_validate(entity))


class ListEntitiesUseCaseImpl(Generic[DtoT]):
    """List every entity of a family."""

    def __init__(self, repository: EntityRepository[Any], dto_type: type[DtoT]):
        self.repository = repository
        self.dto_type = dto_type

    async def execute(self) -> Outcome[list[DtoT]]:
        entities = await self.repository.list_all()
        return Outcome.success([self.dto_type.model_validate(e) for e in entities])


class ListRelatedUseCaseImpl(Generic[DtoT]):
    """List the entities attached to a parent, e.g. the pokemons of a category.

    The parent must exist; an unknown parent is reported as not found rather
    than as an empty list.
    """

    def __init__(
        self,
        parent_repository: EntityRepository[Any],
        fetch_related: Callable[[int], Awaitable[list[Any]]],
        dto_type: type[DtoT],
    ):
        """Initialize the use case with dependencies.

        Args:
            parent_repository: Store used to check the parent exists
            fetch_related: Repository method returning the related entities
            dto_type: DTO class for the related entities
        """
        self.parent_repository = parent_repository
        self.fetch_related = fetch_related
        self.dto_type = dto_type

    async def execute(self, parent_id: int) -> Outcome[list[DtoT]]:
        if not 1 <= parent_id <= MAX_ID:
            return Outcome.invalid_request(INVALID_ID)

        if not await self.parent_repository.exists(parent_id):
            logger.debug("Parent %s not found for related lookup", parent_id)
            return Outcome.not_found()

        related = await self.fetch_related(parent_id)
        return Outcome.success([self.dto_type.model_validate(r) for r in related])
