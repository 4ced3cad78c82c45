"""Use case for creating a pokemon.

The request goes through a fixed chain of checks. The first failing check
decides the outcome and nothing after it runs:

1. the request is present and well formed
2. no pokemon already has this name
3. the category exists
4. the owner exists
5. the type exists
6. the repository commits the pokemon and its links

Checks 2 to 5 are awaited one after the other in this order. When several
are violated at once the earliest one is reported.
"""

import logging

from pokemon_review.core.outcomes import Outcome, ReferenceKind
from pokemon_review.features.catalog.dtos import CreatePokemonRequest, PokemonDto
from pokemon_review.features.catalog.models import (
    MAX_ID,
    Category,
    Owner,
    Pokemon,
    Review,
    Type,
)
from pokemon_review.features.catalog.repositories import (
    NamedEntityRepository,
    PokemonRepository,
)
from pokemon_review.features.catalog.usecases.create_pokemon_usecase.messages import (
    BIRTH_DATE_REQUIRED,
    BLANK_NAME,
    CATEGORY_NOT_FOUND,
    ID_TOO_LARGE,
    NON_POSITIVE_ID,
    OWNER_NOT_FOUND,
    POKEMON_ALREADY_EXISTS,
    POKEMON_REQUIRED,
    SAVE_FAILED,
    TYPE_NOT_FOUND,
)

logger = logging.getLogger(__name__)


class CreatePokemonUseCaseImpl:
    """Implementation of the create pokemon use case."""

    def __init__(
        self,
        pokemon_repository: PokemonRepository,
        category_repository: NamedEntityRepository[Category],
        owner_repository: NamedEntityRepository[Owner],
        type_repository: NamedEntityRepository[Type],
    ):
        """Initialize the use case with dependencies.

        Args:
            pokemon_repository: Store checked for duplicates and written to
            category_repository: Store resolving ``category_id``
            owner_repository: Store resolving ``owner_id``
            type_repository: Store resolving ``type_id``
        """
        self.pokemon_repository = pokemon_repository
        self.category_repository = category_repository
        self.owner_repository = owner_repository
        self.type_repository = type_repository

    async def execute(
        self, request: CreatePokemonRequest | None
    ) -> Outcome[PokemonDto]:
        """Validate the request and create the pokemon.

        Args:
            request: The creation request, possibly absent

        Returns:
            A successful outcome carrying the created pokemon, or the outcome
            of the first check that failed. Errors raised by the stores are
            reported as a persistence failure and never propagate.
        """
        if request is None:
            logger.info("Rejected pokemon creation: no request body")
            return Outcome.invalid_request(POKEMON_REQUIRED)

        problem = self._structural_problem(request)
        if problem is not None:
            logger.info("Rejected pokemon creation: %s", problem)
            return Outcome.invalid_request(problem)

        try:
            return await self._create(request)
        except Exception:
            logger.exception(
                "Unexpected error while creating pokemon %r", request.name
            )
            return Outcome.persistence_failure(SAVE_FAILED)

    async def _create(self, request: CreatePokemonRequest) -> Outcome[PokemonDto]:
        if await self.pokemon_repository.exists_by_name(request.name):
            logger.info("Rejected pokemon %r: name already taken", request.name)
            return Outcome.duplicate_entity(POKEMON_ALREADY_EXISTS)

        if not await self.category_repository.exists(request.category_id):
            logger.info(
                "Rejected pokemon %r: unknown category %s",
                request.name,
                request.category_id,
            )
            return Outcome.missing_reference(ReferenceKind.CATEGORY, CATEGORY_NOT_FOUND)

        if not await self.owner_repository.exists(request.owner_id):
            logger.info(
                "Rejected pokemon %r: unknown owner %s", request.name, request.owner_id
            )
            return Outcome.missing_reference(ReferenceKind.OWNER, OWNER_NOT_FOUND)

        if not await self.type_repository.exists(request.type_id):
            logger.info(
                "Rejected pokemon %r: unknown type %s", request.name, request.type_id
            )
            return Outcome.missing_reference(ReferenceKind.TYPE, TYPE_NOT_FOUND)

        pokemon = self._to_model(request)
        created = await self.pokemon_repository.create(
            pokemon, request.category_id, request.owner_id, request.type_id
        )
        if not created:
            logger.warning("Repository did not save pokemon %r", request.name)
            return Outcome.persistence_failure(SAVE_FAILED)

        return Outcome.success(PokemonDto.model_validate(pokemon))

    def _structural_problem(self, request: CreatePokemonRequest) -> str | None:
        """Describe why the request is malformed, or None when it is usable."""
        name = getattr(request, "name", None)
        if not name or not name.strip():
            return BLANK_NAME

        if getattr(request, "birth_date", None) is None:
            return BIRTH_DATE_REQUIRED

        for field in ("category_id", "owner_id", "type_id"):
            value = getattr(request, field, None)
            if value is None or value < 1:
                return NON_POSITIVE_ID.format(field=field)
            if value > MAX_ID:
                return ID_TOO_LARGE.format(field=field, max_id=MAX_ID)

        return None

    def _to_model(self, request: CreatePokemonRequest) -> Pokemon:
        # Reviews are cascaded into the same transaction as the pokemon
        return Pokemon(
            name=request.name,
            birth_date=request.birth_date,
            reviews=[
                Review(
                    title=review.title,
                    text=review.text,
                    rating=review.rating,
                    reviewer_id=review.reviewer_id,
                )
                for review in request.reviews
            ],
        )
