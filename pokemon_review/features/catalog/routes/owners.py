"""Owner route handlers."""

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from pokemon_review.core.responses import outcome_response
from pokemon_review.features.catalog.dependencies import (
    get_owner_repository,
    get_pokemon_repository,
)
from pokemon_review.features.catalog.dtos import OwnerDto, PokemonDto
from pokemon_review.features.catalog.repositories import (
    SqlAlchemyOwnerRepository,
    SqlAlchemyPokemonRepository,
)
from pokemon_review.features.catalog.usecases import (
    GetEntityByNameUseCaseImpl,
    GetEntityUseCaseImpl,
    ListEntitiesUseCaseImpl,
    ListRelatedUseCaseImpl,
)
from pokemon_review.features.catalog.usecases.protocols import (
    GetEntityByNameUseCase,
    GetEntityUseCase,
    ListEntitiesUseCase,
    ListRelatedUseCase,
)

router = APIRouter()


async def get_list_owners_use_case(
    owner_repository: SqlAlchemyOwnerRepository = Depends(
        get_owner_repository
    ),
) -> ListEntitiesUseCase[OwnerDto]:
    """Dependency injection for the list owners use case."""
    return ListEntitiesUseCaseImpl(owner_repository, OwnerDto)


async def get_get_owner_use_case(
    owner_repository: SqlAlchemyOwnerRepository = Depends(
        get_owner_repository
    ),
) -> GetEntityUseCase[OwnerDto]:
    """Dependency injection for the get owner use case."""
    return GetEntityUseCaseImpl(owner_repository, OwnerDto)


async def get_get_owner_by_name_use_case(
    owner_repository: SqlAlchemyOwnerRepository = Depends(
        get_owner_repository
    ),
) -> GetEntityByNameUseCase[OwnerDto]:
    """Dependency injection for the get owner by name use case."""
    return GetEntityByNameUseCaseImpl(owner_repository, OwnerDto)


async def get_list_owner_pokemons_use_case(
    owner_repository: SqlAlchemyOwnerRepository = Depends(
        get_owner_repository
    ),
    pokemon_repository: SqlAlchemyPokemonRepository = Depends(get_pokemon_repository),
) -> ListRelatedUseCase[PokemonDto]:
    """Dependency injection for the list pokemons of an owner use case."""
    return ListRelatedUseCaseImpl(
        parent_repository=owner_repository,
        fetch_related=pokemon_repository.list_by_owner,
        dto_type=PokemonDto,
    )


@router.get("/owners", response_model=list[OwnerDto])
async def list_owners(
    use_case: ListEntitiesUseCase[OwnerDto] = Depends(get_list_owners_use_case),
) -> Response:
    """List every owner."""
    return outcome_response(await use_case.execute())


@router.get("/owners/name/{name}", response_model=OwnerDto)
async def get_owner_by_name(
    name: str,
    use_case: GetEntityByNameUseCase[OwnerDto] = Depends(
        get_get_owner_by_name_use_case
    ),
) -> Response:
    """Get an owner by its exact name."""
    return outcome_response(await use_case.execute(name))


@router.get("/owners/{owner_id}", response_model=OwnerDto)
async def get_owner(
    owner_id: int,
    use_case: GetEntityUseCase[OwnerDto] = Depends(get_get_owner_use_case),
) -> Response:
    """Get an owner by id."""
    return outcome_response(await use_case.execute(owner_id))


@router.get("/owners/{owner_id}/pokemons", response_model=list[PokemonDto])
async def list_owner_pokemons(
    owner_id: int,
    use_case: ListRelatedUseCase[PokemonDto] = Depends(
        get_list_owner_pokemons_use_case
    ),
) -> Response:
    """List the pokemons of an owner."""
    return outcome_response(await use_case.execute(owner_id))
