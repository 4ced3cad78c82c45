"""Type route handlers."""

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from pokemon_review.core.responses import outcome_response
from pokemon_review.features.catalog.dependencies import (
    get_pokemon_repository,
    get_type_repository,
)
from pokemon_review.features.catalog.dtos import PokemonDto, TypeDto
from pokemon_review.features.catalog.repositories import (
    SqlAlchemyPokemonRepository,
    SqlAlchemyTypeRepository,
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


async def get_list_types_use_case(
    type_repository: SqlAlchemyTypeRepository = Depends(
        get_type_repository
    ),
) -> ListEntitiesUseCase[TypeDto]:
    """Dependency injection for the list types use case."""
    return ListEntitiesUseCaseImpl(type_repository, TypeDto)


async def get_get_type_use_case(
    type_repository: SqlAlchemyTypeRepository = Depends(
        get_type_repository
    ),
) -> GetEntityUseCase[TypeDto]:
    """Dependency injection for the get type use case."""
    return GetEntityUseCaseImpl(type_repository, TypeDto)


async def get_get_type_by_name_use_case(
    type_repository: SqlAlchemyTypeRepository = Depends(
        get_type_repository
    ),
) -> GetEntityByNameUseCase[TypeDto]:
    """Dependency injection for the get type by name use case."""
    return GetEntityByNameUseCaseImpl(type_repository, TypeDto)


async def get_list_type_pokemons_use_case(
    type_repository: SqlAlchemyTypeRepository = Depends(
        get_type_repository
    ),
    pokemon_repository: SqlAlchemyPokemonRepository = Depends(get_pokemon_repository),
) -> ListRelatedUseCase[PokemonDto]:
    """Dependency injection for the list pokemons of a type use case."""
    return ListRelatedUseCaseImpl(
        parent_repository=type_repository,
        fetch_related=pokemon_repository.list_by_type,
        dto_type=PokemonDto,
    )


@router.get("/types", response_model=list[TypeDto])
async def list_types(
    use_case: ListEntitiesUseCase[TypeDto] = Depends(get_list_types_use_case),
) -> Response:
    """List every pokemon type."""
    return outcome_response(await use_case.execute())


@router.get("/types/name/{name}", response_model=TypeDto)
async def get_type_by_name(
    name: str,
    use_case: GetEntityByNameUseCase[TypeDto] = Depends(
        get_get_type_by_name_use_case
    ),
) -> Response:
    """Get a type by its exact name."""
    return outcome_response(await use_case.execute(name))


@router.get("/types/{type_id}", response_model=TypeDto)
async def get_type(
    type_id: int,
    use_case: GetEntityUseCase[TypeDto] = Depends(get_get_type_use_case),
) -> Response:
    """Get a type by id."""
    return outcome_response(await use_case.execute(type_id))


@router.get("/types/{type_id}/pokemons", response_model=list[PokemonDto])
async def list_type_pokemons(
    type_id: int,
    use_case: ListRelatedUseCase[PokemonDto] = Depends(
        get_list_type_pokemons_use_case
    ),
) -> Response:
    """List the pokemons of a type."""
    return outcome_response(await use_case.execute(type_id))
