"""Category route handlers."""

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from pokemon_review.core.responses import outcome_response
from pokemon_review.features.catalog.dependencies import (
    get_category_repository,
    get_pokemon_repository,
)
from pokemon_review.features.catalog.dtos import CategoryDto, PokemonDto
from pokemon_review.features.catalog.repositories import (
    SqlAlchemyCategoryRepository,
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


async def get_list_categories_use_case(
    category_repository: SqlAlchemyCategoryRepository = Depends(
        get_category_repository
    ),
) -> ListEntitiesUseCase[CategoryDto]:
    """Dependency injection for the list categories use case."""
    return ListEntitiesUseCaseImpl(category_repository, CategoryDto)


async def get_get_category_use_case(
    category_repository: SqlAlchemyCategoryRepository = Depends(
        get_category_repository
    ),
) -> GetEntityUseCase[CategoryDto]:
    """Dependency injection for the get category use case."""
    return GetEntityUseCaseImpl(category_repository, CategoryDto)


async def get_get_category_by_name_use_case(
    category_repository: SqlAlchemyCategoryRepository = Depends(
        get_category_repository
    ),
) -> GetEntityByNameUseCase[CategoryDto]:
    """Dependency injection for the get category by name use case."""
    return GetEntityByNameUseCaseImpl(category_repository, CategoryDto)


async def get_list_category_pokemons_use_case(
    category_repository: SqlAlchemyCategoryRepository = Depends(
        get_category_repository
    ),
    pokemon_repository: SqlAlchemyPokemonRepository = Depends(get_pokemon_repository),
) -> ListRelatedUseCase[PokemonDto]:
    """Dependency injection for the list pokemons of a category use case."""
    return ListRelatedUseCaseImpl(
        parent_repository=category_repository,
        fetch_related=pokemon_repository.list_by_category,
        dto_type=PokemonDto,
    )


@router.get("/categories", response_model=list[CategoryDto])
async def list_categories(
    use_case: ListEntitiesUseCase[CategoryDto] = Depends(get_list_categories_use_case),
) -> Response:
    """List every category."""
    return outcome_response(await use_case.execute())


@router.get("/categories/name/{name}", response_model=CategoryDto)
async def get_category_by_name(
    name: str,
    use_case: GetEntityByNameUseCase[CategoryDto] = Depends(
        get_get_category_by_name_use_case
    ),
) -> Response:
    """Get a category by its exact name."""
    return outcome_response(await use_case.execute(name))


@router.get("/categories/{category_id}", response_model=CategoryDto)
async def get_category(
    category_id: int,
    use_case: GetEntityUseCase[CategoryDto] = Depends(get_get_category_use_case),
) -> Response:
    """Get a category by id."""
    return outcome_response(await use_case.execute(category_id))


@router.get("/categories/{category_id}/pokemons", response_model=list[PokemonDto])
async def list_category_pokemons(
    category_id: int,
    use_case: ListRelatedUseCase[PokemonDto] = Depends(
        get_list_category_pokemons_use_case
    ),
) -> Response:
    """List the pokemons of a category."""
    return outcome_response(await use_case.execute(category_id))
