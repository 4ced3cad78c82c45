"""Pokemon route handlers."""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import Response

from pokemon_review.core.responses import outcome_response
from pokemon_review.features.catalog.dependencies import (
    get_category_repository,
    get_owner_repository,
    get_pokemon_repository,
    get_review_repository,
    get_type_repository,
)
from pokemon_review.features.catalog.dtos import (
    CreatePokemonRequest,
    PokemonDto,
    PokemonRatingDto,
    ReviewDto,
)
from pokemon_review.features.catalog.repositories import (
    ReviewRepository,
    SqlAlchemyCategoryRepository,
    SqlAlchemyOwnerRepository,
    SqlAlchemyPokemonRepository,
    SqlAlchemyTypeRepository,
)
from pokemon_review.features.catalog.usecases import (
    CreatePokemonUseCaseImpl,
    GetEntityByNameUseCaseImpl,
    GetEntityUseCaseImpl,
    GetPokemonRatingUseCaseImpl,
    ListEntitiesUseCaseImpl,
    ListRelatedUseCaseImpl,
)
from pokemon_review.features.catalog.usecases.protocols import (
    CreatePokemonUseCase,
    GetEntityByNameUseCase,
    GetEntityUseCase,
    GetPokemonRatingUseCase,
    ListEntitiesUseCase,
    ListRelatedUseCase,
)

router = APIRouter()


async def get_create_pokemon_use_case(
    pokemon_repository: SqlAlchemyPokemonRepository = Depends(get_pokemon_repository),
    category_repository: SqlAlchemyCategoryRepository = Depends(
        get_category_repository
    ),
    owner_repository: SqlAlchemyOwnerRepository = Depends(get_owner_repository),
    type_repository: SqlAlchemyTypeRepository = Depends(get_type_repository),
) -> CreatePokemonUseCase:
    """Dependency injection for the create pokemon use case."""
    return CreatePokemonUseCaseImpl(
        pokemon_repository=pokemon_repository,
        category_repository=category_repository,
        owner_repository=owner_repository,
        type_repository=type_repository,
    )


async def get_list_pokemons_use_case(
    pokemon_repository: SqlAlchemyPokemonRepository = Depends(get_pokemon_repository),
) -> ListEntitiesUseCase[PokemonDto]:
    """Dependency injection for the list pokemons use case."""
    return ListEntitiesUseCaseImpl(pokemon_repository, PokemonDto)


async def get_get_pokemon_use_case(
    pokemon_repository: SqlAlchemyPokemonRepository = Depends(get_pokemon_repository),
) -> GetEntityUseCase[PokemonDto]:
    """Dependency injection for the get pokemon use case."""
    return GetEntityUseCaseImpl(pokemon_repository, PokemonDto)


async def get_get_pokemon_by_name_use_case(
    pokemon_repository: SqlAlchemyPokemonRepository = Depends(get_pokemon_repository),
) -> GetEntityByNameUseCase[PokemonDto]:
    """Dependency injection for the get pokemon by name use case."""
    return GetEntityByNameUseCaseImpl(pokemon_repository, PokemonDto)


async def get_pokemon_rating_use_case(
    pokemon_repository: SqlAlchemyPokemonRepository = Depends(get_pokemon_repository),
) -> GetPokemonRatingUseCase:
    """Dependency injection for the pokemon rating use case."""
    return GetPokemonRatingUseCaseImpl(pokemon_repository)


async def get_list_pokemon_reviews_use_case(
    pokemon_repository: SqlAlchemyPokemonRepository = Depends(get_pokemon_repository),
    review_repository: ReviewRepository = Depends(get_review_repository),
) -> ListRelatedUseCase[ReviewDto]:
    """Dependency injection for the list pokemon reviews use case."""
    return ListRelatedUseCaseImpl(
        parent_repository=pokemon_repository,
        fetch_related=review_repository.list_by_pokemon,
        dto_type=ReviewDto,
    )


@router.get("/pokemons", response_model=list[PokemonDto])
async def list_pokemons(
    use_case: ListEntitiesUseCase[PokemonDto] = Depends(get_list_pokemons_use_case),
) -> Response:
    """List every pokemon."""
    return outcome_response(await use_case.execute())


@router.post(
    "/pokemons",
    response_model=PokemonDto,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_400_BAD_REQUEST: {"description": "Missing or malformed pokemon"},
        status.HTTP_422_UNPROCESSABLE_CONTENT: {
            "description": "Duplicate name or unknown category, owner or type"
        },
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"description": "Pokemon not saved"},
    },
)
async def create_pokemon(
    http_request: Request,
    request: CreatePokemonRequest | None = None,
    use_case: CreatePokemonUseCase = Depends(get_create_pokemon_use_case),
) -> Response:
    """Create a pokemon linked to a category, an owner and a type.

    On success the response points at the get pokemon endpoint through its
    ``Location`` header.
    """
    outcome = await use_case.execute(request)

    location = None
    if outcome.is_success and outcome.value is not None:
        location = str(http_request.url_for("get_pokemon", pokemon_id=outcome.value.id))

    return outcome_response(outcome, created_location=location)


# Registered before the "/pokemons/{pokemon_id}/..." routes so a pokemon
# named "rating" or "reviews" is still reachable by name.
@router.get("/pokemons/name/{name}", response_model=PokemonDto)
async def get_pokemon_by_name(
    name: str,
    use_case: GetEntityByNameUseCase[PokemonDto] = Depends(
        get_get_pokemon_by_name_use_case
    ),
) -> Response:
    """Get a pokemon by its exact name."""
    return outcome_response(await use_case.execute(name))


@router.get("/pokemons/{pokemon_id}", response_model=PokemonDto)
async def get_pokemon(
    pokemon_id: int,
    use_case: GetEntityUseCase[PokemonDto] = Depends(get_get_pokemon_use_case),
) -> Response:
    """Get a pokemon by id."""
    return outcome_response(await use_case.execute(pokemon_id))


@router.get("/pokemons/{pokemon_id}/rating", response_model=PokemonRatingDto)
async def get_pokemon_rating(
    pokemon_id: int,
    use_case: GetPokemonRatingUseCase = Depends(get_pokemon_rating_use_case),
) -> Response:
    """Get the average review rating of a pokemon."""
    return outcome_response(await use_case.execute(pokemon_id))


@router.get("/pokemons/{pokemon_id}/reviews", response_model=list[ReviewDto])
async def list_pokemon_reviews(
    pokemon_id: int,
    use_case: ListRelatedUseCase[ReviewDto] = Depends(
        get_list_pokemon_reviews_use_case
    ),
) -> Response:
    """List the reviews of a pokemon."""
    return outcome_response(await use_case.execute(pokemon_id))
