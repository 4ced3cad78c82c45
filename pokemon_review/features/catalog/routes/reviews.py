"""Review route handlers."""

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from pokemon_review.core.responses import outcome_response
from pokemon_review.features.catalog.dependencies import get_review_repository
from pokemon_review.features.catalog.dtos import ReviewDto
from pokemon_review.features.catalog.repositories import SqlAlchemyReviewRepository
from pokemon_review.features.catalog.usecases import (
    GetEntityUseCaseImpl,
    ListEntitiesUseCaseImpl,
)
from pokemon_review.features.catalog.usecases.protocols import (
    GetEntityUseCase,
    ListEntitiesUseCase,
)

router = APIRouter()


async def get_list_reviews_use_case(
    review_repository: SqlAlchemyReviewRepository = Depends(get_review_repository),
) -> ListEntitiesUseCase[ReviewDto]:
    """Dependency injection for the list reviews use case."""
    return ListEntitiesUseCaseImpl(review_repository, ReviewDto)


async def get_get_review_use_case(
    review_repository: SqlAlchemyReviewRepository = Depends(get_review_repository),
) -> GetEntityUseCase[ReviewDto]:
    """Dependency injection for the get review use case."""
    return GetEntityUseCaseImpl(review_repository, ReviewDto)


@router.get("/reviews", response_model=list[ReviewDto])
async def list_reviews(
    use_case: ListEntitiesUseCase[ReviewDto] = Depends(get_list_reviews_use_case),
) -> Response:
    """List every review."""
    return outcome_response(await use_case.execute())


@router.get("/reviews/{review_id}", response_model=ReviewDto)
async def get_review(
    review_id: int,
    use_case: GetEntityUseCase[ReviewDto] = Depends(get_get_review_use_case),
) -> Response:
    """Get a review by id."""
    return outcome_response(await use_case.execute(review_id))
