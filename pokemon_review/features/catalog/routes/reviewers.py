"""Reviewer route handlers."""

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from pokemon_review.core.responses import outcome_response
from pokemon_review.features.catalog.dependencies import (
    get_review_repository,
    get_reviewer_repository,
)
from pokemon_review.features.catalog.dtos import ReviewDto, ReviewerDto
from pokemon_review.features.catalog.repositories import (
    ReviewRepository,
    SqlAlchemyReviewerRepository,
)
from pokemon_review.features.catalog.usecases import (
    GetEntityUseCaseImpl,
    ListEntitiesUseCaseImpl,
    ListRelatedUseCaseImpl,
)
from pokemon_review.features.catalog.usecases.protocols import (
    GetEntityUseCase,
    ListEntitiesUseCase,
    ListRelatedUseCase,
)

router = APIRouter()


async def get_list_reviewers_use_case(
    reviewer_repository: SqlAlchemyReviewerRepository = Depends(
        get_reviewer_repository
    ),
) -> ListEntitiesUseCase[ReviewerDto]:
    """Dependency injection for the list reviewers use case."""
    return ListEntitiesUseCaseImpl(reviewer_repository, ReviewerDto)


async def get_get_reviewer_use_case(
    reviewer_repository: SqlAlchemyReviewerRepository = Depends(
        get_reviewer_repository
    ),
) -> GetEntityUseCase[ReviewerDto]:
    """Dependency injection for the get reviewer use case."""
    return GetEntityUseCaseImpl(reviewer_repository, ReviewerDto)


async def get_list_reviewer_reviews_use_case(
    reviewer_repository: SqlAlchemyReviewerRepository = Depends(
        get_reviewer_repository
    ),
    review_repository: ReviewRepository = Depends(get_review_repository),
) -> ListRelatedUseCase[ReviewDto]:
    """Dependency injection for the list reviews of a reviewer use case."""
    return ListRelatedUseCaseImpl(
        parent_repository=reviewer_repository,
        fetch_related=review_repository.list_by_reviewer,
        dto_type=ReviewDto,
    )


@router.get("/reviewers", response_model=list[ReviewerDto])
async def list_reviewers(
    use_case: ListEntitiesUseCase[ReviewerDto] = Depends(get_list_reviewers_use_case),
) -> Response:
    """List every reviewer."""
    return outcome_response(await use_case.execute())


@router.get("/reviewers/{reviewer_id}", response_model=ReviewerDto)
async def get_reviewer(
    reviewer_id: int,
    use_case: GetEntityUseCase[ReviewerDto] = Depends(get_get_reviewer_use_case),
) -> Response:
    """Get a reviewer by id."""
    return outcome_response(await use_case.execute(reviewer_id))


@router.get("/reviewers/{reviewer_id}/reviews", response_model=list[ReviewDto])
async def list_reviewer_reviews(
    reviewer_id: int,
    use_case: ListRelatedUseCase[ReviewDto] = Depends(
        get_list_reviewer_reviews_use_case
    ),
) -> Response:
    """List the reviews written by a reviewer."""
    return outcome_response(await use_case.execute(reviewer_id))
