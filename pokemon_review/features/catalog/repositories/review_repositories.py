"""SQLAlchemy repositories for reviews and reviewers."""

from sqlalchemy import select

from pokemon_review.features.catalog.models import Review, Reviewer
from pokemon_review.features.catalog.repositories.sqlalchemy_repository import (
    SqlAlchemyRepository,
)


class SqlAlchemyReviewRepository(SqlAlchemyRepository[Review]):
    model = Review

    async def list_by_pokemon(self, pokemon_id: int) -> list[Review]:
        async with self.get_db_session() as session:
            result = await session.execute(
                select(Review)
                .where(Review.pokemon_id == pokemon_id)
                .order_by(Review.id)
            )
            return list(result.scalars().all())

    async def list_by_reviewer(self, reviewer_id: int) -> list[Review]:
        async with self.get_db_session() as session:
            result = await session.execute(
                select(Review)
                .where(Review.reviewer_id == reviewer_id)
                .order_by(Review.id)
            )
            return list(result.scalars().all())


class SqlAlchemyReviewerRepository(SqlAlchemyRepository[Reviewer]):
    model = Reviewer
