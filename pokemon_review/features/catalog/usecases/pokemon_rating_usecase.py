"""Use case for computing the average review rating of a pokemon."""

from pokemon_review.core.outcomes import Outcome
from pokemon_review.features.catalog.dtos import PokemonRatingDto
from pokemon_review.features.catalog.models import MAX_ID
from pokemon_review.features.catalog.repositories import PokemonRepository
from pokemon_review.features.catalog.usecases.lookups import INVALID_ID


class GetPokemonRatingUseCaseImpl:
    """Implementation of the get pokemon rating use case."""

    def __init__(self, pokemon_repository: PokemonRepository):
        self.pokemon_repository = pokemon_repository

    async def execute(self, pokemon_id: int) -> Outcome[PokemonRatingDto]:
        """Average the ratings of every review of the pokemon.

        Returns:
            The rating, 0.0 for a pokemon without reviews, or not found
        """
        if not 1 <= pokemon_id <= MAX_ID:
            return Outcome.invalid_request(INVALID_ID)

        if not await self.pokemon_repository.exists(pokemon_id):
            return Outcome.not_found()

        rating = await self.pokemon_repository.get_rating(pokemon_id)
        return Outcome.success(PokemonRatingDto(pokemon_id=pokemon_id, rating=rating))
