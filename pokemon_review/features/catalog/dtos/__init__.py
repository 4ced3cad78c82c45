"""Catalog data transfer objects."""

from .pokemon_dto import (
    CreatePokemonRequest,
    PokemonDto,
    PokemonRatingDto,
    ReviewPlaceholder,
)
from .reference_dto import CategoryDto, OwnerDto, TypeDto
from .review_dto import ReviewDto, ReviewerDto

__all__ = [
    "CreatePokemonRequest",
    "PokemonDto",
    "PokemonRatingDto",
    "ReviewPlaceholder",
    "CategoryDto",
    "OwnerDto",
    "TypeDto",
    "ReviewDto",
    "ReviewerDto",
]
