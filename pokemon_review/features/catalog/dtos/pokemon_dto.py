"""Pokemon data transfer objects."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from pokemon_review.features.catalog.models import MAX_ID


class PokemonDto(BaseModel):
    """Transport representation of a pokemon."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    birth_date: date


class ReviewPlaceholder(BaseModel):
    """Review submitted together with a new pokemon."""

    title: str = Field(min_length=1, max_length=200)
    text: str
    rating: int = Field(ge=1, le=5)
    reviewer_id: int = Field(gt=0, le=MAX_ID)


class CreatePokemonRequest(BaseModel):
    """Request model for creating a new pokemon."""

    name: str = Field(min_length=1, max_length=100)
    birth_date: date
    category_id: int = Field(gt=0, le=MAX_ID)
    owner_id: int = Field(gt=0, le=MAX_ID)
    type_id: int = Field(gt=0, le=MAX_ID)
    reviews: list[ReviewPlaceholder] = Field(default_factory=list)


class PokemonRatingDto(BaseModel):
    """Average review rating of a pokemon."""

    pokemon_id: int
    rating: float
