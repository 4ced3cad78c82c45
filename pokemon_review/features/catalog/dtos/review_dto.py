"""Review and reviewer data transfer objects."""

from pydantic import BaseModel, ConfigDict


class ReviewDto(BaseModel):
    """Transport representation of a review."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    text: str
    rating: int
    pokemon_id: int
    reviewer_id: int


class ReviewerDto(BaseModel):
    """Transport representation of a reviewer."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
