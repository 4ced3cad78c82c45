"""Category, owner and type data transfer objects."""

from pydantic import BaseModel, ConfigDict


class CategoryDto(BaseModel):
    """Transport representation of a category."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class OwnerDto(BaseModel):
    """Transport representation of an owner."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    gym: str | None = None


class TypeDto(BaseModel):
    """Transport representation of a type."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
