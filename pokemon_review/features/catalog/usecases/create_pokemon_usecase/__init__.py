"""Create pokemon use case module."""

from .create_pokemon_usecase import CreatePokemonUseCaseImpl
from .messages import (
    CATEGORY_NOT_FOUND,
    OWNER_NOT_FOUND,
    POKEMON_ALREADY_EXISTS,
    SAVE_FAILED,
    TYPE_NOT_FOUND,
)

__all__ = [
    "CreatePokemonUseCaseImpl",
    "POKEMON_ALREADY_EXISTS",
    "CATEGORY_NOT_FOUND",
    "OWNER_NOT_FOUND",
    "TYPE_NOT_FOUND",
    "SAVE_FAILED",
]
