"""Catalog use cases."""

from .create_pokemon_usecase import CreatePokemonUseCaseImpl
from .lookups import (
    GetEntityByNameUseCaseImpl,
    GetEntityUseCaseImpl,
    ListEntitiesUseCaseImpl,
    ListRelatedUseCaseImpl,
)
from .pokemon_rating_usecase import GetPokemonRatingUseCaseImpl

__all__ = [
    "CreatePokemonUseCaseImpl",
    "GetEntityUseCaseImpl",
    "GetEntityByNameUseCaseImpl",
    "ListEntitiesUseCaseImpl",
    "ListRelatedUseCaseImpl",
    "GetPokemonRatingUseCaseImpl",
]
