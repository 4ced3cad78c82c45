"""Catalog API routes - main router that includes all entity-specific route modules."""

from fastapi import APIRouter

from pokemon_review.features.catalog.routes.categories import (
    router as categories_router,
)
from pokemon_review.features.catalog.routes.owners import router as owners_router
from pokemon_review.features.catalog.routes.pokemons import router as pokemons_router
from pokemon_review.features.catalog.routes.reviewers import router as reviewers_router
from pokemon_review.features.catalog.routes.reviews import router as reviews_router
from pokemon_review.features.catalog.routes.types import router as types_router

router = APIRouter(tags=["catalog"])

# Include all route handlers
router.include_router(pokemons_router)
router.include_router(categories_router)
router.include_router(owners_router)
router.include_router(types_router)
router.include_router(reviewers_router)
router.include_router(reviews_router)
