"""Shared helpers for catalog tests."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SeededCatalog:
    """Ids of the reference rows every test starts with."""

    mouse_category_id: int
    seed_category_id: int
    ash_owner_id: int
    misty_owner_id: int
    electric_type_id: int
    grass_type_id: int
    reviewer_ids: list[int]
