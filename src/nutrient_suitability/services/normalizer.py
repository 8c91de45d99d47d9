"""Normalize loosely typed nutrient records to per-100 values."""

import math
from collections.abc import Mapping

from nutrient_suitability.domain.nutrition import SALT_PER_SODIUM, NormalizedNutrition

KCAL_PER_KJ = 0.239006

# (key, factor) pairs in lookup order; the first parseable value wins.
_ENERGY_KEYS = (
    ("energy-kcal_100g", 1.0),
    ("energy-kcal", 1.0),
    ("energy-kj_100g", KCAL_PER_KJ),
    ("energy-kj", KCAL_PER_KJ),
    ("energy_100g", KCAL_PER_KJ),
)
_FAT_KEYS = (("fat_100g", 1.0), ("fat", 1.0))
_SAT_FAT_KEYS = (("saturated-fat_100g", 1.0), ("saturated-fat", 1.0))
_SUGAR_KEYS = (("sugars_100g", 1.0), ("sugars", 1.0))
_SALT_KEYS = (
    ("salt_100g", 1.0),
    ("salt", 1.0),
    ("sodium_100g", SALT_PER_SODIUM),
    ("sodium", SALT_PER_SODIUM),
)


def normalize_nutrients(raw: object) -> NormalizedNutrition:
    """Extract canonical nutrient values; unknown values stay None."""
    if not isinstance(raw, Mapping):
        return NormalizedNutrition()
    return NormalizedNutrition(
        kcal=_lookup(raw, _ENERGY_KEYS),
        fat_g=_lookup(raw, _FAT_KEYS),
        sat_fat_g=_lookup(raw, _SAT_FAT_KEYS),
        sugars_g=_lookup(raw, _SUGAR_KEYS),
        salt_g=_lookup(raw, _SALT_KEYS),
    )


def parse_number(value: object) -> float | None:
    """Return value as a finite float, or None if it isn't one."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int | float):
        number = float(value)
    elif isinstance(value, str):
        cleaned = value.strip().replace(",", ".")
        if not cleaned:
            return None
        try:
            number = float(cleaned)
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def _lookup(
    raw: Mapping[object, object], keys: tuple[tuple[str, float], ...]
) -> float | None:
    for key, factor in keys:
        value = parse_number(raw.get(key))
        if value is not None:
            return value * factor
    return None
