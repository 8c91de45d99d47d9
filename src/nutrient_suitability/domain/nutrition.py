"""Nutrition domain models."""

from dataclasses import dataclass

SALT_PER_SODIUM = 2.5


@dataclass(frozen=True)
class NormalizedNutrition:
    """Nutrient values per 100 g (or 100 mL); None means unknown."""

    kcal: float | None = None
    fat_g: float | None = None
    sat_fat_g: float | None = None
    sugars_g: float | None = None
    salt_g: float | None = None

    @property
    def sodium_g(self) -> float | None:
        """Sodium equivalent of the salt value."""
        if self.salt_g is None:
            return None
        return self.salt_g / SALT_PER_SODIUM
