"""Age-band rule sets.

The older band uses simple sugar tiers and a salt ceiling. The infant band
(6-36 months) follows a simplified WHO Europe nutrient and promotion profile
model for infant foods (2022): energy density floor, share of energy from
sugars, sodium per 100 kcal and a scan for added sugars.
"""

from nutrient_suitability.domain.evaluation import AgeGroup, AgeGroupEvaluation
from nutrient_suitability.domain.nutrition import NormalizedNutrition
from nutrient_suitability.services.ingredients import (
    contains_cheese_hint,
    find_infant_added_sugar_term,
    is_dry_cereal,
)
from nutrient_suitability.services.thresholds import format_amount

OLDER_SUGAR_GOOD_G = 5
OLDER_SUGAR_WARN_G = 15
OLDER_SALT_WARN_G = 1.2

INFANT_MIN_ENERGY_KCAL = 60
INFANT_MIN_ENERGY_KCAL_DRY_CEREAL = 80
INFANT_SUGAR_HIGH_PERCENT_ENERGY = 30
INFANT_SODIUM_MAX_MG_PER_100KCAL = 50
INFANT_SODIUM_MAX_MG_PER_100KCAL_CHEESE = 100

KCAL_PER_G_SUGAR = 4
SODIUM_SHARE_OF_SALT = 0.4


def evaluate_older(nutrition: NormalizedNutrition) -> AgeGroupEvaluation:
    """Sugar tiers and salt ceiling for children over 36 months.

    A missing sugar value is noted but tolerated.
    """
    reasons: list[str] = []
    suitable = True

    sugars = nutrition.sugars_g
    if sugars is None:
        reasons.append("No sugar value provided")
    elif sugars <= OLDER_SUGAR_GOOD_G:
        reasons.append(f"Sugar content ≤ {OLDER_SUGAR_GOOD_G} g / 100 g")
    elif sugars > OLDER_SUGAR_WARN_G:
        suitable = False
        reasons.append(f"Sugar content > {OLDER_SUGAR_WARN_G} g / 100 g")
    else:
        reasons.append("Moderate sugar content")

    salt = nutrition.salt_g
    if salt is not None and salt > OLDER_SALT_WARN_G:
        suitable = False
        reasons.append(f"High salt content (> {OLDER_SALT_WARN_G} g / 100 g)")

    return AgeGroupEvaluation(suitable=suitable, reasons=tuple(reasons))


def evaluate_infant(
    nutrition: NormalizedNutrition,
    *,
    name: str | None = None,
    ingredients_text: str | None = None,
) -> AgeGroupEvaluation:
    """Infant rules; only failing checks produce a reason."""
    reasons: list[str] = []
    kcal = nutrition.kcal

    min_energy = (
        INFANT_MIN_ENERGY_KCAL_DRY_CEREAL
        if is_dry_cereal(name, ingredients_text)
        else INFANT_MIN_ENERGY_KCAL
    )
    if kcal is None:
        reasons.append(f"Energy density below {min_energy} kcal / 100 g (no value)")
    elif kcal < min_energy:
        reasons.append(
            f"Energy density too low: {format_amount(round(kcal, 1))} kcal / 100 g "
            f"(minimum {min_energy} kcal)"
        )

    share = sugar_energy_share(nutrition)
    if share is not None and share >= INFANT_SUGAR_HIGH_PERCENT_ENERGY:
        reasons.append(
            f"High sugar: {format_amount(round(share, 1))} % of energy from sugars "
            f"(limit < {INFANT_SUGAR_HIGH_PERCENT_ENERGY} %)"
        )

    sodium = sodium_mg_per_100kcal(nutrition)
    if sodium is not None:
        ceiling = (
            INFANT_SODIUM_MAX_MG_PER_100KCAL_CHEESE
            if contains_cheese_hint(name, ingredients_text)
            else INFANT_SODIUM_MAX_MG_PER_100KCAL
        )
        if sodium > ceiling:
            reasons.append(
                f"Too much sodium: {format_amount(round(sodium, 1))} mg / 100 kcal "
                f"(maximum {ceiling} mg)"
            )

    term = find_infant_added_sugar_term(ingredients_text)
    if term is not None:
        reasons.append(f'Contains added sugar ("{term}")')

    return AgeGroupEvaluation(suitable=not reasons, reasons=tuple(reasons))


def sugar_energy_share(nutrition: NormalizedNutrition) -> float | None:
    """Percentage of energy coming from sugars, if computable."""
    if nutrition.sugars_g is None or nutrition.kcal is None or nutrition.kcal <= 0:
        return None
    return nutrition.sugars_g * KCAL_PER_G_SUGAR * 100 / nutrition.kcal


def sodium_mg_per_100kcal(nutrition: NormalizedNutrition) -> float | None:
    if nutrition.salt_g is None or nutrition.kcal is None or nutrition.kcal <= 0:
        return None
    sodium_mg = nutrition.salt_g * 1000 * SODIUM_SHARE_OF_SALT
    return sodium_mg * 100 / nutrition.kcal


def evaluate_age_groups(
    nutrition: NormalizedNutrition,
    *,
    name: str | None = None,
    ingredients_text: str | None = None,
) -> dict[AgeGroup, AgeGroupEvaluation]:
    """Evaluate every supported age band."""
    return {
        AgeGroup.INFANT: evaluate_infant(
            nutrition, name=name, ingredients_text=ingredients_text
        ),
        AgeGroup.OLDER: evaluate_older(nutrition),
    }
