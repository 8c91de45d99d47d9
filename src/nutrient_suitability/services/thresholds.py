"""Per-category threshold evaluation."""

from nutrient_suitability.domain.categories import CategoryDefinition
from nutrient_suitability.domain.evaluation import ThresholdCheckResult, ThresholdReport
from nutrient_suitability.domain.nutrition import NormalizedNutrition

NO_VALUE_SUFFIX = " (no value)"

_NUTRIENT_LABELS = {
    "total_fat_g": "Total fat",
    "sat_fat_g": "Saturated fat",
    "total_sugars_g": "Total sugars",
    "sodium_g": "Sodium",
    "energy_kcal": "Energy",
}


def evaluate_thresholds(
    category: CategoryDefinition,
    nutrition: NormalizedNutrition,
    *,
    has_added_sugar: bool,
    has_non_sugar_sweetener: bool,
) -> ThresholdReport:
    """Check every limit defined for the category.

    Numeric limits are inclusive ceilings. The added sugar and sweetener
    limits are zero-tolerance gates driven by the ingredient scan. A missing
    measured value always fails.
    """
    measured_values: dict[str, float | None] = {
        "total_fat_g": nutrition.fat_g,
        "sat_fat_g": nutrition.sat_fat_g,
        "total_sugars_g": nutrition.sugars_g,
        "sodium_g": nutrition.sodium_g,
        "energy_kcal": nutrition.kcal,
    }
    checks: list[ThresholdCheckResult] = []
    for nutrient, limit in category.thresholds.items():
        if nutrient == "added_sugars_g":
            checks.append(
                _gate_check(
                    nutrient,
                    limit,
                    present=has_added_sugar,
                    pass_text="No added sugars",
                    fail_text="Contains added sugars",
                )
            )
        elif nutrient == "nss_g":
            checks.append(
                _gate_check(
                    nutrient,
                    limit,
                    present=has_non_sugar_sweetener,
                    pass_text="No non-sugar sweeteners (NSS)",
                    fail_text="Contains non-sugar sweeteners (NSS)",
                )
            )
        else:
            checks.append(
                _limit_check(
                    nutrient,
                    limit,
                    measured_values[nutrient],
                    unit=_unit(nutrient),
                    per=category.unit_label,
                )
            )
    return ThresholdReport(checks=tuple(checks))


def format_amount(value: float) -> str:
    """Format a number without trailing zeros."""
    return f"{value:g}"


def _unit(nutrient: str) -> str:
    return "kcal" if nutrient == "energy_kcal" else "g"


def _limit_check(
    nutrient: str,
    limit: float,
    measured: float | None,
    *,
    unit: str,
    per: str,
) -> ThresholdCheckResult:
    label = _NUTRIENT_LABELS[nutrient]
    amount = f"{format_amount(limit)}{unit}/100{per}"
    if measured is None:
        return ThresholdCheckResult(
            nutrient=nutrient,
            limit=limit,
            measured=None,
            passed=False,
            reason=f"{label} > {amount}{NO_VALUE_SUFFIX}",
        )
    passed = measured <= limit
    comparator = "≤" if passed else ">"
    return ThresholdCheckResult(
        nutrient=nutrient,
        limit=limit,
        measured=measured,
        passed=passed,
        reason=f"{label} {comparator} {amount}",
    )


def _gate_check(
    nutrient: str,
    limit: float,
    *,
    present: bool,
    pass_text: str,
    fail_text: str,
) -> ThresholdCheckResult:
    return ThresholdCheckResult(
        nutrient=nutrient,
        limit=limit,
        measured=present,
        passed=not present,
        reason=fail_text if present else pass_text,
    )
