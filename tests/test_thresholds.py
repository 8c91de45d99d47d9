"""Tests for the category threshold evaluator."""

from nutrient_suitability.domain.categories import CATEGORIES, CATEGORIES_BY_ID
from nutrient_suitability.domain.nutrition import NormalizedNutrition
from nutrient_suitability.services.thresholds import evaluate_thresholds

CHEESE = CATEGORIES_BY_ID["8_cheese"]
READY_MEALS = CATEGORIES_BY_ID["9_ready_convenience_composite"]
CONFECTIONERY = CATEGORIES_BY_ID["1_choc_sugar_confectionery"]


def _evaluate(category, nutrition, *, added=False, nss=False):
    return evaluate_thresholds(
        category, nutrition, has_added_sugar=added, has_non_sugar_sweetener=nss
    )


def test_value_equal_to_limit_passes() -> None:
    report = _evaluate(CHEESE, NormalizedNutrition(fat_g=17, salt_g=1.25))

    assert report.ok
    assert [check.passed for check in report.checks] == [True, True]
    assert report.checks[0].reason == "Total fat ≤ 17g/100g"


def test_cheese_scenario_fails_fat_and_sodium() -> None:
    report = _evaluate(CHEESE, NormalizedNutrition(fat_g=30, salt_g=2))

    assert not report.ok
    failing = [check for check in report.checks if not check.passed]
    assert len(failing) == 2
    assert "> 17g" in failing[0].reason
    assert failing[1].nutrient == "sodium_g"
    assert failing[1].measured == 0.8
    assert "> 0.5g" in failing[1].reason


def test_missing_value_fails_with_no_value_note() -> None:
    report = _evaluate(CHEESE, NormalizedNutrition(fat_g=10))

    sodium = report.checks[1]
    assert not sodium.passed
    assert sodium.measured is None
    assert "no value" in sodium.reason
    assert not report.ok


def test_one_check_per_defined_limit() -> None:
    nutrition = NormalizedNutrition(
        kcal=100, fat_g=1, sat_fat_g=1, sugars_g=1, salt_g=0
    )
    for category in CATEGORIES:
        report = _evaluate(category, nutrition)
        assert len(report.checks) == len(category.thresholds)


def test_category_without_limits_is_ok() -> None:
    report = _evaluate(
        CATEGORIES_BY_ID["15_fresh_frozen_fruit_veg_legumes"], NormalizedNutrition()
    )

    assert report.checks == ()
    assert report.ok


def test_added_sugar_and_sweetener_gates() -> None:
    clean = _evaluate(CONFECTIONERY, NormalizedNutrition())
    sweetened = _evaluate(CONFECTIONERY, NormalizedNutrition(), added=True, nss=True)

    assert clean.ok
    assert clean.reasons == ["No added sugars", "No non-sugar sweeteners (NSS)"]
    assert not sweetened.ok
    assert sweetened.reasons == [
        "Contains added sugars",
        "Contains non-sugar sweeteners (NSS)",
    ]


def test_energy_limit_only_for_categories_defining_it() -> None:
    nutrition = NormalizedNutrition(
        kcal=300, fat_g=5, sat_fat_g=1, sugars_g=2, salt_g=0.5
    )

    ready = _evaluate(READY_MEALS, nutrition)
    cheese = _evaluate(CHEESE, nutrition)

    energy = [check for check in ready.checks if check.nutrient == "energy_kcal"]
    assert len(energy) == 1
    assert not energy[0].passed
    assert energy[0].reason == "Energy > 225kcal/100g"
    assert all(check.nutrient != "energy_kcal" for check in cheese.checks)


def test_drink_categories_use_millilitres() -> None:
    report = _evaluate(
        CATEGORIES_BY_ID["4_2_dairy_milk_drinks"], NormalizedNutrition(fat_g=1.5)
    )

    assert report.checks[0].reason == "Total fat ≤ 3g/100mL"
