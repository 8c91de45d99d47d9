"""Tests for nutrient normalization."""

import math

import pytest

from nutrient_suitability.services.normalizer import (
    KCAL_PER_KJ,
    normalize_nutrients,
    parse_number,
)


def test_prefers_explicit_kcal_over_kilojoules() -> None:
    nutrition = normalize_nutrients({"energy-kj_100g": 1000, "energy-kcal_100g": 250})

    assert nutrition.kcal == 250


def test_converts_kilojoules_when_kcal_missing() -> None:
    nutrition = normalize_nutrients({"energy_100g": 1000})

    assert nutrition.kcal == pytest.approx(1000 * KCAL_PER_KJ)


def test_sodium_only_converts_to_salt() -> None:
    nutrition = normalize_nutrients({"sodium_100g": 0.4})

    assert nutrition.salt_g == pytest.approx(1.0)


def test_sodium_and_salt_paths_converge() -> None:
    sodium = 0.32
    from_sodium = normalize_nutrients({"sodium_100g": sodium})
    from_salt = normalize_nutrients({"salt_100g": 2.5 * sodium})

    assert from_sodium.salt_g == pytest.approx(2.5 * sodium)
    assert from_salt.salt_g == pytest.approx(2.5 * sodium)
    assert from_sodium.sodium_g == pytest.approx(from_salt.sodium_g)


def test_salt_key_wins_over_sodium() -> None:
    nutrition = normalize_nutrients({"salt_100g": 1.1, "sodium_100g": 0.8})

    assert nutrition.salt_g == 1.1


def test_numeric_strings_are_accepted() -> None:
    nutrition = normalize_nutrients({"fat_100g": "3,5", "sugars_100g": " 12 "})

    assert nutrition.fat_g == 3.5
    assert nutrition.sugars_g == 12


def test_malformed_values_stay_absent() -> None:
    nutrition = normalize_nutrients(
        {
            "fat_100g": "n/a",
            "sugars_100g": None,
            "salt_100g": float("nan"),
            "energy-kcal_100g": True,
            "saturated-fat_100g": [1],
        }
    )

    assert nutrition.fat_g is None
    assert nutrition.sugars_g is None
    assert nutrition.salt_g is None
    assert nutrition.kcal is None
    assert nutrition.sat_fat_g is None


def test_falls_through_to_next_parseable_synonym() -> None:
    nutrition = normalize_nutrients({"fat_100g": "", "fat": 4})

    assert nutrition.fat_g == 4


def test_zero_is_kept_not_treated_as_missing() -> None:
    nutrition = normalize_nutrients({"sugars_100g": 0})

    assert nutrition.sugars_g == 0


def test_non_mapping_input_yields_empty_nutrition() -> None:
    nutrition = normalize_nutrients(["fat_100g", 3])

    assert nutrition.kcal is None
    assert nutrition.salt_g is None
    assert nutrition.sodium_g is None


def test_parse_number_rejects_infinity() -> None:
    assert parse_number("inf") is None
    assert parse_number(math.inf) is None
    assert parse_number(7) == 7.0
