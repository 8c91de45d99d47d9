"""Tests for category classification."""

from nutrient_suitability.domain.categories import (
    CATEGORIES,
    CATEGORIES_BY_ID,
    CLASSIFICATION_RULES,
)
from nutrient_suitability.services.classifier import classify_category


def test_cheese_tags_classify_as_cheese() -> None:
    category = classify_category(["cheeses"])

    assert category is not None
    assert category.id == "8_cheese"
    assert category.thresholds.total_fat_g == 17
    assert category.thresholds.sodium_g == 0.5


def test_earlier_rule_wins_when_two_rules_match() -> None:
    # "granola" matches breakfast cereals, "chocolate" matches confectionery.
    category = classify_category(["en:chocolate-bars", "en:granola"])

    assert category is not None
    assert category.id == "6_breakfast_cereals"


def test_tag_order_does_not_affect_precedence() -> None:
    first = classify_category(["en:ketchup", "en:cheeses"])
    second = classify_category(["en:cheeses", "en:ketchup"])

    assert first is second
    assert first is not None
    assert first.id == "8_cheese"


def test_matching_is_case_insensitive() -> None:
    category = classify_category(["EN:ORANGE-JUICES"])

    assert category is not None
    assert category.id == "4_1_juices"
    assert category.unit_label == "mL"


def test_substring_matches_are_accepted() -> None:
    # "water" inside "watermelon" claims the soft drinks category.
    category = classify_category(["en:watermelons"])

    assert category is not None
    assert category.id == "4_5_soft_drinks_waters_other"


def test_no_match_returns_none() -> None:
    assert classify_category(["en:qwerty"]) is None
    assert classify_category([]) is None


def test_every_rule_points_to_a_known_category() -> None:
    assert all(rule.category_id in CATEGORIES_BY_ID for rule in CLASSIFICATION_RULES)
    assert len(CATEGORIES_BY_ID) == len(CATEGORIES)
