"""Map free-text category tags to a nutrient-profile category."""

from collections.abc import Iterable

from nutrient_suitability.domain.categories import (
    CATEGORIES_BY_ID,
    CLASSIFICATION_RULES,
    CategoryDefinition,
    ClassificationRule,
)


def classify_category(
    tags: Iterable[str],
    rules: Iterable[ClassificationRule] = CLASSIFICATION_RULES,
) -> CategoryDefinition | None:
    """Return the category of the first rule matching any tag, else None."""
    lowered = [tag.lower() for tag in tags if isinstance(tag, str) and tag]
    if not lowered:
        return None
    for rule in rules:
        if any(rule.matches(tag) for tag in lowered):
            return CATEGORIES_BY_ID[rule.category_id]
    return None
