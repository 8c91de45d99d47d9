"""Domain models for product evaluations."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType

from nutrient_suitability.domain.categories import CategoryDefinition
from nutrient_suitability.domain.nutrition import NormalizedNutrition


class AgeGroup(StrEnum):
    """Age bands with their own rule sets."""

    INFANT = "infant"
    OLDER = "older"

    @property
    def label(self) -> str:
        return _AGE_GROUP_LABELS[self]


_AGE_GROUP_LABELS = {
    AgeGroup.INFANT: "6-36 months",
    AgeGroup.OLDER: "> 36 months",
}

DEFAULT_AGE_GROUP = AgeGroup.OLDER


class EvaluationProfile(StrEnum):
    """Independently invocable evaluation profiles."""

    CATEGORY = "category"
    AGE = "age"
    PREGNANCY = "pregnancy"


@dataclass(frozen=True)
class ProductInput:
    """Already-fetched raw product data handed to the engine."""

    code: str
    name: str | None = None
    brand: str | None = None
    image_url: str | None = None
    nutriments: Mapping[str, object] = field(default_factory=dict)
    ingredients_text: str | None = None
    category_tags: tuple[str, ...] = ()
    category_path: tuple[str, ...] = ()
    description: str | None = None


@dataclass(frozen=True)
class ThresholdCheckResult:
    """Outcome of comparing one nutrient against its category limit."""

    nutrient: str
    limit: float
    measured: float | bool | None
    passed: bool
    reason: str


@dataclass(frozen=True)
class ThresholdReport:
    """All threshold checks of a category."""

    checks: tuple[ThresholdCheckResult, ...]

    @property
    def ok(self) -> bool:
        return all(check.passed for check in self.checks)

    @property
    def reasons(self) -> list[str]:
        return [check.reason for check in self.checks]


@dataclass(frozen=True)
class AgeGroupEvaluation:
    """Verdict for one age band."""

    suitable: bool
    reasons: tuple[str, ...] = ()


@dataclass(frozen=True)
class IngredientAnalysis:
    """Ingredient-text findings shared by all profiles."""

    sugars_found: tuple[str, ...] = ()
    has_added_sugar: bool = False
    has_non_sugar_sweetener: bool = False


@dataclass(frozen=True)
class PregnancyEvaluation:
    """Pregnancy-safety verdict; one reason per unsuppressed hazard."""

    reasons: tuple[str, ...] = ()

    @property
    def suitable(self) -> bool:
        return not self.reasons


@dataclass(frozen=True)
class RecentItem:
    """Plain record stored by the app's recent-products list."""

    id: str
    name: str
    brand: str | None
    image_url: str | None
    suitable: bool | None
    favorite: bool | None = None

    def to_record(self) -> dict[str, object]:
        return {
            "id": self.id,
            "name": self.name,
            "brand": self.brand,
            "imageUrl": self.image_url,
            "suitable": self.suitable,
            "favorite": self.favorite,
        }


@dataclass(frozen=True)
class ProductEvaluation:
    """Aggregate result of one evaluation call."""

    code: str
    product_name: str | None
    brand: str | None
    image_url: str | None
    profile: EvaluationProfile
    nutrition: NormalizedNutrition
    category: CategoryDefinition | None
    suitable: bool
    reasons: tuple[str, ...]
    default_age_group: AgeGroup = DEFAULT_AGE_GROUP
    age_evaluations: Mapping[AgeGroup, AgeGroupEvaluation] = field(
        default_factory=lambda: MappingProxyType({})
    )
    threshold_report: ThresholdReport | None = None
    pregnancy: PregnancyEvaluation | None = None
    sugars_found: tuple[str, ...] = ()
    has_non_sugar_sweetener: bool = False
    category_path: tuple[str, ...] = ()
    description: str | None = None
    ingredients_text: str | None = None

    @property
    def display_name(self) -> str:
        """Name and brand joined for display, falling back to the code."""
        parts = [part for part in (self.product_name, self.brand) if part]
        return " · ".join(parts) or self.code
