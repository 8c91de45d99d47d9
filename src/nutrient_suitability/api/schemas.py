"""Pydantic models for the evaluation API."""

from typing import Any

from pydantic import BaseModel, Field

from nutrient_suitability.domain.evaluation import (
    AgeGroup,
    AgeGroupEvaluation,
    ProductEvaluation,
    ProductInput,
    ThresholdCheckResult,
)


class ProductPayload(BaseModel):
    """Raw product data submitted for evaluation."""

    code: str
    name: str | None = None
    brand: str | None = None
    image_url: str | None = None
    nutriments: dict[str, Any] = Field(default_factory=dict)
    ingredients_text: str | None = None
    category_tags: list[str] = Field(default_factory=list)
    category_path: list[str] = Field(default_factory=list)
    description: str | None = None

    def to_domain(self) -> ProductInput:
        return ProductInput(
            code=self.code,
            name=self.name,
            brand=self.brand,
            image_url=self.image_url,
            nutriments=dict(self.nutriments),
            ingredients_text=self.ingredients_text,
            category_tags=tuple(self.category_tags),
            category_path=tuple(self.category_path),
            description=self.description,
        )


class RecentItemRequest(BaseModel):
    """Product to evaluate and store as a recent item."""

    product: ProductPayload
    favorite: bool | None = None


class NutritionOut(BaseModel):
    kcal: float | None = None
    fat_g: float | None = None
    sat_fat_g: float | None = None
    sugars_g: float | None = None
    salt_g: float | None = None


class CategoryOut(BaseModel):
    id: str
    label: str
    is_drink: bool
    thresholds: dict[str, float]


class ThresholdCheckOut(BaseModel):
    nutrient: str
    limit: float
    measured: float | bool | None = None
    passed: bool
    reason: str

    @classmethod
    def from_domain(cls, check: ThresholdCheckResult) -> "ThresholdCheckOut":
        return cls(
            nutrient=check.nutrient,
            limit=check.limit,
            measured=check.measured,
            passed=check.passed,
            reason=check.reason,
        )


class AgeGroupEvaluationOut(BaseModel):
    label: str
    suitable: bool
    reasons: list[str]

    @classmethod
    def from_domain(
        cls, group: AgeGroup, evaluation: AgeGroupEvaluation
    ) -> "AgeGroupEvaluationOut":
        return cls(
            label=group.label,
            suitable=evaluation.suitable,
            reasons=list(evaluation.reasons),
        )


class EvaluationResponse(BaseModel):
    """Evaluation result as rendered by the app."""

    code: str
    product_name: str | None = None
    display_name: str
    brand: str | None = None
    image_url: str | None = None
    profile: str
    suitable: bool
    reasons: list[str]
    nutrition: NutritionOut
    category: CategoryOut | None = None
    checks: list[ThresholdCheckOut] = Field(default_factory=list)
    default_age_group: str
    age_evaluations: dict[str, AgeGroupEvaluationOut] = Field(default_factory=dict)
    sugars_found: list[str] = Field(default_factory=list)
    has_non_sugar_sweetener: bool = False
    category_path: list[str] = Field(default_factory=list)
    description: str | None = None
    ingredients_text: str | None = None

    @classmethod
    def from_domain(cls, evaluation: ProductEvaluation) -> "EvaluationResponse":
        nutrition = evaluation.nutrition
        category = evaluation.category
        report = evaluation.threshold_report
        return cls(
            code=evaluation.code,
            product_name=evaluation.product_name,
            display_name=evaluation.display_name,
            brand=evaluation.brand,
            image_url=evaluation.image_url,
            profile=evaluation.profile.value,
            suitable=evaluation.suitable,
            reasons=list(evaluation.reasons),
            nutrition=NutritionOut(
                kcal=nutrition.kcal,
                fat_g=nutrition.fat_g,
                sat_fat_g=nutrition.sat_fat_g,
                sugars_g=nutrition.sugars_g,
                salt_g=nutrition.salt_g,
            ),
            category=(
                CategoryOut(
                    id=category.id,
                    label=category.label,
                    is_drink=category.is_drink,
                    thresholds=dict(category.thresholds.items()),
                )
                if category
                else None
            ),
            checks=(
                [ThresholdCheckOut.from_domain(check) for check in report.checks]
                if report
                else []
            ),
            default_age_group=evaluation.default_age_group.value,
            age_evaluations={
                group.value: AgeGroupEvaluationOut.from_domain(group, result)
                for group, result in evaluation.age_evaluations.items()
            },
            sugars_found=list(evaluation.sugars_found),
            has_non_sugar_sweetener=evaluation.has_non_sugar_sweetener,
            category_path=list(evaluation.category_path),
            description=evaluation.description,
            ingredients_text=evaluation.ingredients_text,
        )
