"""Evaluation profiles assembling the rule components.

Each profile is a separate pure function sharing only the unit normalizer and
the ingredient analyzer. Callers pick exactly one profile per product.
"""

import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType

from nutrient_suitability.domain.categories import CategoryDefinition
from nutrient_suitability.domain.evaluation import (
    DEFAULT_AGE_GROUP,
    AgeGroup,
    AgeGroupEvaluation,
    EvaluationProfile,
    IngredientAnalysis,
    PregnancyEvaluation,
    ProductEvaluation,
    ProductInput,
    RecentItem,
    ThresholdReport,
)
from nutrient_suitability.domain.nutrition import NormalizedNutrition
from nutrient_suitability.services.age_groups import evaluate_age_groups
from nutrient_suitability.services.classifier import classify_category
from nutrient_suitability.services.ingredients import (
    analyze_ingredients,
    scan_pregnancy_hazards,
)
from nutrient_suitability.services.normalizer import normalize_nutrients
from nutrient_suitability.services.thresholds import evaluate_thresholds

UNCLASSIFIED_REASONS = (
    "Could not auto-classify the product category.",
    (
        "Tip: the product should carry matching category tags in Open Food Facts "
        '(e.g. "breakfast-cereals").'
    ),
)

_logger = logging.getLogger(__name__)


def evaluate_category_profile(product: ProductInput) -> ProductEvaluation:
    """Evaluate against the threshold matrix of the product's category."""
    nutrition = normalize_nutrients(product.nutriments)
    analysis = analyze_ingredients(product.ingredients_text)
    category = classify_category(product.category_tags)
    if category is None:
        _logger.debug("Unclassified product: code=%s", product.code)
        return _build(
            product,
            profile=EvaluationProfile.CATEGORY,
            nutrition=nutrition,
            analysis=analysis,
            suitable=False,
            reasons=UNCLASSIFIED_REASONS,
        )

    report = evaluate_thresholds(
        category,
        nutrition,
        has_added_sugar=analysis.has_added_sugar,
        has_non_sugar_sweetener=analysis.has_non_sugar_sweetener,
    )
    return _build(
        product,
        profile=EvaluationProfile.CATEGORY,
        nutrition=nutrition,
        analysis=analysis,
        suitable=report.ok,
        reasons=tuple(report.reasons),
        category=category,
        threshold_report=report,
    )


def evaluate_age_profile(
    product: ProductInput, default_age_group: AgeGroup = DEFAULT_AGE_GROUP
) -> ProductEvaluation:
    """Evaluate every age band; the default band sets the headline verdict."""
    nutrition = normalize_nutrients(product.nutriments)
    analysis = analyze_ingredients(product.ingredients_text)
    age_evaluations = evaluate_age_groups(
        nutrition, name=product.name, ingredients_text=product.ingredients_text
    )
    default_eval = age_evaluations[default_age_group]
    return _build(
        product,
        profile=EvaluationProfile.AGE,
        nutrition=nutrition,
        analysis=analysis,
        suitable=default_eval.suitable,
        reasons=default_eval.reasons,
        default_age_group=default_age_group,
        age_evaluations=age_evaluations,
    )


def evaluate_pregnancy_profile(product: ProductInput) -> ProductEvaluation:
    """Scan name, ingredients and category path for pregnancy hazards."""
    nutrition = normalize_nutrients(product.nutriments)
    analysis = analyze_ingredients(product.ingredients_text)
    pregnancy = PregnancyEvaluation(
        reasons=tuple(
            scan_pregnancy_hazards(
                product.name, product.ingredients_text, product.category_path
            )
        )
    )
    return _build(
        product,
        profile=EvaluationProfile.PREGNANCY,
        nutrition=nutrition,
        analysis=analysis,
        suitable=pregnancy.suitable,
        reasons=pregnancy.reasons,
        pregnancy=pregnancy,
    )


_ProfileFn = Callable[[ProductInput, AgeGroup], ProductEvaluation]


def _category(product: ProductInput, _: AgeGroup) -> ProductEvaluation:
    return evaluate_category_profile(product)


def _pregnancy(product: ProductInput, _: AgeGroup) -> ProductEvaluation:
    return evaluate_pregnancy_profile(product)


_PROFILES: dict[EvaluationProfile, _ProfileFn] = {
    EvaluationProfile.CATEGORY: _category,
    EvaluationProfile.AGE: evaluate_age_profile,
    EvaluationProfile.PREGNANCY: _pregnancy,
}


def evaluate_product(
    product: ProductInput,
    profile: EvaluationProfile = EvaluationProfile.AGE,
    *,
    default_age_group: AgeGroup = DEFAULT_AGE_GROUP,
) -> ProductEvaluation:
    """Run the selected evaluation profile."""
    evaluation = _PROFILES[profile](product, default_age_group)
    _logger.debug(
        "Evaluated product: code=%s profile=%s suitable=%s",
        product.code,
        profile.value,
        evaluation.suitable,
    )
    return evaluation


def to_recent_item(
    evaluation: ProductEvaluation, *, favorite: bool | None = None
) -> RecentItem:
    """Convert an evaluation into a recent-products entry."""
    return RecentItem(
        id=evaluation.code,
        name=evaluation.product_name or evaluation.code,
        brand=evaluation.brand,
        image_url=evaluation.image_url,
        suitable=evaluation.suitable,
        favorite=favorite,
    )


def _build(  # noqa: PLR0913
    product: ProductInput,
    *,
    profile: EvaluationProfile,
    nutrition: NormalizedNutrition,
    analysis: IngredientAnalysis,
    suitable: bool,
    reasons: tuple[str, ...],
    category: CategoryDefinition | None = None,
    threshold_report: ThresholdReport | None = None,
    default_age_group: AgeGroup = DEFAULT_AGE_GROUP,
    age_evaluations: Mapping[AgeGroup, AgeGroupEvaluation] | None = None,
    pregnancy: PregnancyEvaluation | None = None,
) -> ProductEvaluation:
    return ProductEvaluation(
        code=product.code,
        product_name=product.name,
        brand=product.brand,
        image_url=product.image_url,
        profile=profile,
        nutrition=nutrition,
        category=category,
        suitable=suitable,
        reasons=tuple(reasons),
        default_age_group=default_age_group,
        age_evaluations=MappingProxyType(dict(age_evaluations or {})),
        threshold_report=threshold_report,
        pregnancy=pregnancy,
        sugars_found=analysis.sugars_found,
        has_non_sugar_sweetener=analysis.has_non_sugar_sweetener,
        category_path=product.category_path,
        description=product.description,
        ingredients_text=product.ingredients_text,
    )
