"""WHO Europe nutrient profile model (2023) reference data.

All limits apply per 100 g for foods and per 100 mL for drinks. The
``added_sugars_g`` and ``nss_g`` limits are always zero: when present, no
added sugar or non-sugar sweetener is tolerated at all.
"""

import re
from collections.abc import Iterator
from dataclasses import dataclass

THRESHOLD_FIELDS = (
    "total_fat_g",
    "sat_fat_g",
    "total_sugars_g",
    "added_sugars_g",
    "nss_g",
    "sodium_g",
    "energy_kcal",
)


@dataclass(frozen=True)
class Thresholds:
    """Per-nutrient ceilings of a category; None means no limit."""

    total_fat_g: float | None = None
    sat_fat_g: float | None = None
    total_sugars_g: float | None = None
    added_sugars_g: float | None = None
    nss_g: float | None = None
    sodium_g: float | None = None
    energy_kcal: float | None = None

    def items(self) -> Iterator[tuple[str, float]]:
        """Yield the defined limits in evaluation order."""
        for name in THRESHOLD_FIELDS:
            limit = getattr(self, name)
            if limit is not None:
                yield name, limit

    def __len__(self) -> int:
        return sum(1 for _ in self.items())


@dataclass(frozen=True)
class CategoryDefinition:
    """A nutrient-profile category with its threshold matrix."""

    id: str
    label: str
    thresholds: Thresholds
    is_drink: bool = False

    @property
    def unit_label(self) -> str:
        """Display unit of the per-100 reference amount."""
        return "mL" if self.is_drink else "g"


@dataclass(frozen=True)
class ClassificationRule:
    """Maps tags matching ``pattern`` to ``category_id``."""

    category_id: str
    pattern: re.Pattern[str]

    def matches(self, tag: str) -> bool:
        return self.pattern.search(tag) is not None


CATEGORIES: tuple[CategoryDefinition, ...] = (
    CategoryDefinition(
        id="1_choc_sugar_confectionery",
        label=(
            "Chocolate & sugar confectionery / energy bars / "
            "sweet toppings & desserts"
        ),
        thresholds=Thresholds(added_sugars_g=0, nss_g=0),
    ),
    CategoryDefinition(
        id="2_cakes_biscuits_pastries",
        label="Cakes, sweet biscuits, pastries & dry mixes",
        thresholds=Thresholds(total_fat_g=3, added_sugars_g=0, nss_g=0, sodium_g=0.1),
    ),
    CategoryDefinition(
        id="3_savoury_snacks",
        label="Savoury snacks",
        thresholds=Thresholds(added_sugars_g=0, nss_g=0, sodium_g=0.1),
    ),
    CategoryDefinition(
        id="4_1_juices",
        label="Beverages - Juices",
        thresholds=Thresholds(added_sugars_g=0, nss_g=0),
        is_drink=True,
    ),
    CategoryDefinition(
        id="4_2_dairy_milk_drinks",
        label="Beverages - Dairy milk drinks",
        thresholds=Thresholds(total_fat_g=3, added_sugars_g=0, nss_g=0),
        is_drink=True,
    ),
    CategoryDefinition(
        id="4_3_plant_milk_drinks",
        label="Beverages - Plant-based milk drinks",
        thresholds=Thresholds(total_fat_g=3, added_sugars_g=0, nss_g=0),
        is_drink=True,
    ),
    CategoryDefinition(
        id="4_4_energy_drinks",
        label="Beverages - Energy drinks",
        thresholds=Thresholds(added_sugars_g=0, nss_g=0),
        is_drink=True,
    ),
    CategoryDefinition(
        id="4_5_soft_drinks_waters_other",
        label="Beverages - Soft drinks, bottled waters & other drinks",
        thresholds=Thresholds(added_sugars_g=0, nss_g=0),
        is_drink=True,
    ),
    CategoryDefinition(
        id="5_edible_ices",
        label="Edible ices",
        thresholds=Thresholds(total_fat_g=3, added_sugars_g=0, nss_g=0, sodium_g=0.1),
    ),
    CategoryDefinition(
        id="6_breakfast_cereals",
        label="Breakfast cereals",
        thresholds=Thresholds(
            total_fat_g=17, sat_fat_g=6, total_sugars_g=12.5, sodium_g=0.5
        ),
    ),
    CategoryDefinition(
        id="7_yogurt_sour_milk_cream",
        label="Yogurt, sour milk, cream and similar",
        thresholds=Thresholds(
            total_fat_g=3, sat_fat_g=1, total_sugars_g=12.5, nss_g=0, sodium_g=0.1
        ),
    ),
    CategoryDefinition(
        id="8_cheese",
        label="Cheese",
        thresholds=Thresholds(total_fat_g=17, sodium_g=0.5),
    ),
    CategoryDefinition(
        id="9_ready_convenience_composite",
        label="Ready-made & convenience foods and composite dishes",
        thresholds=Thresholds(
            total_fat_g=17,
            sat_fat_g=6,
            total_sugars_g=12.5,
            sodium_g=0.5,
            energy_kcal=225,
        ),
    ),
    CategoryDefinition(
        id="10_fats_oils",
        label="Butter, other fats and oils",
        thresholds=Thresholds(total_fat_g=21, sodium_g=0.5),
    ),
    CategoryDefinition(
        id="11_bread_and_crispbreads",
        label="Bread, bread products & crisp breads",
        thresholds=Thresholds(total_fat_g=17, total_sugars_g=12.5, sodium_g=0.5),
    ),
    CategoryDefinition(
        id="12_pasta_rice_grains",
        label="Fresh or dried pasta, rice and grains",
        thresholds=Thresholds(total_fat_g=17, total_sugars_g=12.5, sodium_g=0.5),
    ),
    CategoryDefinition(
        id="13_fresh_meat_poultry_fish",
        label="Fresh & frozen meat, poultry, fish and similar",
        thresholds=Thresholds(total_fat_g=17),
    ),
    CategoryDefinition(
        id="14_processed_meat_fish",
        label="Processed meat, poultry, fish and similar",
        thresholds=Thresholds(total_fat_g=17, sodium_g=0.5),
    ),
    # Explicitly permitted, no limits.
    CategoryDefinition(
        id="15_fresh_frozen_fruit_veg_legumes",
        label="Fresh & frozen fruit, vegetables and legumes",
        thresholds=Thresholds(),
    ),
    CategoryDefinition(
        id="16_processed_fruit_veg",
        label="Processed fruit & vegetables",
        thresholds=Thresholds(
            total_fat_g=3, total_sugars_g=12.5, added_sugars_g=0, sodium_g=0.5
        ),
    ),
    CategoryDefinition(
        id="17_savoury_plant_meat_analogues",
        label="Savoury plant-based foods / meat analogues",
        thresholds=Thresholds(total_fat_g=17, added_sugars_g=0, nss_g=0, sodium_g=0.5),
    ),
    CategoryDefinition(
        id="18_sauces_dips_dressings",
        label="Sauces, dips & dressings",
        thresholds=Thresholds(total_fat_g=17, added_sugars_g=0, nss_g=0, sodium_g=0.5),
    ),
)

CATEGORIES_BY_ID: dict[str, CategoryDefinition] = {
    category.id: category for category in CATEGORIES
}


def _rule(category_id: str, pattern: str) -> ClassificationRule:
    return ClassificationRule(category_id, re.compile(pattern, re.IGNORECASE))


# Order matters: the first matching rule claims the product.
CLASSIFICATION_RULES: tuple[ClassificationRule, ...] = (
    _rule("6_breakfast_cereals", r"breakfast-?cereal|muesli|granola"),
    _rule(
        "4_5_soft_drinks_waters_other",
        r"soft-?drinks|sodas?|limonade|cola|iced-?tea|water",
    ),
    _rule("4_1_juices", r"juices?|smoothies?"),
    _rule("4_2_dairy_milk_drinks", r"\bmilk(s)?\b|milchgetränk|kakao-?drink"),
    _rule(
        "4_3_plant_milk_drinks",
        r"soy|soja|oat|hafer|almond|mandel|coconut|kokos.*(drink|milk)",
    ),
    _rule("7_yogurt_sour_milk_cream", r"yogurt|joghur|kefir|buttermilk"),
    _rule("8_cheese", r"cheese|käse"),
    _rule("3_savoury_snacks", r"chips|crisps|snacks?|cracker|pretzel|popcorn"),
    _rule("5_edible_ices", r"ice-?cream|gelato|sorbet|eis"),
    _rule(
        "9_ready_convenience_composite",
        r"ready-?meal|fertiggericht|pizza|soup|sauce.*meal|wrap|burger|sandwich",
    ),
    _rule("11_bread_and_crispbreads", r"bread|brot|baguette|flatbread|tortilla"),
    _rule("12_pasta_rice_grains", r"pasta|noodles?|rice|reis|quinoa|bulgur|couscous"),
    _rule(
        "14_processed_meat_fish",
        r"ham|schinken|sausage|würst|bacon|salami|smoked|tinned tuna|fish finger",
    ),
    _rule(
        "13_fresh_meat_poultry_fish",
        r"fresh.*(meat|fish|poultry)|rohes? (fleisch|fisch)",
    ),
    _rule(
        "16_processed_fruit_veg",
        r"canned|tinned|pickled|eingelegt|kompott|gemüse.*(dose|glas)",
    ),
    _rule(
        "17_savoury_plant_meat_analogues",
        r"tofu|tempeh|seitan|veggie.*(burger|meat)|pflanzen( ?-)?hack",
    ),
    _rule(
        "18_sauces_dips_dressings",
        r"ketchup|mayo|mayonnaise|sauce|dressing|dip|pesto|sojasauce",
    ),
    _rule(
        "1_choc_sugar_confectionery",
        r"chocolate|praline|confectionery|bonbon|gummi|marzipan|nut butter|honig|honey",
    ),
    _rule(
        "2_cakes_biscuits_pastries",
        r"cake|kuchen|biscuit|keks|waffle|croissant|pastry|muffin|pancake|waffel",
    ),
    _rule(
        "10_fats_oils",
        r"butter|margarine|öl|olive oil|sunflower oil|rapsöl|plant oil",
    ),
    _rule(
        "15_fresh_frozen_fruit_veg_legumes",
        r"fresh.*(fruit|vegetable)|frozen.*(fruit|vegetable)|legumes",
    ),
)
