"""Ingredient text scanning for sugars, sweeteners and pregnancy hazards.

Matching is plain case-insensitive substring/regex matching. It is a
heuristic with known false positives (``"mandarinensirup"`` contains
``"sirup"``); callers rely on exactly this behaviour.
"""

import re
from dataclasses import dataclass

from nutrient_suitability.domain.evaluation import IngredientAnalysis

SUGAR_SYNONYMS = (
    "zucker",
    "glukose",
    "glucose",
    "fruktose",
    "fructose",
    "saccharose",
    "dextrose",
    "maltose",
    "laktose",
    "sirup",
    "honig",
    "agavendicksaft",
    "ahornsirup",
    "invertzucker",
    "glukosesirup",
    "fruktosesirup",
)

ADDED_SUGAR_TERMS = (
    "zucker",
    "sugar",
    "glukose",
    "glucose",
    "fruktose",
    "fructose",
    "saccharose",
    "sucrose",
    "dextrose",
    "sirup",
    "syrup",
    "honig",
    "honey",
    "maltose",
    "maltodextrin",
    "invertzucker",
    "reissirup",
    "maissirup",
    "ahornsirup",
    "maple syrup",
    "karamell",
    "caramel",
    "traubenzucker",
)

NON_SUGAR_SWEETENERS = (
    "aspartam",
    "acesulfam",
    "sucralose",
    "saccharin",
    "zyklamat",
    "cyclamat",
    "neotam",
    "advantam",
    "stevia",
    "steviolglycoside",
    "thaumatin",
    "alitame",
    "erythrit",
    "xylit",
    "sorbit",
    "mannit",
    "isomalt",
    "maltit",
    "laktit",
    "e950",
    "e951",
    "e952",
    "e953",
    "e954",
    "e955",
    "e957",
    "e958",
    "e959",
    "e960",
    "e961",
    "e962",
    "e963",
    "e965",
    "e966",
    "e967",
    "e968",
)

INFANT_ADDED_SUGAR_TERMS = (
    "sirup",
    "zucker",
    "honig",
    "dicksaft",
    "syrup",
    "fructose",
    "glucose",
    "saccharose",
    "sucrose",
    "dextrose",
    "maltose",
    "invertzucker",
    "agaven",
    "ahorn",
)

_CHEESE_HINT = re.compile(r"käse|cheese|cheddar|mozzarella|gouda")
_DRY_CEREAL_HINT = re.compile(
    r"getreide|cereal|porridge|haferflocken|hafer|\boats?\b|oatmeal|reisflocken"
    r"|rice[- ]cereal|reisbrei|instant[- ]?(brei|porridge)|grieß|pasta|nudel"
)


def find_sugar_synonyms(text: str | None) -> list[str]:
    """Return matched sugar synonyms, capitalized for display."""
    if not text:
        return []
    lowered = text.lower()
    return [term.capitalize() for term in SUGAR_SYNONYMS if term in lowered]


def contains_added_sugar(text: str | None) -> bool:
    lowered = (text or "").lower()
    return any(term in lowered for term in ADDED_SUGAR_TERMS)


def contains_non_sugar_sweetener(text: str | None) -> bool:
    lowered = (text or "").lower()
    return any(term in lowered for term in NON_SUGAR_SWEETENERS)


def find_infant_added_sugar_term(text: str | None) -> str | None:
    """Return the first infant added-sugar term found in the text."""
    lowered = (text or "").lower()
    for term in INFANT_ADDED_SUGAR_TERMS:
        if term in lowered:
            return term
    return None


def analyze_ingredients(text: str | None) -> IngredientAnalysis:
    """Run the sugar and sweetener scans over ingredient text."""
    return IngredientAnalysis(
        sugars_found=tuple(find_sugar_synonyms(text)),
        has_added_sugar=contains_added_sugar(text),
        has_non_sugar_sweetener=contains_non_sugar_sweetener(text),
    )


def contains_cheese_hint(name: str | None, ingredients: str | None) -> bool:
    return _CHEESE_HINT.search(_haystack(name, ingredients)) is not None


def is_dry_cereal(name: str | None, ingredients: str | None) -> bool:
    return _DRY_CEREAL_HINT.search(_haystack(name, ingredients)) is not None


@dataclass(frozen=True)
class PregnancyHazard:
    """A hazard pattern with an optional safe-preparation exception."""

    key: str
    reason: str
    pattern: re.Pattern[str]
    safe_marker: re.Pattern[str] | None = None

    def applies_to(self, haystack: str) -> bool:
        if self.pattern.search(haystack) is None:
            return False
        return self.safe_marker is None or self.safe_marker.search(haystack) is None


_PASTEURIZED = r"(?<!un)(?<!nicht )pasteuri[sz]|\buht\b|ultrahoch|h-milch"
_HEATED = (
    r"gekocht|gegart|gebacken|gebraten|gegrillt|überbacken|erhitzt"
    r"|cooked|baked|grilled|roasted|fried"
)

PREGNANCY_HAZARDS: tuple[PregnancyHazard, ...] = (
    PregnancyHazard(
        key="alcohol",
        reason="Contains alcohol.",
        pattern=re.compile(
            r"alkohol|alcohol|(?<!sch)wein(?!säure|essig|stein|traube|beere)|wine"
            r"|bier|\bbeer|\brum\b|likör|liqueur|schnaps|whisk(e)?y|wodka|vodka"
            r"|brandy|weinbrand|\bsekt\b|champagne|spirituose|spirits"
        ),
        safe_marker=re.compile(
            r"alkoholfrei|alcohol[- ]?free|non[- ]?alcoholic|ohne alkohol|0[.,]0 ?%"
        ),
    ),
    PregnancyHazard(
        key="caffeine",
        reason="High caffeine content (energy drink or caffeine additive).",
        pattern=re.compile(
            r"energy[- ]?drink|energydrink|koffein|caffeine|coffein|guarana|taurin"
        ),
        safe_marker=re.compile(
            r"entkoffeiniert|koffeinfrei|decaf|caffeine[- ]?free|coffeinfrei"
        ),
    ),
    PregnancyHazard(
        key="unpasteurized_dairy",
        reason="Made from raw (unpasteurized) milk: listeria risk.",
        pattern=re.compile(
            r"rohmilch|raw milk|unpasteuri[sz]|nicht pasteurisiert|lait cru"
        ),
        safe_marker=re.compile(_PASTEURIZED),
    ),
    PregnancyHazard(
        key="soft_cheese",
        reason="Soft or blue-veined cheese: listeria risk.",
        pattern=re.compile(
            r"weichkäse|soft cheese|blauschimmel|blue cheese|edelpilz|camembert"
            r"|\bbrie\b|gorgonzola|roquefort|limburger|romadur|munster|taleggio"
        ),
        safe_marker=re.compile(f"{_PASTEURIZED}|{_HEATED}"),
    ),
    PregnancyHazard(
        key="raw_meat",
        reason="Raw or cured meat: toxoplasmosis and listeria risk.",
        pattern=re.compile(
            r"rohwurst|salami|rohschinken|parmaschinken|serrano|prosciutto"
            r"|\bmett|tatar|tartare|carpaccio|raw meat|rohes fleisch|cured ham"
            r"|luftgetrocknet|air[- ]dried|chorizo|landjäger"
        ),
        safe_marker=re.compile(_HEATED),
    ),
    PregnancyHazard(
        key="raw_fish",
        reason="Raw or cold-smoked fish: listeria risk.",
        pattern=re.compile(
            r"kaltgeräuchert|cold[- ]?smoked|räucherlachs|smoked salmon|graved"
            r"|gravlax|sushi|sashimi|roher fisch|raw fish|matjes|ceviche"
        ),
        safe_marker=re.compile(
            r"heißgeräuchert|heissgeräuchert|hot[- ]?smoked|konserve|canned|tinned"
            r"|sterilisiert|sterili[sz]ed"
        ),
    ),
    PregnancyHazard(
        key="high_mercury_fish",
        reason="Predatory fish with high mercury levels.",
        pattern=re.compile(
            r"schwertfisch|swordfish|haifisch|\bhai\b|shark|königsmakrele"
            r"|king mackerel|marlin|ziegelfisch|tilefish|thunfischsteak|tuna steak"
            r"|granatbarsch|orange roughy|heilbutt"
        ),
    ),
    PregnancyHazard(
        key="liver",
        reason="Liver product: very high vitamin A content.",
        pattern=re.compile(r"leber|liver|foie gras"),
    ),
    PregnancyHazard(
        key="raw_egg",
        reason="Contains raw egg: salmonella risk.",
        pattern=re.compile(
            r"rohe(s)? ei|roh(e|en)? eier|raw eggs?|tiramisu|mousse au chocolat"
            r"|hollandaise|aioli|frische mayonnaise|homemade mayonnaise"
        ),
        safe_marker=re.compile(f"{_PASTEURIZED}|erhitzt|heat[- ]treated"),
    ),
    PregnancyHazard(
        key="raw_sprouts",
        reason="Raw sprouts: risk of bacterial contamination.",
        pattern=re.compile(r"sprossen|sprouts|keimlinge|alfalfa"),
        safe_marker=re.compile(f"{_HEATED}|blanchiert|blanched"),
    ),
    PregnancyHazard(
        key="licorice",
        reason="Contains licorice (glycyrrhizin).",
        pattern=re.compile(r"lakritz|licorice|liquorice|süßholz|glycyrrhiz"),
    ),
)


def scan_pregnancy_hazards(
    name: str | None,
    ingredients: str | None,
    category_path: tuple[str, ...] | list[str] = (),
) -> list[str]:
    """Return one reason per hazard found and not suppressed."""
    haystack = _haystack(name, ingredients, *category_path)
    return [
        hazard.reason for hazard in PREGNANCY_HAZARDS if hazard.applies_to(haystack)
    ]


def _haystack(*parts: str | None) -> str:
    return " ".join(part for part in parts if part).lower()
