from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from recipe_safety.core.rules import TIER_COMMON, TIER_MODERATE, TIER_SEVERE, TIER_SEVERITY, TRIGGER_FOOD_DB
from recipe_safety.services.matcher import IngredientMatcher, default_matcher

TIERS = (TIER_COMMON, TIER_MODERATE, TIER_SEVERE)


@dataclass(frozen=True)
class CatalogMatch:
    name: str
    condition: str
    tier: str

    @property
    def severity(self) -> str:
        return TIER_SEVERITY[self.tier]


def _condition_entry(condition: str) -> Optional[Dict[str, List[Dict[str, Any]]]]:
    # Profiles spell condition names inconsistently ("ibs", "IBS")
    wanted = (condition or "").strip().lower()
    for key, tiers in TRIGGER_FOOD_DB.items():
        if key.lower() == wanted:
            return tiers
    return None


def get_trigger_foods(condition: str, tier: Optional[str] = None) -> List[Dict[str, Any]]:
    """Catalogue entries for a condition, one tier or all of them in tier order."""
    tiers = _condition_entry(condition)
    if tiers is None:
        return []
    if tier is not None:
        return list(tiers.get(tier, []))
    return [entry for name in TIERS for entry in tiers.get(name, [])]


def get_trigger_food_names(condition: str, tier: Optional[str] = None) -> List[str]:
    return [entry["name"] for entry in get_trigger_foods(condition, tier)]


def get_trigger_alternatives(condition: str, trigger_name: str) -> List[str]:
    """Substitutes the catalogue lists for one trigger of one condition."""
    wanted = (trigger_name or "").strip().lower()
    for entry in get_trigger_foods(condition):
        if entry["name"].lower() == wanted:
            return list(entry.get("alternatives", []))
    return []


def is_trigger_food(
    food_name: str,
    conditions: Iterable[str],
    matcher: Optional[IngredientMatcher] = None
) -> Optional[CatalogMatch]:
    """First catalogue trigger contained in a food name, scanning conditions in order."""
    matcher = matcher or default_matcher
    for condition in conditions:
        tiers = _condition_entry(condition)
        if tiers is None:
            continue
        for tier in TIERS:
            for entry in tiers.get(tier, []):
                if matcher.matches(food_name, entry["name"]):
                    return CatalogMatch(name=entry["name"], condition=condition, tier=tier)
    return None
