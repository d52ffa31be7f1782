import hashlib
from typing import Any, Iterable, List

from recipe_safety.core.logging_config import get_logger
from recipe_safety.core.rules import TIER_SEVERITY
from recipe_safety.models import DietPreferences, MedicalCondition, TriggerFood
from recipe_safety.services.trigger_catalog import TIERS, get_trigger_foods

logger = get_logger(__name__)


def condition_display_name(condition: MedicalCondition) -> str:
    return condition.display_name


def default_trigger_foods(conditions: Iterable[MedicalCondition]) -> List[TriggerFood]:
    """Expand known conditions into their catalogue trigger foods.

    Each trigger takes the severity of its catalogue tier (common triggers
    are mild). Custom and unknown conditions contribute nothing.
    """
    triggers: List[TriggerFood] = []
    for condition in conditions:
        for tier in TIERS:
            for entry in get_trigger_foods(condition.name, tier):
                triggers.append(TriggerFood(
                    name=entry["name"],
                    condition=condition.display_name,
                    severity=TIER_SEVERITY[tier],
                    user_added=False,
                    notes=entry.get("description")
                ))
    return triggers


def merge_trigger_foods(preferences: Any) -> DietPreferences:
    """
    Return a copy of the profile with catalogue triggers filled in.

    User-declared triggers come first and win over catalogue entries for
    the same food and condition, so declaration-order tie-breaks keep
    honoring what the user entered.
    """
    profile = DietPreferences.coerce(preferences)
    seen = {
        (t.name.strip().lower(), t.condition.strip().lower())
        for t in profile.trigger_foods
    }
    merged = list(profile.trigger_foods)
    for trigger in default_trigger_foods(profile.medical_conditions):
        key = (trigger.name.lower(), trigger.condition.lower())
        if key not in seen:
            seen.add(key)
            merged.append(trigger)

    added = len(merged) - len(profile.trigger_foods)
    if added:
        logger.info(f"Added {added} catalogue trigger foods to profile")
    return profile.model_copy(update={"trigger_foods": merged})


def profile_fingerprint(preferences: Any) -> str:
    """Stable hash of a profile, for caches keyed on (recipe id, profile)."""
    profile = DietPreferences.coerce(preferences)
    blob = profile.model_dump_json(by_alias=True)
    return hashlib.sha256(blob.encode("utf-8")).hexdigest()
