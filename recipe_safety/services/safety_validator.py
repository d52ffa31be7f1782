"""
Recipe safety validation.

A recipe is checked ingredient by ingredient against an ordered list of
rules. Blocker-tier rules run first; an ingredient that is blocked is never
also reported as a warning. Within a tier the first rule that matches wins,
and each rule reports the first matching term in profile order, so every
ingredient yields at most one blocker and at most one warning.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from recipe_safety.core.logging_config import get_logger
from recipe_safety.core.rules import (
    AVOID_MATCH_PHRASE,
    DEFAULT_MEDICAL_CONDITION,
    MEDICAL_RESTRICTION_PHRASE,
    MEDICAL_TAG,
    SEVERITY_SEVERE,
    SUGGESTIONS_BLOCKED,
    SUGGESTIONS_SAFE,
    SUGGESTIONS_WARNED,
    TRIGGER_PHRASE,
)
from recipe_safety.core.safety_config import SafetyConfig, load_safety_config
from recipe_safety.models import DietPreferences, Recipe, SafetyBlocker, SafetyVerdict, SafetyWarning
from recipe_safety.services.alternatives import AlternativeLookup, alternative_lookup
from recipe_safety.services.matcher import IngredientMatcher, default_matcher
from recipe_safety.services.trigger_catalog import get_trigger_alternatives

logger = get_logger(__name__)

TIER_BLOCKER = "blocker"
TIER_WARNING = "warning"


@dataclass(frozen=True)
class Finding:
    term: str
    reason: str
    severity: str
    medical_condition: Optional[str] = None


def _is_medical(term: str, preferences: DietPreferences) -> bool:
    wanted = term.strip().lower()
    return any(
        key.strip().lower() == wanted and tag.strip().lower() == MEDICAL_TAG
        for key, tag in preferences.severity_levels.items()
    )


def _medical_condition_for(term: str, preferences: DietPreferences) -> str:
    """Best label for the condition behind a medical restriction."""
    wanted = term.strip().lower()
    for trigger in preferences.trigger_foods:
        if trigger.name.strip().lower() == wanted:
            return trigger.condition
    if len(preferences.medical_conditions) == 1:
        return preferences.medical_conditions[0].display_name
    return DEFAULT_MEDICAL_CONDITION


class SafetyRule(ABC):
    name: str = "rule"
    tier: str = TIER_BLOCKER

    @abstractmethod
    def evaluate(
        self,
        ingredient: str,
        preferences: DietPreferences,
        matcher: IngredientMatcher
    ) -> Optional[Finding]:
        """Return the finding for the first matching term, or None."""
        pass


class AvoidFoodRule(SafetyRule):
    name = "avoid"
    tier = TIER_BLOCKER

    def evaluate(self, ingredient, preferences, matcher):
        for term in preferences.avoid_foods:
            if not matcher.matches(ingredient, term):
                continue
            reason = f"Contains {term} ({AVOID_MATCH_PHRASE})"
            condition = None
            if _is_medical(term, preferences):
                reason += f" which is marked as a {MEDICAL_RESTRICTION_PHRASE}"
                condition = _medical_condition_for(term, preferences)
            return Finding(term=term, reason=reason, severity=SEVERITY_SEVERE, medical_condition=condition)
        return None


class MedicalSeverityRule(SafetyRule):
    name = "medical"
    tier = TIER_BLOCKER

    def evaluate(self, ingredient, preferences, matcher):
        for term, tag in preferences.severity_levels.items():
            if tag.strip().lower() != MEDICAL_TAG or not matcher.matches(ingredient, term):
                continue
            return Finding(
                term=term,
                reason=f"Contains {term} which is marked as a {MEDICAL_RESTRICTION_PHRASE}",
                severity=SEVERITY_SEVERE,
                medical_condition=_medical_condition_for(term, preferences)
            )
        return None


class TriggerFoodRule(SafetyRule):
    name = "trigger"
    tier = TIER_WARNING

    def evaluate(self, ingredient, preferences, matcher):
        for trigger in preferences.trigger_foods:
            if not matcher.matches(ingredient, trigger.name):
                continue
            return Finding(
                term=trigger.name,
                reason=f"May contain {trigger.name} {TRIGGER_PHRASE} {trigger.condition}",
                severity=trigger.severity,
                medical_condition=trigger.condition
            )
        return None


DEFAULT_RULES: Tuple[SafetyRule, ...] = (AvoidFoodRule(), MedicalSeverityRule(), TriggerFoodRule())


class SafetyValidator:
    def __init__(
        self,
        matcher: Optional[IngredientMatcher] = None,
        alternatives: Optional[AlternativeLookup] = None,
        config: Optional[SafetyConfig] = None,
        rules: Optional[Sequence[SafetyRule]] = None
    ):
        self.matcher = matcher or default_matcher
        self.alternatives = alternatives or alternative_lookup
        self.config = config or load_safety_config()
        rules = DEFAULT_RULES if rules is None else tuple(rules)
        self.blocker_rules = [r for r in rules if r.tier == TIER_BLOCKER]
        self.warning_rules = [r for r in rules if r.tier == TIER_WARNING]

    def validate(self, recipe: Any, preferences: Any) -> SafetyVerdict:
        """Decide whether a recipe is safe to show to a user.

        Args:
            recipe: A Recipe (or mapping) with an ingredient list.
            preferences: The user's DietPreferences, a raw mapping, or None.

        Returns:
            A fresh SafetyVerdict; is_safe is False iff any blocker was found.

        Raises:
            ValueError: if the recipe has no ingredient list.
        """
        recipe_id, ingredients = self._ingredients_of(recipe)
        profile = DietPreferences.coerce(preferences)

        blockers: List[SafetyBlocker] = []
        warnings: List[SafetyWarning] = []

        for ingredient in ingredients:
            if not isinstance(ingredient, str) or not ingredient.strip():
                continue

            blocked = self._first_finding(self.blocker_rules, ingredient, profile)
            if blocked:
                blockers.append(SafetyBlocker(
                    ingredient=ingredient,
                    reason=blocked.reason,
                    medical_condition=blocked.medical_condition
                ))
                continue

            flagged = self._first_finding(self.warning_rules, ingredient, profile)
            if flagged:
                warnings.append(SafetyWarning(
                    ingredient=ingredient,
                    reason=flagged.reason,
                    severity=flagged.severity,
                    alternatives=self._alternatives_for(ingredient, flagged, profile)
                ))

        verdict = SafetyVerdict(
            blockers=blockers,
            warnings=warnings,
            suggestions=self._suggestions(blockers, warnings)
        )
        if self.config.log_findings:
            logger.info(
                f"Recipe {recipe_id}: safe={verdict.is_safe} "
                f"blockers={len(blockers)} warnings={len(warnings)}"
            )
        return verdict

    def filter_safe(self, recipes: Iterable[Any], preferences: Any) -> List[Tuple[Recipe, SafetyVerdict]]:
        """Keep safe recipes, fewest warnings first (stable for ties)."""
        profile = DietPreferences.coerce(preferences)
        safe = []
        for recipe in recipes:
            verdict = self.validate(recipe, profile)
            if verdict.is_safe:
                safe.append((recipe, verdict))
        safe.sort(key=lambda pair: len(pair[1].warnings))
        return safe

    def _first_finding(
        self,
        rules: Sequence[SafetyRule],
        ingredient: str,
        profile: DietPreferences
    ) -> Optional[Finding]:
        for rule in rules:
            finding = rule.evaluate(ingredient, profile, self.matcher)
            if finding:
                return finding
        return None

    def _alternatives_for(self, ingredient: str, finding: Finding, profile: DietPreferences) -> List[str]:
        """Substitutes for a flagged ingredient that the profile would not flag itself."""
        candidates: List[str] = []
        if finding.medical_condition:
            candidates = get_trigger_alternatives(finding.medical_condition, finding.term)
        if not candidates:
            candidates = self.alternatives.suggest(finding.term) or self.alternatives.suggest(ingredient)

        restricted = profile.restricted_terms()
        safe = [s for s in candidates if not any(self.matcher.matches(s, term) for term in restricted)]
        if safe:
            return safe
        return [f"Consider {finding.term}-free alternatives"]

    def _suggestions(self, blockers: List[SafetyBlocker], warnings: List[SafetyWarning]) -> List[str]:
        if not self.config.include_suggestions:
            return []
        if blockers:
            return list(SUGGESTIONS_BLOCKED)
        if warnings:
            return list(SUGGESTIONS_WARNED)
        return list(SUGGESTIONS_SAFE)

    @staticmethod
    def _ingredients_of(recipe: Any) -> Tuple[str, List[Any]]:
        if isinstance(recipe, dict):
            recipe = Recipe.model_validate(recipe)
        if recipe is None:
            raise ValueError("Cannot validate safety of a missing recipe")
        recipe_id = getattr(recipe, "id", "<unknown>")
        ingredients = getattr(recipe, "ingredients", None)
        if not isinstance(ingredients, (list, tuple)):
            raise ValueError(f"Recipe {recipe_id} has no ingredient list")
        return recipe_id, list(ingredients)


safety_validator = SafetyValidator()


def validate_recipe_safety(recipe: Any, preferences: Any) -> SafetyVerdict:
    return safety_validator.validate(recipe, preferences)


def filter_safe_recipes(recipes: Iterable[Any], preferences: Any) -> List[Tuple[Recipe, SafetyVerdict]]:
    return safety_validator.filter_safe(recipes, preferences)
