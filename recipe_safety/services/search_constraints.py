from typing import Any, Dict, List, Optional

from recipe_safety.core.logging_config import get_logger
from recipe_safety.core.rules import INGREDIENT_SYNONYMS
from recipe_safety.models import DietPreferences, SearchConstraintResult
from recipe_safety.services.matcher import IngredientMatcher, word_matcher

logger = get_logger(__name__)

SOURCE_AVOID = "avoid"
SOURCE_MEDICAL = "medical"
SOURCE_TRIGGER = "trigger"

ISSUE_MESSAGES: Dict[str, str] = {
    SOURCE_AVOID: "Some foods in your \"embrace\" list conflict with your \"avoid\" list: {terms}",
    SOURCE_MEDICAL: "Some foods in your \"embrace\" list are marked as medical restrictions: {terms}",
    SOURCE_TRIGGER: "Some foods in your \"embrace\" list can trigger your medical conditions: {terms}",
}


class SearchConstraintValidator:
    """
    Flags embrace-list foods that a search would filter out anyway.

    A search asking for a food the user also restricts returns nothing, so
    the search layer warns up front instead. An embrace term conflicts with
    a restricted term when it contains the restricted term as whole words
    ("peanut butter cookies" vs "peanut butter"), or when it names an
    allergen category covering the restricted food (embracing "dairy" while
    avoiding "cheese"). Narrower restricted foods ("almond milk") do not
    make a broader embrace ("milk") conflict.
    """

    def __init__(
        self,
        matcher: Optional[IngredientMatcher] = None,
        synonyms: Optional[Dict[str, List[str]]] = None
    ):
        self.matcher = matcher or word_matcher
        self.synonyms = INGREDIENT_SYNONYMS if synonyms is None else synonyms

    def validate(self, preferences: Any) -> SearchConstraintResult:
        profile = DietPreferences.coerce(preferences)
        restricted = self._restricted_terms(profile)

        conflicts: List[str] = []
        conflicting_by_source: Dict[str, List[str]] = {source: [] for source in restricted}

        for embrace in profile.embrace_foods:
            if not embrace.strip():
                continue
            for source, terms in restricted.items():
                if any(self._conflicts(embrace, term) for term in terms):
                    if embrace not in conflicting_by_source[source]:
                        conflicting_by_source[source].append(embrace)
                    if embrace not in conflicts:
                        conflicts.append(embrace)

        issues = [
            ISSUE_MESSAGES[source].format(terms=", ".join(embraced))
            for source, embraced in conflicting_by_source.items()
            if embraced
        ]
        if conflicts:
            logger.info(f"Search constraints conflict on: {conflicts}")
        return SearchConstraintResult(conflicts=conflicts, issues=issues)

    @staticmethod
    def _restricted_terms(profile: DietPreferences) -> Dict[str, List[str]]:
        return {
            SOURCE_AVOID: list(profile.avoid_foods),
            SOURCE_MEDICAL: profile.medical_terms(),
            SOURCE_TRIGGER: [trigger.name for trigger in profile.trigger_foods],
        }

    def _conflicts(self, embrace: str, restricted: str) -> bool:
        if not restricted.strip():
            return False
        if self.matcher.matches(embrace, restricted):
            return True
        covered = self.synonyms.get(embrace.strip().lower(), [])
        return any(self.matcher.matches(restricted, food) for food in covered)


search_constraint_validator = SearchConstraintValidator()


def validate_search_constraints(preferences: Any) -> SearchConstraintResult:
    return search_constraint_validator.validate(preferences)
