from typing import Dict, List, Optional

from recipe_safety.core.logging_config import get_logger
from recipe_safety.core.rules import INGREDIENT_SYNONYMS, SAFE_ALTERNATIVES
from recipe_safety.core.safety_config import SafetyConfig, load_safety_config
from recipe_safety.services.matcher import WordMatcher, word_matcher
from recipe_safety.utils.ingredient_parser import extract_food_name

logger = get_logger(__name__)


class AlternativeLookup:
    """Maps an ingredient to substitutes for the allergen category it belongs to.

    The table is pluggable: pass one in, or let the config file extend the
    built-in dairy/gluten/nuts/eggs/soy entries.
    """

    def __init__(
        self,
        table: Optional[Dict[str, List[str]]] = None,
        synonyms: Optional[Dict[str, List[str]]] = None,
        max_alternatives: int = 0,
        matcher: Optional[WordMatcher] = None
    ):
        self.table = dict(SAFE_ALTERNATIVES if table is None else table)
        self.synonyms = INGREDIENT_SYNONYMS if synonyms is None else synonyms
        self.max_alternatives = max_alternatives
        self.matcher = matcher or word_matcher

    @classmethod
    def from_config(cls, config: SafetyConfig) -> "AlternativeLookup":
        table = {**SAFE_ALTERNATIVES, **config.alternatives}
        return cls(table=table, max_alternatives=config.max_alternatives)

    def suggest(self, ingredient: str) -> List[str]:
        """
        Return ordered substitute names for an ingredient line.

        Args:
            ingredient: A food name or a full line like "1 cup milk".

        Returns:
            Substitutes for the matching category, empty if none known.
        """
        if not ingredient or not ingredient.strip():
            return []
        name = extract_food_name(ingredient) or ingredient.strip().lower()

        category = self.category_for(name)
        if category is None:
            return []

        # Don't suggest the ingredient as its own substitute
        substitutes = [s for s in self.table[category] if s.lower() != name]
        if self.max_alternatives > 0:
            substitutes = substitutes[:self.max_alternatives]
        logger.debug(f"Alternatives for '{name}' via {category}: {substitutes}")
        return substitutes

    def category_for(self, name: str) -> Optional[str]:
        """Category whose name or synonym appears first in the food name.

        The leading word names the source in compounds ("peanut butter" is
        nuts, "almond milk" is nuts). Ties go to table order.
        """
        best: Optional[str] = None
        best_position: Optional[int] = None
        for category in self.table:
            terms = [category] + list(self.synonyms.get(category, []))
            positions = [p for p in (self.matcher.position(name, t) for t in terms) if p is not None]
            if not positions:
                continue
            position = min(positions)
            if best_position is None or position < best_position:
                best, best_position = category, position
        return best


alternative_lookup = AlternativeLookup.from_config(load_safety_config())


def get_safe_alternatives(ingredient: str) -> List[str]:
    return alternative_lookup.suggest(ingredient)
