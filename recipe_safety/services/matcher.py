import re
from abc import ABC, abstractmethod
from typing import Optional


class IngredientMatcher(ABC):
    """Decides whether a free-form ingredient line contains a restriction term."""

    @abstractmethod
    def matches(self, ingredient_text: str, term: str) -> bool:
        pass


class SubstringMatcher(IngredientMatcher):
    """Case-insensitive containment of the term inside the ingredient line.

    No stemming or synonym expansion: profiles that care about variants
    ("egg" / "eggs") list them explicitly. An empty term never matches.
    """

    def matches(self, ingredient_text: str, term: str) -> bool:
        if not term or not term.strip() or not ingredient_text:
            return False
        return term.strip().lower() in ingredient_text.lower()


class WordMatcher(IngredientMatcher):
    """Matches the term as whole words, allowing a trailing plural "s".

    "nut" matches "mixed nuts" but not "nutmeg", "coconut" or "butternut".
    Used where a loose hit would misclassify a food, not for safety rules.
    """

    def matches(self, ingredient_text: str, term: str) -> bool:
        return self.position(ingredient_text, term) is not None

    def position(self, ingredient_text: str, term: str) -> Optional[int]:
        """Index of the first whole-word occurrence, or None."""
        if not term or not term.strip() or not ingredient_text:
            return None
        pattern = rf"\b{re.escape(term.strip().lower())}s?\b"
        match = re.search(pattern, ingredient_text.lower())
        return match.start() if match else None


default_matcher = SubstringMatcher()
word_matcher = WordMatcher()


def matches(ingredient_text: str, term: str) -> bool:
    return default_matcher.matches(ingredient_text, term)
