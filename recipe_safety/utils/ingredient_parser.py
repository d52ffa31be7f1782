import re
from typing import Optional, Tuple

KITCHEN_UNITS = {
    "g", "gram", "grams", "kg", "kilogram", "kilograms",
    "oz", "ounce", "ounces", "lb", "lbs", "pound", "pounds",
    "ml", "milliliter", "milliliters", "l", "liter", "liters",
    "tsp", "teaspoon", "teaspoons", "tbsp", "tblsp", "tbs", "tablespoon", "tablespoons",
    "cup", "cups", "pinch", "dash", "clove", "cloves", "can", "cans",
    "box", "boxes", "package", "packages", "slice", "slices", "stick", "sticks",
}


def extract_food_name(ingredient: str) -> str:
    """Strip quantity, unit and notes from a free-form ingredient line.

    "1 tbsp peanut butter" -> "peanut butter"
    "2 cups (480ml) whole milk" -> "whole milk"
    """
    text = _strip_parens(ingredient.strip().lower())
    quantity, rest = _split_quantity(text)
    if quantity is not None:
        rest = _strip_unit(rest)
    return _normalize_name(rest)


def _split_quantity(text: str) -> Tuple[Optional[str], str]:
    match = re.match(r"^(\d+\s+\d+/\d+|\d+/\d+|\d+(?:\.\d+)?(?:\s*-\s*\d+(?:\.\d+)?)?)", text)
    if not match:
        return None, text
    return match.group(1), text[match.end():].strip()


def _strip_unit(text: str) -> str:
    parts = text.split()
    if parts and parts[0].rstrip(".,") in KITCHEN_UNITS:
        return re.sub(r"^of\s+", "", " ".join(parts[1:]).strip())
    return text


def _strip_parens(text: str) -> str:
    return re.sub(r"\([^)]*\)", "", text)


def _normalize_name(text: str) -> str:
    text = re.sub(r"[^a-z0-9\s'-]", "", text)
    return " ".join(text.split())
