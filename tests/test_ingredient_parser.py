from recipe_safety.utils.ingredient_parser import extract_food_name


def test_strips_quantity_and_unit():
    assert extract_food_name("1 tbsp peanut butter") == "peanut butter"
    assert extract_food_name("1/2 cup sugar") == "sugar"
    assert extract_food_name("1 1/2 cups of milk") == "milk"


def test_strips_parenthetical_notes():
    assert extract_food_name("2 cups (480ml) whole milk") == "whole milk"


def test_keeps_unitless_names():
    assert extract_food_name("2 eggs") == "eggs"
    assert extract_food_name("Salt, to taste") == "salt to taste"
    assert extract_food_name("dairy") == "dairy"
