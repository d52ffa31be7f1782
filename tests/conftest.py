import pytest
from recipe_safety.core.safety_config import SafetyConfig
from recipe_safety.models import DietPreferences, Recipe, NutritionalInfo
from recipe_safety.services.alternatives import AlternativeLookup
from recipe_safety.services.safety_validator import SafetyValidator
from recipe_safety.services.search_constraints import SearchConstraintValidator


@pytest.fixture
def safety_validator():
    """Fixture for a SafetyValidator with default settings."""
    return SafetyValidator(config=SafetyConfig())


@pytest.fixture
def search_validator():
    """Fixture for SearchConstraintValidator instance."""
    return SearchConstraintValidator()


@pytest.fixture
def alternative_lookup():
    """Fixture for AlternativeLookup over the built-in table."""
    return AlternativeLookup(max_alternatives=3)


@pytest.fixture
def peanut_recipe():
    return Recipe(
        id="1",
        title="Test Recipe",
        ingredients=["1 cup flour", "1/2 cup sugar", "1 tbsp peanut butter"],
        nutrition=NutritionalInfo(calories=200, protein=10, carbs=30, fat=5)
    )


@pytest.fixture
def pasta_recipe():
    return Recipe(
        id="2",
        title="Creamy Pasta",
        ingredients=["1 box pasta", "1 cup milk", "1/2 cup cheese"],
        nutrition=NutritionalInfo(calories=500, protein=20, carbs=60, fat=20)
    )


@pytest.fixture
def peanut_allergy_profile():
    return DietPreferences.model_validate({
        "avoidFoods": [],
        "embraceFoods": ["broccoli"],
        "medicalConditions": [
            {"id": "1", "name": "Custom", "severity": "severe", "customName": "Peanut Allergy"}
        ],
        "severityLevels": {"peanut butter": "medical"},
        "triggerFoods": [
            {"name": "peanut butter", "condition": "Peanut Allergy", "severity": "severe", "userAdded": True}
        ],
    })


@pytest.fixture
def ibs_profile():
    return DietPreferences.model_validate({
        "avoidFoods": [],
        "embraceFoods": ["chicken"],
        "medicalConditions": [{"id": "2", "name": "IBS", "severity": "moderate"}],
        "severityLevels": {},
        "triggerFoods": [
            {"name": "milk", "condition": "IBS", "severity": "moderate", "userAdded": False}
        ],
    })
