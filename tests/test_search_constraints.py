from recipe_safety.models import DietPreferences
from recipe_safety.services.search_constraints import validate_search_constraints


class TestSearchConstraints:

    def test_detects_conflicting_embrace_and_avoid(self, search_validator):
        """Embracing a category that covers an avoided food is a conflict."""
        prefs = DietPreferences(
            embrace_foods=["dairy", "leafy greens"],
            avoid_foods=["cheese", "red meat"],
        )
        result = search_validator.validate(prefs)

        assert result.is_valid is False
        assert result.conflicts == ["dairy"]
        assert len(result.issues) == 1
        assert "avoid" in result.issues[0]

    def test_non_conflicting_preferences_are_valid(self, search_validator):
        prefs = DietPreferences(
            embrace_foods=["chicken", "leafy greens"],
            avoid_foods=["cheese", "red meat"],
        )
        result = search_validator.validate(prefs)

        assert result.is_valid is True
        assert result.conflicts == []
        assert result.issues == []

    def test_embrace_conflicts_with_medical_and_trigger_terms(self, search_validator):
        prefs = DietPreferences(
            embrace_foods=["peanut butter cookies", "whole milk", "rice"],
            severity_levels={"peanut butter": "medical", "rice": "preference"},
            trigger_foods=[{"name": "milk", "condition": "IBS", "severity": "moderate"}],
        )
        result = search_validator.validate(prefs)

        assert result.conflicts == ["peanut butter cookies", "whole milk"]
        assert len(result.issues) == 2
        assert "medical restrictions" in result.issues[0]
        assert "trigger" in result.issues[1]

    def test_term_conflicting_on_several_sources_listed_once(self, search_validator):
        prefs = DietPreferences(
            embrace_foods=["milk"],
            avoid_foods=["milk"],
            severity_levels={"milk": "medical"},
        )
        result = search_validator.validate(prefs)

        assert result.conflicts == ["milk"]
        assert len(result.issues) == 2

    def test_empty_profile_is_valid(self):
        result = validate_search_constraints({})
        assert result.is_valid is True
        assert result.model_dump(by_alias=True)["isValid"] is True

    def test_narrower_or_lookalike_restrictions_do_not_conflict(self, search_validator):
        prefs = DietPreferences(
            embrace_foods=["rice", "milk"],
            avoid_foods=["licorice", "almond milk"],
        )
        result = search_validator.validate(prefs)

        assert result.is_valid is True
        assert result.conflicts == []
