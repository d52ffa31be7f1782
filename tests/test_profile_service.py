from recipe_safety.models import DietPreferences, MedicalCondition
from recipe_safety.services.profile_service import (
    condition_display_name,
    default_trigger_foods,
    merge_trigger_foods,
    profile_fingerprint,
)


def test_custom_condition_uses_custom_name():
    custom = MedicalCondition(id="1", name="Custom", severity="severe", custom_name="Peanut Allergy")
    plain = MedicalCondition(id="2", name="IBS", severity="mild")
    unnamed_custom = MedicalCondition(id="3", name="Custom", severity="mild")

    assert condition_display_name(custom) == "Peanut Allergy"
    assert condition_display_name(plain) == "IBS"
    assert condition_display_name(unnamed_custom) == "Custom"


def test_default_trigger_foods_take_catalogue_tier_severity():
    triggers = default_trigger_foods([MedicalCondition(id="1", name="Celiac", severity="mild")])

    assert [t.name for t in triggers] == ["wheat", "barley", "rye", "malt", "brewer's yeast"]
    assert [t.severity for t in triggers] == ["mild", "mild", "moderate", "severe", "severe"]
    assert all(t.condition == "Celiac" for t in triggers)
    assert triggers[0].notes == "All wheat products, flour, bread"
    assert not any(t.user_added for t in triggers)


def test_unknown_conditions_have_no_catalogue_triggers():
    assert default_trigger_foods([MedicalCondition(id="1", name="Custom", severity="mild")]) == []


def test_merge_keeps_user_triggers_first():
    prefs = DietPreferences.model_validate({
        "medicalConditions": [{"id": "1", "name": "IBS", "severity": "mild"}],
        "triggerFoods": [{"name": "dairy", "condition": "IBS", "severity": "severe", "userAdded": True}],
    })
    merged = merge_trigger_foods(prefs)

    assert merged.trigger_foods[0].severity == "severe"
    assert merged.trigger_foods[0].user_added is True
    assert [t.name for t in merged.trigger_foods].count("dairy") == 1
    assert "caffeine" in [t.name for t in merged.trigger_foods]
    # input profile untouched
    assert len(prefs.trigger_foods) == 1


def test_fingerprint_is_stable_and_sensitive():
    prefs = DietPreferences(avoid_foods=["milk"])
    same = DietPreferences.model_validate({"avoidFoods": ["milk"]})
    other = DietPreferences(avoid_foods=["eggs"])

    assert profile_fingerprint(prefs) == profile_fingerprint(same)
    assert profile_fingerprint(prefs) != profile_fingerprint(other)
    assert len(profile_fingerprint(None)) == 64
