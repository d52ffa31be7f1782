from typing import Any, Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, computed_field, field_validator
from pydantic.alias_generators import to_camel

from recipe_safety.core.logging_config import get_logger
from recipe_safety.core.rules import CUSTOM_CONDITION, MEDICAL_TAG

logger = get_logger(__name__)

Severity = Literal["mild", "moderate", "severe"]


class CamelModel(BaseModel):
    # Profiles arrive as camelCase JSON, Python callers use snake_case.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _normalize_severity(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip().lower()
    return value


class NutritionalInfo(BaseModel):
    calories: int
    protein: int
    carbs: int
    fat: int


class Recipe(CamelModel):
    id: str
    title: str = ""
    ingredients: List[str]
    nutrition: Optional[NutritionalInfo] = None


class MedicalCondition(CamelModel):
    id: str
    name: str
    severity: Severity
    custom_name: Optional[str] = None

    normalize_severity = field_validator("severity", mode="before")(_normalize_severity)

    @property
    def display_name(self) -> str:
        if self.name == CUSTOM_CONDITION and self.custom_name:
            return self.custom_name
        return self.name


class TriggerFood(CamelModel):
    name: str
    condition: str
    severity: Severity
    user_added: bool = False
    notes: Optional[str] = None

    normalize_severity = field_validator("severity", mode="before")(_normalize_severity)


def _keep_valid(items: Any, model: type, label: str) -> List[Any]:
    """Validate each entry, dropping the ones that don't fit the model."""
    if not isinstance(items, (list, tuple)):
        if items is not None:
            logger.warning(f"Ignoring malformed {label}: expected a list, got {type(items).__name__}")
        return []
    kept = []
    for item in items:
        try:
            kept.append(model.model_validate(item))
        except ValidationError as exc:
            logger.warning(f"Dropping malformed {label} entry {item!r}: {exc.error_count()} error(s)")
    return kept


class DietPreferences(CamelModel):
    """A user's restriction profile.

    Every collection is optional. Missing or malformed collections are read
    as "no restrictions of that kind" so a recipe can always be validated.
    """

    avoid_foods: List[str] = Field(default_factory=list)
    embrace_foods: List[str] = Field(default_factory=list)
    medical_conditions: List[MedicalCondition] = Field(default_factory=list)
    severity_levels: Dict[str, str] = Field(default_factory=dict)
    trigger_foods: List[TriggerFood] = Field(default_factory=list)

    @field_validator("avoid_foods", "embrace_foods", mode="before")
    @classmethod
    def coerce_terms(cls, value: Any) -> List[str]:
        if not isinstance(value, (list, tuple, set, frozenset)):
            return []
        return [term for term in value if isinstance(term, str)]

    @field_validator("severity_levels", mode="before")
    @classmethod
    def coerce_severity_levels(cls, value: Any) -> Dict[str, str]:
        if not isinstance(value, dict):
            return {}
        return {
            term: tag for term, tag in value.items()
            if isinstance(term, str) and isinstance(tag, str)
        }

    @field_validator("medical_conditions", mode="before")
    @classmethod
    def coerce_conditions(cls, value: Any) -> List[MedicalCondition]:
        return _keep_valid(value, MedicalCondition, "medical condition")

    @field_validator("trigger_foods", mode="before")
    @classmethod
    def coerce_triggers(cls, value: Any) -> List[TriggerFood]:
        return _keep_valid(value, TriggerFood, "trigger food")

    def medical_terms(self) -> List[str]:
        return [term for term, tag in self.severity_levels.items() if tag.strip().lower() == MEDICAL_TAG]

    def restricted_terms(self) -> List[str]:
        """Every term that would flag an ingredient: avoid, medical, trigger."""
        return self.avoid_foods + self.medical_terms() + [t.name for t in self.trigger_foods]

    @classmethod
    def coerce(cls, value: Any) -> "DietPreferences":
        """Accept a model, a raw mapping or None."""
        if isinstance(value, cls):
            return value
        if value is None:
            return cls()
        if isinstance(value, dict):
            return cls.model_validate(value)
        logger.warning(f"Ignoring malformed diet preferences of type {type(value).__name__}")
        return cls()


class SafetyBlocker(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    ingredient: str
    reason: str
    severity: Literal["severe"] = "severe"
    medical_condition: Optional[str] = None


class SafetyWarning(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    ingredient: str
    reason: str
    severity: Severity
    alternatives: Tuple[str, ...] = ()


class SafetyVerdict(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    blockers: Tuple[SafetyBlocker, ...] = ()
    warnings: Tuple[SafetyWarning, ...] = ()
    suggestions: Tuple[str, ...] = ()

    @computed_field(alias="isSafe")
    @property
    def is_safe(self) -> bool:
        return len(self.blockers) == 0


class SearchConstraintResult(CamelModel):
    conflicts: List[str] = Field(default_factory=list)
    issues: List[str] = Field(default_factory=list)

    @computed_field(alias="isValid")
    @property
    def is_valid(self) -> bool:
        return len(self.conflicts) == 0


class ValidateRecipeRequest(CamelModel):
    recipe: Recipe
    preferences: DietPreferences = Field(default_factory=DietPreferences)


class ValidateSearchRequest(CamelModel):
    preferences: DietPreferences = Field(default_factory=DietPreferences)


class AlternativesResponse(CamelModel):
    ingredient: str
    alternatives: List[str] = Field(default_factory=list)
