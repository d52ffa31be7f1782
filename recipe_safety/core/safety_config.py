import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from recipe_safety.core.logging_config import get_logger

load_dotenv()

logger = get_logger(__name__)

CONFIG_PATH_ENV = "SAFETY_CONFIG_PATH"


@dataclass(frozen=True)
class SafetyConfig:
    include_suggestions: bool = True
    max_alternatives: int = 3
    log_findings: bool = True
    alternatives: Dict[str, List[str]] = field(default_factory=dict)


def _as_bool(value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return default


def _as_int(value: Any, default: int) -> int:
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return default
    return default


def _as_alternatives(value: Any) -> Dict[str, List[str]]:
    if not isinstance(value, dict):
        return {}
    table: Dict[str, List[str]] = {}
    for category, substitutes in value.items():
        if isinstance(substitutes, list):
            table[str(category).lower()] = [str(s) for s in substitutes if s]
    return table


def _config_path() -> Path:
    override = os.getenv(CONFIG_PATH_ENV)
    if override:
        return Path(override)
    return Path(__file__).resolve().parents[2] / "config" / "safety_config.json"


def load_safety_config(path: Optional[Path] = None) -> SafetyConfig:
    """Load engine settings from JSON, falling back to defaults.

    A missing file is normal (defaults apply). Invalid JSON is logged and
    also falls back to defaults so validation keeps working.
    """
    config_path = path or _config_path()
    try:
        data: Dict[str, Any] = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return SafetyConfig()
    except json.JSONDecodeError as exc:
        logger.warning(f"Invalid safety config JSON at {config_path}: {exc}")
        return SafetyConfig()

    if not isinstance(data, dict):
        logger.warning(f"Safety config at {config_path} is not a JSON object")
        return SafetyConfig()

    return SafetyConfig(
        include_suggestions=_as_bool(data.get("include_suggestions"), True),
        max_alternatives=max(0, _as_int(data.get("max_alternatives"), 3)),
        log_findings=_as_bool(data.get("log_findings"), True),
        alternatives=_as_alternatives(data.get("alternatives"))
    )
