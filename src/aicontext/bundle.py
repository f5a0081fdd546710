"""Access to the JSON resources bundled with the package."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

__all__ = [
    "RESOURCE_NAMES",
    "TEMPLATE_NAMES",
    "VERSION",
    "available_resources",
    "available_templates",
    "data_dir",
    "load_json",
    "load_json_data",
    "manifest",
    "resource_path",
]

LOGGER = logging.getLogger(__name__)

VERSION = "1.0.0"
_DATA_DIR = Path(__file__).resolve().parent / "data"
RESOURCE_NAMES: tuple[str, ...] = (
    "manifest",
    "architecture",
    "presentation_patterns",
    "state_management",
    "animation_guidelines",
    "ai_rules",
    "theme_system",
    "themes_data",
    "design_tokens",
    "networking",
    "storage",
    "security",
    "testing",
    "di",
)
TEMPLATE_NAMES: tuple[str, ...] = ("tca_screen", "tca_reducer", "usecase", "repository", "theme_manager")


def data_dir() -> Path:
    return _DATA_DIR


def resource_path(name: str, extension: str = "json") -> Path | None:
    """Return the bundled file for ``name`` or ``None`` when it does not exist."""

    suffix = f".{extension}" if extension else ""
    candidate = _DATA_DIR / f"{name}{suffix}"
    return candidate if candidate.is_file() else None


def load_json_data(name: str) -> bytes | None:
    path = resource_path(name)
    if path is None:
        LOGGER.warning("Could not find %s.json", name)
        return None
    return path.read_bytes()


def load_json(name: str) -> Any | None:
    """Decode a bundled JSON document, returning ``None`` on any failure."""

    raw = load_json_data(name)
    if raw is None:
        return None
    try:
        return json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        LOGGER.warning("Error decoding %s.json - %s", name, exc)
        return None


def manifest() -> Dict[str, Any] | None:
    payload = load_json("manifest")
    return payload if isinstance(payload, dict) else None


def available_resources() -> List[str]:
    return [name for name in RESOURCE_NAMES if resource_path(name) is not None]


def available_templates() -> List[str]:
    return [name for name in TEMPLATE_NAMES if resource_path(f"templates/{name}") is not None]
