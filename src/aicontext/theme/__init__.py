"""Theme module consolidating catalog data, resolution, and registry helpers."""

from .models import (
    AvailabilityWindow,
    ColorPalette,
    ColorTuple,
    ThemeCategory,
    ThemeRecord,
    ThemeValidationError,
    normalize_color,
    parse_timestamp,
)
from .catalog import DuplicateThemeError, ThemeCatalog, load_builtin_catalog
from .resolver import CatalogMisconfigured, is_active, list_available, resolve, resolve_or_default
from .manager import (
    DEFAULT_THEME_ID,
    ThemeManager,
    available_themes,
    load_theme,
    theme_manager,
)

__all__ = [
    "AvailabilityWindow",
    "CatalogMisconfigured",
    "ColorPalette",
    "ColorTuple",
    "DEFAULT_THEME_ID",
    "DuplicateThemeError",
    "ThemeCatalog",
    "ThemeCategory",
    "ThemeManager",
    "ThemeRecord",
    "ThemeValidationError",
    "available_themes",
    "is_active",
    "list_available",
    "load_builtin_catalog",
    "load_theme",
    "normalize_color",
    "parse_timestamp",
    "resolve",
    "resolve_or_default",
    "theme_manager",
]
