"""Theme catalog, design tokens and bundled context resources."""

from .bundle import VERSION, available_resources, available_templates, load_json, manifest, resource_path
from .theme import (
    CatalogMisconfigured,
    ThemeCatalog,
    ThemeManager,
    ThemeRecord,
    is_active,
    list_available,
    resolve,
    resolve_or_default,
)
from .tokens import DesignTokens, load_design_tokens

__version__ = VERSION

__all__ = [
    "CatalogMisconfigured",
    "DesignTokens",
    "ThemeCatalog",
    "ThemeManager",
    "ThemeRecord",
    "VERSION",
    "__version__",
    "available_resources",
    "available_templates",
    "is_active",
    "list_available",
    "load_design_tokens",
    "load_json",
    "manifest",
    "resolve",
    "resolve_or_default",
    "resource_path",
]
