"""Theme registry facade, export helpers, and Qt integration utilities."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, List, cast

from .catalog import ThemeCatalog, load_builtin_catalog
from .models import ColorTuple, ThemeCategory, ThemeRecord
from .resolver import CatalogMisconfigured, list_available, resolve, resolve_or_default

LOGGER = logging.getLogger(__name__)

DEFAULT_THEME_ID = "default_light"


class ThemeManager:
    """Resolves and serializes themes for the application.

    The manager pairs a catalog snapshot with the id of the theme used when a
    requested id is unknown. It is the explicit context handed to rendering
    code; nothing in the resolver reads it implicitly.
    """

    def __init__(self, catalog: ThemeCatalog, *, default_id: str = DEFAULT_THEME_ID) -> None:
        if default_id not in catalog:
            raise CatalogMisconfigured(default_id)
        self._catalog = catalog
        self._default_id = default_id

    @property
    def catalog(self) -> ThemeCatalog:
        return self._catalog

    @property
    def default_id(self) -> str:
        return self._default_id

    def available(self, now: datetime | str | None = None) -> List[ThemeRecord]:
        return list_available(self._catalog, now)

    def available_ids(self, now: datetime | str | None = None) -> List[str]:
        return [record.id for record in self.available(now)]

    def themes(self, category: ThemeCategory | str) -> List[ThemeRecord]:
        return self._catalog.by_category(category)

    def get(self, theme_id: str | None) -> ThemeRecord | None:
        return resolve(self._catalog, theme_id)

    def resolve(self, theme: ThemeRecord | str | None = None) -> ThemeRecord:
        if isinstance(theme, ThemeRecord):
            return theme
        return resolve_or_default(self._catalog, theme, self._default_id)

    def default(self) -> ThemeRecord:
        return resolve_or_default(self._catalog, None, self._default_id)

    def export_theme(self, theme: ThemeRecord | str | None, destination: str | Path, *, indent: int = 2) -> Path:
        resolved = self.resolve(theme)
        path = Path(destination)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(resolved.to_dict(), indent=indent), encoding="utf-8")
        LOGGER.debug("Exported theme '%s' to %s", resolved.id, path)
        return path

    def apply_to_application(self, theme: ThemeRecord | str | None = None, *, app: Any | None = None) -> ThemeRecord:
        resolved = self.resolve(theme)
        try:  # pragma: no cover - Qt optional in CI
            from PySide6.QtGui import QColor, QPalette  # type: ignore
            from PySide6.QtWidgets import QApplication  # type: ignore
        except ImportError:  # pragma: no cover - headless install
            LOGGER.debug("PySide6 unavailable; theme '%s' resolved without applying", resolved.id)
            return resolved

        palette_cls = cast(Any, QPalette)
        qt_app: Any = app if app is not None else QApplication.instance()
        if qt_app is None:
            return resolved

        palette = palette_cls()
        colors = resolved.palette

        def _set(role: Any, key: str, fallback: ColorTuple) -> None:
            try:
                rgb = colors.rgb(key)
            except (KeyError, TypeError, ValueError):
                LOGGER.warning("Theme '%s' has an unusable '%s' color", resolved.id, key)
                rgb = fallback
            palette.setColor(role, QColor(*rgb))

        _set(palette_cls.Window, "background", (242, 242, 247))
        _set(palette_cls.WindowText, "text_primary", (0, 0, 0))
        _set(palette_cls.Base, "surface", (255, 255, 255))
        _set(palette_cls.AlternateBase, "background", (242, 242, 247))
        _set(palette_cls.Text, "text_primary", (0, 0, 0))
        _set(palette_cls.PlaceholderText, "text_secondary", (60, 60, 67))
        _set(palette_cls.Button, "surface", (255, 255, 255))
        _set(palette_cls.ButtonText, "primary", (0, 122, 255))
        _set(palette_cls.Highlight, "accent", (0, 122, 255))
        _set(palette_cls.HighlightedText, "surface", (255, 255, 255))
        _set(palette_cls.Link, "primary", (0, 122, 255))

        setter = getattr(qt_app, "setPalette", None)
        if callable(setter):
            setter(palette)
        return resolved


_THEME_MANAGER: ThemeManager | None = None


def theme_manager() -> ThemeManager:
    """Return the shared manager over the bundled catalog, building it on first use."""

    global _THEME_MANAGER
    if _THEME_MANAGER is None:
        _THEME_MANAGER = ThemeManager(load_builtin_catalog(), default_id=DEFAULT_THEME_ID)
    return _THEME_MANAGER


def load_theme(theme: ThemeRecord | str | None = None) -> ThemeRecord:
    return theme_manager().resolve(theme)


def available_themes(now: datetime | str | None = None) -> List[str]:
    return theme_manager().available_ids(now)


__all__ = [
    "DEFAULT_THEME_ID",
    "ThemeManager",
    "available_themes",
    "load_theme",
    "theme_manager",
]
