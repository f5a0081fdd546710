"""Immutable, ordered theme catalogs and their JSON loaders."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Mapping

from ..bundle import resource_path
from .models import ThemeCategory, ThemeRecord, ThemeValidationError

LOGGER = logging.getLogger(__name__)


class DuplicateThemeError(ValueError):
    """Raised when two catalog records share an id."""

    def __init__(self, theme_id: str) -> None:
        super().__init__(f"Theme '{theme_id}' appears more than once in the catalog")
        self.theme_id = theme_id


class ThemeCatalog:
    """Ordered collection of :class:`ThemeRecord` keyed by id.

    The catalog is a snapshot: it is built once and never mutated, so it can be
    shared freely between callers.
    """

    __slots__ = ("_records", "_index")

    def __init__(self, records: Iterable[ThemeRecord] = ()) -> None:
        ordered: List[ThemeRecord] = []
        index: Dict[str, ThemeRecord] = {}
        for record in records:
            if record.id in index:
                raise DuplicateThemeError(record.id)
            index[record.id] = record
            ordered.append(record)
        self._records: tuple[ThemeRecord, ...] = tuple(ordered)
        self._index = index

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ThemeRecord]:
        return iter(self._records)

    def __contains__(self, theme_id: object) -> bool:
        return theme_id in self._index

    def __repr__(self) -> str:
        return f"ThemeCatalog(ids={self.ids()!r})"

    @property
    def records(self) -> tuple[ThemeRecord, ...]:
        return self._records

    def get(self, theme_id: str | None) -> ThemeRecord | None:
        if theme_id is None:
            return None
        return self._index.get(theme_id)

    def ids(self) -> List[str]:
        return [record.id for record in self._records]

    def by_category(self, category: ThemeCategory | str) -> List[ThemeRecord]:
        """Return records tagged with ``category`` in catalog order."""

        wanted = ThemeCategory(category.value if isinstance(category, ThemeCategory) else str(category).lower())
        return [record for record in self._records if record.category is wanted]

    def to_dict(self) -> Dict[str, Any]:
        return {"themes": [record.to_dict() for record in self._records]}

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "ThemeCatalog":
        if not isinstance(payload, Mapping):
            raise ThemeValidationError("Theme catalog must be a JSON object")
        entries = payload.get("themes")
        if not isinstance(entries, list):
            raise ThemeValidationError("Theme catalog requires a 'themes' list")
        catalog = cls(ThemeRecord.from_dict(entry) for entry in entries)
        LOGGER.debug("Loaded theme catalog with %d records: %s", len(catalog), catalog.ids())
        return catalog

    @classmethod
    def from_json(cls, text: str) -> "ThemeCatalog":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ThemeValidationError(f"Theme catalog is not valid JSON: {exc}") from exc
        return cls.from_dict(data)

    @classmethod
    def from_path(cls, path: str | Path) -> "ThemeCatalog":
        source = Path(path)
        LOGGER.debug("Reading theme catalog from %s", source)
        return cls.from_json(source.read_text(encoding="utf-8"))


def load_builtin_catalog() -> ThemeCatalog:
    """Load the catalog shipped in the package's ``themes_data.json``."""

    path = resource_path("themes_data")
    if path is None:
        raise FileNotFoundError("Bundled themes_data.json is missing")
    return ThemeCatalog.from_path(path)


__all__ = ["DuplicateThemeError", "ThemeCatalog", "load_builtin_catalog"]
