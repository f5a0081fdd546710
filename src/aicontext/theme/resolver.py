"""Stateless queries answering which themes are active and which record an id maps to.

Every function here is a pure function of its arguments: the catalog snapshot,
the evaluation instant and the ids supplied by the caller. Callers own the
"currently selected theme id" and are expected to keep only that id in their
own state, resolving the full record at use time.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Iterable, List

from .models import ThemeRecord, parse_timestamp

LOGGER = logging.getLogger(__name__)

__all__ = [
    "CatalogMisconfigured",
    "is_active",
    "list_available",
    "resolve",
    "resolve_or_default",
]


class CatalogMisconfigured(LookupError):
    """Raised when the fallback theme id is itself missing from the catalog."""

    def __init__(self, default_id: str, requested_id: str | None = None) -> None:
        message = f"Default theme '{default_id}' is not present in the catalog"
        if requested_id is not None:
            message += f" (while resolving '{requested_id}')"
        super().__init__(message)
        self.default_id = default_id
        self.requested_id = requested_id


def _instant(now: datetime | str | None) -> datetime:
    if now is None:
        return datetime.now(timezone.utc)
    return parse_timestamp(now)


def is_active(record: ThemeRecord, now: datetime | str | None = None) -> bool:
    """Return ``True`` when ``now`` lies inside the record's window (inclusive).

    Records without a window are always active. Windows whose bounds cannot be
    parsed are treated as always active as well.
    """

    window = record.availability_window
    if window is None:
        return True
    bounds = window.bounds()
    if bounds is None:
        LOGGER.debug(
            "Theme '%s' has a malformed availability window (%r, %r); treating as active",
            record.id,
            window.start,
            window.end,
        )
        return True
    start, end = bounds
    return start <= _instant(now) <= end


def list_available(catalog: Iterable[ThemeRecord], now: datetime | str | None = None) -> List[ThemeRecord]:
    """Return the records active at ``now``, preserving catalog order."""

    instant = _instant(now)
    return [record for record in catalog if is_active(record, instant)]


def resolve(catalog: Iterable[ThemeRecord], theme_id: str | None) -> ThemeRecord | None:
    """Exact-match lookup by id; availability windows are ignored."""

    if theme_id is None:
        return None
    getter = getattr(catalog, "get", None)
    if callable(getter):
        return getter(theme_id)
    for record in catalog:
        if record.id == theme_id:
            return record
    return None


def resolve_or_default(
    catalog: Iterable[ThemeRecord],
    theme_id: str | None,
    default_id: str,
) -> ThemeRecord:
    """Resolve ``theme_id``, falling back to ``default_id``.

    Raises :class:`CatalogMisconfigured` when the default is absent, since that
    means the catalog itself was built incorrectly.
    """

    record = resolve(catalog, theme_id)
    if record is not None:
        return record
    fallback = resolve(catalog, default_id)
    if fallback is None:
        raise CatalogMisconfigured(default_id, theme_id)
    if theme_id is not None:
        LOGGER.info("Theme '%s' not found; falling back to '%s'", theme_id, default_id)
    return fallback
