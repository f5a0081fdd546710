"""Shared test helpers for building theme payloads and records."""

from __future__ import annotations

from typing import Any

from aicontext.theme import ThemeRecord

PALETTE: dict[str, str] = {
    "primary": "#007AFF",
    "secondary": "#5856D6",
    "accent": "#FF9500",
    "success": "#34C759",
    "error": "#FF3B30",
    "warning": "#FFCC00",
    "background": "#F2F2F7",
    "surface": "#FFFFFF",
    "textPrimary": "#000000",
    "textSecondary": "#3C3C43",
    "border": "#C6C6C8",
}


def theme_payload(
    theme_id: str,
    *,
    category: str = "standard",
    window: tuple[str, str] | None = None,
    **extra: Any,
) -> dict[str, Any]:
    payload: dict[str, Any] = {"id": theme_id, "category": category, "colors": dict(PALETTE)}
    if window is not None:
        payload["availabilityPeriod"] = {"start": window[0], "end": window[1]}
    payload.update(extra)
    return payload


def make_record(theme_id: str, **kwargs: Any) -> ThemeRecord:
    return ThemeRecord.from_dict(theme_payload(theme_id, **kwargs))
