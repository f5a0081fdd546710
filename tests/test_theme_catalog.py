"""Tests for theme record parsing and catalog invariants."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from aicontext.theme import (
    AvailabilityWindow,
    DuplicateThemeError,
    ThemeCatalog,
    ThemeCategory,
    ThemeRecord,
    ThemeValidationError,
    load_builtin_catalog,
    normalize_color,
)

from tests.helpers import PALETTE, make_record, theme_payload


def test_record_parses_full_payload() -> None:
    payload = theme_payload(
        "christmas_2024",
        category="seasonal",
        window=("2024-12-01T00:00:00Z", "2024-12-26T23:59:59Z"),
        name="Christmas 2024",
        typography={
            "fontFamily": "SF Pro Rounded",
            **{
                style: {"size": 17, "weight": 400, "lineHeight": 22}
                for style in ("h1", "h2", "h3", "h4", "body1", "body2", "caption")
            },
        },
        spacing={"xs": 4, "sm": 8, "md": 16, "lg": 24, "xl": 32, "xxl": 48},
        components={
            "button": {"borderRadius": 20, "paddingHorizontal": 24, "paddingVertical": 12, "minHeight": 48},
            "card": {"borderRadius": 20, "padding": 18, "elevation": 4},
        },
        assets={"backgroundPattern": "snow", "appIconVariant": "AppIconChristmas", "decorativeElements": ["star"]},
    )

    record = ThemeRecord.from_dict(payload)

    assert record.category is ThemeCategory.SEASONAL
    assert record.name == "Christmas 2024"
    assert record.availability_window is not None
    assert record.availability_window.start == "2024-12-01T00:00:00Z"
    assert record.palette.text_primary == "#000000"
    assert record.typography is not None and record.typography.body1.line_height == 22
    assert record.spacing is not None and record.spacing.md == 16
    assert record.component_styles is not None and record.component_styles.button.min_height == 48
    assert record.assets is not None and record.assets.decorative_elements == ("star",)
    assert record.is_time_limited


def test_record_to_dict_uses_storage_keys() -> None:
    record = make_record("default_light", name="Default Light")

    payload = record.to_dict()

    assert payload["colors"] == PALETTE
    assert payload["category"] == "standard"
    assert payload["availabilityPeriod"] is None
    assert ThemeRecord.from_dict(payload) == record


def test_record_name_defaults_to_id() -> None:
    assert make_record("plain").name == "plain"


@pytest.mark.parametrize(
    ("payload", "fragment"),
    [
        ({"category": "standard", "colors": PALETTE}, "theme.id"),
        ({"id": "x", "colors": PALETTE}, "category"),
        ({"id": "x", "category": "standard"}, "colors"),
        ({"id": "x", "category": "standard", "colors": {k: v for k, v in PALETTE.items() if k != "border"}}, "border"),
        ({"id": "x", "category": "holiday", "colors": PALETTE}, "unknown category"),
        ({"id": "x", "category": "event", "colors": PALETTE, "availabilityPeriod": {"start": "2024"}}, "end"),
        ({"id": "x", "category": "event", "colors": PALETTE, "spacing": {"xs": "wide"}}, "spacing.xs"),
        (
            {"id": "x", "category": "event", "colors": PALETTE, "assets": {"appIconVariant": "A", "decorativeElements": "star"}},
            "decorativeElements",
        ),
        ({"id": "   ", "category": "standard", "colors": PALETTE}, "cannot be empty"),
    ],
)
def test_record_validation_errors(payload: dict, fragment: str) -> None:
    with pytest.raises(ThemeValidationError, match=fragment):
        ThemeRecord.from_dict(payload)


def test_malformed_window_strings_survive_loading() -> None:
    record = make_record("odd", window=("soon", "later"))

    assert record.availability_window is not None
    assert record.availability_window.bounds() is None


def test_palette_rgb_conversion() -> None:
    record = make_record("default_light")

    assert record.palette.rgb("primary") == (0, 122, 255)
    assert record.palette.rgb("text_primary") == (0, 0, 0)
    with pytest.raises(KeyError):
        record.palette.rgb("missing")


@pytest.mark.parametrize(
    ("value", "expected"),
    [("#FFF", (255, 255, 255)), ("007AFF", (0, 122, 255)), (" #FF3B30 ", (255, 59, 48)), ("#11223380", (17, 34, 51))],
)
def test_normalize_color(value, expected) -> None:
    assert normalize_color(value) == expected


@pytest.mark.parametrize("value", ["10, 20, 30", "#12345", "", None])
def test_normalize_color_rejects_non_hex(value) -> None:
    with pytest.raises(ValueError):
        normalize_color(value)


def test_window_bounds_require_offset() -> None:
    assert AvailabilityWindow("2024-12-01T00:00:00Z", "2024-12-26T23:59:59-05:00").bounds() is not None
    assert AvailabilityWindow("2024-12-01T00:00:00", "2024-12-26T23:59:59Z").bounds() is None
    assert AvailabilityWindow("2024-12-01", "2024-12-26").bounds() is None


def test_catalog_rejects_duplicate_ids() -> None:
    with pytest.raises(DuplicateThemeError) as excinfo:
        ThemeCatalog([make_record("a"), make_record("b"), make_record("a")])

    assert excinfo.value.theme_id == "a"


def test_catalog_preserves_order_and_supports_lookup() -> None:
    catalog = ThemeCatalog([make_record("b"), make_record("a", category="event"), make_record("c")])

    assert catalog.ids() == ["b", "a", "c"]
    assert len(catalog) == 3
    assert "a" in catalog and "z" not in catalog
    assert catalog.get("c") is catalog.records[2]
    assert catalog.get(None) is None
    assert [record.id for record in catalog.by_category("event")] == ["a"]
    assert [record.id for record in catalog.by_category(ThemeCategory.STANDARD)] == ["b", "c"]


def test_catalog_from_json_and_path(tmp_path: Path) -> None:
    document = {"themes": [theme_payload("default_light"), theme_payload("halloween", category="seasonal")]}
    target = tmp_path / "themes.json"
    target.write_text(json.dumps(document), encoding="utf-8")

    catalog = ThemeCatalog.from_path(target)

    assert catalog.ids() == ["default_light", "halloween"]
    assert ThemeCatalog.from_dict(catalog.to_dict()).ids() == catalog.ids()


@pytest.mark.parametrize("text", ["not json", "[]", '{"themes": {}}'])
def test_catalog_from_json_rejects_bad_documents(text: str) -> None:
    with pytest.raises(ThemeValidationError):
        ThemeCatalog.from_json(text)


def test_builtin_catalog_contains_default_and_seasonal_themes() -> None:
    catalog = load_builtin_catalog()

    assert {"default_light", "default_dark", "christmas_2024"} <= set(catalog.ids())
    christmas = catalog.get("christmas_2024")
    assert christmas is not None
    assert christmas.category is ThemeCategory.SEASONAL
    assert christmas.availability_window is not None
    assert {record.category for record in catalog} == set(ThemeCategory)
