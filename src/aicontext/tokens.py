"""Design token definitions shared by every theme."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping

from .bundle import load_json
from .theme.models import ThemeValidationError

__all__ = [
    "ColorMode",
    "ComponentToken",
    "DesignTokens",
    "FontSize",
    "SpacingScale",
    "load_design_tokens",
]


def _section(payload: Mapping[str, Any], key: str, path: str) -> Any:
    if not isinstance(payload, Mapping) or payload.get(key) is None:
        raise ThemeValidationError(f"Design tokens missing '{path}.{key}'")
    return payload[key]


def _int(payload: Mapping[str, Any], key: str, path: str) -> int:
    value = _section(payload, key, path)
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ThemeValidationError(f"'{path}.{key}' must be an integer") from exc


@dataclass(slots=True, frozen=True)
class ColorMode:
    primary: str
    secondary: str
    success: str
    error: str
    warning: str
    background: str
    surface: str
    text_primary: str
    text_secondary: str
    border: str

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any], path: str) -> "ColorMode":
        values: Dict[str, str] = {}
        for item in fields(cls):
            head, *rest = item.name.split("_")
            key = head + "".join(part.title() for part in rest)
            values[item.name] = str(_section(payload, key, path))
        return cls(**values)


@dataclass(slots=True, frozen=True)
class FontSize:
    size: int
    weight: int
    line_height: int


@dataclass(slots=True, frozen=True)
class SpacingScale:
    xs: int
    sm: int
    md: int
    lg: int
    xl: int
    xxl: int


@dataclass(slots=True, frozen=True)
class ComponentToken:
    border_radius: int
    padding: int | None = None
    padding_horizontal: int | None = None
    padding_vertical: int | None = None
    min_height: int | None = None
    border_width: int | None = None
    elevation: int | None = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any], path: str) -> "ComponentToken":
        def _optional(key: str) -> int | None:
            value = payload.get(key)
            return int(value) if value is not None else None

        return cls(
            border_radius=_int(payload, "borderRadius", path),
            padding=_optional("padding"),
            padding_horizontal=_optional("paddingHorizontal"),
            padding_vertical=_optional("paddingVertical"),
            min_height=_optional("minHeight"),
            border_width=_optional("borderWidth"),
            elevation=_optional("elevation"),
        )


@dataclass(slots=True, frozen=True)
class DesignTokens:
    """Light/dark colors, type scale, spacing and component metrics."""

    light_mode: ColorMode
    dark_mode: ColorMode
    font_family: str
    font_sizes: Dict[str, FontSize]
    spacing: SpacingScale
    components: Dict[str, ComponentToken]

    def color_mode(self, appearance: str) -> ColorMode:
        if appearance.strip().lower() == "dark":
            return self.dark_mode
        return self.light_mode

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "DesignTokens":
        colors = _section(payload, "colors", "tokens")
        typography = _section(payload, "typography", "tokens")
        spacing = _section(payload, "spacing", "tokens")
        components = _section(payload, "components", "tokens")

        sizes: Dict[str, FontSize] = {}
        for name, entry in dict(_section(typography, "sizes", "tokens.typography")).items():
            path = f"tokens.typography.sizes.{name}"
            sizes[name] = FontSize(
                size=_int(entry, "size", path),
                weight=_int(entry, "weight", path),
                line_height=_int(entry, "lineHeight", path),
            )

        return cls(
            light_mode=ColorMode.from_dict(_section(colors, "lightMode", "tokens.colors"), "tokens.colors.lightMode"),
            dark_mode=ColorMode.from_dict(_section(colors, "darkMode", "tokens.colors"), "tokens.colors.darkMode"),
            font_family=str(_section(typography, "fontFamily", "tokens.typography")),
            font_sizes=sizes,
            spacing=SpacingScale(**{item.name: _int(spacing, item.name, "tokens.spacing") for item in fields(SpacingScale)}),
            components={
                name: ComponentToken.from_dict(_section(components, name, "tokens.components"), f"tokens.components.{name}")
                for name in ("button", "card", "input")
            },
        )


def load_design_tokens() -> DesignTokens | None:
    """Return the bundled design tokens, or ``None`` when they cannot be loaded."""

    payload = load_json("design_tokens")
    if payload is None:
        return None
    return DesignTokens.from_dict(payload)
