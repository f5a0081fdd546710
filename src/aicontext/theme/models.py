"""Data structures describing catalog theme records."""

from __future__ import annotations

import json
from dataclasses import dataclass, fields
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Mapping, Sequence, Tuple

ColorTuple = Tuple[int, int, int]


class ThemeValidationError(ValueError):
    """Raised when a theme payload is missing required fields."""


class ThemeCategory(str, Enum):
    """Classification tags; they carry no behaviour of their own."""

    STANDARD = "standard"
    SEASONAL = "seasonal"
    CULTURAL = "cultural"
    EVENT = "event"


def normalize_color(value: str) -> ColorTuple:
    """Convert a ``#RGB``, ``#RRGGBB`` or ``#RRGGBBAA`` hex string into an RGB tuple."""

    text = value.strip() if isinstance(value, str) else ""
    if text.startswith("#"):
        text = text[1:]
    if len(text) == 8:
        # alpha channel is ignored
        text = text[:6]
    if len(text) == 3:
        text = "".join(ch * 2 for ch in text)
    if len(text) != 6:
        raise ValueError(f"Unsupported color format: {value!r}")
    return tuple(int(text[i : i + 2], 16) for i in range(0, 6, 2))  # type: ignore[return-value]


def parse_timestamp(value: Any, *, require_offset: bool = False) -> datetime:
    """Parse an ISO-8601 instant.

    Offset-less values are taken as UTC unless ``require_offset`` is set, in
    which case only full date-times carrying ``Z`` or ``+hh:mm``/``-hh:mm`` are accepted.
    """

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueError("Timestamp cannot be empty")
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        if require_offset and "T" not in text.upper():
            raise ValueError(f"Timestamp {value!r} has no time component")
        parsed = datetime.fromisoformat(text)
    else:
        raise TypeError(f"Cannot interpret {type(value)!r} as a timestamp")
    if parsed.tzinfo is None:
        if require_offset:
            raise ValueError(f"Timestamp {value!r} has no UTC offset")
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def _require(payload: Mapping[str, Any], key: str, path: str) -> Any:
    if not isinstance(payload, Mapping):
        raise ThemeValidationError(f"'{path}' must be an object")
    if key not in payload or payload[key] is None:
        raise ThemeValidationError(f"Theme payload missing '{path}.{key}'")
    return payload[key]


def _number(payload: Mapping[str, Any], key: str, path: str) -> float:
    value = _require(payload, key, path)
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ThemeValidationError(f"'{path}.{key}' must be numeric") from exc


def _plain_fields(instance: Any) -> Dict[str, Any]:
    return {_camel(item.name): getattr(instance, item.name) for item in fields(instance)}


@dataclass(slots=True, frozen=True)
class AvailabilityWindow:
    """Inclusive ``[start, end]`` interval, kept as the raw stored strings."""

    start: str
    end: str

    def bounds(self) -> tuple[datetime, datetime] | None:
        """Return the parsed bounds or ``None`` when either side is unparseable."""

        try:
            return (
                parse_timestamp(self.start, require_offset=True),
                parse_timestamp(self.end, require_offset=True),
            )
        except (TypeError, ValueError):
            return None

    def to_dict(self) -> Dict[str, str]:
        return {"start": self.start, "end": self.end}

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any], path: str = "availabilityPeriod") -> "AvailabilityWindow":
        return cls(start=str(_require(payload, "start", path)), end=str(_require(payload, "end", path)))


@dataclass(slots=True, frozen=True)
class ColorPalette:
    primary: str
    secondary: str
    accent: str
    success: str
    error: str
    warning: str
    background: str
    surface: str
    text_primary: str
    text_secondary: str
    border: str

    def rgb(self, key: str) -> ColorTuple:
        """Return the named palette entry as an RGB tuple."""

        lookup = key.strip().lower()
        if lookup not in self.__dataclass_fields__:
            raise KeyError(f"Palette has no entry '{key}'")
        return normalize_color(getattr(self, lookup))

    def to_dict(self) -> Dict[str, str]:
        return _plain_fields(self)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any], path: str = "colors") -> "ColorPalette":
        values = {item.name: str(_require(payload, _camel(item.name), path)) for item in fields(cls)}
        return cls(**values)


@dataclass(slots=True, frozen=True)
class FontStyle:
    size: float
    weight: int
    line_height: float

    def to_dict(self) -> Dict[str, Any]:
        return _plain_fields(self)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any], path: str) -> "FontStyle":
        return cls(
            size=_number(payload, "size", path),
            weight=int(_number(payload, "weight", path)),
            line_height=_number(payload, "lineHeight", path),
        )


@dataclass(slots=True, frozen=True)
class Typography:
    font_family: str
    h1: FontStyle
    h2: FontStyle
    h3: FontStyle
    h4: FontStyle
    body1: FontStyle
    body2: FontStyle
    caption: FontStyle

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"fontFamily": self.font_family}
        for item in fields(self):
            if item.name != "font_family":
                payload[item.name] = getattr(self, item.name).to_dict()
        return payload

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any], path: str = "typography") -> "Typography":
        styles = {
            item.name: FontStyle.from_dict(_require(payload, item.name, path), f"{path}.{item.name}")
            for item in fields(cls)
            if item.name != "font_family"
        }
        return cls(font_family=str(_require(payload, "fontFamily", path)), **styles)


@dataclass(slots=True, frozen=True)
class Spacing:
    xs: float
    sm: float
    md: float
    lg: float
    xl: float
    xxl: float

    def to_dict(self) -> Dict[str, Any]:
        return _plain_fields(self)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any], path: str = "spacing") -> "Spacing":
        return cls(**{item.name: _number(payload, item.name, path) for item in fields(cls)})


@dataclass(slots=True, frozen=True)
class ButtonStyle:
    border_radius: float
    padding_horizontal: float
    padding_vertical: float
    min_height: float

    def to_dict(self) -> Dict[str, Any]:
        return _plain_fields(self)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any], path: str) -> "ButtonStyle":
        return cls(**{item.name: _number(payload, _camel(item.name), path) for item in fields(cls)})


@dataclass(slots=True, frozen=True)
class CardStyle:
    border_radius: float
    padding: float
    elevation: float

    def to_dict(self) -> Dict[str, Any]:
        return _plain_fields(self)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any], path: str) -> "CardStyle":
        return cls(**{item.name: _number(payload, _camel(item.name), path) for item in fields(cls)})


@dataclass(slots=True, frozen=True)
class ComponentStyles:
    button: ButtonStyle
    card: CardStyle

    def to_dict(self) -> Dict[str, Any]:
        return {"button": self.button.to_dict(), "card": self.card.to_dict()}

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any], path: str = "components") -> "ComponentStyles":
        return cls(
            button=ButtonStyle.from_dict(_require(payload, "button", path), f"{path}.button"),
            card=CardStyle.from_dict(_require(payload, "card", path), f"{path}.card"),
        )


@dataclass(slots=True, frozen=True)
class ThemeAssets:
    app_icon_variant: str
    decorative_elements: tuple[str, ...] = ()
    background_pattern: str | None = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "backgroundPattern": self.background_pattern,
            "appIconVariant": self.app_icon_variant,
            "decorativeElements": list(self.decorative_elements),
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any], path: str = "assets") -> "ThemeAssets":
        elements = _require(payload, "decorativeElements", path)
        if isinstance(elements, str) or not isinstance(elements, Sequence):
            raise ThemeValidationError(f"'{path}.decorativeElements' must be a list")
        pattern = payload.get("backgroundPattern")
        return cls(
            app_icon_variant=str(_require(payload, "appIconVariant", path)),
            decorative_elements=tuple(str(item) for item in elements),
            background_pattern=str(pattern) if pattern is not None else None,
        )


@dataclass(slots=True, frozen=True)
class ThemeRecord:
    """One catalog entry: identity, availability and presentation payloads."""

    id: str
    category: ThemeCategory
    palette: ColorPalette
    name: str = ""
    availability_window: AvailabilityWindow | None = None
    typography: Typography | None = None
    spacing: Spacing | None = None
    component_styles: ComponentStyles | None = None
    assets: ThemeAssets | None = None

    def __post_init__(self) -> None:
        identifier = (self.id or "").strip()
        if not identifier:
            raise ThemeValidationError("Theme id cannot be empty")
        object.__setattr__(self, "id", identifier)
        if not isinstance(self.category, ThemeCategory):
            object.__setattr__(self, "category", _coerce_category(self.category, identifier))
        if not self.name:
            object.__setattr__(self, "name", identifier)

    @property
    def is_time_limited(self) -> bool:
        return self.availability_window is not None

    def to_dict(self) -> Dict[str, Any]:
        def _optional(value: Any) -> Any:
            return value.to_dict() if value is not None else None

        return {
            "id": self.id,
            "name": self.name,
            "category": self.category.value,
            "availabilityPeriod": _optional(self.availability_window),
            "colors": self.palette.to_dict(),
            "typography": _optional(self.typography),
            "spacing": _optional(self.spacing),
            "components": _optional(self.component_styles),
            "assets": _optional(self.assets),
        }

    def to_json(self, *, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "ThemeRecord":
        if not isinstance(payload, Mapping):
            raise ThemeValidationError("Theme payload must be an object")
        theme_id = str(_require(payload, "id", "theme"))
        path = f"themes[{theme_id}]"

        def _section(key: str, parser: Any) -> Any:
            value = payload.get(key)
            if value is None:
                return None
            return parser(value, f"{path}.{key}")

        return cls(
            id=theme_id,
            name=str(payload.get("name") or theme_id),
            category=_coerce_category(_require(payload, "category", path), theme_id),
            availability_window=_section("availabilityPeriod", AvailabilityWindow.from_dict),
            palette=ColorPalette.from_dict(_require(payload, "colors", path), f"{path}.colors"),
            typography=_section("typography", Typography.from_dict),
            spacing=_section("spacing", Spacing.from_dict),
            component_styles=_section("components", ComponentStyles.from_dict),
            assets=_section("assets", ThemeAssets.from_dict),
        )


def _coerce_category(value: Any, theme_id: str) -> ThemeCategory:
    try:
        return ThemeCategory(str(value).strip().lower())
    except ValueError as exc:
        raise ThemeValidationError(f"Theme '{theme_id}' has unknown category {value!r}") from exc


__all__ = [
    "AvailabilityWindow",
    "ButtonStyle",
    "CardStyle",
    "ColorPalette",
    "ColorTuple",
    "ComponentStyles",
    "FontStyle",
    "Spacing",
    "ThemeAssets",
    "ThemeCategory",
    "ThemeRecord",
    "ThemeValidationError",
    "Typography",
    "normalize_color",
    "parse_timestamp",
]
