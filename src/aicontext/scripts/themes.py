"""CLI helper to list catalog themes and resolve a theme id."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Sequence

from ..services.settings import Settings, SettingsStore
from ..theme.catalog import ThemeCatalog, load_builtin_catalog
from ..theme.models import ThemeCategory, ThemeRecord, ThemeValidationError, parse_timestamp
from ..theme.resolver import CatalogMisconfigured, is_active, list_available, resolve_or_default
from ..utils.logging import setup_logging

LOGGER = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    settings = SettingsStore(args.settings).load()
    if args.verbose or settings.debug_logging:
        log_path = setup_logging(settings, level=logging.DEBUG if args.verbose else None, log_dir=args.log_dir)
        LOGGER.debug("Debug logging enabled; writing to %s", log_path)
    catalog_path = args.catalog or settings.catalog_path
    try:
        catalog = ThemeCatalog.from_path(catalog_path) if catalog_path else load_builtin_catalog()
    except (OSError, ThemeValidationError) as exc:
        print(f"Unable to load theme catalog: {exc}", file=sys.stderr)
        return 1

    if args.command == "list":
        return _list(catalog, args)
    return _show(catalog, settings, args)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Inspect the theme catalog.")
    parser.add_argument("--catalog", type=Path, help="Theme catalog JSON file. Uses the bundled catalog when omitted.")
    parser.add_argument(
        "--settings",
        type=Path,
        help="Settings file providing the stored theme id and defaults. Uses ~/.aicontext/settings.json when omitted.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging to the console and the log file.")
    parser.add_argument("--log-dir", type=Path, help="Directory for the rotating log file.")
    commands = parser.add_subparsers(dest="command", required=True)

    listing = commands.add_parser("list", help="List themes available at a given instant.")
    listing.add_argument("--now", help="ISO-8601 instant to evaluate availability at. Defaults to the current time.")
    listing.add_argument("--all", action="store_true", help="Include themes outside their availability window.")
    listing.add_argument(
        "--category",
        choices=[category.value for category in ThemeCategory],
        help="Only list themes in this category.",
    )
    listing.add_argument("--json", action="store_true", help="Emit full theme records as JSON.")

    show = commands.add_parser("show", help="Resolve a theme id, falling back to the default theme.")
    show.add_argument("theme_id", nargs="?", help="Theme id to resolve. Defaults to the stored settings value.")
    show.add_argument("--default", dest="default_id", help="Fallback theme id. Defaults to the settings value.")
    show.add_argument("--json", action="store_true", help="Emit the resolved record as JSON.")
    return parser


def _list(catalog: ThemeCatalog, args: argparse.Namespace) -> int:
    try:
        now = parse_timestamp(args.now) if args.now else None
    except (TypeError, ValueError):
        print(f"Invalid --now timestamp: {args.now!r}", file=sys.stderr)
        return 1

    records = list(catalog) if args.all else list_available(catalog, now)
    if args.category:
        records = [record for record in records if record.category.value == args.category]

    if args.json:
        print(json.dumps([record.to_dict() for record in records], indent=2))
        return 0
    for record in records:
        marker = "" if is_active(record, now) else " (inactive)"
        print(f"{record.id}\t{record.category.value}\t{record.name}{marker}")
    return 0


def _show(catalog: ThemeCatalog, settings: Settings, args: argparse.Namespace) -> int:
    theme_id = args.theme_id or settings.theme
    default_id = args.default_id or settings.default_theme
    try:
        record = resolve_or_default(catalog, theme_id, default_id)
    except CatalogMisconfigured as exc:
        print(str(exc), file=sys.stderr)
        return 1

    if args.json:
        print(record.to_json())
        return 0
    _print_summary(record, requested=theme_id)
    return 0


def _print_summary(record: ThemeRecord, *, requested: str | None) -> None:
    print(f"id: {record.id}")
    if requested and requested != record.id:
        print(f"requested: {requested} (fell back to default)")
    print(f"name: {record.name}")
    print(f"category: {record.category.value}")
    window = record.availability_window
    print(f"window: {window.start} .. {window.end}" if window else "window: always")
    print(f"primary: {record.palette.primary}")


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
