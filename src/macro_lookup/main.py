"""Command-line entry point."""

import argparse
import asyncio
import sys
from collections.abc import Callable
from pathlib import Path

from macro_lookup.app_logging import configure_logging
from macro_lookup.config import (
    Settings,
    default_config_file,
    load_settings,
    require_api_key,
    save_api_key,
)
from macro_lookup.containers import AppContainer, build_container
from macro_lookup.domain.items import BareItemDefault, UnknownUnitPolicy
from macro_lookup.domain.report import Report
from macro_lookup.errors import UsageError
from macro_lookup.services.formatting import format_report
from macro_lookup.services.parser import split_arguments

EXIT_OK = 0
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="macro-lookup",
        description=(
            "Look up calories, protein, carbs and fat for foods. "
            "Pass bare food names (apple banana) or comma-separated "
            "'<quantity> <unit> <food>' items (1 lb ground beef, 500 eggs)."
        ),
    )
    parser.add_argument("items", nargs="*", help="food descriptions")
    parser.add_argument(
        "--setup",
        metavar="API_KEY",
        help="store a FoodData Central API key and exit",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="config file holding the API key",
    )
    parser.add_argument(
        "--servings",
        action="store_true",
        help="treat bare food names as one serving instead of 100 g",
    )
    parser.add_argument(
        "--strict-units",
        action="store_true",
        help="report unknown units as errors instead of assuming 100 g per unit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="log lookups (-vv for debug output)",
    )
    return parser


def main(
    argv: list[str] | None = None,
    *,
    settings: Settings | None = None,
    container_factory: Callable[[Settings], AppContainer] = build_container,
) -> int:
    """Run the CLI and return the exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)
    config_file = args.config or default_config_file()

    if args.setup is not None:
        try:
            path = save_api_key(args.setup, config_file)
        except UsageError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return EXIT_USAGE
        print(f"Saved FoodData Central API key to {path}")
        return EXIT_OK

    resolved_settings = _apply_flags(settings or load_settings(config_file), args)
    configure_logging(resolved_settings.log_level)

    try:
        require_api_key(resolved_settings)
        items = split_arguments(args.items)
        if not items:
            raise UsageError("no food items given")
        container = container_factory(resolved_settings)
    except UsageError as exc:
        parser.print_usage(sys.stderr)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    report = asyncio.run(_build_report(container, items))
    for line in format_report(report):
        print(line)
    return EXIT_OK


async def _build_report(container: AppContainer, items: list[str]) -> Report:
    try:
        return await container.report_service.build_report(items)
    finally:
        await container.close_resources()


def _apply_flags(settings: Settings, args: argparse.Namespace) -> Settings:
    update: dict[str, object] = {}
    if args.servings:
        update["bare_item_default"] = BareItemDefault.SERVING
    if args.strict_units:
        update["unknown_unit_policy"] = UnknownUnitPolicy.STRICT
    if args.verbose:
        update["log_level"] = "DEBUG" if args.verbose > 1 else "INFO"
    if not update:
        return settings
    return settings.model_copy(update=update)


if __name__ == "__main__":
    sys.exit(main())
