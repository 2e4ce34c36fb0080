"""CLI entry point for the boolean search query language."""

import argparse
import json
import logging
import sys
from typing import Any

from talent_query.core.config import Settings
from talent_query.query import (
    EXAMPLE_QUERIES,
    compile_query,
    format_for_display,
    parse,
    validate,
)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--config",
        default=None,
        help="Path to settings YAML file (default: built-in settings)",
    )
    common.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )

    parser = argparse.ArgumentParser(
        description="Boolean search query language - validate, parse and compile queries",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate_parser = subparsers.add_parser(
        "validate", parents=[common], help="Check a query for syntax errors",
    )
    validate_parser.add_argument("query", help="Raw boolean query")

    parse_parser = subparsers.add_parser(
        "parse", parents=[common], help="Print the parsed query as JSON",
    )
    parse_parser.add_argument("query", help="Raw boolean query")

    compile_parser = subparsers.add_parser(
        "compile", parents=[common], help="Print the search filter payload as JSON",
    )
    compile_parser.add_argument("query", help="Raw boolean query")
    compile_parser.add_argument(
        "--force",
        action="store_true",
        help="Compile even when validation reports errors",
    )

    highlight_parser = subparsers.add_parser(
        "highlight", parents=[common], help="Print the query as highlighted HTML",
    )
    highlight_parser.add_argument("query", help="Raw boolean query")

    subparsers.add_parser("examples", parents=[common], help="List example queries")

    return parser.parse_args(argv)


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def load_settings(path: str | None) -> Settings:
    if path is None:
        return Settings()
    return Settings.from_yaml(path)


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def cmd_validate(args: argparse.Namespace) -> int:
    """Handle validate subcommand."""
    result = validate(args.query)
    for error in result.errors:
        print(f"Error: {error}")
    for warning in result.warnings:
        print(f"Warning: {warning}")
    if result.is_valid:
        print("Query is valid.")
        return 0
    return 1


def cmd_parse(args: argparse.Namespace, settings: Settings) -> int:
    """Handle parse subcommand."""
    parsed = parse(args.query, exclude_negated=settings.parser.exclude_negated_terms)
    _print_json(parsed.model_dump(mode="json"))
    return 0


def cmd_compile(args: argparse.Namespace, settings: Settings) -> int:
    """Handle compile subcommand."""
    result = compile_query(args.query, settings)
    if not result.validation.is_valid:
        for error in result.validation.errors:
            print(f"Error: {error}", file=sys.stderr)
        if not args.force:
            return 1
    _print_json(result.filters.to_payload())
    return 0


def cmd_highlight(args: argparse.Namespace, settings: Settings) -> int:
    """Handle highlight subcommand."""
    print(format_for_display(args.query, settings.display))
    return 0


def cmd_examples() -> int:
    """Handle examples subcommand."""
    for query in EXAMPLE_QUERIES:
        print(query)
    return 0


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        settings = load_settings(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        sys.exit(1)

    if args.command == "validate":
        code = cmd_validate(args)
    elif args.command == "parse":
        code = cmd_parse(args, settings)
    elif args.command == "compile":
        code = cmd_compile(args, settings)
    elif args.command == "highlight":
        code = cmd_highlight(args, settings)
    else:
        code = cmd_examples()

    if code:
        sys.exit(code)


if __name__ == "__main__":
    main()
