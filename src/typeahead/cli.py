"""CLI entry point — Run a typeahead query against a seeded record store."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

from typeahead.models.records import NodeOrder

CATEGORIES = ("all", "notes", "wikis", "maps", "tags", "questions", "comments", "profiles")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="typeahead",
        description="Federated typeahead suggestions across tags, notes, wikis, maps, questions, comments and profiles",
    )
    parser.add_argument("query", help="Query text")
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--data",
        "-d",
        type=str,
        default=None,
        help="JSON or YAML seed file for the record store (overrides config)",
    )
    parser.add_argument(
        "--category",
        choices=CATEGORIES,
        default="all",
        help="Category to search (default: all)",
    )
    parser.add_argument(
        "--limit",
        "-n",
        type=int,
        default=None,
        help="Per-category result limit (overrides config)",
    )
    parser.add_argument(
        "--order",
        choices=[o.value for o in NodeOrder],
        default=NodeOrder.DEFAULT.value,
        help="Secondary order for maps and questions",
    )
    parser.add_argument(
        "--fulltext",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Enable or disable the full-text engine (overrides config)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["debug", "info", "warning", "error"],
        default=None,
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"typeahead {_get_version()}",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point: print the result list as JSON on stdout."""
    args = build_parser().parse_args(argv)

    from typeahead.config.settings import Settings
    from typeahead.observability.logging import setup_logging

    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: Config file not found: {config_path}", file=sys.stderr)
            sys.exit(1)
        settings = Settings.from_yaml(config_path)
    else:
        settings = Settings()

    # Apply CLI overrides
    if args.data:
        settings.storage.data_file = args.data
    if args.fulltext is not None:
        settings.fulltext.enabled = args.fulltext
    if args.log_level:
        settings.observability.log_level = args.log_level

    setup_logging(settings.observability)

    if settings.storage.data_file and not Path(settings.storage.data_file).exists():
        print(f"Error: Seed file not found: {settings.storage.data_file}", file=sys.stderr)
        sys.exit(1)

    limit = args.limit if args.limit is not None else settings.search.default_limit
    if limit < 1:
        print("Error: --limit must be at least 1", file=sys.stderr)
        sys.exit(2)

    from typeahead.adapters.base.exceptions import CategoryRetrievalError
    from typeahead.engines.base.exceptions import EngineError

    try:
        entries = asyncio.run(_run(settings, args.query, args.category, limit, NodeOrder(args.order)))
    except (CategoryRetrievalError, EngineError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    json.dump(entries, sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")


async def _run(settings, query: str, category: str, limit: int, order: NodeOrder) -> list[dict]:
    from typeahead.core.engine import TypeaheadEngine

    engine = TypeaheadEngine.from_settings(settings)
    try:
        await engine.initialize()
        if category == "all":
            results = await engine.search_all(query, limit)
        elif category in ("maps", "questions"):
            results = await getattr(engine, f"search_{category}")(query, limit, order)
        else:
            results = await getattr(engine, f"search_{category}")(query, limit)
        return results.model_dump()
    finally:
        await engine.shutdown()


def _get_version() -> str:
    """Get the package version."""
    try:
        from typeahead import __version__

        return __version__
    except ImportError:
        return "unknown"


if __name__ == "__main__":
    main()
