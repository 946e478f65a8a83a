"""
Command-line interface for inspecting the model generation rules.

Subcommands:
    types       list the schema type -> Go type table
    resolve     resolve one column type
    keywords    list or check reserved query API names
    normalize   collapse whitespace in a SQL fragment
"""

from __future__ import annotations

import argparse
import sys

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__, type_map_from_config
from .core.config import ConfigError, GeneratorConfig, get_config_manager
from .core.keywords import KEYWORD_SETS
from .core.sql_buffer import normalize_sql
from .languages.go.field import Field
from .languages.go.types import DataTypeMap
from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)

console = Console()


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="modelgen",
        description="Inspect Go model generation rules for database columns.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--config", metavar="FILE", help="JSON configuration file (type overrides, tag options)"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    subparsers.add_parser("types", help="List the schema type to Go type mapping")

    resolve = subparsers.add_parser("resolve", help="Resolve the Go type of a column type")
    resolve.add_argument("data_type", help="Schema type name, e.g. tinyint")
    resolve.add_argument(
        "detail_type", nargs="?", default="", help="Full column type, e.g. 'tinyint(1) unsigned'"
    )

    keywords = subparsers.add_parser("keywords", help="List or check reserved names")
    keywords.add_argument(
        "--set", dest="keyword_set", choices=sorted(KEYWORD_SETS), default="gorm",
        help="Keyword set to use (default: gorm)",
    )
    keywords.add_argument("--check", metavar="NAME", help="Check a single identifier")

    normalize = subparsers.add_parser("normalize", help="Collapse whitespace in SQL text")
    normalize.add_argument("sql", help="SQL text (use '-' to read stdin)")

    return parser


def _load_config(path: str | None) -> GeneratorConfig:
    manager = get_config_manager()
    config = manager.get_config(config_file=path)
    for warning in manager.validate_config(config):
        logger.warning("Config: %s", warning)
    return config


def _cmd_types(type_map: DataTypeMap) -> int:
    table = Table(title="📋 Data Type Mapping", box=box.ROUNDED, title_style="bold cyan")
    table.add_column("Data Type", style="bold green", no_wrap=True)
    table.add_column("Go Type", style="cyan")
    table.add_column("Gen Type", style="dim")

    for data_type in type_map.names():
        go_type = type_map.get(data_type)
        table.add_row(data_type, escape(go_type), Field(name="", type=go_type).gen_type())

    console.print(table)
    return 0


def _cmd_resolve(type_map: DataTypeMap, data_type: str, detail_type: str) -> int:
    go_type = type_map.get(data_type, detail_type)
    known = data_type in type_map
    console.print(f"[bold]{escape(data_type)}[/bold] {escape(detail_type)}".rstrip())
    console.print(f"  Go type:  [cyan]{escape(go_type)}[/cyan]" + ("" if known else " [yellow](default)[/yellow]"))
    console.print(f"  Gen type: {Field(name='', type=go_type).gen_type()}")
    return 0


def _cmd_keywords(set_name: str, check: str | None) -> int:
    keywords = KEYWORD_SETS[set_name]
    if check is None:
        console.print(f"[bold]{set_name}[/bold] keywords ({len(keywords)}):")
        console.print(", ".join(keywords), soft_wrap=True)
        return 0

    escaped = Field(name=check, type="").escape_keyword_for(keywords).name
    if escaped != check:
        console.print(f"[yellow]reserved[/yellow] {escape(check)} -> {escape(escaped)}")
    else:
        console.print(f"[green]ok[/green] {escape(check)}")
    return 0


def _cmd_normalize(sql: str) -> int:
    if sql == "-":
        sql = sys.stdin.read()
    console.print(normalize_sql(sql), markup=False, highlight=False, soft_wrap=True)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point; returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging("DEBUG" if args.verbose else "WARNING")

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = _load_config(args.config)
        type_map = type_map_from_config(config)

        if args.command == "types":
            return _cmd_types(type_map)
        if args.command == "resolve":
            return _cmd_resolve(type_map, args.data_type, args.detail_type)
        if args.command == "keywords":
            return _cmd_keywords(args.keyword_set, args.check)
        if args.command == "normalize":
            return _cmd_normalize(args.sql)
        raise CLIError(f"Unknown command: {args.command}")
    except (ConfigError, CLIError) as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        logger.debug("Command failed", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
