#!/usr/bin/env python3
"""CLI for browsing the spell catalog by class and source."""

import argparse
import logging
import sys
from pathlib import Path

from spellbrowser.catalog import load_catalog, load_settings
from spellbrowser.core import CatalogLoadError, SpellNotVisibleError
from spellbrowser.engine import SpellBrowser
from spellbrowser.render import (
    Colors,
    build_spell_detail,
    format_level_groups,
    format_spell_detail,
    interactive_mode,
)


def add_filter_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-c", "--class",
        dest="class_name",
        help="Class to filter by ('' for no class; default from config)"
    )
    parser.add_argument(
        "-s", "--source",
        dest="sources",
        action="append",
        help="Enable a source (repeatable; default from config)"
    )


def main():
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Browse the spell catalog by class and source",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                Interactive mode
  %(prog)s classes                        List classes
  %(prog)s sources                        List sources
  %(prog)s list -c Cleric -s "Players HB"   Spells grouped by level
  %(prog)s show Aid -c Cleric             Show one spell's details
""",
    )
    parser.add_argument(
        "--catalog", type=Path,
        help="Path to the spell catalog JSON (default from config)"
    )
    parser.add_argument(
        "--config", type=Path,
        help="Path to the YAML config file"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print debug information"
    )

    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("classes", help="List classes")
    subparsers.add_parser("sources", help="List sources")

    list_parser = subparsers.add_parser("list", help="List spells grouped by level")
    add_filter_args(list_parser)

    show_parser = subparsers.add_parser("show", help="Show a spell's details")
    show_parser.add_argument("name", help="Spell name")
    add_filter_args(show_parser)

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        settings = load_settings(args.config)
        catalog = load_catalog(args.catalog or settings.catalog_path)
    except (CatalogLoadError, FileNotFoundError) as e:
        print(f"{Colors.RED}Error: {e}{Colors.RESET}", file=sys.stderr)
        sys.exit(1)

    class_name = getattr(args, "class_name", None)
    sources = getattr(args, "sources", None)
    browser = SpellBrowser(
        catalog,
        selected_class=settings.default_class if class_name is None else class_name,
        selected_sources=settings.default_sources if sources is None else sources,
    )

    if args.command == "classes":
        for name in browser.sorted_class_list:
            print(name)

    elif args.command == "sources":
        for name in browser.source_names:
            print(name)

    elif args.command == "list":
        print(format_level_groups(browser.level_groups))

    elif args.command == "show":
        try:
            spell = browser.open_spell(args.name)
        except SpellNotVisibleError as e:
            print(f"{Colors.RED}{e}{Colors.RESET}", file=sys.stderr)
            sys.exit(1)
        print(format_spell_detail(build_spell_detail(spell)))

    else:
        try:
            interactive_mode(browser)
        except KeyboardInterrupt:
            print(f"\n{Colors.DIM}Interrupted{Colors.RESET}", file=sys.stderr)
            sys.exit(130)


if __name__ == "__main__":
    main()
