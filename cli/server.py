#!/usr/bin/env python3
"""CLI for serving the spell browser web API and page."""

import argparse
import logging
import os
import sys
from pathlib import Path

import uvicorn

from spellbrowser.catalog import config, load_catalog, load_settings
from spellbrowser.core import CatalogLoadError
from spellbrowser.render import Colors


def main():
    parser = argparse.ArgumentParser(
        description="Serve the spell browser API and page",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                  Serve data/spells.json on :8000
  %(prog)s --catalog my_spells.json -p 9000
  %(prog)s --config config/local.yaml --reload
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
    parser.add_argument("--host", default="127.0.0.1", help="Host to bind to")
    parser.add_argument("-p", "--port", type=int, default=8000, help="Port to bind to")
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Reload when source files change"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print debug information"
    )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    # The app reads these in its lifespan hook, including under --reload
    if args.config:
        os.environ[config.ENV_CONFIG] = str(args.config.resolve())
    if args.catalog:
        os.environ[config.ENV_CATALOG] = str(args.catalog.resolve())

    try:
        settings = load_settings()
        catalog = load_catalog(settings.catalog_path)
    except (CatalogLoadError, FileNotFoundError) as e:
        print(f"{Colors.RED}Error: {e}{Colors.RESET}", file=sys.stderr)
        sys.exit(1)

    print(
        f"{Colors.CYAN}Serving {len(catalog)} spells from {settings.catalog_path}{Colors.RESET} "
        f"on http://{args.host}:{args.port}",
        file=sys.stderr,
    )

    try:
        uvicorn.run(
            "spellbrowser.web.app:app",
            host=args.host,
            port=args.port,
            reload=args.reload,
            log_level="debug" if args.verbose else "info",
        )
    except KeyboardInterrupt:
        print("\nServer stopped", file=sys.stderr)
        sys.exit(0)


if __name__ == "__main__":
    main()
