# hotel_search/cli.py
"""CLI entrypoint: run the listing service or browse it from the terminal."""

import argparse
import asyncio
import logging
import sys
from typing import Any, List, Optional, Sequence

import uvicorn

from hotel_search.client.api import ListingClient
from hotel_search.client.browser import SearchBrowser
from hotel_search.client.search import CITIES, FIELD_OPTIONS, HOTELS
from hotel_search.config import get_settings
from hotel_search.main import create_app


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def format_cell(field: str, value: Any) -> str:
    if value is None:
        return ""
    if field == "price":
        return f"${value:.2f}"
    return str(value)


def render_table(table: str, records: Sequence[Any]) -> List[str]:
    """Plain-text rendering of a filtered snapshot, one line per record."""
    options = FIELD_OPTIONS[table]
    rows = [[option.label for option in options]]
    for record in records:
        rows.append([format_cell(option.value, option.accessor(record)) for option in options])

    widths = [max(len(row[i]) for row in rows) for i in range(len(options))]
    lines = []
    for n, row in enumerate(rows):
        lines.append("  ".join(cell.ljust(width) for cell, width in zip(row, widths)).rstrip())
        if n == 0:
            lines.append("  ".join("-" * width for width in widths))
    return lines


def cmd_serve(args: argparse.Namespace) -> int:
    settings = get_settings()
    host = settings.HOST if args.host is None else args.host
    port = settings.PORT if args.port is None else args.port

    logging.getLogger(__name__).info("Server starting on %s:%s", host, port)
    uvicorn.run(create_app(settings), host=host, port=port, log_level=settings.LOG_LEVEL.lower())
    return 0


def cmd_browse(args: argparse.Namespace) -> int:
    browser = SearchBrowser(ListingClient(args.api_url or get_settings().API_URL))
    loaded = asyncio.run(browser.load())
    if not loaded:
        print(browser.error)
        return 1

    browser.set_table(args.table)
    browser.set_field(args.field)
    browser.set_query(args.query)
    results = browser.filtered

    print(browser.summary)
    heading = "Cities" if args.table == CITIES else "Hotels"
    print(f"\n{heading}: {len(results)} results")
    if not results:
        print("No results found")
        return 0
    for line in render_table(args.table, results):
        print(line)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hotel-search", description="Hotel & city search")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the listing API")
    serve_parser.add_argument("--host", default=None, help="Bind address (default: HOST setting)")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port (default: PORT setting)")
    serve_parser.set_defaults(func=cmd_serve)

    browse_parser = subparsers.add_parser("browse", help="Load both listings and search them locally")
    browse_parser.add_argument("--api-url", default=None, help="Listing API base URL (default: API_URL setting)")
    browse_parser.add_argument("--table", choices=[HOTELS, CITIES], default=HOTELS)
    browse_parser.add_argument("--field", default="name", help="Field to search (id, name, city, capacity, price)")
    browse_parser.add_argument("--query", default="", help="Case-insensitive substring to look for")
    browse_parser.set_defaults(func=cmd_browse)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(get_settings().LOG_LEVEL)

    if args.command == "browse":
        fields = [option.value for option in FIELD_OPTIONS[args.table]]
        if args.field not in fields:
            parser.error(f"--field must be one of {', '.join(fields)} for {args.table}")

    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
