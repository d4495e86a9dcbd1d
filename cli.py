import argparse
import json
import logging
import sys

from config.settings import get_settings
from services.mapping import map_view
from services.query_engine import QueryEngine
from services.reporting import print_summary
from store.errors import MalformedDataError
from store.record_store import RecordStore
from utils.logging_setup import init_logging

logger = logging.getLogger(__name__)

BROWSE_HELP = (
    "Commands: /text or 'search text' to filter, 'search' alone to clear, "
    "n/next, p/prev, a page number or 'page N', q/quit"
)


def _load_store(args) -> RecordStore:
    try:
        return RecordStore.load(args.data)
    except MalformedDataError as e:
        logger.error("Could not load directory data", extra={"step": "load", "status": "failed", "error": str(e)})
        print(f"Invalid directory data: {e}", file=sys.stderr)
        raise SystemExit(1)
    except OSError as e:
        print(f"Could not read {args.data}: {e}", file=sys.stderr)
        raise SystemExit(1)


def cmd_validate(args):
    store = _load_store(args)
    print(f"OK: {len(store)} records in {args.data}")


def cmd_show(args):
    store = _load_store(args)
    engine = QueryEngine(store, page_size=args.page_size)
    if args.query:
        engine.on_query_change(args.query)
    result = engine.on_page_request(args.page)
    if args.format == "text":
        print_summary(result)
    else:
        print(json.dumps(map_view(result), indent=2, ensure_ascii=False))


def _handle_browse_command(engine: QueryEngine, line: str):
    """Apply one browse command. Returns False to stop, None for unknown input."""
    text = line.strip()
    low = text.lower()
    if low in ("q", "quit", "exit"):
        return False
    if text.startswith("/"):
        return engine.on_query_change(text[1:].strip())
    if low == "search" or low.startswith("search "):
        return engine.on_query_change(text[len("search"):].strip())
    if low in ("n", "next"):
        return engine.next_page()
    if low in ("p", "prev", "previous"):
        return engine.previous_page()
    if low.startswith("page "):
        text = text[len("page "):].strip()
    try:
        return engine.on_page_request(int(text))
    except ValueError:
        return None


def cmd_browse(args):
    store = _load_store(args)
    engine = QueryEngine(store, page_size=args.page_size)
    print(BROWSE_HELP)
    print_summary(engine.result)
    for line in sys.stdin:
        if not line.strip():
            continue
        outcome = _handle_browse_command(engine, line)
        if outcome is False:
            break
        if outcome is None:
            print(f"Unknown command: {line.strip()}")
            print(BROWSE_HELP)
            continue
        print_summary(outcome)


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be positive: {number}")
    return number


def main():
    settings = get_settings()
    init_logging(settings.log_level)
    parser = argparse.ArgumentParser(description="Team directory CLI")
    parser.add_argument("--data", default=settings.data_path, help="Path to team JSON (default from settings)")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_val = sub.add_parser("validate", help="Load and validate the directory data")
    p_val.set_defaults(func=cmd_validate)

    p_show = sub.add_parser("show", help="Render one page of (optionally filtered) results")
    p_show.add_argument("--query", "-q", default="", help="Search by name, job title, bio, or skills")
    # Out-of-range pages are clamped, so any integer is accepted here
    p_show.add_argument("--page", "-p", type=int, default=1, help="1-based page number (default: 1)")
    p_show.add_argument("--page-size", type=_positive_int, default=settings.page_size, help=f"Records per page (default: {settings.page_size})")
    p_show.add_argument("--format", choices=["json", "text"], default="json", help="Output format (default: json)")
    p_show.set_defaults(func=cmd_show)

    p_br = sub.add_parser("browse", help="Interactive search and paging over stdin")
    p_br.add_argument("--page-size", type=_positive_int, default=settings.page_size, help=f"Records per page (default: {settings.page_size})")
    p_br.set_defaults(func=cmd_browse)

    args = parser.parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
