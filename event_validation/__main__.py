"""
Validate a JSON payload from the command line.

    python -m event_validation event.json
    python -m event_validation filter.json --search --timezone Europe/Berlin
"""

import argparse
import json
import sys
from dataclasses import replace

from .chain import build_create_event_chain, build_search_chain
from .config import get_settings
from .exceptions import ConfigurationError, ValidationError
from .logger import setup_logger


def _load_payload(source: str) -> dict:
    """Read a JSON object from a file path, or stdin for '-'."""
    if source == '-':
        payload = json.load(sys.stdin)
    else:
        with open(source, encoding='utf-8') as f:
            payload = json.load(f)

    if not isinstance(payload, dict):
        raise ValueError(f"expected a JSON object, got {type(payload).__name__}")
    return payload


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog='event_validation', description=__doc__.strip().splitlines()[0])
    parser.add_argument('payload', help="JSON file, or '-' for stdin")
    parser.add_argument('--search', action='store_true', help='validate a search filter instead of an event')
    parser.add_argument('--timezone', help='override TIMEZONE')
    args = parser.parse_args(argv)

    try:
        settings = get_settings()
        if args.timezone:
            settings = replace(settings, timezone=args.timezone)
    except ConfigurationError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        return 2
    setup_logger(level=settings.log_level, stream=sys.stderr)

    try:
        payload = _load_payload(args.payload)
    except (OSError, ValueError) as e:
        print(f"Input Error: {e}", file=sys.stderr)
        return 2

    chain = build_search_chain(settings) if args.search else build_create_event_chain(settings)

    try:
        result = chain.run(payload)
    except ValidationError as e:
        print(f"Validation Error [{e.code}]: {e.user_message}")
        return 1

    print(json.dumps(result, indent=2, default=str))
    return 0


if __name__ == '__main__':
    sys.exit(main())
