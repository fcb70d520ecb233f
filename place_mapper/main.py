"""
Place Mapper - Main Entry Point

Command-line interface for normalizing raw place payloads saved from the
places-lookup API.

Usage:
    python -m place_mapper.main FILE [OPTIONS]

Options:
    --format TEXT     Output shape: 'simplified' (default) or 'external'
    --policy TEXT     Decode policy: 'falsy' or 'nullish' (overrides config)
    --config PATH     Path to mapper.yml
    --verbose         Enable debug logging
    --help            Show this message and exit

Accepted input files:
    - A single place object
    - A list of place objects
    - A place details response: {"result": {...}}
    - A search response: {"results": [...]}

Examples:
    # Print the display view of a saved details response:
    python -m place_mapper.main samples/chick_fil_a.json

    # Re-encode into the API shape, keeping explicit false/0 values:
    python -m place_mapper.main samples/chick_fil_a.json --format external --policy nullish

Exit Codes:
    0: Success
    1: One or more places are missing place_id or name
    2: Fatal error (unreadable file, invalid JSON, bad configuration)
"""

import argparse
import json
import logging
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from .config_loader import load_mapper_config
from .mapper import DecodePolicy, from_external, to_external

# Load environment variables
load_dotenv()

# Configure logging (stdout carries the JSON output)
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stderr)
    ]
)

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ('simplified', 'external')


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        description='Normalize raw place payloads into canonical records',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    parser.add_argument(
        'input',
        type=str,
        help='Path to a JSON file with one or more place payloads'
    )

    parser.add_argument(
        '--format',
        type=str,
        choices=OUTPUT_FORMATS,
        default='simplified',
        dest='output_format',
        help='Output shape (default: simplified)'
    )

    parser.add_argument(
        '--policy',
        type=str,
        choices=[p.value for p in DecodePolicy],
        default=None,
        help='Decode policy (default: from configuration)'
    )

    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='Path to mapper.yml'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    return parser.parse_args(argv)


def extract_places(document: Any) -> list[Any]:
    """
    Pull place payloads out of a decoded JSON document.

    API envelopes are unwrapped: a details response carries the place under
    `result`, a search response carries a list under `results`.

    Args:
        document: Parsed JSON value

    Returns:
        List of raw place payloads
    """
    if isinstance(document, list):
        return document

    if isinstance(document, Mapping):
        if isinstance(document.get('result'), Mapping):
            return [document['result']]
        if isinstance(document.get('results'), list):
            return document['results']

    return [document]


def run_mapper(
    places: list[Any],
    policy: DecodePolicy = DecodePolicy.FALSY,
    output_format: str = 'simplified'
) -> tuple[list[dict[str, Any]], dict[str, int]]:
    """
    Decode every payload and render it in the requested output shape.

    Args:
        places: Raw place payloads
        policy: Decode policy
        output_format: 'simplified' or 'external'

    Returns:
        Tuple of (rendered places, statistics). Statistics hold:
        - decoded: Number of payloads decoded
        - valid: Number with both place_id and name
        - invalid: Number missing place_id or name
    """
    stats = {
        'decoded': 0,
        'valid': 0,
        'invalid': 0,
    }
    rendered = []

    for index, payload in enumerate(places):
        place = from_external(payload, policy)
        stats['decoded'] += 1

        if place.is_valid():
            stats['valid'] += 1
        else:
            stats['invalid'] += 1
            logger.warning(
                "Place is missing place_id or name",
                extra={'index': index, 'place_id': place.place_id}
            )

        if output_format == 'external':
            rendered.append(to_external(place))
        else:
            rendered.append(place.get_simplified())

    return rendered, stats


def main(argv: Optional[list[str]] = None) -> int:
    """
    Main entry point.

    Returns:
        Exit code (0 = success, 1 = invalid places, 2 = fatal error)
    """
    args = parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Debug logging enabled")

    try:
        config = load_mapper_config(args.config)
        policy = DecodePolicy(args.policy) if args.policy else config.decode_policy

        path = Path(args.input)
        with path.open('r', encoding='utf-8') as handle:
            document = json.load(handle)

    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        return 2
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {args.input}: {e}")
        return 2
    except (OSError, ValueError) as e:
        logger.error(f"Failed to start place mapper: {e}")
        return 2

    places = extract_places(document)
    logger.info(
        "Mapping places",
        extra={'input': args.input, 'count': len(places), 'policy': policy.value}
    )

    rendered, stats = run_mapper(places, policy, args.output_format)

    json.dump(rendered, sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write('\n')

    logger.info("Place mapping complete", extra=stats)

    return 1 if stats['invalid'] > 0 else 0


if __name__ == '__main__':
    sys.exit(main())
