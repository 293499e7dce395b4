"""Main CLI entry point for hcard index."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from .. import __version__
from ..core.encoding import CharsetNormalizerDetector
from ..core.models import FIELDS, HCardName


def build_name(args) -> HCardName:
    """Feed the command line values into a new HCardName."""
    name = HCardName()
    for kind in FIELDS:
        for value in getattr(args, kind.value.replace("-", "_")) or []:
            name.set_field(kind, value)
    name.set_full_name(args.fn)
    name.set_organization(args.org)
    name.set_organization_unit(args.org_unit)
    return name


def name_command(args):
    """Print the computed fields of an hCard name as JSON."""
    try:
        name = build_name(args)
        result = {
            "full_name": name.get_full_name(),
            "organization": name.get_organization(),
            "organization_unit": name.get_organization_unit(),
            "fields": {
                kind.value: {
                    "value": name.get_field(kind),
                    "values": name.get_fields(kind),
                }
                for kind in FIELDS
            },
        }
        print(json.dumps(result, indent=2, ensure_ascii=False))
    except Exception as e:
        print(f"Error building name: {e}", file=sys.stderr)
        sys.exit(1)


def detect_encoding_command(args):
    """Print the detected character encoding of a file."""
    try:
        detector = CharsetNormalizerDetector(
            sample_size=args.sample_size,
            strip_markup=not args.no_strip_markup,
        )
        print(detector.guess_file_encoding(str(args.input)))
    except Exception as e:
        print(f"Error detecting encoding of {args.input}: {e}", file=sys.stderr)
        sys.exit(1)


def main(argv: Optional[list] = None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="hcard-index",
        description="Name records for hCard metadata extraction"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"hcard-index {__version__}"
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Name command
    name_parser = subparsers.add_parser("name", help="Compose an hCard name from its parts")
    name_parser.add_argument("--fn", type=str, help="Formatted (full) name, e.g. 'King, Ryan'")
    name_parser.add_argument("--org", type=str, help="Organization name")
    name_parser.add_argument("--org-unit", type=str, help="Organization unit")
    for kind in FIELDS:
        name_parser.add_argument(
            f"--{kind.value}",
            action="append",
            help=f"Value for {kind.value} (repeatable)",
        )
    name_parser.set_defaults(func=name_command)

    # Detect encoding command
    detect_parser = subparsers.add_parser("detect-encoding", help="Guess the character encoding of a file")
    detect_parser.add_argument("input", type=Path, help="Input file")
    detect_parser.add_argument(
        "--sample-size",
        type=int,
        default=None,
        help="Number of bytes to inspect (default: $HCARD_INDEX_SAMPLE_SIZE or 10240)"
    )
    detect_parser.add_argument(
        "--no-strip-markup",
        action="store_true",
        help="Do not ignore markup tags when guessing"
    )
    detect_parser.set_defaults(func=detect_encoding_command)

    # Parse arguments
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if not hasattr(args, 'func'):
        parser.print_help()
        sys.exit(1)

    # Execute command
    args.func(args)


if __name__ == "__main__":
    main()
