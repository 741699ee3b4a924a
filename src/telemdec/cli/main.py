"""Main CLI entry point for telemdec."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from .. import __version__
from ..codec.decoder import decode
from ..codec.schema import MessageSchema
from ..exceptions import TelemdecError
from ..models.documents import load_schema
from ..variants import VARIANTS, get_variant
from .describe import describe_schema

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NO_RESULT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="telemdec",
        description="telemdec: Schema-driven Telemetry Decoder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  telemdec 08108b8182342d580104de00af01020164             Decode with the device-id layout
  telemdec --variant mac 08108b8182342d580104de00af01020164
  telemdec --schema sensor.json --json 0810...            Decode with a JSON schema document
  telemdec --variant mac --describe                       Show the field layout
        """,
    )

    parser.add_argument("hex", nargs="?", help="Hex-encoded message to decode")

    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--variant",
        choices=sorted(VARIANTS),
        default="device-id",
        help="Built-in schema variant (default: device-id)",
    )
    source.add_argument(
        "--schema",
        metavar="FILE",
        help="JSON schema document to decode with",
    )

    parser.add_argument("--json", action="store_true", help="Print the record as JSON")
    parser.add_argument(
        "--describe",
        action="store_true",
        help="Describe the schema layout instead of decoding",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging on stderr"
    )
    parser.add_argument("--version", action="version", version=f"telemdec {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the telemdec CLI.

    Returns:
        Exit code: 0 on success, 1 on schema or decode errors, 2 when a
        strict-length schema rejects the input
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        schema = _resolve_schema(args)
    except TelemdecError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    if args.describe:
        describe_schema(schema)
        return EXIT_OK

    # If no message given, show help
    if args.hex is None:
        parser.print_help()
        return EXIT_OK

    logger.debug("Decoding %d hex characters with schema %s", len(args.hex), schema.name)
    try:
        record = decode(args.hex, schema)
    except TelemdecError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    if record is None:
        print(
            f"No result: expected {schema.config.expected_hex_length} hex characters, "
            f"got {len(args.hex)}",
            file=sys.stderr,
        )
        return EXIT_NO_RESULT

    if args.json:
        print(json.dumps(record.to_dict(), indent=2))
    else:
        for name, value in record.items():
            print(f"{name}: {value}")
    return EXIT_OK


def _resolve_schema(args: argparse.Namespace) -> MessageSchema:
    if args.schema:
        return load_schema(args.schema)
    return get_variant(args.variant)


if __name__ == "__main__":
    sys.exit(main())
