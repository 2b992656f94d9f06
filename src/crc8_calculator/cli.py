"""Compute a CRC-8/MAXIM checksum from the command line."""

import argparse
import sys

from crc8_calculator.core.calculator import compute_crc8
from crc8_calculator.core.config import setup_logging
from crc8_calculator.core.models import ComputationResult
from crc8_calculator.protocol.constants import EXAMPLES, InputFormat


def format_plain(result: ComputationResult) -> str:
    """Format a successful result as aligned text lines."""
    lines = [
        f"HEX: {result.hex}",
        f"DEC: {result.dec}",
        f"BIN: {result.bin}",
        f"Algorithm: {result.algorithm_name} ({result.polynomial_hex})",
        f"Length: {result.input_byte_count} bytes",
        f"Time: {result.elapsed_micros} us",
    ]
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compute the CRC-8/MAXIM checksum of hex bytes or text")
    parser.add_argument("data", nargs="*", help="Hex bytes (e.g. C8 64 54) or text with --text")
    parser.add_argument("-t", "--text", action="store_true", help="Treat data as UTF-8 text")
    parser.add_argument(
        "-o",
        "--output",
        choices=["plain", "hex", "json"],
        default="plain",
        help="Output style (default: plain)",
    )
    parser.add_argument("-e", "--examples", action="store_true", help="Compute the built-in example vectors")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging("DEBUG" if args.verbose else "WARNING")

    if args.examples:
        for cells in EXAMPLES:
            result = compute_crc8("".join(cells), InputFormat.HEX)
            print(f"{' '.join(cells):30s}  {result.hex}")
        return 0

    fmt = InputFormat.TEXT if args.text else InputFormat.HEX
    data = " ".join(args.data)
    result = compute_crc8(data, fmt)

    if not result.success:
        print(f"Error: {result.error_message}", file=sys.stderr)
        return 1

    if args.output == "json":
        print(result.model_dump_json(indent=2))
    elif args.output == "hex":
        print(result.hex)
    else:
        print(format_plain(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
