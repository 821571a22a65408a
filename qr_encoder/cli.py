"""CLI entry point for the QR encoder."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from qr_encoder import __version__


def create_parser() -> argparse.ArgumentParser:
    """
    Build the argument parser for the qr-encoder command.

    Returns:
        argparse.ArgumentParser: Parser for text, level, version, mask and
            output options
    """
    parser = argparse.ArgumentParser(
        prog="qr-encoder",
        description="Encode text into a byte-mode QR code.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print the symbol to the terminal
  qr-encoder "HELLO"

  # Save a PNG with high error correction
  qr-encoder "https://example.com" --ecc H -o link.png

  # Pick the mask with the lowest penalty and write SVG
  qr-encoder "WIFI:T:WPA;S:home;P:secret;;" --mask auto -o wifi.svg
        """,
    )

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument("text", help="Text to encode (UTF-8)")
    parser.add_argument(
        "--ecc",
        default="M",
        type=str.upper,
        choices=["L", "M", "Q", "H"],
        help="Error correction level. Default: M",
    )
    parser.add_argument(
        "--symbol-version",
        default="auto",
        help="QR version 1-29 or 'auto' for the smallest that fits. Default: auto",
    )
    parser.add_argument(
        "--mask",
        default="0",
        help="Mask pattern 0-7 or 'auto' for penalty-based selection. Default: 0",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Output file; .svg writes SVG, other suffixes go through Pillow. "
             "Without it the symbol is printed as text",
    )
    parser.add_argument(
        "--module-size",
        type=int,
        default=8,
        help="Pixels per module. Default: 8",
    )
    parser.add_argument(
        "--margin",
        type=int,
        default=4,
        help="Quiet zone in modules. Default: 4",
    )
    parser.add_argument("--dark", default="#000000", help="Dark module color. Default: #000000")
    parser.add_argument("--light", default="#ffffff", help="Light module color. Default: #ffffff")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log encoding decisions")

    return parser


def format_text(rows: List[List[bool]], margin: int = 2) -> str:
    """Draw the matrix with block characters, two columns per module."""
    width = len(rows) + 2 * margin
    blank = [False] * width
    padded = [blank] * margin + [[False] * margin + row + [False] * margin for row in rows] + [blank] * margin
    return "\n".join("".join("██" if dark else "  " for dark in row) for row in padded)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the command line tool.

    Encodes the text, then prints it as block characters or writes it to
    the output file (SVG for a .svg suffix, any Pillow format otherwise).

    Args:
        argv (Optional[List[str]]): Arguments without the program name,
            sys.argv[1:] when None

    Returns:
        int: 0 on success, 2 when encoding or writing fails
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    # Lazy imports for faster --help
    from qr_encoder.qr_generator import make_qr
    from qr_encoder.renderer import render_image, render_svg

    mask = args.mask if args.mask == "auto" else _int_arg(parser, "--mask", args.mask)
    version = args.symbol_version if args.symbol_version == "auto" else _int_arg(
        parser, "--symbol-version", args.symbol_version)

    try:
        qr = make_qr(args.text, ecc=args.ecc, version=version, mask=mask)

        if args.output is None:
            print(format_text(qr.rows))
            return 0

        output = Path(args.output)
        if output.suffix.lower() == ".svg":
            output.write_bytes(render_svg(qr.matrix, args.module_size, args.margin, args.dark, args.light))
        else:
            img = render_image(qr.matrix, args.module_size, args.margin, args.dark, args.light)
            img.save(output)
        print(f"Version {qr.version}-{qr.level} ({qr.size}x{qr.size}), mask {qr.mask}: {output}")
        return 0

    except (ValueError, OSError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2


def _int_arg(parser: argparse.ArgumentParser, name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        parser.error(f"{name} expects an integer or 'auto', got {value!r}")


if __name__ == "__main__":
    sys.exit(main())
