from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from ..field import Bitmap, decode
from ..rendering import bitmap_to_image, bitmap_to_text

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="gfdecode: decode ^GFA graphic fields into monochrome bitmaps."
    )
    parser.add_argument("path", nargs="?", help="File holding one graphic field (default: stdin)")
    parser.add_argument("--field", metavar="TEXT", help="Decode the given field text instead of a file")
    parser.add_argument("--output", metavar="PNG", help="Write the decoded bitmap as an image")
    parser.add_argument("--preview", action="store_true", help="Print the bitmap as text")
    parser.add_argument("--verify-checksum", action="store_true", help="Verify the Z64 CRC trailer")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log decoding details")
    return parser.parse_args(argv)


def _read_field(args: argparse.Namespace) -> str:
    if args.field is not None:
        return args.field
    if args.path:
        with open(args.path, "r", encoding="ascii", errors="replace") as handle:
            return handle.read()
    return sys.stdin.read()


def write_outputs(bitmap: Bitmap, args: argparse.Namespace) -> None:
    print(f"{bitmap.width}x{bitmap.height}")
    if args.preview:
        print(bitmap_to_text(bitmap))
    if args.output:
        bitmap_to_image(bitmap).save(args.output)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format=LOG_FORMAT)
    if args.path and args.field is not None:
        print("Provide either a file path or --field, not both. Use --help for usage.", file=sys.stderr)
        return 2
    try:
        bitmap = decode(_read_field(args), verify_checksum=args.verify_checksum)
        write_outputs(bitmap, args)
    except Exception as exc:
        print(str(exc), file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
