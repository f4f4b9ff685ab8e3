from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

from ..bmp import write_bmp
from ..image import make_gradient
from ..rendering import load_any, show_image

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="mage", description="mage: read, show and write 32 bit BMP images.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log parsed headers and written sizes")
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")
    commands.required = True

    show = commands.add_parser("show", help="Show the image in a file")
    show.add_argument("input", help="The input file to show (.bmp/.png/.jpg/.gif)")

    convert = commands.add_parser("convert", help="Convert an image from one format to BMP")
    convert.add_argument("input", help="The image file to convert")
    convert.add_argument("-o", dest="output", required=True, help="The output file for the image")

    sample = commands.add_parser("sample", help="Write the sample gradient image")
    sample.add_argument("-o", dest="output", required=True, help="The output file for the image")
    sample.add_argument("--width", type=int, default=255, help="Image width in pixels (default: 255)")
    sample.add_argument("--height", type=int, default=200, help="Image height in pixels (default: 200)")
    return parser.parse_args(argv)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def show(args: argparse.Namespace) -> int:
    image = load_any(args.input)
    show_image(image, title=os.path.basename(args.input))
    return 0


def convert(args: argparse.Namespace) -> int:
    image = load_any(args.input)
    write_bmp(args.output, image)
    logger.info("Converted %s to %s", args.input, args.output)
    return 0


def sample(args: argparse.Namespace) -> int:
    if args.width < 0 or args.height < 0:
        print("Width and height must not be negative.", file=sys.stderr)
        return 2
    write_bmp(args.output, make_gradient(args.width, args.height))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)
    handlers = {"show": show, "convert": convert, "sample": sample}
    try:
        return handlers[args.command](args)
    except Exception as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(str(exc), file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
