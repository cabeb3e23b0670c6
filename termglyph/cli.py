#!/usr/bin/env python3
"""Command line entry point: render an image as text on stdout."""

import argparse
import sys
from dataclasses import dataclass

from termglyph import __version__
from termglyph.brightness import DEFAULT_THRESHOLD
from termglyph.loader import DecodeError, load_image, resize_to_fit
from termglyph.render import Mode, render


@dataclass(frozen=True)
class Options:
    input: str
    output: str = None
    size: int = None
    threshold: int = DEFAULT_THRESHOLD
    double: bool = False
    mode: Mode = Mode.ASCII


def size_value(value):
    try:
        size = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError("Value for size is not a valid integer")
    if size < 0:
        raise argparse.ArgumentTypeError("Value for size must not be negative")
    return size


def threshold_value(value):
    try:
        threshold = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError("Value for threshold is not a valid integer")
    if not 0 <= threshold <= 255:
        raise argparse.ArgumentTypeError("Value for threshold must be between 0 and 255")
    return threshold


def build_parser():
    parser = argparse.ArgumentParser(
        prog='termglyph',
        description='Render an image as ASCII, block or braille characters',
    )
    parser.add_argument('input', metavar='INPUT', help='Input image file, or . to read from stdin')
    # Accepted for compatibility; output always goes to stdout
    parser.add_argument('-o', '--output', metavar='FILE', help='Specify output file (unused)')
    parser.add_argument('-s', '--size', type=size_value,
                        help='Maximum dimension to resize the image to')
    parser.add_argument('-t', '--threshold', type=threshold_value, default=DEFAULT_THRESHOLD,
                        help=f'Brightness threshold 0-255 for dark pixels (default: {DEFAULT_THRESHOLD})')
    parser.add_argument('-d', '--double-width', action='store_true',
                        help='Write every character twice')
    parser.add_argument('-V', '--version', action='version', version=f'%(prog)s {__version__}')

    modes = parser.add_mutually_exclusive_group()
    modes.add_argument('-b', '--braille', action='store_true', help='Use braille instead of ASCII')
    modes.add_argument('-B', '--blocks', action='store_true', help='Use blocks instead of ASCII')
    return parser


def parse_options(parser, argv):
    args = parser.parse_args(argv)

    mode = Mode.ASCII
    if args.braille:
        mode = Mode.BRAILLE
    elif args.blocks:
        mode = Mode.BLOCKS

    return Options(
        input=args.input,
        output=args.output,
        size=args.size,
        threshold=args.threshold,
        double=args.double_width,
        mode=mode,
    )


def main(argv=None, stdin=None):
    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        parser.print_help(sys.stderr)
        return 2

    options = parse_options(parser, argv)

    try:
        image = load_image(options.input, stdin)
    except DecodeError as e:
        parser.exit(1, f"{parser.prog}: error: {e}\n")
    except OSError as e:
        parser.exit(1, f"{parser.prog}: error: {options.input}: {e.strerror or e}\n")

    image = resize_to_fit(image, options.size)
    print(render(image, options.mode, options.threshold, options.double))
    return 0


if __name__ == "__main__":
    sys.exit(main())
