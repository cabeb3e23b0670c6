#!/usr/bin/env python3
"""
Rasterize an RGBA image into lines of glyphs.

Block and braille modes scan the image in fixed-size cells. Cells that run
past the right or bottom edge read the missing pixels as transparent white,
so they are always light.
"""

from enum import Enum

import numpy as np

from termglyph.brightness import (
    DEFAULT_THRESHOLD,
    OUT_OF_BOUNDS,
    brightness_level,
    is_dark,
    luminance,
    pixel_brightness,
)
from termglyph.tables import ASCII_CHARS, BLOCKS, BRAILLE, cell_key


class Mode(Enum):
    ASCII = "ascii"
    BLOCKS = "blocks"
    BRAILLE = "braille"


# (width, height) of one cell in pixels
CELL_SIZES = {
    Mode.BLOCKS: (2, 2),
    Mode.BRAILLE: (2, 4),
}


def cell_keys(image, threshold, cell_width, cell_height):
    """
    Compute the lookup key of every cell in the image.

    Args:
        image: PIL image in RGBA mode
        threshold: luminance below which a pixel counts as dark
        cell_width: cell width in pixels
        cell_height: cell height in pixels

    Returns:
        int array of shape (rows, cols), rows = ceil(height / cell_height)
        and cols = ceil(width / cell_width)
    """
    lum = luminance(image)
    height, width = lum.shape
    rows = -(-height // cell_height)
    cols = -(-width // cell_width)

    padded = np.full(
        (rows * cell_height, cols * cell_width),
        pixel_brightness(OUT_OF_BOUNDS),
        dtype=np.uint8,
    )
    padded[:height, :width] = lum

    dark = is_dark(padded, threshold)
    # (rows, ch, cols, cw) -> (rows, cols, ch * cw) with samples row-major
    cells = dark.reshape(rows, cell_height, cols, cell_width)
    cells = cells.transpose(0, 2, 1, 3).reshape(rows, cols, cell_height * cell_width)
    return cell_key(cells)


def _emit(glyph_rows, double):
    out = []
    for row in glyph_rows:
        for ch in row:
            if double:
                out.append(ch)
            out.append(ch)
        out.append("\n")
    return "".join(out)


def _to_cells(image, table, mode, threshold, double):
    cell_width, cell_height = CELL_SIZES[mode]
    keys = cell_keys(image, threshold, cell_width, cell_height)
    return _emit(([table[k] for k in row] for row in keys.tolist()), double)


def to_ascii(image, double=False):
    """One glyph per pixel, denser glyphs for darker pixels."""
    levels = brightness_level(luminance(image))
    last = len(ASCII_CHARS) - 1
    return _emit(([ASCII_CHARS[last - level] for level in row] for row in levels.tolist()), double)


def to_blocks(image, threshold=DEFAULT_THRESHOLD, double=False):
    """One quadrant block glyph per 2x2 cell."""
    return _to_cells(image, BLOCKS, Mode.BLOCKS, threshold, double)


def to_braille(image, threshold=DEFAULT_THRESHOLD, double=False):
    """One braille glyph per 2x4 cell."""
    return _to_cells(image, BRAILLE, Mode.BRAILLE, threshold, double)


def render(image, mode=Mode.ASCII, threshold=DEFAULT_THRESHOLD, double=False):
    if mode is Mode.BRAILLE:
        return to_braille(image, threshold, double)
    if mode is Mode.BLOCKS:
        return to_blocks(image, threshold, double)
    return to_ascii(image, double)
