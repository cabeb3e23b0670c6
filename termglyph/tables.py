#!/usr/bin/env python3
"""
Glyph lookup tables.

A cell key packs the darkness of each sample in a cell into an int, bit i
being sample i in row-major order (left to right, then top to bottom).
"""

import numpy as np

ASCII_CHARS = " .,-/O#@"

# 2x2 cell: TL, TR, BL, BR
BLOCKS = (
    " ", "▘", "▝", "▀",
    "▖", "▌", "▞", "▛",
    "▗", "▚", "▐", "▜",
    "▄", "▙", "▟", "█",
)

BRAILLE_BASE = 0x2800

# Braille dots are numbered
# 1 4
# 2 5
# 3 6
# 7 8
# so sample order (row-major, 2 wide) -> dot bit
DOT_MAP = (0, 3, 1, 4, 2, 5, 6, 7)


def cell_key(samples):
    """
    Pack darkness booleans into table keys.

    Args:
        samples: sequence or array whose last axis holds the samples of a cell

    Returns:
        int for a single cell, int array for an array of cells
    """
    samples = np.asarray(samples, dtype=np.int64)
    weights = 1 << np.arange(samples.shape[-1], dtype=np.int64)
    keys = samples @ weights
    return int(keys) if keys.ndim == 0 else keys


def _braille_char(key):
    value = 0
    for i, bit in enumerate(DOT_MAP):
        if key & (1 << i):
            value |= 1 << bit
    return chr(BRAILLE_BASE + value)


BRAILLE = tuple(_braille_char(key) for key in range(256))
