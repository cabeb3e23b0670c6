#!/usr/bin/env python3
"""Pixel luminance and dark/light classification."""

import numpy as np

# Rec. 601 weights (0.299, 0.587, 0.114) in thousandths, so truncation is exact
RED_LUM = 299
GREEN_LUM = 587
BLUE_LUM = 114
LUM_SCALE = 1000

DEFAULT_THRESHOLD = 96

# Read for samples that fall outside the image
OUT_OF_BOUNDS = (255, 255, 255, 0)

_WEIGHTS = np.array([RED_LUM, GREEN_LUM, BLUE_LUM], dtype=np.uint32)


def pixel_brightness(pixel):
    """Luminance of a single RGBA pixel as an int in 0..255. Alpha is ignored."""
    r, g, b = (int(c) for c in pixel[:3])
    return (RED_LUM * r + GREEN_LUM * g + BLUE_LUM * b) // LUM_SCALE


def luminance(image):
    """
    Luminance of every pixel of an RGBA image.

    Args:
        image: PIL image in RGBA mode

    Returns:
        uint8 array of shape (height, width)
    """
    pixels = np.asarray(image, dtype=np.uint8)
    lum = pixels[:, :, :3].astype(np.uint32) @ _WEIGHTS
    return (lum // LUM_SCALE).astype(np.uint8)


def is_dark(lum, threshold=DEFAULT_THRESHOLD):
    return lum < threshold


def brightness_level(lum):
    """Bucket a luminance into one of 8 levels, 0 darkest."""
    return lum // 32
