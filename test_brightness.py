#!/usr/bin/env python3
"""Luminance and classification tests."""

import numpy as np
from PIL import Image

from termglyph.brightness import (
    DEFAULT_THRESHOLD,
    OUT_OF_BOUNDS,
    brightness_level,
    is_dark,
    luminance,
    pixel_brightness,
)


def test_pixel_brightness():
    assert pixel_brightness((255, 0, 0, 255)) == 76
    assert pixel_brightness((0, 255, 0, 255)) == 149
    assert pixel_brightness((0, 0, 255, 255)) == 29
    assert pixel_brightness((255, 255, 255, 255)) == 255
    assert pixel_brightness((0, 0, 0, 255)) == 0


def test_alpha_is_ignored():
    assert pixel_brightness((10, 20, 30, 0)) == pixel_brightness((10, 20, 30, 255))


def test_out_of_bounds_is_light_for_every_threshold():
    lum = pixel_brightness(OUT_OF_BOUNDS)
    assert lum == 255
    assert not any(is_dark(lum, t) for t in range(256))


def test_luminance_matches_single_pixel():
    pixels = [
        [(255, 0, 0, 255), (12, 200, 77, 255)],
        [(0, 0, 0, 0), (255, 255, 255, 255)],
        [(128, 128, 128, 255), (3, 250, 9, 17)],
    ]
    image = Image.fromarray(np.array(pixels, dtype=np.uint8))

    lum = luminance(image)

    assert lum.shape == (3, 2)
    assert lum.dtype == np.uint8
    for y, row in enumerate(pixels):
        for x, pixel in enumerate(row):
            assert lum[y, x] == pixel_brightness(pixel)


def test_is_dark_is_strict():
    assert DEFAULT_THRESHOLD == 96
    assert is_dark(95)
    assert not is_dark(96)
    assert not is_dark(0, 0)
    assert list(is_dark(np.array([10, 96, 200]), 100)) == [True, True, False]


def test_brightness_level():
    assert brightness_level(0) == 0
    assert brightness_level(31) == 0
    assert brightness_level(32) == 1
    assert brightness_level(76) == 2
    assert brightness_level(255) == 7
