#!/usr/bin/env python3
"""Read image bytes from a file or stdin and decode them with Pillow."""

import io
import sys

from PIL import Image, UnidentifiedImageError

STDIN_SOURCE = "."


class DecodeError(ValueError):
    """Raised when input bytes are not a recognised image."""


def read_source(source, stdin=None):
    """
    Read all bytes of the input.

    Args:
        source: file path, or "." for standard input
        stdin: binary stream used in place of sys.stdin.buffer

    Raises:
        OSError: if the file or stream cannot be read
    """
    if source == STDIN_SOURCE:
        stream = stdin if stdin is not None else sys.stdin.buffer
        return stream.read()

    with open(source, 'rb') as f:
        return f.read()


def decode_image(data):
    """Decode image bytes of any format Pillow recognises into an RGBA image."""
    try:
        image = Image.open(io.BytesIO(data))
        image.load()
    except UnidentifiedImageError as e:
        raise DecodeError("The image format could not be determined") from e
    except Image.DecompressionBombError as e:
        raise DecodeError(f"Image is too large: {e}") from e
    except (OSError, SyntaxError) as e:
        raise DecodeError(f"Could not decode image: {e}") from e

    # Only the first frame of animated formats is used
    return image.convert('RGBA')


def load_image(source, stdin=None):
    return decode_image(read_source(source, stdin))


def fit_dimensions(width, height, size):
    """Largest (width, height) within size x size that keeps the aspect ratio."""
    ratio = min(size / width, size / height)
    return max(1, round(width * ratio)), max(1, round(height * ratio))


def resize_to_fit(image, size):
    """
    Scale image so its longer side is size pixels.

    Smaller images are scaled up. A size of 0 or None leaves the image as is.
    """
    if not size:
        return image

    new_size = fit_dimensions(image.width, image.height, size)
    if new_size == image.size:
        return image
    # RGBA resize premultiplies alpha; per-band keeps RGB under transparent pixels
    bands = [band.resize(new_size, Image.Resampling.BICUBIC) for band in image.split()]
    return Image.merge(image.mode, bands)
