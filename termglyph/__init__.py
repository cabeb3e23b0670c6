"""Render images as ASCII, block or braille text."""

__version__ = "0.1.0"
