"""Detect bitwise transformations behind a BMP image from additive masking clues."""

__version__ = "0.1.0"