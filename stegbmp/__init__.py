"""Hide a text file in the least significant bits of a BMP image and recover it."""

__version__ = "0.1.0"