"""Read 24-bit BMP images, apply a chain of filters and write them back."""

__version__ = "0.1.0"