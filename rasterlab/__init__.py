"""15-bit pixel buffers and shape types, a BMP reader and writer, and a binary search tree."""

__version__ = "0.1.0"
__all__ = ["bmp", "bmp_format", "bst", "geometry", "images", "screenbuffer"]