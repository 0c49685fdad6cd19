"""Padded test screens and conversion between 15-bit pixels and BMP files.

A :class:`PaddedScreen` surrounds a drawable screen with white margins of
``MARGIN`` rows above and below, each bounded by a black frame row next to
the screen. Whole padded buffers can be saved to and loaded from 24-bit BMP
files, compared, and turned into a green/red difference map.
"""

from __future__ import annotations

from collections.abc import Sequence
from itertools import product
from typing import Optional

from rasterlab.bmp import Bitmap, PathLike
from rasterlab.geometry import Screen

MARGIN = 10

WHITE = 0x7FFF
BLACK = 0x0000
MATCH_COLOR = 0x1F << 5
MISMATCH_COLOR = 0x1F

_CHANNEL_MASK = 0x1F


def pixel_to_rgb(pixel: int) -> tuple[int, int, int]:
    """Expand a 15-bit BGR pixel into 8-bit (r, g, b) channels."""
    return (
        (pixel & _CHANNEL_MASK) * 255 // 31,
        ((pixel >> 5) & _CHANNEL_MASK) * 255 // 31,
        ((pixel >> 10) & _CHANNEL_MASK) * 255 // 31,
    )


def rgb_to_pixel(r: int, g: int, b: int) -> int:
    """Pack 8-bit (r, g, b) channels into a 15-bit BGR pixel."""
    return ((b >> 3) << 10) | ((g >> 3) << 5) | (r >> 3)


class PaddedScreen:
    """A screen with framed white margins above and below it."""

    def __init__(self, width: int, height: int) -> None:
        self.screen = Screen.blank(width, height, WHITE)
        self.width = width
        self.height = height
        self.buffer_width = width
        self.buffer_height = height + 2 * MARGIN
        self._top = [WHITE] * (width * (MARGIN - 1)) + [BLACK] * width
        self._bottom = [BLACK] * width + [WHITE] * (width * (MARGIN - 1))

    @property
    def buffer(self) -> list[int]:
        """The whole padded buffer: top margin, screen rows, bottom margin."""
        return self._top + self.screen.buffer + self._bottom


def load_buffer(path: PathLike, width: int, height: int) -> list[int]:
    """Read a ``width`` x ``height`` region of a BMP file as 15-bit pixels."""
    bitmap = Bitmap.read(path)
    return [
        rgb_to_pixel(*bitmap.get_pixel_rgb(x, y))
        for y, x in product(range(height), range(width))
    ]


def save_buffer(path: PathLike, buffer: Sequence[int], width: int, height: int) -> None:
    """Write a row-major buffer of 15-bit pixels as a 24-bit BMP file."""
    if len(buffer) < width * height:
        raise ValueError(
            f"buffer holds {len(buffer)} pixels, {width}x{height} needs {width * height}"
        )
    bitmap = Bitmap(width, height, 24)
    for y, x in product(range(height), range(width)):
        bitmap.set_pixel_rgb(x, y, *pixel_to_rgb(buffer[y * width + x]))
    bitmap.write(path)


def create_diff(actual: Sequence[int], expected: Sequence[int]) -> list[int]:
    """Return a buffer that is green where the pixels agree and red where not."""
    if len(actual) != len(expected):
        raise ValueError(
            f"buffers differ in length: {len(actual)} and {len(expected)}"
        )
    return [
        MATCH_COLOR if a == e else MISMATCH_COLOR for a, e in zip(actual, expected)
    ]


def first_mismatch(
    expected: Sequence[int], actual: Sequence[int], width: int, height: int
) -> Optional[tuple[int, int, int, int]]:
    """Find the first differing pixel of two padded buffers.

    The rows checked are those from ``2 * MARGIN`` up to ``height + 2 * MARGIN``
    of a buffer ``width`` pixels wide. Returns ``(row, column, expected,
    found)`` for the first difference, or ``None`` when they agree.
    """
    for row, column in product(range(2 * MARGIN, height + 2 * MARGIN), range(width)):
        index = row * width + column
        if expected[index] != actual[index]:
            return row, column, expected[index], actual[index]
    return None