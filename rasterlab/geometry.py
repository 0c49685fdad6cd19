"""Geometric objects that can be drawn onto a 16-bit pixel screen."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple

PIXEL_MAX = 0xFFFF


class Vector(NamedTuple):
    """A pair of integer coordinates, or a (width, height) size."""

    x: int
    y: int


@dataclass
class Screen:
    """A drawable surface: its size and a row-major pixel buffer."""

    size: Vector
    buffer: list[int] = field(default_factory=list)

    @classmethod
    def blank(cls, width: int, height: int, color: int = 0) -> Screen:
        """Create a screen of the given size with every pixel set to ``color``."""
        if width < 0 or height < 0:
            raise ValueError(f"screen size must not be negative: {width}x{height}")
        if not 0 <= color <= PIXEL_MAX:
            raise ValueError(f"pixel value out of range: {color:#x}")
        return cls(Vector(width, height), [color] * (width * height))


@dataclass
class Circle:
    """A circle given by its center, radius and color."""

    center: Vector
    radius: int
    color: int


@dataclass
class Line:
    """A line segment from ``start`` to ``end``."""

    start: Vector
    end: Vector
    color: int


@dataclass
class Rectangle:
    """An axis-aligned rectangle given by its top-left corner and size."""

    top_left: Vector
    size: Vector
    color: int


@dataclass
class Polygon:
    """A closed polygon given by its vertices and perimeter color."""

    vertices: tuple[Vector, ...]
    color: int

    def __post_init__(self) -> None:
        self.vertices = tuple(Vector(*v) for v in self.vertices)

    @property
    def num_vertices(self) -> int:
        return len(self.vertices)


@dataclass
class Image:
    """An image placed at ``top_left`` with a row-major pixel buffer."""

    top_left: Vector
    size: Vector
    buffer: list[int]