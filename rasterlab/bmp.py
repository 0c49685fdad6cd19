"""Reading, writing and editing uncompressed 8, 24 and 32 bit BMP images."""

from __future__ import annotations

import os
from typing import Optional, Union

from rasterlab.bmp_format import (
    HEADER_SIZE,
    PALETTE_SIZE,
    BmpError,
    BmpHeader,
    BmpStatus,
)

PathLike = Union[str, "os.PathLike[str]"]


def _check_byte(name: str, value: int) -> int:
    if not 0 <= value <= 0xFF:
        raise BmpError(BmpStatus.INVALID_ARGUMENT, f"{name} out of range: {value}")
    return value


class Bitmap:
    """An in-memory BMP image: header, optional palette and pixel rows.

    Rows are stored bottom-up as in the file format; coordinates passed to
    the pixel methods count from the top-left corner.
    """

    def __init__(self, width: int, height: int, depth: int) -> None:
        header = BmpHeader.for_image(width, height, depth)
        palette = bytearray(PALETTE_SIZE) if depth == 8 else None
        self._setup(header, palette, bytearray(header.image_data_size))

    def _setup(
        self, header: BmpHeader, palette: Optional[bytearray], data: bytearray
    ) -> None:
        self.header = header
        self.palette = palette
        self.data = data

    @property
    def width(self) -> int:
        return self.header.width

    @property
    def height(self) -> int:
        return self.header.height

    @property
    def depth(self) -> int:
        return self.header.bits_per_pixel

    @classmethod
    def from_bytes(cls, data: bytes) -> Bitmap:
        """Parse a complete BMP file held in ``data``."""
        header = BmpHeader.unpack(data)
        pos = HEADER_SIZE
        palette: Optional[bytearray] = None
        if header.bits_per_pixel == 8:
            palette = bytearray(data[pos : pos + PALETTE_SIZE])
            if len(palette) != PALETTE_SIZE:
                raise BmpError(BmpStatus.FILE_INVALID, "palette is truncated")
            pos += PALETTE_SIZE
        pixels = bytearray(data[pos : pos + header.image_data_size])
        if len(pixels) != header.image_data_size:
            raise BmpError(BmpStatus.FILE_INVALID, "pixel data is truncated")
        bitmap = cls.__new__(cls)
        bitmap._setup(header, palette, pixels)
        return bitmap

    @classmethod
    def read(cls, path: PathLike) -> Bitmap:
        """Read the BMP file at ``path``."""
        try:
            with open(path, "rb") as stream:
                content = stream.read()
        except OSError as exc:
            raise BmpError(BmpStatus.FILE_NOT_FOUND, str(path)) from exc
        return cls.from_bytes(content)

    def to_bytes(self) -> bytes:
        """Serialise the image as a complete BMP file."""
        parts = [self.header.pack()]
        if self.palette is not None:
            parts.append(bytes(self.palette))
        parts.append(bytes(self.data))
        return b"".join(parts)

    def write(self, path: PathLike) -> None:
        """Write the image to ``path``."""
        content = self.to_bytes()
        try:
            stream = open(path, "wb")
        except OSError as exc:
            raise BmpError(BmpStatus.FILE_NOT_FOUND, str(path)) from exc
        with stream:
            try:
                stream.write(content)
            except OSError as exc:
                raise BmpError(BmpStatus.IO_ERROR, str(path)) from exc

    def _offset(self, x: int, y: int, bytes_per_pixel: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise BmpError(BmpStatus.INVALID_ARGUMENT, f"pixel ({x}, {y}) outside image")
        row = self.header.bytes_per_row()
        return (self.height - y - 1) * row + x * bytes_per_pixel

    def _require_indexed(self) -> bytearray:
        if self.depth != 8 or self.palette is None:
            raise BmpError(BmpStatus.TYPE_MISMATCH, "image has no palette")
        return self.palette

    def get_pixel_rgb(self, x: int, y: int) -> tuple[int, int, int]:
        """Return the (r, g, b) color of a pixel, looked up in the palette if indexed."""
        offset = self._offset(x, y, self.depth >> 3)
        source = self.data
        if self.depth == 8:
            source = self._require_indexed()
            offset = self.data[offset] * 4
        blue, green, red = source[offset : offset + 3]
        return red, green, blue

    def set_pixel_rgb(self, x: int, y: int, r: int, g: int, b: int) -> None:
        """Set a pixel of a 24 or 32 bit image."""
        offset = self._offset(x, y, self.depth >> 3)
        if self.depth not in (24, 32):
            raise BmpError(BmpStatus.TYPE_MISMATCH, "image is indexed")
        self.data[offset : offset + 3] = bytes(
            (_check_byte("b", b), _check_byte("g", g), _check_byte("r", r))
        )

    def get_pixel_index(self, x: int, y: int) -> int:
        """Return the palette index of a pixel of an 8 bit image."""
        offset = self._offset(x, y, 1)
        self._require_indexed()
        return self.data[offset]

    def set_pixel_index(self, x: int, y: int, value: int) -> None:
        """Set the palette index of a pixel of an 8 bit image."""
        offset = self._offset(x, y, 1)
        self._require_indexed()
        self.data[offset] = _check_byte("value", value)

    def get_palette_color(self, index: int) -> tuple[int, int, int]:
        """Return the (r, g, b) color stored at a palette index."""
        palette = self._require_indexed()
        base = _check_byte("index", index) * 4
        blue, green, red = palette[base : base + 3]
        return red, green, blue

    def set_palette_color(self, index: int, r: int, g: int, b: int) -> None:
        """Store an (r, g, b) color at a palette index."""
        palette = self._require_indexed()
        base = _check_byte("index", index) * 4
        palette[base : base + 3] = bytes(
            (_check_byte("b", b), _check_byte("g", g), _check_byte("r", r))
        )