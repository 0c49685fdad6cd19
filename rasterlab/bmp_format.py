"""Header layout, status codes and errors of uncompressed BMP files."""

from __future__ import annotations

import struct
from dataclasses import astuple, dataclass
from enum import IntEnum
from typing import Optional

MAGIC = 0x4D42
HEADER_SIZE = 54
INFO_HEADER_SIZE = 40
PALETTE_SIZE = 256 * 4
SUPPORTED_DEPTHS = (8, 24, 32)

_HEADER_STRUCT = struct.Struct("<HIHHIIIIHHIIIIII")
_USHORT_FIELDS = frozenset({0, 2, 3, 8, 9})


class BmpStatus(IntEnum):
    """Outcome of a bitmap operation."""

    OK = 0
    ERROR = 1
    OUT_OF_MEMORY = 2
    IO_ERROR = 3
    FILE_NOT_FOUND = 4
    FILE_NOT_SUPPORTED = 5
    FILE_INVALID = 6
    INVALID_ARGUMENT = 7
    TYPE_MISMATCH = 8

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    BmpStatus.OK: "",
    BmpStatus.ERROR: "General error",
    BmpStatus.OUT_OF_MEMORY: "Could not allocate enough memory to complete the operation",
    BmpStatus.IO_ERROR: "File input/output error",
    BmpStatus.FILE_NOT_FOUND: "File not found",
    BmpStatus.FILE_NOT_SUPPORTED: (
        "File is not a supported BMP variant (must be uncompressed 8, 24 or 32 BPP)"
    ),
    BmpStatus.FILE_INVALID: "File is not a valid BMP image",
    BmpStatus.INVALID_ARGUMENT: "An argument is invalid or out of range",
    BmpStatus.TYPE_MISMATCH: "The requested action is not compatible with the BMP's type",
}


class BmpError(Exception):
    """Raised when a bitmap operation fails; carries a :class:`BmpStatus`."""

    def __init__(self, status: BmpStatus, message: Optional[str] = None) -> None:
        self.status = status
        text = status.description
        if message:
            text = f"{text}: {message}"
        super().__init__(text)


@dataclass
class BmpHeader:
    """The 54-byte file and info header of a BMP image."""

    magic: int
    file_size: int
    reserved1: int
    reserved2: int
    data_offset: int
    header_size: int
    width: int
    height: int
    planes: int
    bits_per_pixel: int
    compression_type: int
    image_data_size: int
    h_pixels_per_meter: int
    v_pixels_per_meter: int
    colors_used: int
    colors_required: int

    @classmethod
    def for_image(cls, width: int, height: int, depth: int) -> BmpHeader:
        """Build the header of a blank image of the given size and bit depth."""
        if width <= 0 or height <= 0:
            raise BmpError(BmpStatus.INVALID_ARGUMENT, f"size {width}x{height}")
        if depth not in SUPPORTED_DEPTHS:
            raise BmpError(BmpStatus.FILE_NOT_SUPPORTED, f"depth {depth}")

        row = width * (depth >> 3)
        row += -row % 4
        data_offset = HEADER_SIZE + (PALETTE_SIZE if depth == 8 else 0)
        image_data_size = row * height
        return cls(
            magic=MAGIC,
            file_size=image_data_size + data_offset,
            reserved1=0,
            reserved2=0,
            data_offset=data_offset,
            header_size=INFO_HEADER_SIZE,
            width=width,
            height=height,
            planes=1,
            bits_per_pixel=depth,
            compression_type=0,
            image_data_size=image_data_size,
            h_pixels_per_meter=0,
            v_pixels_per_meter=0,
            colors_used=0,
            colors_required=0,
        )

    @classmethod
    def unpack(cls, data: bytes) -> BmpHeader:
        """Parse and check the header at the start of ``data``.

        Raises :class:`BmpError` with ``FILE_INVALID`` for a truncated or
        non-BMP header and ``FILE_NOT_SUPPORTED`` for variants other than
        uncompressed 8, 24 or 32 bits per pixel.
        """
        if len(data) < HEADER_SIZE:
            raise BmpError(BmpStatus.FILE_INVALID, "header is truncated")
        header = cls(*_HEADER_STRUCT.unpack_from(data))
        if header.magic != MAGIC:
            raise BmpError(BmpStatus.FILE_INVALID, f"bad magic {header.magic:#06x}")
        if (
            header.bits_per_pixel not in SUPPORTED_DEPTHS
            or header.compression_type != 0
            or header.header_size != INFO_HEADER_SIZE
        ):
            raise BmpError(BmpStatus.FILE_NOT_SUPPORTED)
        return header

    def pack(self) -> bytes:
        """Serialise the header as 54 little-endian bytes."""
        values = (
            value & (0xFFFF if i in _USHORT_FIELDS else 0xFFFFFFFF)
            for i, value in enumerate(astuple(self))
        )
        return _HEADER_STRUCT.pack(*values)

    def bytes_per_row(self) -> int:
        """Bytes taken by one stored row, padding included."""
        if self.height <= 0:
            raise BmpError(BmpStatus.INVALID_ARGUMENT, "image has no rows")
        return self.image_data_size // self.height