"""Bundled 15-bit images, stored row-major."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import repeat

from rasterlab.geometry import Image, Vector

GARBAGE_WIDTH = 50
GARBAGE_HEIGHT = 37
GARBAGE_LENGTH = GARBAGE_WIDTH * GARBAGE_HEIGHT
GARBAGE_SIZE = GARBAGE_LENGTH * 2

# Run-length encoded pixels: each token is a hex colour, optionally "*count".
_GARBAGE_RUNS = """
7fff*117 7bdf 739f 6b5e 5efe 529d 4e7d*2 4a5d*2 4e7d*2 529d 5ade 673e 739f 7bdf
7fff*31 739f 5ade 463d 3ddc 35bc 3ddd 461d 4a5d 527e 569e 56be*2 569e 527e 4a5d
463d 3dfd 35bc 39dc 463d 56be 6f7f 7bdf 7fff*24 739f 5ade 421d 35bc 421d 569e
631e 6f7d 6b5b 6739 6318 5ad6 56b4 5293*2 56b4 5ad6 6318 673a 6b5c 6f7d 673e
56be 463d 35bc 3dfc 56bd 6f7f 7fff*20 6b5f 4a5d 39dc 461d 5add 673c 5ef7 4a52
35ac 2528 14a5 0842 0421*2 0000*4 0421*2 0c63 18c6 2529 39ce 5293 6319 6f7d
62fe 463d 39bc 463d 6b3e 7fff*16 739f 4a5d 39bc 4e7d 631c 5ad6 39ce 18c6 0842
0000*18 0c63 2108 4210 6319 6f5e 529e 39bc 463d 6f7f 7fff*13 5efe 35bc 4a5d
6b5d 5294 2108 0841 0000*24 0c63 318b 6318 739e 4e7d 35bc 5ade 7fff*10 7bdf
4e5d 39bc 631e 5ef7 2529 0421 0000*13 0421*3 0000*12 0842 35ad 6b5a 673e 39bc
4a5d 7bdf 7fff*7 77bf 421d*2 6b5d 4210 0c63 0000*10 0842 1ce7 318c 4631 56b5
5ad6*2 56b5 4a52 35ad 1ce7 0842 0000*10 18c6 56b5 737e 421d 461d 77bf 7fff*5
7bdf 421d 463d 6b5c 318b 0000*10 0c63 35ad 5ef7 77bd 7fff*8 739c 5ef7 318c 0842
0000*9 0842 4631 739e 461d 463d 7bdf 7fff*4 4e7d 421d 6f7d 2d6b 0000*10 2108
6318 7fff*14 5ef7 1ce7 0000*9 0421 4210 739e 3ddc 569d 7fff*3 673e 35bc 6f7e
3def 0000*10 294a 6f7b 7fff*16 6f7b 2529 0421*9 0842 5294 6b5e 359c 6b5f 7fff
7bdf 421d 5abe 5ad6 0842 0000*9 1ce7 6f7b 7fff*18 739c 56b5*9 5294 6318 7fff
527d 421d 7fff 6b5e 39dc 6f7d 2529 0000*9 0421 5294 7fff*32 739f 35bc 6b5f 529d
4a5d 6318 0c63 0000*9 1ce7 739c 7fff*33 463d 529d 421d 56be 5293 0000*10 318c
7fff*6 6739 2d6b*25 318c 6b5a 56be 461d 3ddc 5ede 4a52 0000*10 3def 7fff*6 56b5
0000*26 56b5 5efe 3dfc*2 5ade 5293 0000*10 39ce 7fff*6 56b5 0421 0000*24 0421
5ef6 5ade 3dfd 4a5d 527e 6318 0842 0000*9 2529 77bd 7fff*5 56b5 0421 0000*24
0c63 6b5a 4e7d 4a5d 5efe 3dfd 739d 2108 0000*9 0842 5ef7 7fff*5 6b5a 3def
39ce*13 1ce7 0000*10 2529 739d 3ddc 5efe 779f 39dc 6b5f 5294 0421 0000*9 294a
77bd 7fff*18 739c 2108 0000*9 0421 4e73 62fe 39dc 7bbf 7fff 529d 461d 77be 2d6b
0000*10 39ce 77bd 7fff*16 77bd 318c 0000*10 2529 6f7c 39dc 5ede 7fff*2 77bf 39dc
5efe 6f7b 1ce7 0000*10 2d6b 6f7b 7fff*14 6f7b 318c 0000*10 1084 6318 4e7d 421d
7fdf 7fff*3 673e 359c 673e 6318 18c6 0000*10 14a5 4a52 6f7b 7fff*10 739c 4e73
18c6 0000*10 1084 5ad6 56be 39bc 739f 7fff*5 5efe 359c 631e 6739 2529 0000*11
14a5 318c 4a52 5ef7 6739 6b5a*2 6739 5ef7 4e73 35ad 18c6 0000*11 1ce7 5ef7 56be
35bc 6b5e 7fff*7 631e 35bc 56be 6f7c 4210 0c63 0000*12 0421 0c63 1084*2 0c63
0842 0000*12 0842 35ad 673b 4a5d 39dc 6f5f 7fff*9 6f5f 3ddc 41fd 6b5e 6739 35ac
0c63 0000*26 0421 294a 5ad7 631d 39dc 463d 77bf 7fff*11 7bdf 529d 35bc 4e5d 6b5e
6319 3def 1ce7 0842 0000*20 0421 14a5 35ac 5ad6 631d 463d 35bc 5ade 7fff*15 6f7f
4e5d 39bc 463d 5efe 6b5c 5ef7 4631 2d6a 18c6 0c63 0421 0000*11 0841 14a4 2108
39ce 5295 631a 5add 461d 39dc 527d 739f 7fff*18 739f 56be 3dfc 39dc 463d 5ade
6b5d 6f7c 6319 5ad6 4e73 420f 35ad 318b 2d6a 294a 2d6b 318c 39ce 4631 56b4 5ef7
673a 673d 5add 463d 39dc 41fd 5ade 739f 7fff*22 7bdf 6f7f 56bd 421d 39bc*2 461d
527e 5ade 631e 673e 6b5e*4 673e 62fe 5ade 527e 463d 39dc 39bc 421d 56be 6f7f
7fff*29 77bf 6b5f 5ade 4e7d 463d 421d 3dfc 39dc*4 3dfc 421d 463d 4e5d 5ade 6b5e
77bf 7fff*38 7bdf*2 77bf*2 7bdf*2 7fff*172
"""


def _expand_runs(text: str) -> Iterator[int]:
    """Yield pixel values from a whitespace-separated run-length listing."""
    for token in text.split():
        value, _, count = token.partition("*")
        yield from repeat(int(value, 16), int(count) if count else 1)


def _decode(text: str, length: int) -> tuple[int, ...]:
    pixels = tuple(_expand_runs(text))
    if len(pixels) != length:
        raise ValueError(f"expected {length} pixels, decoded {len(pixels)}")
    return pixels


GARBAGE: tuple[int, ...] = _decode(_GARBAGE_RUNS, GARBAGE_LENGTH)


def garbage_image(top_left: Vector = Vector(0, 0)) -> Image:
    """Return the 50x37 garbage picture placed at ``top_left``.

    The image gets its own copy of the pixels, so it may be edited freely.
    """
    return Image(
        Vector(*top_left),
        Vector(GARBAGE_WIDTH, GARBAGE_HEIGHT),
        list(GARBAGE),
    )