# rasterlab

Small building blocks for working with 15-bit (BGR555) pixel buffers, plus
a reader and writer for uncompressed BMP files and a plain integer binary
search tree. There are no third-party dependencies.

## Modules

- `rasterlab.geometry` holds the data types a drawing is described with:
  `Vector` (a named tuple of `x`, `y`), `Screen`, `Circle`, `Line`,
  `Rectangle`, `Polygon` and `Image`. Buffers are row-major lists of
  pixel values. `Screen.blank(width, height, color=0)` makes a screen with
  every pixel set to one colour; it raises `ValueError` for a negative size
  or a colour outside 0..0xFFFF. `Polygon.num_vertices` gives the vertex
  count.
- `rasterlab.bmp` reads and writes uncompressed 8, 24 and 32 bits-per-pixel
  BMP files through the `Bitmap` class: `Bitmap(width, height, depth)`,
  `Bitmap.read(path)`, `Bitmap.from_bytes(data)`, `to_bytes()`,
  `write(path)`, `get_pixel_rgb` / `set_pixel_rgb`, and for 8-bit images
  `get_pixel_index` / `set_pixel_index` and `get_palette_color` /
  `set_palette_color`. Coordinates count from the top-left corner.
- `rasterlab.bmp_format` holds the 54-byte header (`BmpHeader`, with
  `for_image`, `unpack`, `pack` and `bytes_per_row`), the status codes
  (`BmpStatus`, each with a `description`) and the error type `BmpError`.
- `rasterlab.screenbuffer` converts between 15-bit pixels and 8-bit RGB
  (`pixel_to_rgb`, `rgb_to_pixel`), saves and loads pixel buffers as 24-bit
  BMP files (`save_buffer`, `load_buffer`), and compares buffers:
  `create_diff(actual, expected)` returns a buffer that is green where the
  pixels agree and red where they differ, and
  `first_mismatch(expected, actual, width, height)` returns
  `(row, column, expected, found)` for the first differing pixel in the
  rows `2 * MARGIN` to `height + 2 * MARGIN`, or `None`.
  `PaddedScreen(width, height)` wraps a white `Screen` with `MARGIN` (10)
  white rows above and below, the row next to the screen on each side
  being black; its `buffer` property returns the whole padded buffer.
- `rasterlab.images` provides a bundled 50x37 sample picture through
  `garbage_image(top_left)`, which returns an `Image` with its own copy of
  the pixels.
- `rasterlab.bst` is a binary search tree of integers with `Node`,
  `add(node, data)` (returns the subtree root; duplicates are ignored) and
  `contains(node, data)`.

## Installing

```
pip install .
```

Run the tests with:

```
pip install .[test]
pytest
```

## Example

```python
from rasterlab.bmp import Bitmap
from rasterlab.screenbuffer import save_buffer, load_buffer, pixel_to_rgb

bmp = Bitmap(2, 1, 24)
bmp.set_pixel_rgb(0, 0, 255, 0, 0)
bmp.write("red.bmp")
print(Bitmap.read("red.bmp").get_pixel_rgb(0, 0))   # (255, 0, 0)

save_buffer("tiny.bmp", [0x001F, 0x7C00], 2, 1)
print(load_buffer("tiny.bmp", 2, 1))                 # [31, 31744]
print(pixel_to_rgb(0x7FFF))                          # (255, 255, 255)
```

Errors while reading, writing or editing bitmaps raise `BmpError`; its
`status` attribute is a `BmpStatus` telling what went wrong.

```python
from rasterlab import bst

root = None
for value in (5, 2, 8, 4):
    root = bst.add(root, value)
print(bst.contains(root, 4), bst.contains(root, 3))  # True False
```

## What it does not do

The shape types in `rasterlab.geometry` only describe shapes; the package
has no functions that draw lines, rectangles, circles, polygons or images
onto a `Screen`, no colour filters and no image rotation. Pixels are
written by assigning into a screen's `buffer` directly. There is no
command-line tool and no display window.