import pytest

from rasterlab.geometry import Vector
from rasterlab.images import (
    GARBAGE,
    GARBAGE_HEIGHT,
    GARBAGE_LENGTH,
    GARBAGE_SIZE,
    GARBAGE_WIDTH,
    garbage_image,
)
from rasterlab.screenbuffer import load_buffer, save_buffer


def test_dimensions_match_header_constants():
    image = garbage_image()
    assert image.size == Vector(50, 37)
    assert len(image.buffer) == GARBAGE_LENGTH == 1850
    assert GARBAGE_SIZE == 2 * len(image.buffer) == 3700


def test_data_has_one_value_per_pixel():
    image = garbage_image()
    assert len(image.buffer) == GARBAGE_WIDTH * GARBAGE_HEIGHT


def test_all_pixels_fit_in_fifteen_bits():
    assert all(0 <= value <= 0x7FFF for value in garbage_image().buffer)


def test_image_size_and_buffer():
    image = garbage_image(Vector(3, 4))
    assert image.size == Vector(GARBAGE_WIDTH, GARBAGE_HEIGHT)
    assert image.buffer == list(GARBAGE)
    assert len(image.buffer) == image.size.x * image.size.y


@pytest.mark.parametrize("corner", [(0, 0), (5, 5), (-50, -20), (120, 80)])
def test_top_left_is_kept(corner):
    image = garbage_image(corner)
    assert image.top_left == Vector(*corner)


def test_default_top_left_is_origin():
    assert garbage_image().top_left == Vector(0, 0)


def test_buffer_is_a_private_copy():
    first = garbage_image()
    first.buffer[0] = 0
    second = garbage_image()
    assert second.buffer[0] == GARBAGE[0]
    assert GARBAGE[0] == 0x7FFF


def test_pinned_pixels():
    buffer = garbage_image().buffer
    assert buffer[-1] == 0x7FFF
    assert buffer[117] == 0x7BDF
    assert buffer[116] == 0x7FFF


def test_corners_are_white_and_middle_has_black():
    buffer = garbage_image().buffer
    w, h = GARBAGE_WIDTH, GARBAGE_HEIGHT
    corners = [buffer[0], buffer[w - 1], buffer[(h - 1) * w], buffer[h * w - 1]]
    assert corners == [0x7FFF] * 4
    assert 0x0000 in buffer


def test_bmp_round_trip(tmp_path):
    path = tmp_path / "garbage.bmp"
    image = garbage_image()
    save_buffer(path, image.buffer, image.size.x, image.size.y)
    assert load_buffer(path, image.size.x, image.size.y) == image.buffer