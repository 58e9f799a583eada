import pytest

from solong.pixels import LSB_FIRST, MSB_FIRST, Image, PixelFormat

IM1_SX = 42
IM1_SY = 42
IM3_SX = 242
IM3_SY = 242

TRUE_COLOR = PixelFormat.from_masks(0xFF0000, 0x00FF00, 0x0000FF, 24)


def _color_map(x, y, w, h, kind):
    if kind == 2:
        return (y * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


@pytest.mark.parametrize("size,kind", [((IM1_SX, IM1_SY), 1), ((IM3_SX, IM3_SY), 1),
                                       ((IM3_SX, IM3_SY), 2)])
def test_color_map_fill_reads_back(size, kind):
    w, h = size
    img = Image(w, h)
    for y in range(h):
        for x in range(w):
            img.set_pixel(x, y, TRUE_COLOR.convert(_color_map(x, y, w, h, kind)))
    for y in range(0, h, 7):
        for x in range(0, w, 5):
            assert img.get_pixel(x, y) == _color_map(x, y, w, h, kind)


def test_image_geometry():
    img = Image(IM1_SX, IM1_SY)
    assert img.bits_per_pixel == 32
    assert img.size_line == IM1_SX * 4
    assert len(img.data) == img.size_line * IM1_SY


def test_little_endian_layout():
    img = Image(IM1_SX, IM1_SY, byte_order=LSB_FIRST)
    img.set_pixel(0, 0, _color_map(0, 0, IM1_SX, IM1_SY, 1))
    assert bytes(img.data[0:4]) == b"\x00\x00\xff\x00"


def test_big_endian_layout():
    img = Image(IM1_SX, IM1_SY, byte_order=MSB_FIRST)
    img.set_pixel(0, 0, 0xFF0000)
    assert bytes(img.data[0:4]) == b"\x00\xff\x00\x00"
    assert img.get_pixel(0, 0) == 0xFF0000


def test_row_offset_uses_size_line():
    img = Image(3, 2)
    img.set_pixel(0, 1, 0x010203)
    assert bytes(img.data[img.size_line:img.size_line + 4]) == b"\x03\x02\x01\x00"


def test_negative_color_is_truncated():
    img = Image(1, 1)
    img.set_pixel(0, 0, -1)
    assert img.get_pixel(0, 0) == 0xFFFFFFFF


def test_out_of_range_pixel():
    img = Image(4, 4)
    with pytest.raises(IndexError):
        img.set_pixel(4, 0, 0)
    with pytest.raises(IndexError):
        img.get_pixel(0, -1)


@pytest.mark.parametrize("w,h", [(0, 5), (5, 0), (-1, 3)])
def test_invalid_size(w, h):
    with pytest.raises(ValueError):
        Image(w, h)


def test_true_color_masks():
    assert (TRUE_COLOR.red_shift, TRUE_COLOR.red_bits) == (16, 8)
    assert (TRUE_COLOR.green_shift, TRUE_COLOR.green_bits) == (8, 8)
    assert (TRUE_COLOR.blue_shift, TRUE_COLOR.blue_bits) == (0, 8)


def test_deep_visual_keeps_color():
    assert TRUE_COLOR.convert(0xFF99FF) == 0xFF99FF
    assert TRUE_COLOR.convert(0x00FFFF) == 0x00FFFF


def test_rgb565_conversion():
    fmt = PixelFormat.from_masks(0xF800, 0x07E0, 0x001F, 16)
    assert fmt.convert(0xFFFFFF) == 0xFFFF
    assert fmt.convert(0xFF0000) == 0xF800
    assert fmt.convert(0x00FF00) == 0x07E0
    assert fmt.convert(0x0000FF) == 0x001F
    assert fmt.convert(0) == 0


def test_zero_mask_rejected():
    with pytest.raises(ValueError):
        PixelFormat.from_masks(0, 0xFF00, 0xFF, 24)