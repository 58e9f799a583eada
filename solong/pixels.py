"""Pixel formats and in-memory images with a fixed byte layout."""

from __future__ import annotations

from dataclasses import dataclass, field

LSB_FIRST = 0
MSB_FIRST = 1


def _mask_shape(mask: int) -> tuple[int, int]:
    """Return (shift, width) of the contiguous run of set bits in a mask."""
    if mask <= 0:
        raise ValueError(f"colour mask must be a positive integer, got {mask!r}")
    shift = (mask & -mask).bit_length() - 1
    run = mask >> shift
    width = (~run & (run + 1)).bit_length() - 1
    return shift, width


def _scale(channel16: int, bits: int) -> int:
    """Reduce a 16-bit channel value to ``bits`` bits."""
    if bits <= 16:
        return channel16 >> (16 - bits)
    return channel16 << (bits - 16)


@dataclass(frozen=True)
class PixelFormat:
    """How 0xRRGGBB colours are packed into pixel values of a visual."""

    depth: int
    red_shift: int
    red_bits: int
    green_shift: int
    green_bits: int
    blue_shift: int
    blue_bits: int

    @classmethod
    def from_masks(cls, red_mask, green_mask, blue_mask, depth):
        """Build a format from the channel masks of a true-colour visual."""
        red_shift, red_bits = _mask_shape(red_mask)
        green_shift, green_bits = _mask_shape(green_mask)
        blue_shift, blue_bits = _mask_shape(blue_mask)
        return cls(depth, red_shift, red_bits, green_shift, green_bits,
                   blue_shift, blue_bits)

    def convert(self, color):
        """Turn a 0xRRGGBB colour into the pixel value of this format.

        Visuals of depth 24 or more take the colour unchanged.
        """
        if self.depth >= 24:
            return color
        red = (color >> 8) & 0xFF00
        green = color & 0xFF00
        blue = (color << 8) & 0xFF00
        return ((_scale(red, self.red_bits) << self.red_shift)
                + (_scale(green, self.green_bits) << self.green_shift)
                + (_scale(blue, self.blue_bits) << self.blue_shift))


@dataclass
class Image:
    """A width x height pixel buffer, rows padded to 32 bits."""

    width: int
    height: int
    bits_per_pixel: int = 32
    byte_order: int = LSB_FIRST
    size_line: int = field(init=False)
    data: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"image size must be positive, got {self.width}x{self.height}")
        if self.bits_per_pixel <= 0 or self.bits_per_pixel % 8:
            raise ValueError(f"unsupported bits per pixel: {self.bits_per_pixel}")
        if self.byte_order not in (LSB_FIRST, MSB_FIRST):
            raise ValueError(f"byte order must be 0 or 1, got {self.byte_order}")
        self.size_line = ((self.width * self.bits_per_pixel + 31) // 32) * 4
        self.data = bytearray(self.size_line * self.height)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.size_line + x * self.bytes_per_pixel

    def set_pixel(self, x, y, color):
        """Store the low bytes of ``color`` at (x, y) in the image's byte order."""
        opp = self.bytes_per_pixel
        value = color & ((1 << (8 * opp)) - 1)
        order = "big" if self.byte_order == MSB_FIRST else "little"
        start = self._offset(x, y)
        self.data[start:start + opp] = value.to_bytes(opp, order)

    def get_pixel(self, x, y):
        """Return the unsigned pixel value stored at (x, y)."""
        opp = self.bytes_per_pixel
        order = "big" if self.byte_order == MSB_FIRST else "little"
        start = self._offset(x, y)
        return int.from_bytes(self.data[start:start + opp], order)