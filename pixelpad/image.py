"""In-memory RGBA images and the instances that place them on screen."""

from __future__ import annotations

from dataclasses import dataclass

_CHANNEL_MASK = 0xFF
_COLOR_MASK = 0xFFFFFFFF
BYTES_PER_PIXEL = 4


def pixel(r: int, g: int, b: int, a: int) -> int:
    """Pack four 8-bit channels into one 32-bit RGBA colour value."""
    color = (r << 24) | (g << 16) | (b << 8) | a
    return color & _COLOR_MASK


@dataclass
class Instance:
    """A placement of an image: top-left position, depth and visibility."""

    x: int
    y: int
    z: int = 0
    enabled: bool = True


class Image:
    """A fixed-size pixel buffer stored as RGBA bytes, row by row.

    Every instance of the image shares this one buffer.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid image dimensions {width}x{height}")
        self._width = width
        self._height = height
        self.pixels = bytearray(width * height * BYTES_PER_PIXEL)
        self.instances: list[Instance] = []
        self.enabled = True

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def __repr__(self) -> str:
        return (
            f"Image(width={self._width}, height={self._height}, "
            f"instances={len(self.instances)}, enabled={self.enabled})"
        )

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(
                f"pixel ({x}, {y}) outside image of {self._width}x{self._height}"
            )
        return (y * self._width + x) * BYTES_PER_PIXEL

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Write a 32-bit RGBA colour at (x, y)."""
        offset = self._offset(x, y)
        color &= _COLOR_MASK
        self.pixels[offset:offset + BYTES_PER_PIXEL] = color.to_bytes(
            BYTES_PER_PIXEL, "big"
        )

    def get_pixel(self, x: int, y: int) -> int:
        """Read the 32-bit RGBA colour at (x, y)."""
        offset = self._offset(x, y)
        return int.from_bytes(self.pixels[offset:offset + BYTES_PER_PIXEL], "big")

    def add_instance(self, x: int, y: int) -> int:
        """Place a new instance of the image at (x, y) and return its index."""
        self.instances.append(Instance(x, y))
        return len(self.instances) - 1