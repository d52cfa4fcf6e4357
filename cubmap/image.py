"""In-memory pixel image with a raw byte buffer in a chosen byte order."""

from __future__ import annotations

_BITMAP_PAD = 32
_ROW_SLACK = 32


class Image:
    """A width x height image of ``bpp`` bits per pixel.

    Rows are ``size_line`` bytes apart, padded to 32 bits; ``endian`` is 0
    for little-endian pixels and 1 for big-endian ones.
    """

    def __init__(self, width: int, height: int, bpp: int = 32, endian: int = 0):
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        if bpp not in (8, 16, 24, 32):
            raise ValueError(f"unsupported bits per pixel: {bpp}")
        if endian not in (0, 1):
            raise ValueError(f"endian must be 0 or 1, got {endian}")
        self.width = width
        self.height = height
        self.bpp = bpp
        self.endian = endian
        self.size_line = (width * bpp + _BITMAP_PAD - 1) // _BITMAP_PAD * (_BITMAP_PAD // 8)
        self.data = bytearray(max(self.size_line, (width + _ROW_SLACK) * 4) * height)

    @property
    def opp(self) -> int:
        """Bytes per pixel."""
        return self.bpp // 8

    def _offset(self, row: int, x: int) -> int:
        if not 0 <= x < self.width or not 0 <= row < self.height:
            raise IndexError(f"pixel ({x}, {row}) outside {self.width}x{self.height} image")
        return row * self.size_line + x * self.opp

    @property
    def _byteorder(self) -> str:
        return "big" if self.endian else "little"

    def set_row_pixel(self, row: int, x: int, color: int) -> None:
        """Store the low ``opp`` bytes of ``color`` as pixel ``x`` of ``row``."""
        start = self._offset(row, x)
        opp = self.opp
        value = color & ((1 << (8 * opp)) - 1)
        self.data[start:start + opp] = value.to_bytes(opp, self._byteorder)

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` at column ``x``, row ``y``."""
        self.set_row_pixel(y, x, color)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel value stored at column ``x``, row ``y``."""
        start = self._offset(y, x)
        return int.from_bytes(self.data[start:start + self.opp], self._byteorder)