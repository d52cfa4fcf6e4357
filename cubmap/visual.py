"""Conversion of 0xRRGGBB colours to pixel values for a TrueColor visual."""

from __future__ import annotations

_TRUE_COLOR_DEPTH = 24


def _mask_shift(mask: int) -> tuple[int, int]:
    """Return (offset, width) of the contiguous run of set bits in ``mask``."""
    if mask <= 0:
        raise ValueError(f"colour mask must be a positive bit mask, got {mask!r}")
    offset = (mask & -mask).bit_length() - 1
    mask >>= offset
    width = 0
    while mask & 1:
        mask >>= 1
        width += 1
    return offset, width


def rgb_shifts(red_mask: int, green_mask: int, blue_mask: int) -> tuple[int, ...]:
    """Return the six shifts (offset, width for red, green and blue) of a visual.

    Each mask is read from its lowest set bit: the offset counts the zero
    bits below it and the width counts the run of set bits that follows.
    """
    shifts: list[int] = []
    for mask in (red_mask, green_mask, blue_mask):
        shifts.extend(_mask_shift(mask))
    return tuple(shifts)


def good_color(color: int, depth: int, shifts: tuple[int, ...]) -> int:
    """Convert 0xRRGGBB to a pixel value for a visual of the given depth.

    At a depth of 24 bits or more the colour is used as is; below that each
    channel is scaled down to its mask width and moved to its offset.
    """
    if depth >= _TRUE_COLOR_DEPTH:
        return color
    if len(shifts) != 6:
        raise ValueError("shifts must hold six values")
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    red_off, red_width, green_off, green_width, blue_off, blue_width = shifts
    return (
        ((red >> (16 - red_width)) << red_off)
        + ((green >> (16 - green_width)) << green_off)
        + ((blue >> (16 - blue_width)) << blue_off)
    )