# -*- coding: utf-8 -*-
from typing import NamedTuple

import numpy as np


# --- Packed Color ---
class RGB(NamedTuple):
    """8-bit color. Packs to 0x00RRGGBB, the only format the window accepts."""
    r: int
    g: int
    b: int

    def pack(self) -> int:
        return ((self.r & 0xFF) << 16) | ((self.g & 0xFF) << 8) | (self.b & 0xFF)

    @classmethod
    def unpack(cls, value: int) -> "RGB":
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    def to_rgba(self) -> tuple:
        return (self.r, self.g, self.b, 255)


def as_packed(color) -> int:
    return color.pack() if isinstance(color, RGB) else int(color) & 0xFFFFFF


def pack_rgb_array(rgb: np.ndarray) -> np.ndarray:
    """Packs the first three channels of an (..., C) uint8 array into uint32."""
    rgb = rgb.astype(np.uint32, copy=False)
    return (rgb[..., 0] << 16) | (rgb[..., 1] << 8) | rgb[..., 2]
# --------------------


class RasterBuffer:
    """Fixed-size framebuffer of packed colors, row-major, shape (height, width).

    Every write clips against the buffer; a coordinate outside it (negative
    included) is ignored rather than reported.
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0: raise ValueError(f"Invalid raster size: {width}x{height}")
        self.width = width; self.height = height
        self.pixels = np.zeros((height, width), dtype=np.uint32)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def clear(self):
        self.pixels.fill(0)

    def set_pixel(self, x: int, y: int, color):
        if self.in_bounds(x, y): self.pixels[y, x] = as_packed(color)

    def add_pixel(self, x: int, y: int, color):
        if self.in_bounds(x, y): self.pixels[y, x] |= np.uint32(as_packed(color))

    def get_pixel(self, x: int, y: int) -> int:
        return int(self.pixels[y, x]) if self.in_bounds(x, y) else 0

    def add_block(self, x: int, y: int, w: int, h: int, color):
        """ORs color into the w x h rectangle whose top-left corner is (x, y)."""
        x0 = max(x, 0); x1 = min(x + w, self.width)
        y0 = max(y, 0); y1 = min(y + h, self.height)
        if x0 >= x1 or y0 >= y1: return
        self.pixels[y0:y1, x0:x1] |= np.uint32(as_packed(color))

    def blit(self, image: np.ndarray):
        """Copies an RGB(A) grid at its native coordinates, dropping what does not fit."""
        h = min(image.shape[0], self.height); w = min(image.shape[1], self.width)
        if h <= 0 or w <= 0: return
        self.pixels[:h, :w] = pack_rgb_array(image[:h, :w])

    def fill_row(self, y: int, x_end: int, color):
        """Overwrites columns 0..x_end-1 of row y."""
        x_end = min(x_end, self.width)
        if not 0 <= y < self.height or x_end <= 0: return
        self.pixels[y, :x_end] = as_packed(color)
