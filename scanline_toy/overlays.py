# -*- coding: utf-8 -*-
import numpy as np

from .raster import RGB, RasterBuffer
from .spectral import GREEN

SPECTRUM_SCALE = 0.02   # coefficient real part -> bar pixels
BASELINE_OFFSET = 400   # spectrum baseline sits this far above the bottom edge
BAR_WIDTH = 4
PROFILE_SCALE = 0.2     # green intensity -> profile bar pixels
PROFILE_MARGIN = 5      # profile bars end this far above the bottom edge


def bar_heights(spectrum: np.ndarray, scale: float = SPECTRUM_SCALE) -> np.ndarray:
    """Signed bar height per coefficient: floor(real * scale)."""
    return np.floor(np.asarray(spectrum).real * scale).astype(np.int64)


def render_spectrum(raster: RasterBuffer, spectrum: np.ndarray, color, baseline: int | None = None):
    """Draws coefficients 1 .. len//2 - 1 as bars around the baseline.

    DC and the mirrored upper half are skipped. Positive heights grow upward,
    negative ones downward; both include the baseline pixel. Bars are ORed so
    a second render over the first mixes colors.
    """
    if baseline is None: baseline = raster.height - BASELINE_OFFSET
    heights = bar_heights(spectrum)
    for i in range(1, len(heights) // 2):
        mag = int(heights[i])
        if mag > 0: raster.add_block(BAR_WIDTH * i, baseline - mag + 1, BAR_WIDTH, mag, color)
        elif mag < 0: raster.add_block(BAR_WIDTH * i, baseline, BAR_WIDTH, -mag, color)


def draw_image(raster: RasterBuffer, image: np.ndarray, marker_row: int, marker_color):
    raster.blit(image)
    raster.fill_row(marker_row, image.shape[1], marker_color)


def draw_row_profile(raster: RasterBuffer, image: np.ndarray, row: int):
    """Green level of each column of image[row] as a bar rising from the bottom."""
    if not 0 <= row < image.shape[0]: return
    bottom = raster.height - PROFILE_MARGIN
    for x, g in enumerate(image[row, :, GREEN]):
        if x >= raster.width: break
        h = int(int(g) * PROFILE_SCALE)
        if h > 0: raster.add_block(x, bottom - h + 1, 1, h, RGB(0, int(g), 0))
