# -*- coding: utf-8 -*-
from dataclasses import dataclass

import numpy as np

from .overlays import draw_image, draw_row_profile, render_spectrum
from .raster import RGB, RasterBuffer
from .spectral import attenuate, extract_signal, forward_transform, reconstruct_row

WIDTH = 1500
HEIGHT = 800


@dataclass(frozen=True)
class ExplorerSettings:
    width: int = WIDTH
    height: int = HEIGHT
    frame_interval: float = 0.0166  # seconds; pacing only
    title: str = "Scan-line FFT - ESC to exit"
    marker_color: RGB = RGB(0xFF, 0x00, 0x00)
    pre_filter_color: RGB = RGB(0xAA, 0x00, 0xAA)
    post_filter_color: RGB = RGB(0xAA, 0xAA, 0x00)


class ScanlineExplorer:
    """Owns the image, the framebuffer and the frame counter.

    Each frame handles image row frame_index % image_height. Reconstructed
    rows are written back into the image and stay grey from then on.
    """

    def __init__(self, image: np.ndarray, settings: ExplorerSettings | None = None):
        if image.ndim != 3 or image.shape[2] < 3: raise ValueError(f"Expected an (H, W, C>=3) image, got shape {image.shape}")
        if image.shape[0] == 0 or image.shape[1] == 0: raise ValueError("Image is empty.")
        self.settings = settings or ExplorerSettings()
        self.image = image
        self.raster = RasterBuffer(self.settings.width, self.settings.height)
        self.frame_index = 0

    @property
    def active_row(self) -> int:
        return self.frame_index % self.image.shape[0]

    def render_frame(self) -> int:
        s = self.settings; row = self.active_row
        self.raster.clear()
        draw_image(self.raster, self.image, row, s.marker_color)

        spectrum = forward_transform(extract_signal(self.image, row))
        render_spectrum(self.raster, spectrum, s.pre_filter_color)
        filtered = attenuate(spectrum)
        render_spectrum(self.raster, filtered, s.post_filter_color)
        reconstruct_row(self.image, filtered, row, self.raster.height)

        draw_row_profile(self.raster, self.image, row)
        return row

    def tick(self) -> int:
        row = self.render_frame()
        self.frame_index += 1
        return row

    def run(self, surface, max_frames: int | None = None) -> int:
        """Renders and presents frames until the surface closes or quit is pressed.

        surface needs is_open(), quit_pressed() and update_with_buffer(raster).
        Returns the number of frames presented.
        """
        shown = 0
        while surface.is_open() and not surface.quit_pressed():
            if max_frames is not None and shown >= max_frames: break
            self.tick()
            surface.update_with_buffer(self.raster)
            shown += 1
        return shown
