# -*- coding: utf-8 -*-
"""Real-time spectrum explorer for one scan-line of an image at a time."""
from .errors import DecodeError, ScanlineError, SurfaceInitError, UsageError
from .explorer import HEIGHT, WIDTH, ExplorerSettings, ScanlineExplorer
from .overlays import bar_heights, draw_image, draw_row_profile, render_spectrum
from .raster import RGB, RasterBuffer, pack_rgb_array
from .spectral import attenuate, extract_signal, forward_transform, inverse_transform, reconstruct_row

__version__ = "0.1.0"
