import os

import numpy as np
import pytest

# Qt tests run without a real display.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


def make_image(height, width, rgb=(10, 20, 30)):
    image = np.zeros((height, width, 4), dtype=np.uint8)
    image[..., :3] = rgb; image[..., 3] = 255
    return image


@pytest.fixture
def gradient_image():
    """6 rows x 16 columns, green ramps along each row, red/blue mark the row."""
    image = make_image(6, 16)
    for r in range(6):
        image[r, :, 0] = 40 * r
        image[r, :, 1] = np.arange(16) * 15
        image[r, :, 2] = 200 - 30 * r
    return image


class FakeSurface:
    def __init__(self, quit_after=None):
        self.frames = []; self.quit_after = quit_after; self.open = True; self.closed = False

    def is_open(self): return self.open
    def quit_pressed(self): return self.quit_after is not None and len(self.frames) >= self.quit_after
    def update_with_buffer(self, raster): self.frames.append(raster.pixels.copy())
    def close(self): self.closed = True


@pytest.fixture
def fake_surface():
    return FakeSurface
