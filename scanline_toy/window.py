# -*- coding: utf-8 -*-
import os
import sys
import time

import numpy as np
from PyQt5.QtCore import QRectF, Qt
from PyQt5.QtGui import QColor, QFont, QImage, QPainter
from PyQt5.QtWidgets import QApplication, QWidget

from .errors import SurfaceInitError
from .raster import RasterBuffer


# --- Helper Function for Buffer Conversion ---
def raster_to_qimage(raster: RasterBuffer) -> QImage:
    # Format_RGB32 wants 0xffRRGGBB; the packed format leaves the top byte unused.
    argb = np.ascontiguousarray(raster.pixels | np.uint32(0xFF000000))
    qimg = QImage(argb.data, raster.width, raster.height, 4 * raster.width, QImage.Format_RGB32)
    return qimg.copy()
# ---------------------------------------------


class FrameWindow(QWidget):
    """Fixed-size window that shows one raster per update and reports ESC / close."""

    def __init__(self, width: int, height: int, title: str, frame_interval: float = 0.0, parent=None):
        super().__init__(parent)
        self.setWindowTitle(title); self.setFixedSize(width, height)
        self.setAutoFillBackground(True); palette = self.palette(); palette.setColor(self.backgroundRole(), QColor(0, 0, 0)); self.setPalette(palette)
        self.display_image = None; self.frame_interval = frame_interval; self._last_update = None
        self._open = True; self._quit = False

    def is_open(self) -> bool: return self._open
    def quit_pressed(self) -> bool: return self._quit

    def keyPressEvent(self, event):
        if event.key() == Qt.Key_Escape: self._quit = True
        else: super().keyPressEvent(event)

    def closeEvent(self, event):
        self._open = False; super().closeEvent(event)

    def update_with_buffer(self, raster: RasterBuffer):
        self.display_image = raster_to_qimage(raster)
        self.update(); QApplication.processEvents()
        self._wait_for_next_frame()

    def _wait_for_next_frame(self):
        now = time.monotonic()
        if self._last_update is not None and self.frame_interval > 0:
            remaining = self.frame_interval - (now - self._last_update)
            if remaining > 0: time.sleep(remaining); now = time.monotonic()
        self._last_update = now

    def paintEvent(self, event): # Nearest neighbor, native size
        super().paintEvent(event); painter = QPainter(self)
        if self.display_image is not None and not self.display_image.isNull():
            rect = QRectF(0, 0, self.display_image.width(), self.display_image.height())
            painter.drawImage(rect, self.display_image, rect)
        else: painter.setPen(Qt.gray); painter.setFont(QFont("Arial", 10)); painter.drawText(self.rect(), Qt.AlignCenter, "No Data")
        painter.end()


def display_available() -> bool:
    if os.environ.get("QT_QPA_PLATFORM"): return True
    if not sys.platform.startswith("linux"): return True
    return bool(os.environ.get("DISPLAY") or os.environ.get("WAYLAND_DISPLAY"))


def open_surface(settings):
    """Returns (app, window) with the window shown. Raises SurfaceInitError without a display."""
    if not display_available(): raise SurfaceInitError("No display available (DISPLAY/WAYLAND_DISPLAY unset).")
    try:
        app = QApplication.instance()
        if app is None:
            if hasattr(Qt, 'AA_EnableHighDpiScaling'): QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
            if hasattr(Qt, 'AA_UseHighDpiPixmaps'): QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)
            app = QApplication(sys.argv[:1])
        window = FrameWindow(settings.width, settings.height, settings.title, settings.frame_interval)
        window.show(); QApplication.processEvents()
    except Exception as e: raise SurfaceInitError(f"Failed to create window: {e}") from e
    return app, window
