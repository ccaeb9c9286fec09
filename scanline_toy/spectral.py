# -*- coding: utf-8 -*-
"""Scan-line transform pipeline: row -> spectrum -> filtered spectrum -> row.

Both transform directions are unnormalized. The only scaling applied on the
way back is the division by the raster height in reconstruct_row, which sets
the brightness of reconstructed rows.
"""
import numpy as np

RED, GREEN, BLUE, ALPHA = 0, 1, 2, 3


def extract_signal(image: np.ndarray, row: int, channel: int = GREEN) -> np.ndarray:
    """One image row as a complex sequence: real = channel intensity, imag = 0."""
    height = image.shape[0]
    if not 0 <= row < height: raise IndexError(f"Row {row} outside image of height {height}")
    return image[row, :, channel].astype(np.complex128)


def forward_transform(signal: np.ndarray) -> np.ndarray:
    return np.fft.fft(np.asarray(signal, dtype=np.complex128))


def inverse_transform(spectrum: np.ndarray) -> np.ndarray:
    # norm="forward" leaves the inverse as a plain sum (no 1/W).
    return np.fft.ifft(np.asarray(spectrum, dtype=np.complex128), norm="forward")


def attenuate(spectrum: np.ndarray) -> np.ndarray:
    """Divides coefficient n by n for every n >= 1; the DC term is kept."""
    filtered = np.array(spectrum, dtype=np.complex128, copy=True)
    if filtered.size > 1:
        n = np.arange(1, filtered.size, dtype=np.float64)
        filtered[1:] = filtered[1:] / n
    return filtered


def row_intensities(spectrum: np.ndarray, scale: float) -> np.ndarray:
    values = inverse_transform(spectrum).real / scale
    np.clip(values, 0, 255, out=values)
    return values.astype(np.uint8)


def reconstruct_row(image: np.ndarray, spectrum: np.ndarray, row: int, scale: float) -> np.ndarray:
    """Writes the inverse transform of spectrum back into image[row] as grey.

    Intensities are real / scale clamped to a byte (truncating). Rewritten
    pixels are made opaque. Samples past the image width, or a row outside
    the image, are skipped. Returns the intensities computed.
    """
    intensities = row_intensities(spectrum, scale)
    height, width = image.shape[:2]
    if not 0 <= row < height: return intensities
    n = min(width, intensities.size)
    image[row, :n, RED] = intensities[:n]; image[row, :n, GREEN] = intensities[:n]; image[row, :n, BLUE] = intensities[:n]; image[row, :n, ALPHA] = 255
    return intensities
