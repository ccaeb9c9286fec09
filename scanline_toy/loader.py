# -*- coding: utf-8 -*-
import cv2
import numpy as np
import requests

from .errors import DecodeError

_COLOR_CONVERSIONS = {1: cv2.COLOR_GRAY2RGBA, 3: cv2.COLOR_BGR2RGBA, 4: cv2.COLOR_BGRA2RGBA}


def is_url(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


def fetch_image_bytes(url: str, timeout: float = 20) -> np.ndarray:
    print(f"Requesting image URL: {url}")
    try: response = requests.get(url, timeout=timeout); response.raise_for_status()
    except requests.exceptions.Timeout as e: raise DecodeError(f"Timeout loading {url}") from e
    except requests.exceptions.RequestException as e: raise DecodeError(f"Network error: {e}") from e
    return np.frombuffer(response.content, np.uint8)


def to_rgba(img: np.ndarray) -> np.ndarray:
    """Converts a decoded cv2 image (grey, BGR or BGRA; 8, 16 bit or float) to RGBA uint8."""
    if img.dtype == np.uint16: img = (img >> 8).astype(np.uint8)
    elif np.issubdtype(img.dtype, np.floating): img = (np.clip(np.nan_to_num(img) * 255, 0, 255)).astype(np.uint8)
    elif img.dtype != np.uint8: raise DecodeError(f"Unsupported sample type: {img.dtype}")
    channels = 1 if img.ndim == 2 else img.shape[2]
    if channels not in _COLOR_CONVERSIONS: raise DecodeError(f"Unsupported channel count: {channels}")
    if img.ndim == 3 and channels == 1: img = img[:, :, 0]
    return np.ascontiguousarray(cv2.cvtColor(img, _COLOR_CONVERSIONS[channels]))


def decode_bytes(data: np.ndarray, source: str) -> np.ndarray | None:
    if data.size == 0: raise DecodeError(f"Empty file: {source}")
    try: return cv2.imdecode(data, cv2.IMREAD_UNCHANGED)
    except cv2.error as e: raise DecodeError(f"Failed to decode {source}: {e}") from e


def load_image(source: str) -> np.ndarray:
    """Reads a local path or http(s) URL into an (H, W, 4) RGBA grid."""
    if is_url(source):
        img = decode_bytes(fetch_image_bytes(source), source)
    else:
        img = cv2.imread(source, cv2.IMREAD_UNCHANGED)
        if img is None:
            try: data = np.fromfile(source, dtype=np.uint8)
            except OSError as e: raise DecodeError(f"Failed to read {source}: {e}") from e
            img = decode_bytes(data, source)
    if img is None: raise DecodeError(f"Failed to load/decode: {source}")
    if img.size == 0: raise DecodeError(f"Empty image: {source}")
    return to_rgba(img)
