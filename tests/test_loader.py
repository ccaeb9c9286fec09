import cv2
import numpy as np
import pytest
import requests

from scanline_toy import loader
from scanline_toy.errors import DecodeError
from scanline_toy.loader import is_url, load_image, to_rgba


@pytest.fixture
def bgr_image():
    img = np.zeros((5, 7, 3), dtype=np.uint8)
    img[..., 0] = 200; img[..., 1] = 100; img[..., 2] = 50   # B, G, R
    img[2, 3] = (1, 2, 3)
    return img


def test_loads_png_as_rgba(tmp_path, bgr_image):
    path = tmp_path / "img.png"
    cv2.imwrite(str(path), bgr_image)
    image = load_image(str(path))
    assert image.shape == (5, 7, 4) and image.dtype == np.uint8
    assert image[0, 0].tolist() == [50, 100, 200, 255]
    assert image[2, 3].tolist() == [3, 2, 1, 255]


def test_loads_grayscale_and_alpha(tmp_path):
    grey = np.full((3, 4), 77, dtype=np.uint8)
    cv2.imwrite(str(tmp_path / "grey.png"), grey)
    assert load_image(str(tmp_path / "grey.png"))[1, 1].tolist() == [77, 77, 77, 255]

    bgra = np.zeros((2, 2, 4), dtype=np.uint8); bgra[..., 0] = 9; bgra[..., 3] = 128
    cv2.imwrite(str(tmp_path / "alpha.png"), bgra)
    assert load_image(str(tmp_path / "alpha.png"))[0, 0].tolist() == [0, 0, 9, 128]


def test_sixteen_bit_images_are_reduced(tmp_path):
    deep = np.full((2, 3, 3), 0x8040, dtype=np.uint16)
    cv2.imwrite(str(tmp_path / "deep.png"), deep)
    assert load_image(str(tmp_path / "deep.png"))[0, 0].tolist() == [0x80, 0x80, 0x80, 255]


def test_missing_file_raises_decode_error(tmp_path):
    with pytest.raises(DecodeError):
        load_image(str(tmp_path / "nope.png"))


def test_garbage_and_empty_files_raise_decode_error(tmp_path):
    (tmp_path / "junk.png").write_bytes(b"definitely not an image")
    (tmp_path / "empty.png").write_bytes(b"")
    with pytest.raises(DecodeError):
        load_image(str(tmp_path / "junk.png"))
    with pytest.raises(DecodeError):
        load_image(str(tmp_path / "empty.png"))


def test_decode_error_is_a_value_error():
    assert issubclass(DecodeError, ValueError)


def test_is_url():
    assert is_url("https://picsum.photos/400/300")
    assert is_url("HTTP://example.com/a.png")
    assert not is_url("/tmp/http.png")


class FakeResponse:
    def __init__(self, content, status=200):
        self.content = content; self.status = status

    def raise_for_status(self):
        if self.status >= 400: raise requests.exceptions.HTTPError(f"{self.status} error")


def test_url_is_downloaded_and_decoded(monkeypatch, bgr_image):
    ok, encoded = cv2.imencode(".png", bgr_image)
    assert ok
    calls = []

    def fake_get(url, timeout):
        calls.append((url, timeout)); return FakeResponse(encoded.tobytes())
    monkeypatch.setattr(loader.requests, "get", fake_get)

    image = load_image("https://picsum.photos/7/5")
    assert calls == [("https://picsum.photos/7/5", 20)]
    assert image[2, 3].tolist() == [3, 2, 1, 255]


@pytest.mark.parametrize("failure", [requests.exceptions.Timeout("slow"),
                                     requests.exceptions.ConnectionError("down")])
def test_network_failures_raise_decode_error(monkeypatch, failure):
    def fake_get(url, timeout): raise failure
    monkeypatch.setattr(loader.requests, "get", fake_get)
    with pytest.raises(DecodeError):
        load_image("https://example.com/a.png")


def test_http_error_status_raises_decode_error(monkeypatch):
    monkeypatch.setattr(loader.requests, "get", lambda url, timeout: FakeResponse(b"", status=404))
    with pytest.raises(DecodeError, match="404"):
        load_image("https://example.com/a.png")


def test_float_samples_are_scaled_to_bytes():
    img = np.zeros((2, 2, 3), dtype=np.float32)
    img[0, 0] = (0.0, 0.5, 1.0)     # B, G, R
    img[1, 1] = (-0.2, 2.0, np.nan)
    rgba = to_rgba(img)
    assert rgba.dtype == np.uint8
    assert rgba[0, 0].tolist() == [255, 127, 0, 255]
    assert rgba[1, 1].tolist() == [0, 255, 0, 255]


def test_unsupported_sample_type_raises_decode_error():
    with pytest.raises(DecodeError):
        to_rgba(np.zeros((2, 2, 3), dtype=np.int32))
