# -*- coding: utf-8 -*-
import sys

from .errors import DecodeError, SurfaceInitError, UsageError
from .explorer import ExplorerSettings, ScanlineExplorer
from .loader import load_image
from .window import open_surface


def parse_args(argv: list) -> str:
    if len(argv) < 2: raise UsageError(f"Usage: {argv[0] if argv else 'scanline-toy'} <image path or http(s) URL>")
    return argv[1]


def main(argv: list | None = None, settings: ExplorerSettings | None = None) -> int:
    argv = sys.argv if argv is None else argv
    settings = settings or ExplorerSettings()
    try: source = parse_args(argv)
    except UsageError as e: print(e, file=sys.stderr); return 1

    try: image = load_image(source)
    except DecodeError as e: print(f"Error loading image: {e}", file=sys.stderr); return 1
    print(f"Loaded image: {source} ({image.shape[1]}x{image.shape[0]})")

    try: app, window = open_surface(settings)
    except SurfaceInitError as e: print(f"Error opening window: {e}", file=sys.stderr); return 1

    explorer = ScanlineExplorer(image, settings)
    frames = explorer.run(window)
    print(f"Stopped after {frames} frames.")
    window.close()
    return 0
