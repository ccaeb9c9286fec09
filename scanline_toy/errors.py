# -*- coding: utf-8 -*-
"""Fatal startup errors. Nothing inside a frame tick raises these."""


class ScanlineError(Exception):
    pass


class UsageError(ScanlineError):
    """Missing image argument on the command line."""


class DecodeError(ScanlineError, ValueError):
    """Image could not be read, downloaded or decoded."""


class SurfaceInitError(ScanlineError):
    """The display window could not be created."""
