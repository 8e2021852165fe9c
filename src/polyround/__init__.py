# -*- coding: utf-8 -*-
"""Filleted polygon construction from relative corner paths."""

from importlib.metadata import PackageNotFoundError, version

from polyround.errors import (
    DegenerateFilletWarning,
    FilletTooLargeError,
    InvalidInputError,
    PolyroundError,
)
from polyround.fillet import Fillet, polygonize, rounded_polygon
from polyround.path import AbsolutePoint, CornerStep, resolve
from polyround.quality import RenderQuality, segments_for

try:
    __version__ = version("polyround")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"

__all__ = [
    "AbsolutePoint",
    "CornerStep",
    "DegenerateFilletWarning",
    "Fillet",
    "FilletTooLargeError",
    "InvalidInputError",
    "PolyroundError",
    "RenderQuality",
    "polygonize",
    "resolve",
    "rounded_polygon",
    "segments_for",
]
