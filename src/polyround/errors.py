"""Exceptions and warnings raised by the polyround geometry engine."""

from __future__ import annotations


class PolyroundError(ValueError):
    """Base class for errors in path or polygon construction."""


class InvalidInputError(PolyroundError):
    """Malformed or under-sized input (empty paths, too few corners,
    bad segment counts, negative radii)."""


class FilletTooLargeError(PolyroundError):
    """A fillet radius does not fit the edges around its corner."""

    def __init__(self, index: int, radius: float, max_radius: float):
        self.index = index
        self.radius = radius
        self.max_radius = max_radius
        super().__init__(
            f"fillet radius {radius:g} at corner {index} exceeds the "
            f"maximum permissible radius {max_radius:g}"
        )


class DegenerateFilletWarning(UserWarning):
    """A non-zero radius was requested on a straight (180 degree)
    corner, which is emitted unfilleted."""

    def __init__(self, index: int):
        self.index = index
        super().__init__(
            f"corner {index} is straight; fillet radius ignored"
        )


__all__ = [
    "PolyroundError",
    "InvalidInputError",
    "FilletTooLargeError",
    "DegenerateFilletWarning",
]
