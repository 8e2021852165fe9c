"""Render quality levels and their fillet segment counts.

Part scripts usually pick tessellation density from a single quality
switch (fast preview while editing, dense output for the final export).
The engine itself only takes a plain ``segments_per_corner`` integer;
this module is the explicit mapping between the two, passed around as a
value rather than read from a global setting.
"""

from __future__ import annotations

from enum import Enum

from polyround.errors import InvalidInputError


class RenderQuality(Enum):
    """Quality levels, valued by their segments per fillet corner."""

    PREVIEW = 2
    DRAFT = 4
    NORMAL = 8
    FINE = 16
    FINAL = 32

    @property
    def segments(self) -> int:
        return self.value

    @classmethod
    def parse(cls, value) -> "RenderQuality":
        """Look a level up by member or case-insensitive name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        raise InvalidInputError(
            f"unknown render quality {value!r}; "
            f"expected one of {[q.name.lower() for q in cls]}"
        )


DEFAULT_QUALITY = RenderQuality.NORMAL


def segments_for(quality=DEFAULT_QUALITY) -> int:
    """Return the fillet segment count for ``quality``.

    ``quality`` may be a ``RenderQuality``, a level name such as
    ``"final"``, or a positive integer that is passed through as is.
    """
    if isinstance(quality, bool):
        raise InvalidInputError(f"unknown render quality {quality!r}")
    if isinstance(quality, int):
        if quality < 1:
            raise InvalidInputError(
                f"segment count must be at least 1, got {quality}"
            )
        return quality
    return RenderQuality.parse(quality).segments


__all__ = [
    "RenderQuality",
    "DEFAULT_QUALITY",
    "segments_for",
]
