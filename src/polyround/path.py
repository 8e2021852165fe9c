## relative corner paths for polyround
## Copyright (c) 2026 polyround contributors

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""relative corner paths and their absolute resolution

====================
OVERVIEW
====================

Part outlines are easiest to author as a walk: start somewhere, then
step ``dx`` right and ``dy`` up, then step again, stating each edge
once.  Every step also names the fillet radius wanted at the corner it
arrives at.  A walk is a sequence of ``CornerStep`` values: ::

   steps = [CornerStep(0, 0, 1),     # literal starting point
            CornerStep(20, 0, 2),
            CornerStep(0, 12, 2),
            CornerStep(-20, 0, 1)]

``resolve()`` turns the walk into ``AbsolutePoint`` values, which is
what the fillet polygonizer (``polyround.fillet``) consumes.  The first
step is taken literally as the starting coordinate; its radius only
matters when the path is later closed into a polygon.

Tuples are accepted anywhere a step or point is expected, so the
example above can also be written ``[(0, 0, 1), (20, 0, 2), ...]``;
the radius defaults to zero when omitted.

**NOTE:** resolution is a running sum, so two paths that are equal on
paper but traverse their steps in a different order are only equal to
within a small tolerance.  Compare coordinates with an epsilon, never
with ``==``.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import isfinite
from typing import Iterable, List, Sequence, Tuple

from polyround.errors import InvalidInputError
from polyround.geom import Vec2, rotate


def _coerce_number(value, what):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(f"{what} must be a number, got {value!r}")
    value = float(value)
    if not isfinite(value):
        raise InvalidInputError(f"{what} must be finite, got {value!r}")
    return value


@dataclass(frozen=True)
class CornerStep:
    """One relative step of a path: a signed displacement plus the
    fillet radius wanted at the corner the step arrives at."""

    dx: float
    dy: float
    radius: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, 'dx', _coerce_number(self.dx, 'dx'))
        object.__setattr__(self, 'dy', _coerce_number(self.dy, 'dy'))
        object.__setattr__(self, 'radius', _coerce_number(self.radius, 'radius'))
        if self.radius < 0.0:
            raise InvalidInputError(f"negative fillet radius {self.radius:g}")

    @classmethod
    def coerce(cls, value) -> "CornerStep":
        """Return ``value`` as a ``CornerStep``; accepts a step or a
        ``(dx, dy)`` / ``(dx, dy, radius)`` sequence."""
        if isinstance(value, cls):
            return value
        if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
            raise InvalidInputError(f"cannot interpret {value!r} as a corner step")
        if len(value) == 2:
            return cls(value[0], value[1])
        if len(value) == 3:
            return cls(value[0], value[1], value[2])
        raise InvalidInputError(
            f"corner step needs 2 or 3 components, got {len(value)}"
        )


@dataclass(frozen=True)
class AbsolutePoint:
    """An absolute corner position tagged with its fillet radius."""

    x: float
    y: float
    radius: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, 'x', _coerce_number(self.x, 'x'))
        object.__setattr__(self, 'y', _coerce_number(self.y, 'y'))
        object.__setattr__(self, 'radius', _coerce_number(self.radius, 'radius'))
        if self.radius < 0.0:
            raise InvalidInputError(f"negative fillet radius {self.radius:g}")

    @property
    def xy(self) -> Vec2:
        return (self.x, self.y)

    @classmethod
    def coerce(cls, value) -> "AbsolutePoint":
        """Return ``value`` as an ``AbsolutePoint``; accepts a point or
        an ``(x, y)`` / ``(x, y, radius)`` sequence."""
        if isinstance(value, cls):
            return value
        if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
            raise InvalidInputError(f"cannot interpret {value!r} as a point")
        if len(value) == 2:
            return cls(value[0], value[1])
        if len(value) == 3:
            return cls(value[0], value[1], value[2])
        raise InvalidInputError(
            f"point needs 2 or 3 components, got {len(value)}"
        )


def resolve(steps: Iterable) -> List[AbsolutePoint]:
    """Convert relative corner steps into absolute points.

    ``result[0]`` is ``steps[0]`` taken literally; every later point is
    the previous point displaced by its step.  Radii are carried over
    unchanged and the output has one point per step, in order.

    Raises ``InvalidInputError`` for an empty path.
    """
    result: List[AbsolutePoint] = []
    x = y = 0.0
    for step in steps:
        step = CornerStep.coerce(step)
        if result:
            x += step.dx
            y += step.dy
        else:
            x, y = step.dx, step.dy
        result.append(AbsolutePoint(x, y, step.radius))
    if not result:
        raise InvalidInputError("cannot resolve an empty path")
    return result


def relative(points: Iterable) -> List[CornerStep]:
    """Inverse of ``resolve()``: absolute points back to relative steps,
    with the first point as the literal start."""
    result: List[CornerStep] = []
    prev = None
    for p in points:
        p = AbsolutePoint.coerce(p)
        if prev is None:
            result.append(CornerStep(p.x, p.y, p.radius))
        else:
            result.append(CornerStep(p.x - prev.x, p.y - prev.y, p.radius))
        prev = p
    if not result:
        raise InvalidInputError("cannot convert an empty path")
    return result


def coordinates(points: Iterable) -> List[Vec2]:
    """Drop the radii, returning bare ``(x, y)`` tuples."""
    return [AbsolutePoint.coerce(p).xy for p in points]


def translate(points: Iterable, dx=0.0, dy=0.0, angle=0.0) -> List[AbsolutePoint]:
    """Rotate absolute points by ``angle`` degrees about the origin, then
    move them by ``(dx, dy)``.  Radii are unchanged."""
    result = []
    for p in points:
        p = AbsolutePoint.coerce(p)
        x, y = rotate(p.xy, angle) if angle else p.xy
        result.append(AbsolutePoint(x + dx, y + dy, p.radius))
    return result


def mirror(points: Sequence, angle=0.0, trim: Tuple[int, int] = (0, 0)) -> List[AbsolutePoint]:
    """Return ``points`` followed by their reflection across the line
    through the origin at ``angle`` degrees.

    The reflected copy is appended in reverse order, so the result walks
    out along one side and back along the other and can be closed as a
    symmetric outline.  ``trim`` drops that many points from the start
    and end of the reflected copy, which is how points lying on the
    mirror line avoid being doubled.
    """
    pts = [AbsolutePoint.coerce(p) for p in points]
    head, tail = trim
    if head < 0 or tail < 0:
        raise InvalidInputError(f"mirror trim counts must not be negative: {trim}")
    # reflect by rotating onto the x axis, flipping y, and rotating back
    reflected = []
    for p in reversed(pts):
        x, y = rotate(p.xy, -angle)
        x, y = rotate((x, -y), angle)
        reflected.append(AbsolutePoint(x, y, p.radius))
    reflected = reflected[head:len(reflected) - tail]
    return pts + reflected


__all__ = [
    'CornerStep',
    'AbsolutePoint',
    'resolve',
    'relative',
    'coordinates',
    'translate',
    'mirror',
]
