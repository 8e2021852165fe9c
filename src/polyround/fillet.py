## fillet arcs for polygon corners
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

"""replace radius-tagged polygon corners with tessellated fillet arcs

====================
OVERVIEW
====================

``polygonize()`` takes absolute, radius-tagged points (see
``polyround.path``) and returns a flat list of ``(x, y)`` vertices.
Every corner with a non-zero radius is replaced by a circular arc of
that radius, tangent to both edges meeting at the corner, and sampled
as ``segments_per_corner`` vertices running from the tangent point on
the incoming edge to the tangent point on the outgoing edge.  Corners
with a zero radius pass through as a single vertex.  A segment count of
one leaves every corner sharp, which is a convenient way to switch
smoothing off for previews.

corner geometry
===============

For a corner ``P`` with neighbours ``A`` (previous) and ``B`` (next),
let ``theta`` be the interior angle between ``PA`` and ``PB``.  The
fillet circle of radius ``r`` inscribed in that angle

* touches both edges at distance `r / tan(theta/2)` from ``P``
  (``polyround.geom.tangent_length``),
* has its center on the angle bisector at distance `r / sin(theta/2)`
  from ``P``, and
* sinks into the corner by `r / sin(theta/2) - r`, reported as the
  fillet ``depth``.

The arc always sweeps the short way round, in the direction the path
turns, so both clockwise and counter-clockwise outlines work.

limits
======

Fillets are never clamped silently.  The largest radius a corner can
hold is half its shorter edge, reduced further at acute corners so that
neither tangent point passes the middle of its edge (the other half
belongs to the neighbouring corner).  A larger radius raises
``FilletTooLargeError`` with the corner index and that maximum.

A straight corner cannot be filleted at all; a non-zero radius there is
treated as a placeholder: the point is emitted unchanged and a
``DegenerateFilletWarning`` is issued.  A corner that doubles back on
itself (a zero degree spike) holds no fillet and raises.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from math import atan2, cos, isfinite, pi, sin, tan
from typing import Iterable, List, Optional, Sequence, Tuple

from polyround.errors import (
    DegenerateFilletWarning,
    FilletTooLargeError,
    InvalidInputError,
)
from polyround.geom import (
    Vec2,
    add,
    angle_between,
    arc_radius_from_chord,
    dist,
    epsilon,
    scale,
    sas_side,
    sub,
    tangent_length,
    unit,
    vclose,
    vec,
)
from polyround.path import AbsolutePoint, resolve


@dataclass(frozen=True)
class Fillet:
    """Solved geometry of one filleted corner.

    ``start`` and ``end`` are the tangent points on the incoming and
    outgoing edges, ``start_angle`` is the polar angle of ``start`` about
    ``center`` and ``sweep`` the signed arc angle (radians, positive is
    counter-clockwise) from ``start`` to ``end``.
    """

    index: int
    corner: Vec2
    center: Vec2
    radius: float
    start: Vec2
    end: Vec2
    start_angle: float
    sweep: float
    chord: float
    depth: float

    def sample(self, segments: int) -> List[Vec2]:
        """Tessellate the arc into ``segments`` vertices, tangent points
        included.  A single segment collapses to the original corner."""
        if segments < 2:
            return [self.corner]
        cx, cy = self.center
        last = segments - 1
        result = [self.start]
        for k in range(1, last):
            a = self.start_angle + self.sweep * k / last
            result.append((cx + self.radius * cos(a), cy + self.radius * sin(a)))
        result.append(self.end)
        return result


def _check_segments(segments) -> int:
    if isinstance(segments, bool) or not isinstance(segments, int):
        raise InvalidInputError(
            f"segments per corner must be an integer, got {segments!r}"
        )
    if segments < 1:
        raise InvalidInputError(
            f"segments per corner must be at least 1, got {segments}"
        )
    return segments


def _corner_angle(prev: Vec2, corner: Vec2, nxt: Vec2) -> float:
    return angle_between(sub(prev, corner), sub(nxt, corner))


def _is_straight(theta: float) -> bool:
    return pi - theta <= epsilon


def max_fillet_radius(prev, corner, nxt) -> float:
    """Largest fillet radius the corner at ``corner`` can hold without
    either tangent point passing the middle of its edge."""
    prev, corner, nxt = vec(prev), vec(corner), vec(nxt)
    half = min(dist(prev, corner), dist(corner, nxt)) / 2.0
    if half < epsilon:
        return 0.0
    theta = _corner_angle(prev, corner, nxt)
    if theta < epsilon:
        return 0.0
    if _is_straight(theta):
        return half
    return min(half, half * tan(theta / 2.0))


def fillet_corner(prev, corner, nxt, radius, index=0, *, stacklevel=2) -> Optional[Fillet]:
    """Fit a fillet of ``radius`` into the corner ``prev``-``corner``-``nxt``.

    Returns ``None`` when there is nothing to fit: a zero radius, or a
    straight corner (which also issues ``DegenerateFilletWarning``).
    Raises ``FilletTooLargeError`` when the radius does not fit.
    ``index`` only labels the corner in errors and warnings, and
    ``stacklevel`` is handed to ``warnings.warn``.
    """
    if not isfinite(radius):
        raise InvalidInputError(f"fillet radius at corner {index} must be finite, got {radius!r}")
    if radius < 0.0:
        raise InvalidInputError(f"negative fillet radius {radius:g} at corner {index}")
    if radius == 0.0:
        return None
    prev, corner, nxt = vec(prev), vec(corner), vec(nxt)
    if not all(isfinite(c) for p in (prev, corner, nxt) for c in p):
        raise InvalidInputError(f"corner {index} has non-finite coordinates")

    ## spikes and zero-length edges hold no fillet; the slack on the bound
    ## is relative so no tangent point passes the middle of its edge
    limit = max_fillet_radius(prev, corner, nxt)
    if limit == 0.0 or radius > limit * (1.0 + 1e-9):
        raise FilletTooLargeError(index, radius, limit)

    theta = _corner_angle(prev, corner, nxt)
    if _is_straight(theta):
        warnings.warn(DegenerateFilletWarning(index), stacklevel=stacklevel)
        return None

    u1 = unit(sub(prev, corner))
    u2 = unit(sub(nxt, corner))
    t = tangent_length(radius, theta)
    start = add(corner, scale(u1, t))
    end = add(corner, scale(u2, t))

    offset = radius / sin(theta / 2.0)
    center = add(corner, scale(unit(add(u1, u2)), offset))

    start_angle = atan2(start[1] - center[1], start[0] - center[0])
    end_angle = atan2(end[1] - center[1], end[0] - center[0])
    # |sweep| is pi - theta < pi, so wrapping into (-pi, pi] picks the
    # short arc in the turning direction
    sweep = end_angle - start_angle
    if sweep > pi:
        sweep -= 2.0 * pi
    elif sweep <= -pi:
        sweep += 2.0 * pi

    return Fillet(index=index,
                  corner=corner,
                  center=center,
                  radius=float(radius),
                  start=start,
                  end=end,
                  start_angle=start_angle,
                  sweep=sweep,
                  chord=sas_side(t, t, theta),
                  depth=offset - radius)


def _prepare(points, closed) -> List[AbsolutePoint]:
    pts = [AbsolutePoint.coerce(p) for p in points]
    minimum = 3 if closed else 2
    if len(pts) < minimum:
        kind = 'closed polygon' if closed else 'open path'
        raise InvalidInputError(
            f"a {kind} needs at least {minimum} points, got {len(pts)}"
        )
    return pts


def _solve(pts: Sequence[AbsolutePoint], closed: bool, stacklevel: int):
    """yield ``(point, fillet_or_None)`` for every corner, in order.

    ``stacklevel`` locates warnings as ``warnings.warn`` would if it were
    called from the frame iterating this generator.
    """
    n = len(pts)
    for i, p in enumerate(pts):
        if not closed and (i == 0 or i == n - 1):
            # open path end points have only one edge
            yield p, None
            continue
        prev = pts[i - 1]
        nxt = pts[(i + 1) % n]
        yield p, fillet_corner(prev.xy, p.xy, nxt.xy, p.radius, index=i,
                               stacklevel=stacklevel + 2)


def _dedupe(vertices: List[Vec2], closed: bool) -> List[Vec2]:
    result: List[Vec2] = []
    for v in vertices:
        if result and vclose(result[-1], v):
            continue
        result.append(v)
    if closed:
        while len(result) > 1 and vclose(result[0], result[-1]):
            result.pop()
    return result


def corners(points: Iterable, closed=True) -> List[Tuple[AbsolutePoint, Optional[Fillet]]]:
    """Pair every point with its solved ``Fillet`` (``None`` for sharp
    corners and open path ends), validating the whole outline."""
    pts = _prepare(points, closed)
    return list(_solve(pts, closed, stacklevel=2))


def fillets(points: Iterable, closed=True) -> List[Fillet]:
    """Solve and validate every filleted corner without tessellating."""
    pts = _prepare(points, closed)
    result: List[Fillet] = []
    for _, f in _solve(pts, closed, stacklevel=2):
        if f is not None:
            result.append(f)
    return result


def _polygonize(points, segments_per_corner, closed, stacklevel) -> List[Vec2]:
    segments = _check_segments(segments_per_corner)
    pts = _prepare(points, closed)

    vertices: List[Vec2] = []
    for p, f in _solve(pts, closed, stacklevel=stacklevel):
        if f is None:
            vertices.append(p.xy)
        else:
            vertices.extend(f.sample(segments))
    return _dedupe(vertices, closed)


def polygonize(points: Iterable, segments_per_corner: int, closed=True) -> List[Vec2]:
    """Replace every radius-tagged corner of ``points`` with a fillet arc.

    ``points`` are ``AbsolutePoint`` values or ``(x, y[, radius])``
    tuples.  Each zero-radius corner yields one vertex and each filleted
    corner ``segments_per_corner`` vertices, in input order.  Coincident
    consecutive vertices (for instance where two fillets meet in the
    middle of an edge) are collapsed to one.

    A closed polygon needs three points and wraps around for the
    neighbours of its first and last corners; an open path needs two
    and leaves its end points sharp.

    Raises ``InvalidInputError`` for too few points, non-finite values
    or a bad segment count and ``FilletTooLargeError`` for radii that do
    not fit.  No vertices are returned unless every corner succeeds.
    """
    return _polygonize(points, segments_per_corner, closed, stacklevel=3)


def rounded_polygon(steps: Iterable, segments_per_corner: int, closed=True) -> List[Vec2]:
    """Resolve relative corner steps and polygonize them in one call."""
    return _polygonize(resolve(steps), segments_per_corner, closed, stacklevel=3)


def chord_arc(start, end, height, segments: int) -> List[Vec2]:
    """Vertices of the circular arc from ``start`` to ``end`` that rises
    ``height`` above the middle of the chord.

    Positive heights bulge to the left of the direction of travel,
    negative heights to the right.  ``segments`` vertices are returned,
    both end points included.
    """
    segments = _check_segments(segments)
    start, end = vec(start), vec(end)
    c = dist(start, end)
    if c < epsilon:
        raise InvalidInputError("arc end points coincide")
    if abs(height) < epsilon:
        raise InvalidInputError("arc height must be non-zero")
    if segments < 2:
        return [start, end]

    r = arc_radius_from_chord(c, abs(height))
    side = 1.0 if height > 0 else -1.0
    mid = scale(add(start, end), 0.5)
    d = sub(end, start)
    normal = (-d[1] / c, d[0] / c)
    # the apex sits ``height`` along the left normal, the center one
    # radius back from it
    center = add(mid, scale(normal, height - side * r))

    phi = 2.0 * atan2(c / 2.0, r - abs(height))
    sweep = -side * phi
    a0 = atan2(start[1] - center[1], start[0] - center[0])

    last = segments - 1
    result = [start]
    for k in range(1, last):
        a = a0 + sweep * k / last
        result.append((center[0] + r * cos(a), center[1] + r * sin(a)))
    result.append(end)
    return result


__all__ = [
    'Fillet',
    'max_fillet_radius',
    'fillet_corner',
    'corners',
    'fillets',
    'polygonize',
    'rounded_polygon',
    'chord_arc',
]
