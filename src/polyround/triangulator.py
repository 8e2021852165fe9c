"""Triangulation of flat outlines for mesh caps.

We delegate to ``mapbox-earcut`` (the fast ear clipping implementation
used by Mapbox GL) to keep the logic compact and reliable.  The helpers
here only normalise outlines into the array layout earcut expects and
return counter-clockwise index triples.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

import numpy as np

try:
    import mapbox_earcut as _earcut
except ImportError as exc:  # pragma: no cover - import guard
    raise ImportError(
        "mapbox-earcut must be installed to triangulate polygons"
    ) from exc

from polyround.geom import Vec2, epsilon, signed_area, vclose

Triangle = Tuple[int, int, int]


def prepare_loop(points: Iterable[Sequence[float]], *, want_ccw: bool = True) -> List[Vec2]:
    """Return ``points`` as a clean loop: float ``(x, y)`` tuples, no
    repeated or closing vertices, wound as requested."""
    loop: List[Vec2] = []
    for pt in points:
        p = (float(pt[0]), float(pt[1]))
        if loop and vclose(loop[-1], p):
            continue
        loop.append(p)
    while len(loop) > 1 and vclose(loop[0], loop[-1]):
        loop.pop()
    if len(loop) < 3:
        return loop
    area = signed_area(loop)
    if (want_ccw and area < 0) or (not want_ccw and area > 0):
        loop.reverse()
    return loop


def triangulate(outer: Sequence[Vec2],
                holes: Iterable[Sequence[Vec2]] | None = None) -> List[Triangle]:
    """Triangulate ``outer`` minus ``holes``.

    Loops are used as given (see ``prepare_loop()``).  Returned indices
    refer to the concatenation of ``outer`` and each hole, in order, and
    every triangle is wound counter-clockwise.
    """
    if len(outer) < 3:
        return []
    coords: List[Vec2] = list(outer)
    ring_ends = [len(coords)]
    for hole in holes or []:
        if len(hole) < 3:
            continue
        coords.extend(hole)
        ring_ends.append(len(coords))

    vertices = np.asarray(coords, dtype=np.float64).reshape(-1, 2)
    rings = np.asarray(ring_ends, dtype=np.uint32)
    indices = np.asarray(_earcut.triangulate_float64(vertices, rings)).reshape(-1, 3)

    triangles: List[Triangle] = []
    for a, b, c in indices.tolist():
        pa, pb, pc = coords[a], coords[b], coords[c]
        area = ((pb[0] - pa[0]) * (pc[1] - pa[1])
                - (pc[0] - pa[0]) * (pb[1] - pa[1]))
        if abs(area) <= epsilon * epsilon:
            continue
        if area < 0:
            b, c = c, b
        triangles.append((a, b, c))
    return triangles


__all__ = ["Triangle", "prepare_loop", "triangulate"]
