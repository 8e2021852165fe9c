## linear and rotational extrusion of flat outlines
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

"""Sweep a flat polygon into a closed triangle mesh.

The meshes produced here are plain vertex and face tables, the same
shape a CAD kernel's ``polyhedron`` primitive takes.  Faces are wound
counter-clockwise when seen from outside the solid.  Boolean
combination of meshes is left to the kernel.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from math import cos, radians, sin
from typing import List, Sequence, Tuple

from polyround.errors import InvalidInputError
from polyround.geom import epsilon
from polyround.triangulator import Triangle, prepare_loop, triangulate

Vec3 = Tuple[float, float, float]


@dataclass
class Mesh:
    """Triangle mesh: vertex coordinates plus index triples."""

    vertices: List[Vec3] = field(default_factory=list)
    faces: List[Triangle] = field(default_factory=list)

    def volume(self) -> float:
        """Enclosed volume, positive for outward-facing triangles."""
        total = 0.0
        v = self.vertices
        for a, b, c in self.faces:
            ax, ay, az = v[a]
            bx, by, bz = v[b]
            cx, cy, cz = v[c]
            total += (ax * (by * cz - bz * cy)
                      - ay * (bx * cz - bz * cx)
                      + az * (bx * cy - by * cx))
        return total / 6.0

    def bbox(self) -> Tuple[Vec3, Vec3]:
        """``(min, max)`` corners of the axis-aligned bounding box."""
        if not self.vertices:
            raise ValueError('empty mesh has no bounding box')
        xs, ys, zs = zip(*self.vertices)
        return (min(xs), min(ys), min(zs)), (max(xs), max(ys), max(zs))


def _outline(vertices: Sequence[Sequence[float]]):
    loop = prepare_loop(vertices, want_ccw=True)
    if len(loop) < 3:
        raise InvalidInputError(
            f"extrusion needs an outline with at least 3 distinct vertices, got {len(loop)}"
        )
    return loop


def linear_extrude(vertices: Sequence[Sequence[float]], height, center=False) -> Mesh:
    """Extrude a flat outline along +z by ``height``.

    With ``center`` the solid spans `-height/2 .. height/2` instead of
    `0 .. height`.
    """
    if height <= 0:
        raise InvalidInputError(f"extrusion height must be positive, got {height}")
    loop = _outline(vertices)
    n = len(loop)
    z0 = -height / 2.0 if center else 0.0
    z1 = z0 + height

    mesh = Mesh()
    mesh.vertices = [(x, y, z0) for x, y in loop] + [(x, y, z1) for x, y in loop]

    for a, b, c in triangulate(loop):
        mesh.faces.append((a, c, b))              # bottom faces down
        mesh.faces.append((a + n, b + n, c + n))  # top faces up
    for i in range(n):
        j = (i + 1) % n
        mesh.faces.append((i, j, j + n))
        mesh.faces.append((i, j + n, i + n))
    return mesh


def rotate_extrude(vertices: Sequence[Sequence[float]], angle=360.0, steps=36) -> Mesh:
    """Revolve a flat outline about its Y axis, which becomes the mesh
    Z axis.

    The outline's x coordinate becomes the distance from the axis and
    its y coordinate the mesh z, so the outline must lie at `x >= 0`.
    ``angle`` (degrees) is swept counter-clockwise seen from +z in
    ``steps`` increments.  A full turn closes the seam; anything less is
    capped at both ends.  Vertices on the axis are shared between
    rings.
    """
    if not 0 < angle <= 360:
        raise InvalidInputError(f"revolution angle must be in (0, 360], got {angle}")
    if isinstance(steps, bool) or not isinstance(steps, int) or steps < 1:
        raise InvalidInputError(f"revolution steps must be a positive integer, got {steps!r}")
    loop = _outline(vertices)
    if any(x < -epsilon for x, _ in loop):
        raise InvalidInputError("revolved outline must not cross the axis (x < 0)")

    full = abs(angle - 360) < epsilon
    if full and steps < 3:
        raise InvalidInputError("a full revolution needs at least 3 steps")
    n = len(loop)
    rings = steps if full else steps + 1
    on_axis = [abs(x) <= epsilon for x, _ in loop]

    mesh = Mesh()
    index = []
    for k in range(rings):
        phi = radians(angle * k / steps)
        c, s = cos(phi), sin(phi)
        ring = []
        for i, (x, z) in enumerate(loop):
            if on_axis[i] and k > 0:
                ring.append(index[0][i])
                continue
            ring.append(len(mesh.vertices))
            mesh.vertices.append((x * c, x * s, z))
        index.append(ring)

    def _face(a, b, c):
        if a != b and b != c and a != c:
            mesh.faces.append((a, b, c))

    for k in range(steps):
        cur = index[k]
        nxt = index[(k + 1) % rings]
        for i in range(n):
            j = (i + 1) % n
            _face(cur[i], nxt[j], cur[j])
            _face(cur[i], nxt[i], nxt[j])

    if not full:
        first, last = index[0], index[-1]
        for a, b, c in triangulate(loop):
            mesh.faces.append((first[a], first[b], first[c]))
            mesh.faces.append((last[a], last[c], last[b]))
    return mesh


__all__ = ["Vec3", "Mesh", "linear_extrude", "rotate_extrude"]
