## planar vector arithmetic and closed-form circle geometry for polyround
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

"""planar geometry helpers for **polyround**

Points and vectors are plain ``(x, y)`` tuples of Python floats, so all
computation happens in IEEE double precision.  Anything indexable with
at least two numeric components is accepted as input; results are
always tuples.

The module also carries the closed-form formulas used when fitting
fillet arcs into polygon corners:

* ``arc_radius_from_chord()`` -- radius of the circle through a chord
  of length ``c`` with sagitta (arc height) ``h``
* ``tangent_length()`` -- distance from a corner to the tangent points
  of an inscribed circle of radius ``r``
* ``sas_side()`` and ``cosine_rule_angle()`` -- side-angle-side and
  side-side-side triangle solutions by the law of cosines

``epsilon`` is the library-wide coincidence tolerance.  Redefine it at
your peril.
"""

from __future__ import annotations

from math import acos, atan2, cos, pi, radians, sin, sqrt, tan
from typing import Sequence, Tuple

Vec2 = Tuple[float, float]

## constants
epsilon = 0.000005


## operations on scalars
## -----------------------

def close(a, b, tol=epsilon):
    """ are two scalars the same within ``tol``
    """
    return abs(a - b) < tol


## operations on vectors
## ------------------------

def vec(a) -> Vec2:
    """Coerce a point-like value into an ``(x, y)`` float tuple"""
    if len(a) < 2:
        raise ValueError('point needs at least two components: {}'.format(a))
    return (float(a[0]), float(a[1]))


def add(a, b) -> Vec2:
    """ `a + b` """
    return (a[0] + b[0], a[1] + b[1])


def sub(a, b) -> Vec2:
    """ `a - b` """
    return (a[0] - b[0], a[1] - b[1])


def scale(a, c) -> Vec2:
    """ vector ``a`` times scalar ``c`` """
    return (a[0] * c, a[1] * c)


def dot(a, b) -> float:
    return a[0] * b[0] + a[1] * b[1]


def cross(a, b) -> float:
    """z component of the cross product of ``a`` and ``b``; positive
    when ``b`` lies counter-clockwise of ``a``"""
    return a[0] * b[1] - a[1] * b[0]


def mag(a) -> float:
    return sqrt(a[0] * a[0] + a[1] * a[1])


def dist(a, b) -> float:  # distance between two points a & b
    return mag(sub(a, b))


def vclose(a, b, tol=epsilon):
    """are two points the same to within ``tol``"""
    return close(dist(a, b), 0.0, tol)


def unit(a) -> Vec2:
    """unit vector in the direction of ``a``"""
    m = mag(a)
    if m < epsilon:
        raise ValueError('cannot normalize zero-length vector {}'.format(a))
    return (a[0] / m, a[1] / m)


def rotate(a, angle, center=(0.0, 0.0)) -> Vec2:
    """rotate point ``a`` counter-clockwise by ``angle`` degrees about
    ``center``"""
    th = radians(angle)
    c = cos(th)
    s = sin(th)
    x = a[0] - center[0]
    y = a[1] - center[1]
    return (center[0] + x * c - y * s, center[1] + x * s + y * c)


def angle_between(a, b) -> float:
    """unsigned angle between vectors ``a`` and ``b``, in radians.

    Uses ``atan2`` of the cross and dot products, which stays accurate
    near 0 and pi where ``acos`` of the dot product loses digits.
    """
    return atan2(abs(cross(a, b)), dot(a, b))


def signed_area(pts: Sequence[Sequence[float]]) -> float:
    """shoelace area of a closed loop; positive for counter-clockwise
    winding"""
    total = 0.0
    n = len(pts)
    for i in range(n):
        x0, y0 = pts[i][0], pts[i][1]
        x1, y1 = pts[(i + 1) % n][0], pts[(i + 1) % n][1]
        total += x0 * y1 - x1 * y0
    return total / 2.0


## closed-form circle and triangle solutions
## -----------------------------------------

def arc_radius_from_chord(chord, height):
    """radius of the circle through a chord of length ``chord`` whose
    arc rises ``height`` above the chord midpoint: `h/2 + c^2/(8h)`"""
    if height <= 0.0:
        raise ValueError('arc height must be positive, got {}'.format(height))
    if chord < 0.0:
        raise ValueError('chord length must not be negative, got {}'.format(chord))
    return height / 2.0 + (chord * chord) / (8.0 * height)


def tangent_length(radius, angle):
    """distance from a corner with interior ``angle`` (radians) to the
    points where an inscribed circle of ``radius`` touches its edges"""
    if not 0.0 < angle <= pi:
        raise ValueError('corner angle out of range: {}'.format(angle))
    return radius / tan(angle / 2.0)


def sas_side(a, b, angle):
    """length of the side opposite ``angle`` (radians) in a triangle
    with sides ``a`` and ``b`` enclosing it"""
    sq = a * a + b * b - 2.0 * a * b * cos(angle)
    # rounding can push a degenerate triangle slightly negative
    return sqrt(max(sq, 0.0))


def cosine_rule_angle(a, b, c):
    """angle (radians) opposite side ``c`` in the triangle with sides
    ``a``, ``b`` and ``c``"""
    if a <= 0.0 or b <= 0.0:
        raise ValueError('triangle sides must be positive')
    if c > a + b + epsilon or a > b + c + epsilon or b > a + c + epsilon:
        raise ValueError('sides {}, {}, {} do not form a triangle'.format(a, b, c))
    cosc = (a * a + b * b - c * c) / (2.0 * a * b)
    return acos(min(1.0, max(-1.0, cosc)))


__all__ = [
    'Vec2',
    'epsilon',
    'close',
    'vec',
    'add',
    'sub',
    'scale',
    'dot',
    'cross',
    'mag',
    'dist',
    'vclose',
    'unit',
    'rotate',
    'angle_between',
    'signed_area',
    'arc_radius_from_chord',
    'tangent_length',
    'sas_side',
    'cosine_rule_angle',
]
