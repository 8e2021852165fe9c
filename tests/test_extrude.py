import math
from collections import Counter

import pytest

from polyround.errors import InvalidInputError
from polyround.extrude import Mesh, linear_extrude, rotate_extrude
from polyround.fillet import rounded_polygon
from polyround.triangulator import prepare_loop, triangulate


def _watertight(mesh):
    edges = Counter()
    for a, b, c in mesh.faces:
        for u, v in ((a, b), (b, c), (c, a)):
            edges[(u, v)] += 1
    # every directed edge is matched by exactly one reversed edge
    return all(count == 1 and edges[(v, u)] == 1 for (u, v), count in edges.items())


UNIT_SQUARE = [(0, 0), (1, 0), (1, 1), (0, 1)]


def test_prepare_loop_cleans_and_orients():
    loop = prepare_loop([(0, 0), (0, 1), (0, 1), (1, 1), (1, 0), (0, 0)])
    assert loop == [(1.0, 0.0), (1.0, 1.0), (0.0, 1.0), (0.0, 0.0)]


def test_triangulate_concave_outline():
    outline = [(0, 0), (4, 0), (4, 4), (2, 1), (0, 4)]
    tris = triangulate(outline)
    assert len(tris) == 3
    area = 0.0
    for a, b, c in tris:
        pa, pb, pc = outline[a], outline[b], outline[c]
        twice = (pb[0] - pa[0]) * (pc[1] - pa[1]) - (pc[0] - pa[0]) * (pb[1] - pa[1])
        assert twice > 0
        area += twice / 2.0
    assert area == pytest.approx(10.0)


def test_linear_extrude_unit_square():
    mesh = linear_extrude(UNIT_SQUARE, 2.0)
    assert isinstance(mesh, Mesh)
    assert len(mesh.vertices) == 8
    assert len(mesh.faces) == 12
    assert mesh.volume() == pytest.approx(2.0)
    assert mesh.bbox() == ((0.0, 0.0, 0.0), (1.0, 1.0, 2.0))
    assert _watertight(mesh)


def test_linear_extrude_centered_and_clockwise():
    mesh = linear_extrude(list(reversed(UNIT_SQUARE)), 2.0, center=True)
    assert mesh.volume() == pytest.approx(2.0)
    assert mesh.bbox()[0][2] == -1.0
    assert mesh.bbox()[1][2] == 1.0


def test_linear_extrude_filleted_outline():
    outline = rounded_polygon([(0, 0, 1), (20, 0, 1), (0, 12, 1), (-3, 0, 0.5),
                               (0, -6, 2), (-14, 0, 2), (0, 6, 0.5), (-3, 0, 1)], 8)
    mesh = linear_extrude(outline, 10.0)
    assert _watertight(mesh)
    # convex quarter fillets remove (4 - pi) r^2 / 4 of area, the two
    # concave ones at the slot bottom add it back
    k = (4 - math.pi) / 4
    area = 20 * 12 - 14 * 6 - k * (4 * 1 ** 2 + 2 * 0.5 ** 2) + k * (2 * 2 ** 2)
    assert mesh.volume() == pytest.approx(area * 10.0, rel=1e-3)


def test_rotate_extrude_annulus():
    steps = 36
    mesh = rotate_extrude([(1, 0), (2, 0), (2, 1), (1, 1)], steps=steps)
    polygon_factor = steps / 2.0 * math.sin(2 * math.pi / steps)
    assert mesh.volume() == pytest.approx(polygon_factor * (4 - 1) * 1.0)
    assert len(mesh.vertices) == 4 * steps
    assert _watertight(mesh)


def test_rotate_extrude_partial_is_capped():
    steps = 18
    mesh = rotate_extrude([(1, 0), (2, 0), (2, 1), (1, 1)], angle=180, steps=steps)
    wedge = 0.5 * math.sin(math.pi / steps) * (4 - 1)
    assert mesh.volume() == pytest.approx(steps * wedge)
    assert _watertight(mesh)


def test_rotate_extrude_shares_axis_vertices():
    steps = 24
    mesh = rotate_extrude([(0, 0), (1, 0), (0, 1)], steps=steps)
    assert len(mesh.vertices) == 2 + steps
    base = steps / 2.0 * math.sin(2 * math.pi / steps)
    assert mesh.volume() == pytest.approx(base / 3.0)
    assert _watertight(mesh)


def test_extrusion_input_errors():
    with pytest.raises(InvalidInputError):
        linear_extrude(UNIT_SQUARE, 0)
    with pytest.raises(InvalidInputError):
        linear_extrude([(0, 0), (1, 1), (1, 1)], 1.0)
    with pytest.raises(InvalidInputError):
        rotate_extrude([(-1, 0), (1, 0), (1, 1)])
    with pytest.raises(InvalidInputError):
        rotate_extrude(UNIT_SQUARE, steps=2)
    with pytest.raises(InvalidInputError):
        rotate_extrude(UNIT_SQUARE, angle=400)


def test_empty_mesh_has_no_bbox():
    with pytest.raises(ValueError):
        Mesh().bbox()
