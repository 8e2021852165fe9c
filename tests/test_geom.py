import math

import pytest

from polyround.geom import (
    angle_between,
    arc_radius_from_chord,
    close,
    cosine_rule_angle,
    cross,
    dist,
    rotate,
    sas_side,
    signed_area,
    tangent_length,
    unit,
    vclose,
    vec,
)


def test_vector_basics():
    assert vec([1, 2, 3]) == (1.0, 2.0)
    assert dist((0, 0), (3, 4)) == 5.0
    assert cross((1, 0), (0, 1)) == 1.0
    assert unit((0, 5)) == (0.0, 1.0)
    assert vclose(rotate((1, 0), 90), (0, 1))
    assert vclose(rotate((2, 1), 180, center=(1, 1)), (0, 1))
    assert close(angle_between((1, 0), (-1, 1e-9)), math.pi)


def test_degenerate_vectors():
    with pytest.raises(ValueError):
        unit((0, 0))
    with pytest.raises(ValueError):
        vec([1])


def test_signed_area_winding():
    square = [(0, 0), (2, 0), (2, 2), (0, 2)]
    assert signed_area(square) == 4.0
    assert signed_area(list(reversed(square))) == -4.0


def test_arc_radius_from_chord():
    # a semicircle: chord is the diameter, height the radius
    assert arc_radius_from_chord(2.0, 1.0) == 1.0
    assert arc_radius_from_chord(2.0, 0.5) == pytest.approx(1.25)
    with pytest.raises(ValueError):
        arc_radius_from_chord(2.0, 0.0)


def test_tangent_length():
    assert tangent_length(1.0, math.pi / 2) == pytest.approx(1.0)
    assert tangent_length(1.0, math.pi / 3) == pytest.approx(math.sqrt(3))
    with pytest.raises(ValueError):
        tangent_length(1.0, 0.0)


def test_law_of_cosines():
    assert sas_side(3.0, 4.0, math.pi / 2) == pytest.approx(5.0)
    assert sas_side(1.0, 1.0, 0.0) == 0.0
    assert cosine_rule_angle(3.0, 4.0, 5.0) == pytest.approx(math.pi / 2)
    assert cosine_rule_angle(1.0, 1.0, 1.0) == pytest.approx(math.pi / 3)
    with pytest.raises(ValueError):
        cosine_rule_angle(1.0, 1.0, 3.0)
