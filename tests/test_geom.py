import math

import pytest

from tubesweep.geom import (
    cross,
    deg2rad,
    direction,
    dist,
    dot,
    epsilon,
    isgoodnum,
    mag,
    normalize,
    point,
    pointbbox,
    scale3,
    sub,
    to_vec3,
    vect,
)


def test_isgoodnum_rejects_booleans():
    assert isgoodnum(1)
    assert isgoodnum(2.5)
    assert not isgoodnum(True)
    assert not isgoodnum('1')


def test_point_and_direction_w():
    assert point(1, 2, 3) == [1, 2, 3, 1.0]
    assert point((1, 2)) == [1.0, 2.0, 0.0, 1.0]
    assert direction(1, 0, 0)[3] == 0.0
    assert direction((0.0, 1.0, 0.0)) == [0.0, 1.0, 0.0, 0.0]


def test_vector_arithmetic():
    a = vect(1, 2, 3)
    b = vect(4, 5, 6)
    assert sub(b, a)[:3] == [3, 3, 3]
    assert scale3(a, 2)[:3] == [2, 4, 6]
    assert dot(a, b) == 32
    assert cross(vect(1, 0, 0), vect(0, 1, 0))[:3] == [0, 0, 1]
    assert mag(vect(3, 4, 0)) == 5.0
    assert dist(point(0, 0, 0), point(0, 3, 4)) == 5.0


def test_normalize():
    n = normalize(vect(0, 0, 7))
    assert n == [0.0, 0.0, 1.0, 0.0]
    with pytest.raises(ValueError):
        normalize(vect(0, 0, 0))
    with pytest.raises(ValueError):
        normalize(vect(epsilon / 10, 0, 0))


def test_deg2rad_and_to_vec3():
    assert math.isclose(deg2rad(180.0), math.pi)
    assert to_vec3([1, 2, 3, 1]) == (1.0, 2.0, 3.0)


def test_pointbbox():
    lo, hi = pointbbox([(0, 5, -1), (2, -3, 4), (1, 1, 1)])
    assert lo[:3] == [0.0, -3.0, -1.0]
    assert hi[:3] == [2.0, 5.0, 4.0]
    with pytest.raises(ValueError):
        pointbbox([])
