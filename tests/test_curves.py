import math

import pytest

from tubesweep.curves import CURVES, circle, curve_by_name, torus_knot, trefoil
from tubesweep.errors import ConfigurationError
from tubesweep.geom import dist, mag


@pytest.mark.parametrize('name', sorted(CURVES))
def test_curves_are_periodic(name):
    f = curve_by_name(name, 3.0)
    assert dist(f(0.0), f(360.0)) < 1e-9
    assert dist(f(45.0), f(405.0)) < 1e-9


def test_trefoil_values():
    f = trefoil(2.0)
    p = f(0.0)
    assert p[:3] == pytest.approx([0.0, -2.0, 0.0], abs=1e-12)
    assert p[3] == 1.0
    q = f(90.0)
    # sin 90 + 2 sin 180, cos 90 - 2 cos 180, -sin 270
    assert q[:3] == pytest.approx([2.0, 4.0, 2.0], abs=1e-12)


def test_circle_radius():
    f = circle(4.0)
    for t in range(0, 360, 30):
        assert mag(f(float(t))) == pytest.approx(4.0)


def test_torus_knot_stays_on_torus():
    f = torus_knot(10.0, p=2, q=3, ratio=0.4)
    for t in range(0, 360, 15):
        x, y, z = f(float(t))[:3]
        ring = math.hypot(x, y) - 10.0
        assert math.hypot(ring, z) == pytest.approx(4.0)


def test_unknown_curve():
    with pytest.raises(ConfigurationError):
        curve_by_name('spirograph')
