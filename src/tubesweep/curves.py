"""Periodic parametric curves for sweeping.

Every factory takes a ``scale`` and returns a function ``f(t)`` mapping
a parameter in **degrees** to a point.  The curves are periodic over
360 degrees, so ``f(0)`` and ``f(360)`` coincide up to rounding, which
is what lets the stitcher close the tube by wrapping the last ring to
the first.
"""

from __future__ import annotations

from math import cos, sin
from typing import Callable, Dict, List

from tubesweep.errors import ConfigurationError
from tubesweep.geom import deg2rad, point

Curve = Callable[[float], List[float]]


def trefoil(scale: float = 1.0) -> Curve:
    """Return the classic trefoil knot scaled by ``scale``."""

    def f(t):
        r = deg2rad(t)
        return point(scale * (sin(r) + 2.0 * sin(2.0 * r)),
                     scale * (cos(r) - 2.0 * cos(2.0 * r)),
                     scale * -sin(3.0 * r))

    return f


def torus_knot(scale: float = 1.0, p: int = 2, q: int = 3, ratio: float = 0.4) -> Curve:
    """Return a ``(p, q)`` torus knot.

    The knot winds ``p`` times around the torus axis and ``q`` times
    through the hole; ``ratio`` is the tube-to-center radius ratio of the
    underlying torus.
    """

    def f(t):
        r = deg2rad(t)
        rad = 1.0 + ratio * cos(q * r)
        return point(scale * rad * cos(p * r),
                     scale * rad * sin(p * r),
                     scale * ratio * sin(q * r))

    return f


def circle(scale: float = 1.0) -> Curve:
    """Return a circle of radius ``scale`` in the XY plane."""

    def f(t):
        r = deg2rad(t)
        return point(scale * cos(r), scale * sin(r), 0.0)

    return f


CURVES: Dict[str, Callable[..., Curve]] = {
    "trefoil": trefoil,
    "torus_knot": torus_knot,
    "circle": circle,
}


def curve_by_name(name: str, scale: float = 1.0) -> Curve:
    """Look up a registered curve factory and apply ``scale``."""

    try:
        factory = CURVES[name]
    except KeyError:
        raise ConfigurationError(
            f"unknown curve {name!r}; expected one of {sorted(CURVES)}"
        ) from None
    return factory(scale)


__all__ = ["Curve", "CURVES", "trefoil", "torus_knot", "circle", "curve_by_name"]
