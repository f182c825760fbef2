"""Cross-section profiles."""

from __future__ import annotations

from math import cos, sin
from typing import Tuple

from tubesweep.errors import ConfigurationError
from tubesweep.geom import deg2rad, isgoodnum

Vec3 = Tuple[float, float, float]
Profile = Tuple[Vec3, ...]


def regular_polygon(sides: int, radius: float) -> Profile:
    """Return a counter-clockwise regular ``sides``-gon in the local XY plane.

    Vertex ``k`` sits at ``k * 360 / sides`` degrees, starting on the
    positive X axis, with ``z == 0``.
    """

    if isinstance(sides, bool) or not isinstance(sides, int) or sides < 3:
        raise ConfigurationError(f"profile needs an integer number of sides >= 3, got {sides!r}")
    if not isgoodnum(radius) or radius <= 0:
        raise ConfigurationError(f"profile radius must be > 0, got {radius!r}")

    step = 360.0 / sides
    verts = []
    for k in range(sides):
        a = deg2rad(k * step)
        verts.append((radius * cos(a), radius * sin(a), 0.0))
    return tuple(verts)


__all__ = ["Profile", "regular_polygon"]
