"""Common geometric helpers shared by the mesh view and validators."""

from __future__ import annotations

from typing import Sequence, Tuple

from tubesweep.geom import cross, epsilon, mag

Vec3 = Tuple[float, float, float]


def triangle_normal(v0: Vec3, v1: Vec3, v2: Vec3) -> Vec3 | None:
    """Return the unit right-hand-rule normal of a triangle or ``None`` if degenerate.

    Degeneracy is judged by the angle between the edges, so the test
    does not depend on the size of the triangle.
    """

    ax, ay, az = v1[0] - v0[0], v1[1] - v0[1], v1[2] - v0[2]
    bx, by, bz = v2[0] - v0[0], v2[1] - v0[1], v2[2] - v0[2]
    n = cross([ax, ay, az, 1.0], [bx, by, bz, 1.0])
    length = mag(n)
    if length <= epsilon * epsilon * mag([ax, ay, az]) * mag([bx, by, bz]):
        return None
    return (n[0] / length, n[1] / length, n[2] / length)


def centroid(points: Sequence[Vec3]) -> Vec3:
    """Return the average of ``points``."""

    n = float(len(points))
    return (
        sum(p[0] for p in points) / n,
        sum(p[1] for p in points) / n,
        sum(p[2] for p in points) / n,
    )


__all__ = [
    "Vec3",
    "triangle_normal",
    "centroid",
]
