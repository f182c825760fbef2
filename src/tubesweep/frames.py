"""Local frames along a sampled path.

A frame is an orthonormal, right-handed basis attached to one path
sample: ``z`` is the tangent, ``x`` the normal and ``y`` the binormal,
with ``cross(x, y) == z``.  The profile's local X and Y axes are mapped
onto ``x`` and ``y``.

Two strategies are provided:

``fixed``
    Each frame is derived independently from its tangent and a fixed
    ``up`` reference, ``x = normalize(up x z)``, ``y = z x x``.  Fast
    and trivially parallel, but undefined where the tangent is parallel
    to ``up``.  There the solver falls back to the cardinal axis least
    aligned with the tangent, or raises if ``strict`` is set.

``rmf``
    Rotation-minimizing frames propagated from sample to sample with
    the double reflection method (Wang, Juttler, Zheng and Liu, 2008).
    The first frame is the fixed-reference one.  A closed curve
    generally returns to its start with the frame rotated about the
    tangent; that residual angle is spread evenly over the rings so
    the seam between the last ring and the first does not jump.

Tangents are forward differences ``path[i+1] - path[i]`` with indices
taken modulo ``step_count`` (``len(path) - 1``), so the last ring looks
back at sample 0, never at the duplicate closing sample.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from math import atan2, cos, sin
from typing import List, Optional, Sequence, Tuple

from tubesweep.errors import DegenerateFrameError
from tubesweep.geom import cross, direction, dot, epsilon, mag, normalize, scale3, sub, to_vec3
from tubesweep.path import path_extent
from tubesweep.xform import Basis, Matrix

logger = logging.getLogger(__name__)

Vec3 = Tuple[float, float, float]

UP: Vec3 = (0.0, 0.0, 1.0)
# tangents shorter than this fraction of the path extent count as zero-length
TANGENT_RTOL = 1e-12
_CARDINALS: Tuple[Vec3, ...] = ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))


@dataclass(frozen=True)
class Frame:
    """Orthonormal basis at one path sample; translation is applied separately."""

    x: Vec3
    y: Vec3
    z: Vec3

    def matrix(self) -> Matrix:
        """4x4 rotation with the basis vectors as columns and zero translation."""
        return Basis(direction(self.x), direction(self.y), direction(self.z))

    def rotated(self, angle: float) -> "Frame":
        """Return this frame rotated right-handedly about its tangent by ``angle`` radians."""
        ca = cos(angle)
        sa = sin(angle)
        x = direction(ca * self.x[0] + sa * self.y[0],
                      ca * self.x[1] + sa * self.y[1],
                      ca * self.x[2] + sa * self.y[2])
        return _frame(self.z, x)


def _frame(z, x) -> Frame:
    y = cross(z, x)
    return Frame(x=to_vec3(x), y=to_vec3(y), z=to_vec3(z))


def _least_aligned_axis(z) -> Vec3:
    return min(_CARDINALS, key=lambda axis: abs(dot(axis, z)))


def _unit_tangent(vec, index: Optional[int], tol: float = 0.0):
    m = mag(vec)
    if m <= tol:
        raise DegenerateFrameError(
            "zero-length tangent; consecutive path samples coincide", index
        )
    return direction(vec[0] / m, vec[1] / m, vec[2] / m)


def _tangent_tolerance(path) -> float:
    return TANGENT_RTOL * path_extent(path)


def frame_axes(tangent, up: Sequence[float] = UP, *, index: Optional[int] = None,
               strict: bool = False, tol: float = 0.0) -> Frame:
    """Build the fixed-reference frame for tangent direction ``tangent``.

    ``index`` only labels errors and log messages.  A tangent no longer
    than ``tol`` is treated as zero-length.
    """

    z = _unit_tangent(tangent, index, tol)
    ref = cross(up, z)
    if mag(ref) <= epsilon:
        if strict:
            raise DegenerateFrameError(
                "tangent is parallel to the up reference vector", index
            )
        alt = _least_aligned_axis(z)
        logger.debug("sample %s: tangent parallel to up, using reference %s", index, alt)
        ref = cross(alt, z)
    x = normalize(ref)
    return _frame(z, x)


def frame_matrix(tangent, up: Sequence[float] = UP, *, index: Optional[int] = None,
                 strict: bool = False) -> Matrix:
    """Return the 4x4 rotation (zero translation) for tangent direction ``tangent``."""

    return frame_axes(tangent, up, index=index, strict=strict).matrix()


def tangents(path: Sequence[Sequence[float]]) -> List[list]:
    """Forward-difference tangent directions, one per ring, unnormalized."""

    n = len(path) - 1
    if n < 2:
        raise DegenerateFrameError("path needs at least three samples to define tangents")
    return [sub(path[(i + 1) % n], path[i]) for i in range(n)]


def fixed_frames(path: Sequence[Sequence[float]], up: Sequence[float] = UP, *,
                 strict: bool = False) -> List[Frame]:
    """Independent fixed-reference frames, one per ring."""

    tol = _tangent_tolerance(path)
    return [frame_axes(d, up, index=i, strict=strict, tol=tol)
            for i, d in enumerate(tangents(path))]


def _reflect(v, axis, c):
    # reflection of v in the plane through the origin normal to axis, c = |axis|^2
    return sub(v, scale3(axis, 2.0 / c * dot(axis, v)))


def rotation_minimizing_frames(path: Sequence[Sequence[float]], up: Sequence[float] = UP, *,
                               strict: bool = False) -> List[Frame]:
    """Double-reflection rotation-minimizing frames, one per ring, seam-corrected."""

    dirs = tangents(path)
    n = len(dirs)
    tol = _tangent_tolerance(path)
    ts = [_unit_tangent(d, i, tol) for i, d in enumerate(dirs)]

    first = frame_axes(dirs[0], up, index=0, strict=strict, tol=tol)
    frames = [first]
    r = direction(first.x)
    r_wrap = r
    for i in range(n):
        v1 = dirs[i]
        c1 = dot(v1, v1)
        r_l = _reflect(r, v1, c1)
        t_l = _reflect(ts[i], v1, c1)
        t_next = ts[(i + 1) % n]
        v2 = sub(t_next, t_l)
        c2 = dot(v2, v2)
        r_next = r_l if c2 <= epsilon * epsilon else _reflect(r_l, v2, c2)
        # drift control: keep r exactly perpendicular to the tangent
        r_next = normalize(sub(r_next, scale3(t_next, dot(r_next, t_next))))
        if i + 1 < n:
            frames.append(_frame(t_next, r_next))
            r = r_next
        else:
            r_wrap = r_next

    r0 = direction(first.x)
    seam = atan2(dot(cross(r_wrap, r0), ts[0]), dot(r_wrap, r0))
    if abs(seam) > epsilon:
        logger.debug("distributing %.6g rad of frame holonomy over %d rings", seam, n)
        frames = [f.rotated(seam * i / n) for i, f in enumerate(frames)]
    return frames


def solve_frames(path: Sequence[Sequence[float]], mode: str = "fixed",
                 up: Sequence[float] = UP, *, strict: bool = False) -> List[Frame]:
    """Dispatch to the frame strategy named by ``mode``."""

    if mode == "fixed":
        return fixed_frames(path, up, strict=strict)
    if mode == "rmf":
        return rotation_minimizing_frames(path, up, strict=strict)
    raise ValueError(f"unknown frame mode {mode!r}")


__all__ = [
    "UP",
    "TANGENT_RTOL",
    "Frame",
    "frame_axes",
    "frame_matrix",
    "tangents",
    "fixed_frames",
    "rotation_minimizing_frames",
    "solve_frames",
]
