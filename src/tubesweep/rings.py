"""Placing the profile along the path.

Each ring is the profile twisted about the local Z axis, then rotated
into the frame, then translated to the path sample.  The three steps
are composed into one matrix, ``T(origin) . F . R_z(twist)``, which
fixes the order: twist first, translation last.
"""

from __future__ import annotations

from typing import Sequence, Tuple

from tubesweep.frames import Frame
from tubesweep.geom import point, to_vec3
from tubesweep.xform import Matrix, Rotation, Translation

Vec3 = Tuple[float, float, float]
Ring = Tuple[Vec3, ...]

_LOCAL_Z = [0.0, 0.0, 1.0, 0.0]


def twist_matrix(angle: float) -> Matrix:
    """Rotation by ``angle`` degrees about the profile's local Z axis."""

    return Rotation(_LOCAL_Z, angle)


def ring_transform(frame: Frame, origin: Sequence[float], twist: float = 0.0) -> Matrix:
    """Compose twist, frame rotation and translation into one matrix."""

    placed = Translation(origin).mul(frame.matrix())
    if twist:
        return placed.mul(twist_matrix(twist))
    return placed


def transform_ring(profile: Sequence[Sequence[float]], frame: Frame,
                   origin: Sequence[float], twist: float = 0.0) -> Ring:
    """Return the ring of world-space vertices for one path sample.

    Ring vertex ``j`` is always the image of profile vertex ``j``.
    """

    m = ring_transform(frame, origin, twist)
    return tuple(to_vec3(m.mul(point(p))) for p in profile)


__all__ = ["Ring", "twist_matrix", "ring_transform", "transform_ring"]
