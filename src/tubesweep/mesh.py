"""The indexed quad mesh produced by a sweep, and views onto it.

A ``Mesh`` is the only artifact that leaves the sweep pipeline.  It is
immutable: vertices are ``(x, y, z)`` tuples, faces are 4-tuples of
zero-based vertex indices, and ring ``i`` occupies vertex indices
``[i*ring_size, (i+1)*ring_size)``.

Faces keep the stitcher's winding (clockwise seen from outside).  The
triangulated views below flip that to counter-clockwise so that the
right-hand-rule normals they report point out of the tube.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Tuple

import numpy as np

try:
    import trimesh
except ImportError:  # pragma: no cover - optional dependency
    trimesh = None  # type: ignore[assignment]

from tubesweep.geom import pointbbox, to_vec3
from tubesweep.geometry_utils import triangle_normal

Vec3 = Tuple[float, float, float]
Quad = Tuple[int, int, int, int]
Tri = Tuple[int, int, int]
TriTuple = Tuple[Vec3, Vec3, Vec3, Vec3]


@dataclass(frozen=True)
class Mesh:
    """Indexed quad mesh of a swept tube.

    ``centers`` holds the path sample each ring was placed on; it is
    not part of the topology but lets validators tell inside from
    outside.  ``closure_gap`` is the distance between the curve's end
    and start points, bridged by the faces joining the last ring to
    the first.
    """

    vertices: Tuple[Vec3, ...]
    faces: Tuple[Quad, ...]
    ring_size: int
    centers: Tuple[Vec3, ...] = ()
    closure_gap: float = 0.0

    def __post_init__(self) -> None:
        if isinstance(self.ring_size, bool) or not isinstance(self.ring_size, int) \
                or self.ring_size < 3:
            raise ValueError(f"ring_size must be an integer >= 3, got {self.ring_size!r}")
        if len(self.vertices) % self.ring_size:
            raise ValueError(
                f"{len(self.vertices)} vertices do not form rings of {self.ring_size}"
            )
        if self.centers and len(self.centers) != self.ring_count:
            raise ValueError(
                f"{len(self.centers)} ring centers for {self.ring_count} rings"
            )

    @property
    def ring_count(self) -> int:
        return len(self.vertices) // self.ring_size

    def ring(self, i: int) -> Tuple[Vec3, ...]:
        """Vertices of ring ``i``, index-aligned with the profile."""
        if i < 0 or i >= self.ring_count:
            raise IndexError(f"ring index {i} out of range [0, {self.ring_count})")
        start = i * self.ring_size
        return self.vertices[start:start + self.ring_size]

    def ring_of(self, vertex: int) -> int:
        return vertex // self.ring_size

    def triangles(self) -> List[Tri]:
        """Split every quad into two counter-clockwise (outward) triangles."""
        tris: List[Tri] = []
        for a, b, c, d in self.faces:
            tris.append((a, d, c))
            tris.append((a, c, b))
        return tris

    def bbox(self) -> Tuple[Vec3, Vec3]:
        """Axis-aligned bounding box as ``(min, max)``."""
        if not self.vertices:
            raise ValueError("empty mesh has no bounding box")
        lo, hi = pointbbox(self.vertices)
        return to_vec3(lo), to_vec3(hi)

    def as_arrays(self) -> Tuple[np.ndarray, np.ndarray]:
        """Return ``(vertices, faces)`` as ``float64 (N, 3)`` and ``int64 (M, 4)`` arrays."""
        verts = np.asarray(self.vertices, dtype=np.float64).reshape(-1, 3)
        faces = np.asarray(self.faces, dtype=np.int64).reshape(-1, 4)
        return verts, faces

    def summary(self) -> str:
        return (f"{len(self.vertices)} vertices, {len(self.faces)} quads, "
                f"{self.ring_count} rings of {self.ring_size}")


def mesh_view(mesh: Mesh) -> Iterator[TriTuple]:
    """Yield triangles of ``mesh`` as ``(normal, v0, v1, v2)``.

    Normals are outward unit vectors.  Degenerate (zero-area)
    triangles are skipped silently.
    """

    verts = mesh.vertices
    for i0, i1, i2 in mesh.triangles():
        v0 = verts[i0]
        v1 = verts[i1]
        v2 = verts[i2]
        normal = triangle_normal(v0, v1, v2)
        if normal is None:
            continue
        yield normal, v0, v1, v2


def to_trimesh(mesh: Mesh) -> "trimesh.Trimesh":
    """Hand the mesh to ``trimesh`` as outward-wound triangles."""

    if trimesh is None:  # pragma: no cover - optional dependency
        raise RuntimeError("trimesh is not installed")
    verts, _ = mesh.as_arrays()
    faces = np.asarray(mesh.triangles(), dtype=np.int64).reshape(-1, 3)
    return trimesh.Trimesh(vertices=verts, faces=faces, process=False)


__all__ = ["Mesh", "mesh_view", "to_trimesh"]
