"""Validation helpers for swept meshes."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import List, Sequence

from tubesweep.frames import Frame
from tubesweep.geom import cross, dist, dot, epsilon, mag
from tubesweep.geometry_utils import centroid, triangle_normal
from tubesweep.mesh import Mesh


def is_closed_path(points: Sequence[Sequence[float]], tol: float = epsilon) -> bool:
    """Return ``True`` if a sampled path ends where it starts, within ``tol``."""

    if len(points) < 2:
        return False
    return dist(points[0], points[-1]) <= tol


def frame_is_orthonormal(frame: Frame, tol: float = 1e-9) -> bool:
    """Unit axes, mutually perpendicular, and ``cross(x, y) == z``."""

    x, y, z = frame.x, frame.y, frame.z
    for axis in (x, y, z):
        if abs(mag(axis) - 1.0) > tol:
            return False
    if abs(dot(x, y)) > tol or abs(dot(x, z)) > tol or abs(dot(y, z)) > tol:
        return False
    xy = cross(x, y)
    return all(abs(xy[k] - z[k]) <= tol for k in range(3))


def faces_oriented(mesh: Mesh) -> "CheckResult":
    """Check that every outward triangle normal points away from its ring center."""

    if not mesh.centers:
        raise ValueError('faces_oriented needs a mesh with ring centers')

    verts = mesh.vertices
    inward = []
    degenerate = 0
    for idx, tri in enumerate(mesh.triangles()):
        v0, v1, v2 = verts[tri[0]], verts[tri[1]], verts[tri[2]]
        normal = triangle_normal(v0, v1, v2)
        if normal is None:
            degenerate += 1
            continue
        center = mesh.centers[mesh.ring_of(tri[0])]
        mid = centroid((v0, v1, v2))
        outward = (mid[0] - center[0], mid[1] - center[1], mid[2] - center[2])
        if dot(normal, outward) < 0:
            inward.append(idx // 2)

    warnings: List[str] = []
    if degenerate:
        warnings.append(f'{degenerate} degenerate triangles skipped')
    if inward:
        faces = sorted(set(inward))
        return CheckResult(False, warnings + [f'inward-facing faces: {faces}'])
    return CheckResult(True, warnings)


def mesh_watertight(mesh: Mesh) -> "CheckResult":
    """Every edge shared by exactly two faces, traversed once in each direction."""

    edges = Counter()
    directed = Counter()

    for face in mesh.faces:
        for k in range(len(face)):
            a = face[k]
            b = face[(k + 1) % len(face)]
            edges[_edge_key(a, b)] += 1
            directed[(a, b)] += 1

    boundary = [edge for edge, count in edges.items() if count == 1]
    invalid = [edge for edge, count in edges.items() if count > 2]
    flipped = [edge for edge, count in directed.items() if count > 1]

    warnings: List[str] = []
    ok = True
    if boundary:
        ok = False
        warnings.append(f'{len(boundary)} boundary edges detected')
    if invalid:
        ok = False
        warnings.append(f'edges with multiplicity >2: {invalid}')
    if flipped:
        ok = False
        warnings.append(f'{len(flipped)} edges traversed twice in the same direction')

    return CheckResult(ok, warnings)


def _edge_key(a: int, b: int) -> tuple[int, int]:
    return (a, b) if a < b else (b, a)


@dataclass
class CheckResult:
    ok: bool
    warnings: List[str]

    def __bool__(self) -> bool:
        return self.ok


__all__ = [
    'CheckResult',
    'is_closed_path',
    'frame_is_orthonormal',
    'faces_oriented',
    'mesh_watertight',
]
