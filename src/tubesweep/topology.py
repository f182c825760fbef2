"""Stitching rings into a closed tube.

Ring ``i`` occupies vertex indices ``[i*sides, (i+1)*sides)``.  Every
ring is joined to the next one by ``sides`` quadrilaterals, and the
ring index wraps modulo ``step_count`` so the last ring is joined back
to ring 0.  No caps are generated.

The face ``(a, b, c, d)`` runs from ring ``i`` to ring ``i+1`` along
profile vertex ``j``, then back along ``j+1``.  Seen from outside the
tube it is clockwise, which is the polyhedron convention of the CSG
tools the mesh is handed to; ``Mesh.triangles()`` produces
counter-clockwise triangles for consumers expecting the opposite.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from tubesweep.errors import IndexConsistencyError

Vec3 = Tuple[float, float, float]
Quad = Tuple[int, int, int, int]


def quad_face(i: int, j: int, step_count: int, sides: int) -> Quad:
    """Indices of the quad joining ring ``i`` to ring ``i+1`` at profile edge ``j``."""

    nxt = (i + 1) % step_count
    j1 = (j + 1) % sides
    a = i * sides + j
    b = nxt * sides + j
    c = nxt * sides + j1
    d = i * sides + j1
    return (a, b, c, d)


def stitch_faces(step_count: int, sides: int) -> Tuple[Quad, ...]:
    """All ``step_count * sides`` quads, ordered by ring then profile index."""

    if step_count < 2 or sides < 3:
        raise IndexConsistencyError(
            f"cannot stitch {step_count} rings of {sides} vertices"
        )
    return tuple(quad_face(i, j, step_count, sides)
                 for i in range(step_count)
                 for j in range(sides))


def assemble_vertices(rings: Sequence[Sequence[Vec3]], sides: int) -> Tuple[Vec3, ...]:
    """Concatenate rings into one vertex buffer, checking every ring's size."""

    verts: List[Vec3] = []
    for i, ring in enumerate(rings):
        if len(ring) != sides:
            raise IndexConsistencyError(
                f"ring {i} has {len(ring)} vertices, expected {sides}"
            )
        verts.extend(ring)
    return tuple(verts)


__all__ = ["Quad", "quad_face", "stitch_faces", "assemble_vertices"]
