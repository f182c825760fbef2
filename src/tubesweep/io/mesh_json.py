"""Mesh JSON serialization/deserialization helpers.

The document is the hand-off format for downstream CSG, rendering and
export tools::

    {
      "schema": "tubesweep-mesh-json-v0.1",
      "units": "mm",
      "generator": {"name": "tubesweep", "version": "..."},
      "boundingBox": [xmin, ymin, zmin, xmax, ymax, zmax],
      "topology": {"faceSize": 4, "winding": "cw-outside", "ringSize": 6},
      "vertices": [[x, y, z], ...],
      "faces": [[a, b, c, d], ...],
      "centers": [[x, y, z], ...],
      "closureGap": 0.0
    }
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence

from tubesweep import __version__ as _tubesweep_version
from tubesweep.geom import isgoodnum
from tubesweep.mesh import Mesh

SCHEMA_ID = "tubesweep-mesh-json-v0.1"
WINDING = "cw-outside"


def _float_vec(vec: Iterable[float]) -> List[float]:
    return [float(c) for c in vec]


def _int_vec(vec: Iterable[int]) -> List[int]:
    return [int(c) for c in vec]


def _vec3(components: Sequence[Any], what: str) -> tuple:
    if len(components) != 3:
        raise ValueError(f"{what} must have three components, got {components!r}")
    return (float(components[0]), float(components[1]), float(components[2]))


def mesh_to_json(mesh: Mesh, *, units: str = "mm",
                 generator: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return a JSON-serialisable document describing ``mesh``."""

    if generator is None:
        generator = {"name": "tubesweep", "version": _tubesweep_version}
    bbox = None
    if mesh.vertices:
        lo, hi = mesh.bbox()
        bbox = _float_vec(lo) + _float_vec(hi)
    return {
        "schema": SCHEMA_ID,
        "units": units,
        "generator": generator,
        "boundingBox": bbox,
        "topology": {
            "faceSize": 4,
            "winding": WINDING,
            "ringSize": mesh.ring_size,
        },
        "vertices": [_float_vec(v) for v in mesh.vertices],
        "faces": [_int_vec(face) for face in mesh.faces],
        "centers": [_float_vec(c) for c in mesh.centers],
        "closureGap": float(mesh.closure_gap),
    }


def mesh_from_json(doc: Dict[str, Any]) -> Mesh:
    """Rebuild a ``Mesh`` from a document produced by :func:`mesh_to_json`."""

    schema = doc.get("schema")
    if schema != SCHEMA_ID:
        raise ValueError(f"unsupported mesh schema {schema!r}")
    topology = doc.get("topology") or {}
    if topology.get("faceSize") != 4 or topology.get("winding") != WINDING:
        raise ValueError(f"unsupported mesh topology {topology!r}")
    ring_size = int(topology.get("ringSize", 0))
    if ring_size < 3:
        raise ValueError(f"bad ring size {ring_size}")

    vertices = tuple(_vec3(v, "vertex") for v in doc.get("vertices", []))
    if len(vertices) % ring_size:
        raise ValueError(f"{len(vertices)} vertices do not form rings of {ring_size}")
    ring_count = len(vertices) // ring_size
    faces = []
    for face in doc.get("faces", []):
        if len(face) != 4:
            raise ValueError(f"face must have four indices, got {face!r}")
        idx = tuple(int(i) for i in face)
        if any(i < 0 or i >= len(vertices) for i in idx):
            raise ValueError(f"face {idx} references a missing vertex")
        faces.append(idx)
    centers = tuple(_vec3(c, "center") for c in doc.get("centers", []))
    if centers and len(centers) != ring_count:
        raise ValueError(f"{len(centers)} ring centers for {ring_count} rings")
    gap = doc.get("closureGap", 0.0)
    if not isgoodnum(gap) or gap < 0:
        raise ValueError(f"bad closure gap {gap!r}")
    return Mesh(vertices=vertices, faces=tuple(faces), ring_size=ring_size,
                centers=centers, closure_gap=float(gap))


def write_mesh_json(mesh: Mesh, path_or_file, **kwargs: Any) -> None:
    """Write ``mesh`` as JSON to a filesystem path or an open text stream."""

    doc = mesh_to_json(mesh, **kwargs)
    if hasattr(path_or_file, "write"):
        json.dump(doc, path_or_file, indent=2)
        path_or_file.write("\n")
        return
    target = Path(path_or_file)
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as fp:
        json.dump(doc, fp, indent=2)
        fp.write("\n")


def read_mesh_json(path_or_file) -> Mesh:
    """Read a mesh JSON document from a path or an open text stream."""

    if hasattr(path_or_file, "read"):
        doc = json.load(path_or_file)
    else:
        with open(path_or_file, "r", encoding="utf-8") as fp:
            doc = json.load(fp)
    return mesh_from_json(doc)


__all__ = [
    "SCHEMA_ID",
    "mesh_to_json",
    "mesh_from_json",
    "write_mesh_json",
    "read_mesh_json",
]
