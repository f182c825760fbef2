"""Sweep a profile along a closed parametric curve.

The pipeline runs in five stages, each a plain function over immutable
data::

    sample_path -> regular_polygon -> solve_frames -> transform_ring -> stitch

Everything after frame solving depends only on the ring index, so ring
transformation can be spread over a thread pool (``workers > 1``);
results are collected in index order and the output is identical to a
sequential run.

Example::

    from tubesweep import SweepConfig, sweep

    mesh = sweep(SweepConfig(step_count=150, profile_sides=6, twist_factor=3))
    verts, faces = mesh.as_arrays()
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional, Sequence

from tubesweep.config import SweepConfig
from tubesweep.curves import curve_by_name
from tubesweep.errors import ConfigurationError, IndexConsistencyError
from tubesweep.frames import Frame, solve_frames
from tubesweep.mesh import Mesh
from tubesweep.path import Path, check_closure, sample_path
from tubesweep.profile import Profile, regular_polygon
from tubesweep.rings import Ring, transform_ring
from tubesweep.topology import assemble_vertices, stitch_faces

logger = logging.getLogger(__name__)

CurveFunc = Callable[[float], Sequence[float]]


def build_rings(path: Path, profile: Profile, frames: Sequence[Frame],
                twist_factor: float = 0.0, workers: int = 1) -> List[Ring]:
    """Place one twisted copy of ``profile`` on each of the first ``len(frames)`` samples."""

    if len(frames) != len(path) - 1:
        raise IndexConsistencyError(
            f"{len(frames)} frames for a path of {len(path)} samples"
        )

    def ring(i: int) -> Ring:
        return transform_ring(profile, frames[i], path[i], i * twist_factor)

    indices = range(len(frames))
    if workers > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            return list(pool.map(ring, indices))
    return [ring(i) for i in indices]


def sweep(config: Optional[SweepConfig] = None, curve: Optional[CurveFunc] = None) -> Mesh:
    """Generate the tube mesh described by ``config``.

    ``curve`` overrides the named curve in ``config``; it must accept a
    parameter in degrees and be periodic over 360.  Raises
    ``ConfigurationError`` or ``DegenerateFrameError`` before any mesh
    is produced; there is no partial output.
    """

    if config is None:
        config = SweepConfig()
    if not isinstance(config, SweepConfig):
        raise ConfigurationError(f"expected a SweepConfig, got {type(config).__name__}")
    label = config.curve if curve is None else getattr(curve, "__name__", "custom curve")
    if curve is None:
        curve = curve_by_name(config.curve, config.path_scale)
    elif not callable(curve):
        raise ConfigurationError(f"curve must be callable, got {curve!r}")

    steps = config.step_count
    sides = config.profile_sides

    path = sample_path(curve, steps)
    gap = check_closure(path, config.closure_tolerance)
    profile = regular_polygon(sides, config.tube_radius)
    frames = solve_frames(path, config.frame_mode, strict=config.strict_frames)
    logger.debug("sampled %d path points (closure gap %.3g), %s frames",
                 len(path), gap, config.frame_mode)

    rings = build_rings(path, profile, frames, config.twist_factor, config.workers)
    vertices = assemble_vertices(rings, sides)
    faces = stitch_faces(steps, sides)

    if len(vertices) != config.vertex_count or len(faces) != config.face_count:
        raise IndexConsistencyError(
            f"built {len(vertices)} vertices and {len(faces)} faces, "
            f"expected {config.vertex_count} of each"
        )

    mesh = Mesh(vertices=vertices, faces=faces, ring_size=sides,
                centers=tuple(path[:steps]), closure_gap=gap)
    logger.info("swept %s: %s", label, mesh.summary())
    return mesh


__all__ = ["build_rings", "sweep"]
