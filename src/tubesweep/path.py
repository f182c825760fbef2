"""Path sampling.

``sample_path`` evaluates a curve at ``step_count + 1`` evenly spaced
parameter values from 0 to 360 degrees inclusive.  The last sample is
kept even though the stitcher never builds a ring on it: it is the
evidence used to judge whether the curve actually closes.
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence, Tuple

from tubesweep.errors import ConfigurationError
from tubesweep.geom import dist, isgoodnum, to_vec3

logger = logging.getLogger(__name__)

Vec3 = Tuple[float, float, float]
Path = Tuple[Vec3, ...]


def sample_path(curve: Callable[[float], Sequence[float]], step_count: int) -> Path:
    """Return ``step_count + 1`` samples of ``curve`` at ``i * 360 / step_count`` degrees."""

    if isinstance(step_count, bool) or not isinstance(step_count, int) or step_count < 2:
        raise ConfigurationError(f"step_count must be an integer >= 2, got {step_count!r}")
    if not callable(curve):
        raise ConfigurationError(f"curve must be callable, got {curve!r}")

    step = 360.0 / step_count
    samples = []
    for i in range(step_count + 1):
        p = curve(i * step)
        if len(p) < 3 or not all(isgoodnum(c) for c in p[:3]):
            raise ConfigurationError(f"curve returned a bad point at t={i * step}: {p!r}")
        samples.append(to_vec3(p))
    return tuple(samples)


def closure_gap(path: Path) -> float:
    """Distance between the last and first samples of ``path``."""

    if len(path) < 2:
        raise ConfigurationError("path must contain at least two samples")
    return dist(path[-1], path[0])


def path_extent(path: Path) -> float:
    """Largest absolute coordinate in ``path``; a scale for tolerances."""

    return max(abs(c) for p in path for c in p)


def check_closure(path: Path, tolerance: float | None = None) -> float:
    """Verify that ``path`` closes on itself and return the gap.

    With an explicit ``tolerance`` an open path is a configuration
    error.  Without one, a gap beyond rounding noise is only logged,
    and stitching proceeds as if the path were closed.
    """

    gap = closure_gap(path)
    if tolerance is not None:
        if gap > tolerance:
            raise ConfigurationError(
                f"curve does not close: gap {gap:.6g} exceeds closure tolerance {tolerance:.6g}"
            )
        return gap
    noise = 1e-9 * max(1.0, path_extent(path))
    if gap > noise:
        logger.warning("curve is not periodic over 360 degrees; closure gap %.6g "
                       "will be bridged by the last ring", gap)
    return gap


__all__ = ["Path", "sample_path", "closure_gap", "path_extent", "check_closure"]
