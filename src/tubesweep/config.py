"""Sweep configuration.

A ``SweepConfig`` is fixed for the lifetime of one generation run.  It is
validated on construction, so an instance that exists is a usable one.
Configurations can be built in code, from a mapping, or from a YAML
document::

    step_count: 150
    profile_sides: 6
    path_scale: 10.0
    tube_radius: 2.0
    twist_factor: 3.0
    curve: trefoil
    frame_mode: rmf
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from tubesweep.curves import CURVES
from tubesweep.errors import ConfigurationError
from tubesweep.geom import isgoodnum

FRAME_MODES = ("fixed", "rmf")


def _require_int(name: str, value: Any, minimum: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise ConfigurationError(f"{name} must be >= {minimum}, got {value}")


def _require_positive(name: str, value: Any) -> None:
    if not isgoodnum(value):
        raise ConfigurationError(f"{name} must be a number, got {value!r}")
    if value <= 0:
        raise ConfigurationError(f"{name} must be > 0, got {value}")


@dataclass(frozen=True)
class SweepConfig:
    """Static parameters of one sweep.

    ``twist_factor`` is the per-ring twist increment in degrees.  The
    curve named by ``curve`` must be periodic over 360 degrees for the
    tube to close cleanly; ``closure_tolerance`` turns that assumption
    into a checked precondition.
    """

    step_count: int = 150
    profile_sides: int = 6
    path_scale: float = 10.0
    tube_radius: float = 2.0
    twist_factor: float = 0.0
    curve: str = "trefoil"
    frame_mode: str = "fixed"
    strict_frames: bool = False
    closure_tolerance: Optional[float] = None
    workers: int = 1

    def __post_init__(self) -> None:
        _require_int("step_count", self.step_count, 2)
        _require_int("profile_sides", self.profile_sides, 3)
        _require_positive("path_scale", self.path_scale)
        _require_positive("tube_radius", self.tube_radius)
        if not isgoodnum(self.twist_factor):
            raise ConfigurationError(f"twist_factor must be a number, got {self.twist_factor!r}")
        if self.curve not in CURVES:
            raise ConfigurationError(
                f"unknown curve {self.curve!r}; expected one of {sorted(CURVES)}"
            )
        if self.frame_mode not in FRAME_MODES:
            raise ConfigurationError(
                f"frame_mode must be one of {FRAME_MODES}, got {self.frame_mode!r}"
            )
        if not isinstance(self.strict_frames, bool):
            raise ConfigurationError(f"strict_frames must be a boolean, got {self.strict_frames!r}")
        if self.closure_tolerance is not None:
            if not isgoodnum(self.closure_tolerance) or self.closure_tolerance < 0:
                raise ConfigurationError(
                    f"closure_tolerance must be a non-negative number, got {self.closure_tolerance!r}"
                )
        _require_int("workers", self.workers, 1)

    @property
    def vertex_count(self) -> int:
        return self.step_count * self.profile_sides

    @property
    def face_count(self) -> int:
        return self.step_count * self.profile_sides

    def replace(self, **overrides: Any) -> "SweepConfig":
        """Return a validated copy with ``overrides`` applied."""

        return dataclasses.replace(self, **overrides)

    def to_mapping(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "SweepConfig":
        if not isinstance(data, Mapping):
            raise ConfigurationError(f"configuration must be a mapping, got {type(data).__name__}")
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"unknown configuration keys: {unknown}")
        return cls(**dict(data))


def load_config(path: Path | str) -> SweepConfig:
    """Read a ``SweepConfig`` from a YAML file.

    An empty document yields the default configuration.
    """

    config_path = Path(path)
    with config_path.open("r", encoding="utf-8") as fp:
        try:
            data = yaml.safe_load(fp)
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"{config_path}: invalid YAML: {exc}") from exc
    if data is None:
        return SweepConfig()
    return SweepConfig.from_mapping(data)


__all__ = ["FRAME_MODES", "SweepConfig", "load_config"]
