# -*- coding: utf-8 -*-
from importlib.metadata import PackageNotFoundError, version


try:
    __version__ = version("tubesweep")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"

from tubesweep.config import SweepConfig, load_config
from tubesweep.errors import (
    ConfigurationError,
    DegenerateFrameError,
    IndexConsistencyError,
    SweepError,
)
from tubesweep.mesh import Mesh
from tubesweep.sweep import sweep

__all__ = [
    "__version__",
    "SweepConfig",
    "load_config",
    "Mesh",
    "sweep",
    "SweepError",
    "ConfigurationError",
    "DegenerateFrameError",
    "IndexConsistencyError",
]
