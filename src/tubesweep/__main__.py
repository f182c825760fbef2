#!/usr/bin/env python3
"""
CLI for the tubesweep mesh generator.

Usage:
    python -m tubesweep [--config FILE.yaml] [overrides ...] [--check] [--output FILE.json]

Examples:
    # Default trefoil tube, summary only
    python -m tubesweep

    # Hexagonal trefoil with a 3 degree per-ring twist, validated and saved
    python -m tubesweep --steps 150 --sides 6 --twist 3 --check --output knot.json

    # Start from a YAML configuration and override the frame strategy
    python -m tubesweep --config knot.yaml --frames rmf
"""

import argparse
import logging
import sys
from typing import List, Optional

from tubesweep import __version__
from tubesweep.config import FRAME_MODES, SweepConfig, load_config
from tubesweep.curves import CURVES
from tubesweep.errors import SweepError
from tubesweep.geometry_checks import faces_oriented, mesh_watertight
from tubesweep.io.mesh_json import write_mesh_json
from tubesweep.sweep import sweep

# command-line option -> SweepConfig field
_OVERRIDES = {
    "steps": "step_count",
    "sides": "profile_sides",
    "scale": "path_scale",
    "radius": "tube_radius",
    "twist": "twist_factor",
    "curve": "curve",
    "frames": "frame_mode",
    "closure_tol": "closure_tolerance",
    "workers": "workers",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tubesweep",
        description="Sweep a polygonal profile along a closed parametric curve",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", help="YAML configuration file")
    parser.add_argument("--steps", type=int, help="number of path samples (>= 2)")
    parser.add_argument("--sides", type=int, help="profile polygon sides (>= 3)")
    parser.add_argument("--scale", type=float, help="curve scale factor")
    parser.add_argument("--radius", type=float, help="tube radius")
    parser.add_argument("--twist", type=float, help="twist per ring, degrees")
    parser.add_argument("--curve", choices=sorted(CURVES), help="named curve")
    parser.add_argument("--frames", choices=FRAME_MODES, help="frame strategy")
    parser.add_argument("--strict-frames", action="store_true", default=None,
                        help="fail instead of falling back when the tangent is parallel to up")
    parser.add_argument("--closure-tol", type=float,
                        help="fail if the curve does not close within this distance")
    parser.add_argument("--workers", type=int, help="threads used to place rings")
    parser.add_argument("--output", "-o", help="write the mesh as JSON to this file")
    parser.add_argument("--check", action="store_true",
                        help="verify face orientation and watertightness")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="count", default=0)
    verbosity.add_argument("-q", "--quiet", action="store_true")
    return parser


def config_from_args(args: argparse.Namespace) -> SweepConfig:
    """Load the base configuration, then apply command-line overrides."""

    config = load_config(args.config) if args.config else SweepConfig()
    overrides = {}
    for option, field_name in _OVERRIDES.items():
        value = getattr(args, option)
        if value is not None:
            overrides[field_name] = value
    if args.strict_frames:
        overrides["strict_frames"] = True
    if overrides:
        config = config.replace(**overrides)
    return config


def _configure_logging(args: argparse.Namespace) -> None:
    if args.quiet:
        level = logging.ERROR
    elif args.verbose >= 2:
        level = logging.DEBUG
    elif args.verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args)

    try:
        config = config_from_args(args)
        mesh = sweep(config)
    except SweepError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    lo, hi = mesh.bbox()
    print(f"{config.curve}: {mesh.summary()}")
    print(f"  bounding box: ({lo[0]:.4g}, {lo[1]:.4g}, {lo[2]:.4g}) - "
          f"({hi[0]:.4g}, {hi[1]:.4g}, {hi[2]:.4g})")
    print(f"  closure gap: {mesh.closure_gap:.4g}")

    status = 0
    if args.check:
        for name, result in (("orientation", faces_oriented(mesh)),
                             ("watertight", mesh_watertight(mesh))):
            print(f"  {name}: {'ok' if result else 'FAILED'}")
            for warning in result.warnings:
                print(f"    {warning}")
            if not result:
                status = 1

    if args.output:
        try:
            write_mesh_json(mesh, args.output)
        except OSError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2
        print(f"  wrote {args.output}")

    return status


if __name__ == "__main__":
    sys.exit(main())
