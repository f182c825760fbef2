from tubesweep import Mesh, SweepConfig, sweep
from tubesweep.frames import Frame, fixed_frames
from tubesweep.geometry_checks import (
    CheckResult,
    faces_oriented,
    frame_is_orthonormal,
    is_closed_path,
    mesh_watertight,
)
from tubesweep.curves import trefoil
from tubesweep.path import sample_path

import pytest


def _tube(**kw):
    base = dict(step_count=150, profile_sides=6)
    base.update(kw)
    return sweep(SweepConfig(**base))


def test_is_closed_path():
    assert is_closed_path(sample_path(trefoil(10.0), 30))
    assert not is_closed_path([(0, 0, 0), (1, 0, 0), (1, 1, 0)])
    assert not is_closed_path([(0, 0, 0)])


def test_frame_is_orthonormal():
    good = Frame(x=(1.0, 0.0, 0.0), y=(0.0, 1.0, 0.0), z=(0.0, 0.0, 1.0))
    assert frame_is_orthonormal(good)
    left_handed = Frame(x=(1.0, 0.0, 0.0), y=(0.0, -1.0, 0.0), z=(0.0, 0.0, 1.0))
    assert not frame_is_orthonormal(left_handed)
    stretched = Frame(x=(2.0, 0.0, 0.0), y=(0.0, 1.0, 0.0), z=(0.0, 0.0, 1.0))
    assert not frame_is_orthonormal(stretched)
    for f in fixed_frames(sample_path(trefoil(10.0), 40)):
        assert frame_is_orthonormal(f)


def test_swept_tube_is_oriented_and_watertight():
    mesh = _tube()
    assert faces_oriented(mesh)
    assert mesh_watertight(mesh)


def test_full_turn_twist_stays_oriented():
    # 360 degrees over the tube, so the last ring meets the first without a jump
    mesh = _tube(twist_factor=2.4)
    assert faces_oriented(mesh)
    assert mesh_watertight(mesh)


def test_rmf_tube_is_oriented():
    mesh = _tube(frame_mode='rmf', curve='torus_knot')
    assert faces_oriented(mesh)


def test_reversed_faces_detected():
    mesh = _tube(step_count=20)
    flipped = Mesh(vertices=mesh.vertices,
                   faces=tuple(tuple(reversed(f)) for f in mesh.faces),
                   ring_size=mesh.ring_size, centers=mesh.centers)
    result = faces_oriented(flipped)
    assert not result
    assert any('inward-facing' in w for w in result.warnings)
    # consistently reversed faces still form a closed surface
    assert mesh_watertight(flipped)


def test_missing_face_detected():
    mesh = _tube(step_count=20)
    holed = Mesh(vertices=mesh.vertices, faces=mesh.faces[1:],
                 ring_size=mesh.ring_size, centers=mesh.centers)
    result = mesh_watertight(holed)
    assert not result
    assert any('boundary edges' in w for w in result.warnings)


def test_duplicate_face_detected():
    mesh = _tube(step_count=20)
    doubled = Mesh(vertices=mesh.vertices, faces=mesh.faces + mesh.faces[:1],
                   ring_size=mesh.ring_size, centers=mesh.centers)
    result = mesh_watertight(doubled)
    assert not result
    assert any('multiplicity' in w for w in result.warnings)
    assert any('same direction' in w for w in result.warnings)


def test_orientation_needs_centers():
    mesh = _tube(step_count=10)
    bare = Mesh(vertices=mesh.vertices, faces=mesh.faces, ring_size=mesh.ring_size)
    with pytest.raises(ValueError):
        faces_oriented(bare)


def test_check_result_truthiness():
    assert CheckResult(True, [])
    assert not CheckResult(False, ['bad'])
