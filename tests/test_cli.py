import json

import pytest

from tubesweep.__main__ import build_parser, config_from_args, main


def test_defaults_print_summary(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith('trefoil: 900 vertices, 900 quads, 150 rings of 6')
    assert 'bounding box' in out
    assert 'closure gap' in out


def test_overrides_build_config():
    args = build_parser().parse_args(
        ['--steps', '40', '--sides', '5', '--twist', '3', '--curve', 'circle',
         '--frames', 'rmf', '--strict-frames', '--workers', '2']
    )
    cfg = config_from_args(args)
    assert cfg.step_count == 40
    assert cfg.profile_sides == 5
    assert cfg.twist_factor == 3.0
    assert cfg.curve == 'circle'
    assert cfg.frame_mode == 'rmf'
    assert cfg.strict_frames is True
    assert cfg.workers == 2
    assert cfg.tube_radius == 2.0


def test_config_file_with_override(tmp_path, capsys):
    conf = tmp_path / 'tube.yaml'
    conf.write_text('step_count: 30\nprofile_sides: 4\ncurve: torus_knot\n')
    assert main(['--config', str(conf), '--sides', '8']) == 0
    out = capsys.readouterr().out
    assert out.startswith('torus_knot: 240 vertices, 240 quads, 30 rings of 8')


def test_check_and_output(tmp_path, capsys):
    target = tmp_path / 'knot.json'
    assert main(['--check', '--output', str(target)]) == 0
    out = capsys.readouterr().out
    assert 'orientation: ok' in out
    assert 'watertight: ok' in out
    doc = json.loads(target.read_text())
    assert doc['schema'] == 'tubesweep-mesh-json-v0.1'
    assert len(doc['faces']) == 900


def test_invalid_configuration_exits_1(capsys):
    assert main(['--steps', '1']) == 1
    assert 'step_count' in capsys.readouterr().err


def test_bad_config_file(tmp_path, capsys):
    conf = tmp_path / 'bad.yaml'
    conf.write_text('step_count: 30\nwobble: 3\n')
    assert main(['--config', str(conf)]) == 1
    assert 'wobble' in capsys.readouterr().err


def test_missing_config_file_exits_2(tmp_path, capsys):
    assert main(['--config', str(tmp_path / 'nope.yaml')]) == 2
    assert 'Error' in capsys.readouterr().err


def test_unknown_curve_rejected_by_parser():
    with pytest.raises(SystemExit):
        main(['--curve', 'lissajous'])


def test_closure_gap_comes_from_the_mesh(monkeypatch, capsys):
    import dataclasses

    import tubesweep.__main__ as cli
    from tubesweep.sweep import sweep

    def gapped(config):
        return dataclasses.replace(sweep(config), closure_gap=0.25)

    monkeypatch.setattr(cli, 'sweep', gapped)
    assert main(['--steps', '20']) == 0
    assert 'closure gap: 0.25' in capsys.readouterr().out
