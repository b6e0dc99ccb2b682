#!/usr/bin/env python3
"""
Command-line surface: interleaved options, usage errors, exit statuses.
"""

import sys
import os
import subprocess
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from bfcross import Target, toolchain
from bfcross.cli import EXIT_ERROR, EXIT_TOOLCHAIN, EXIT_USAGE, build_parser, main


@pytest.fixture
def returncode(monkeypatch):
    state = {'code': 0, 'calls': []}

    def fake_run(args, **kwargs):
        state['calls'].append(list(args))
        return subprocess.CompletedProcess(args, state['code'], b'', b'')

    monkeypatch.setattr(toolchain.subprocess, 'run', fake_run)
    return state


@pytest.fixture
def program(tmp_path):
    p = tmp_path / 'hello.b'
    p.write_text('+.', encoding='utf-8')
    return p


def test_options_and_files_interleave():
    args = build_parser().parse_intermixed_args(['-c', 'a.b', '-r', 'b.b', '-go', '-c'])
    assert args.files == ['a.b', 'b.b']
    assert args.targets == [Target.C, Target.GO, Target.C]
    assert args.run


def test_long_spellings():
    args = build_parser().parse_intermixed_args(['x', '-java', '-python', '-interpret', '-run', '-rust', '-js'])
    assert args.targets == [Target.JAVA, Target.PYTHON, Target.INTERPRET, Target.RUST, Target.JAVASCRIPT]
    assert args.run


@pytest.mark.parametrize('argv', [[], ['prog.b'], ['-c'], ['-r', '-c']])
def test_usage_when_files_or_targets_missing(argv, capsys):
    assert main(argv) == EXIT_USAGE
    assert 'usage:' in capsys.readouterr().err


def test_unsupported_target_exits_with_error(program, returncode, capsys):
    assert main([str(program), '-py']) == EXIT_ERROR
    assert "target 'python' is not supported yet" in capsys.readouterr().err
    assert returncode['calls'] == []


def test_fan_out_writes_both_artifacts(program, returncode):
    assert main([str(program), '-c', '-go']) == 0
    assert program.with_suffix('.c').exists()
    assert program.with_suffix('.go').exists()


def test_toolchain_failure_keeps_exit_zero(program, returncode):
    returncode['code'] = 1
    assert main([str(program), '-c', '-r']) == 0


def test_strict_propagates_toolchain_failure(program, returncode):
    returncode['code'] = 1
    assert main([str(program), '-c', '--strict']) == EXIT_TOOLCHAIN


def test_missing_file_is_fatal(tmp_path, returncode, capsys):
    assert main([str(tmp_path / 'nope.b'), '-c']) == EXIT_ERROR
    assert 'InputError' in capsys.readouterr().err


def test_keep_going_skips_missing_file(tmp_path, program, returncode):
    assert main([str(tmp_path / 'nope.b'), str(program), '-c', '--keep-going']) == 0
    assert program.with_suffix('.c').exists()


def test_tape_size_flag(program, returncode):
    assert main([str(program), '-c', '--tape-size', '512']) == 0
    assert 'arr[512]' in program.with_suffix('.c').read_text(encoding='utf-8')


def test_unwritable_artifact_exits_with_error(program, returncode, capsys):
    program.with_suffix('.c').mkdir()
    assert main([str(program), '-c']) == EXIT_ERROR
    assert 'EmissionError' in capsys.readouterr().err
    assert returncode['calls'] == []


def test_unknown_option_is_a_usage_error(program, returncode, capsys):
    assert main([str(program), '-c', '-x']) == EXIT_USAGE
    err = capsys.readouterr().err
    assert 'usage:' in err
    assert '-x' in err
    assert returncode['calls'] == []


def test_no_capture_flag(program, monkeypatch):
    seen = []

    def fake_run(args, **kwargs):
        seen.append(kwargs.get('capture_output'))
        return subprocess.CompletedProcess(args, 0, None, None)

    monkeypatch.setattr(toolchain.subprocess, 'run', fake_run)
    assert main([str(program), '-c', '-r', '--no-capture']) == 0
    assert seen == [True, False]
