#!/usr/bin/env python3
"""
Emission tables for each backend and the target -> backend mapping.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from bfcross import Target, TranslateOptions, translate_string
from bfcross.backends import BACKENDS, get_backend, is_supported
from bfcross.errors import UnsupportedTargetError

IMPLEMENTED = [Target.C, Target.GO, Target.RUST, Target.JAVASCRIPT]


def test_every_target_has_a_registry_entry():
    assert set(BACKENDS) == set(Target)


@pytest.mark.parametrize('target', IMPLEMENTED)
def test_implemented_targets_resolve(target):
    backend = get_backend(target)
    assert backend.target is target
    assert is_supported(target)


@pytest.mark.parametrize('target', [Target.INTERPRET, Target.JAVA, Target.PYTHON])
def test_placeholder_targets_fail_fast(target):
    assert not is_supported(target)
    with pytest.raises(UnsupportedTargetError) as exc:
        get_backend(target)
    assert target.value in str(exc.value)
    assert 'Hint:' in str(exc.value)


def test_extensions_are_distinct():
    exts = [get_backend(t).extension for t in IMPLEMENTED]
    assert exts == ['c', 'go', 'rs', 'js']


def test_c_program_shape():
    code = translate_string('+', Target.C)
    assert code == (
        '#include <stdio.h>\n'
        '\n'
        'int main(void) {\n'
        '    static unsigned char arr[30000];\n'
        '    unsigned char *ptr = arr;\n'
        '    ++*ptr;\n'
        '    return 0;\n'
        '}\n'
    )


def test_c_instruction_table():
    code = translate_string('><+-.,[]', Target.C)
    body = [line.strip() for line in code.splitlines()[5:-2]]
    assert body == [
        '++ptr;',
        '--ptr;',
        '++*ptr;',
        '--*ptr;',
        'putchar(*ptr);',
        '*ptr = (unsigned char)getchar();',
        'while (*ptr) {',
        '}',
    ]


def test_go_program_declares_and_uses_tape():
    code = translate_string('', Target.GO)
    assert code.startswith('package main\n')
    assert 'arr := make([]uint8, 30000)' in code
    assert '_, _ = arr, ptr' in code
    assert code.rstrip().endswith('}')


def test_go_loop_uses_native_for():
    code = translate_string('[-]', Target.GO)
    assert 'for arr[ptr] != 0 {' in code
    assert '        arr[ptr] -= 1\n' in code


def test_rust_uses_wrapping_arithmetic():
    code = translate_string('+-><', Target.RUST)
    assert 'arr[ptr] = arr[ptr].wrapping_add(1);' in code
    assert 'arr[ptr] = arr[ptr].wrapping_sub(1);' in code
    assert 'ptr = ptr.wrapping_add(1);' in code
    assert 'ptr = ptr.wrapping_sub(1);' in code


def test_javascript_ends_with_main_call():
    code = translate_string('.', Target.JAVASCRIPT)
    assert 'fs.writeSync(1, arr, ptr, 1);' in code
    assert code.endswith('main();\n')


@pytest.mark.parametrize('target', IMPLEMENTED)
def test_tape_size_option(target):
    code = translate_string('+', target, options=TranslateOptions(tape_size=64))
    assert '64' in code
    assert '30000' not in code


def test_invalid_tape_size():
    from bfcross.errors import ConfigurationError

    with pytest.raises(ConfigurationError):
        TranslateOptions(tape_size=0)
