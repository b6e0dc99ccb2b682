from __future__ import annotations

import logging
from pathlib import Path

from ..config import BuildOptions
from ..emission import EmissionTarget
from ..targets import Target
from ..toolchain import CompileResult, ProcessResult, executable_path, run_tool


logger = logging.getLogger(__name__)


class CBackend:
    """C99 output.

    Cells are ``unsigned char`` so ``+``/``-`` wrap modulo 256. ``getchar``
    returning ``EOF`` is stored as-is, which truncates to 255.
    """

    target = Target.C
    extension = 'c'

    def __init__(self, options: BuildOptions):
        self.options = options

    def emit_prologue(self, out: EmissionTarget) -> None:
        out.line('#include <stdio.h>')
        out.line('')
        out.open_block('int main(void) {')
        out.line(f'static unsigned char arr[{self.options.translate.tape_size}];')
        out.line('unsigned char *ptr = arr;')

    def emit_epilogue(self, out: EmissionTarget) -> None:
        out.line('return 0;')
        out.close_block('}')

    def emit_move_right(self, out: EmissionTarget) -> None:
        out.line('++ptr;')

    def emit_move_left(self, out: EmissionTarget) -> None:
        out.line('--ptr;')

    def emit_increment(self, out: EmissionTarget) -> None:
        out.line('++*ptr;')

    def emit_decrement(self, out: EmissionTarget) -> None:
        out.line('--*ptr;')

    def emit_output(self, out: EmissionTarget) -> None:
        out.line('putchar(*ptr);')

    def emit_input(self, out: EmissionTarget) -> None:
        out.line('*ptr = (unsigned char)getchar();')

    def emit_loop_open(self, out: EmissionTarget) -> None:
        out.open_block('while (*ptr) {')

    def emit_loop_close(self, out: EmissionTarget) -> None:
        out.close_block('}')

    def compile(self, path: Path) -> CompileResult:
        logger.info("Compiling %s", path)
        exe = executable_path(path)
        argv = [self.options.tool('CC'), str(path)]
        if self.options.optimize:
            argv.append('-O3')
        argv += ['-o', str(exe)]
        return CompileResult(executable=exe, process=run_tool(argv))

    def run(self, path: Path) -> ProcessResult:
        logger.info("Running %s", path)
        return run_tool([str(path.resolve())], capture=self.options.capture_run)
