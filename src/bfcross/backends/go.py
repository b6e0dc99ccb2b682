from __future__ import annotations

import logging
from pathlib import Path

from ..config import BuildOptions
from ..emission import EmissionTarget
from ..targets import Target
from ..toolchain import CompileResult, ProcessResult, executable_path, run_tool


logger = logging.getLogger(__name__)


class GoBackend:
    """Go output, built with ``go build``.

    Go rejects unused locals, so the prologue blanks out ``arr`` and ``ptr``.
    Reading past end of input stores 0.
    """

    target = Target.GO
    extension = 'go'

    def __init__(self, options: BuildOptions):
        self.options = options

    def emit_prologue(self, out: EmissionTarget) -> None:
        out.line('package main')
        out.line('')
        out.line('import (')
        out.line('\t"bufio"')
        out.line('\t"os"')
        out.line(')')
        out.line('')
        out.line('var in = bufio.NewReader(os.Stdin)')
        out.line('')
        out.open_block('func getchar() uint8 {')
        out.line('b, err := in.ReadByte()')
        out.open_block('if err != nil {')
        out.line('return 0')
        out.close_block('}')
        out.line('return b')
        out.close_block('}')
        out.line('')
        out.open_block('func main() {')
        out.line(f'arr := make([]uint8, {self.options.translate.tape_size})')
        out.line('ptr := 0')
        out.line('_, _ = arr, ptr')

    def emit_epilogue(self, out: EmissionTarget) -> None:
        out.close_block('}')

    def emit_move_right(self, out: EmissionTarget) -> None:
        out.line('ptr += 1')

    def emit_move_left(self, out: EmissionTarget) -> None:
        out.line('ptr -= 1')

    def emit_increment(self, out: EmissionTarget) -> None:
        out.line('arr[ptr] += 1')

    def emit_decrement(self, out: EmissionTarget) -> None:
        out.line('arr[ptr] -= 1')

    def emit_output(self, out: EmissionTarget) -> None:
        out.line('os.Stdout.Write(arr[ptr : ptr+1])')

    def emit_input(self, out: EmissionTarget) -> None:
        out.line('arr[ptr] = getchar()')

    def emit_loop_open(self, out: EmissionTarget) -> None:
        out.open_block('for arr[ptr] != 0 {')

    def emit_loop_close(self, out: EmissionTarget) -> None:
        out.close_block('}')

    def compile(self, path: Path) -> CompileResult:
        logger.info("Compiling %s", path)
        exe = executable_path(path)
        # go build has no optimisation switch; it always optimises.
        argv = [self.options.tool('GO'), 'build', '-o', str(exe), str(path)]
        return CompileResult(executable=exe, process=run_tool(argv))

    def run(self, path: Path) -> ProcessResult:
        logger.info("Running %s", path)
        return run_tool([str(path.resolve())], capture=self.options.capture_run)
