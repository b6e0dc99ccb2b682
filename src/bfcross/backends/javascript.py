from __future__ import annotations

import logging
from pathlib import Path

from ..config import BuildOptions
from ..emission import EmissionTarget
from ..targets import Target
from ..toolchain import CompileResult, ProcessResult, run_tool


logger = logging.getLogger(__name__)


class JavaScriptBackend:
    """Node.js output.

    There is no build step producing a binary: ``compile`` is a syntax check
    with ``node --check`` and the checked source is what ``run`` executes.
    A ``Uint8Array`` tape wraps on store. End of input stores 0.
    """

    target = Target.JAVASCRIPT
    extension = 'js'

    def __init__(self, options: BuildOptions):
        self.options = options

    def emit_prologue(self, out: EmissionTarget) -> None:
        out.line("'use strict';")
        out.line("const fs = require('fs');")
        out.line('')
        out.line('const buf = Buffer.alloc(1);')
        out.open_block('function getchar() {')
        out.line('return fs.readSync(0, buf, 0, 1, null) === 1 ? buf[0] : 0;')
        out.close_block('}')
        out.line('')
        out.open_block('function main() {')
        out.line(f'const arr = new Uint8Array({self.options.translate.tape_size});')
        out.line('let ptr = 0;')

    def emit_epilogue(self, out: EmissionTarget) -> None:
        out.close_block('}')
        out.line('')
        out.line('main();')

    def emit_move_right(self, out: EmissionTarget) -> None:
        out.line('ptr++;')

    def emit_move_left(self, out: EmissionTarget) -> None:
        out.line('ptr--;')

    def emit_increment(self, out: EmissionTarget) -> None:
        out.line('arr[ptr]++;')

    def emit_decrement(self, out: EmissionTarget) -> None:
        out.line('arr[ptr]--;')

    def emit_output(self, out: EmissionTarget) -> None:
        out.line('fs.writeSync(1, arr, ptr, 1);')

    def emit_input(self, out: EmissionTarget) -> None:
        out.line('arr[ptr] = getchar();')

    def emit_loop_open(self, out: EmissionTarget) -> None:
        out.open_block('while (arr[ptr] !== 0) {')

    def emit_loop_close(self, out: EmissionTarget) -> None:
        out.close_block('}')

    def compile(self, path: Path) -> CompileResult:
        logger.info("Checking %s", path)
        return CompileResult(executable=path, process=run_tool([self.options.tool('NODE'), '--check', str(path)]))

    def run(self, path: Path) -> ProcessResult:
        logger.info("Running %s", path)
        return run_tool([self.options.tool('NODE'), str(path)], capture=self.options.capture_run)
