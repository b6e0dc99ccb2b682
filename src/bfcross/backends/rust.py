from __future__ import annotations

import logging
from pathlib import Path

from ..config import BuildOptions
from ..emission import EmissionTarget
from ..targets import Target
from ..toolchain import CompileResult, ProcessResult, executable_path, run_tool


logger = logging.getLogger(__name__)


class RustBackend:
    """Rust output built with rustc.

    Cell and cursor arithmetic use ``wrapping_*`` so overflow never trips
    rustc's overflow lints; an out-of-range cursor panics on indexing.
    End of input stores 0.
    """

    target = Target.RUST
    extension = 'rs'

    def __init__(self, options: BuildOptions):
        self.options = options

    def emit_prologue(self, out: EmissionTarget) -> None:
        out.line('#![allow(unused)]')
        out.line('use std::io::{self, Read, Write};')
        out.line('')
        out.open_block('fn main() {')
        out.line(f'let mut arr = vec![0u8; {self.options.translate.tape_size}];')
        out.line('let mut ptr: usize = 0;')
        out.line('let stdin = io::stdin();')
        out.line('let mut input = stdin.lock();')
        out.line('let stdout = io::stdout();')
        out.line('let mut output = stdout.lock();')
        out.line('let mut buf = [0u8; 1];')

    def emit_epilogue(self, out: EmissionTarget) -> None:
        out.line('output.flush().unwrap();')
        out.close_block('}')

    def emit_move_right(self, out: EmissionTarget) -> None:
        out.line('ptr = ptr.wrapping_add(1);')

    def emit_move_left(self, out: EmissionTarget) -> None:
        out.line('ptr = ptr.wrapping_sub(1);')

    def emit_increment(self, out: EmissionTarget) -> None:
        out.line('arr[ptr] = arr[ptr].wrapping_add(1);')

    def emit_decrement(self, out: EmissionTarget) -> None:
        out.line('arr[ptr] = arr[ptr].wrapping_sub(1);')

    def emit_output(self, out: EmissionTarget) -> None:
        out.line('output.write_all(&arr[ptr..ptr + 1]).unwrap();')

    def emit_input(self, out: EmissionTarget) -> None:
        # EOF stores 0.
        out.line('output.flush().unwrap();')
        out.line('arr[ptr] = match input.read(&mut buf) { Ok(1) => buf[0], _ => 0 };')

    def emit_loop_open(self, out: EmissionTarget) -> None:
        out.open_block('while arr[ptr] != 0 {')

    def emit_loop_close(self, out: EmissionTarget) -> None:
        out.close_block('}')

    def compile(self, path: Path) -> CompileResult:
        logger.info("Compiling %s", path)
        exe = executable_path(path)
        argv = [self.options.tool('RUSTC'), str(path)]
        if self.options.optimize:
            argv += ['-C', 'opt-level=3']
        argv += ['-o', str(exe)]
        return CompileResult(executable=exe, process=run_tool(argv))

    def run(self, path: Path) -> ProcessResult:
        logger.info("Running %s", path)
        return run_tool([str(path.resolve())], capture=self.options.capture_run)
