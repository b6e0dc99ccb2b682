from __future__ import annotations

from typing import Dict

from .backends import Backend
from .emission import EmissionTarget
from .lexer import Instruction, scan


class Translator:
    """
    Single-pass translator from tape-machine source to a host language.

    Each recognised instruction maps to one backend emission call; all other
    characters are skipped. No bracket matching happens here: loops are
    emitted as native ``while`` blocks and an unbalanced program surfaces as
    a host compiler error.
    """

    DISPATCH: Dict[Instruction, str] = {
        Instruction.MOVE_RIGHT: 'emit_move_right',
        Instruction.MOVE_LEFT: 'emit_move_left',
        Instruction.INCREMENT: 'emit_increment',
        Instruction.DECREMENT: 'emit_decrement',
        Instruction.OUTPUT: 'emit_output',
        Instruction.INPUT: 'emit_input',
        Instruction.LOOP_OPEN: 'emit_loop_open',
        Instruction.LOOP_CLOSE: 'emit_loop_close',
    }

    def __init__(self, backend: Backend):
        self.backend = backend

    def translate(self, source: str, out: EmissionTarget) -> int:
        """Emit the whole program into ``out``; returns the instruction count."""
        self.backend.emit_prologue(out)
        count = 0
        for ins in scan(source):
            getattr(self.backend, self.DISPATCH[ins])(out)
            count += 1
        self.backend.emit_epilogue(out)
        return count


def translate(source: str, backend: Backend, out: EmissionTarget) -> int:
    return Translator(backend).translate(source, out)
