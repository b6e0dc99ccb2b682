from __future__ import annotations

from enum import Enum
from typing import Iterator


class Instruction(Enum):
    MOVE_RIGHT = '>'
    MOVE_LEFT = '<'
    INCREMENT = '+'
    DECREMENT = '-'
    OUTPUT = '.'
    INPUT = ','
    LOOP_OPEN = '['
    LOOP_CLOSE = ']'


_BY_SYMBOL = {ins.value: ins for ins in Instruction}


def is_code_char(ch: str) -> bool:
    return ch in _BY_SYMBOL


def scan(source: str) -> Iterator[Instruction]:
    """Yield the instructions of ``source`` in order; every other character is a comment."""
    for ch in source:
        ins = _BY_SYMBOL.get(ch)
        if ins is not None:
            yield ins


def strip(source: str) -> str:
    return ''.join(ins.value for ins in scan(source))
