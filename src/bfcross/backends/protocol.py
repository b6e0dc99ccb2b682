from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..emission import EmissionTarget
    from ..targets import Target
    from ..toolchain import CompileResult, ProcessResult


class Backend(Protocol):
    """Capability set every code generator provides.

    Implementations are independent classes with no shared base. They hold
    only immutable configuration, so one instance can translate any number
    of files and the output is a pure function of the source text.
    """

    target: 'Target'
    extension: str

    def emit_prologue(self, out: 'EmissionTarget') -> None: ...
    def emit_epilogue(self, out: 'EmissionTarget') -> None: ...
    def emit_move_right(self, out: 'EmissionTarget') -> None: ...
    def emit_move_left(self, out: 'EmissionTarget') -> None: ...
    def emit_increment(self, out: 'EmissionTarget') -> None: ...
    def emit_decrement(self, out: 'EmissionTarget') -> None: ...
    def emit_output(self, out: 'EmissionTarget') -> None: ...
    def emit_input(self, out: 'EmissionTarget') -> None: ...
    def emit_loop_open(self, out: 'EmissionTarget') -> None: ...
    def emit_loop_close(self, out: 'EmissionTarget') -> None: ...

    def compile(self, path: Path) -> 'CompileResult': ...
    def run(self, path: Path) -> 'ProcessResult': ...
