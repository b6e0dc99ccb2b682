from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from typing import Dict, Mapping, Optional

from .errors import make_configuration_error


DEFAULT_TAPE_SIZE = 30000

# Environment variable -> default command for each external tool.
DEFAULT_TOOLS: Dict[str, str] = {
    'CC': 'cc',
    'GO': 'go',
    'RUSTC': 'rustc',
    'NODE': 'node',
}


@dataclass(frozen=True)
class TranslateOptions:
    tape_size: int = DEFAULT_TAPE_SIZE
    indent: str = '    '

    def __post_init__(self) -> None:
        if self.tape_size < 1:
            raise make_configuration_error(message=f"invalid tape size {self.tape_size}")


@dataclass(frozen=True)
class BuildOptions:
    """Settings for one ``build`` run.

    ``keep_going`` selects what happens when a source file cannot be read:
    abort the whole run (the default) or log the failure and move on to the
    next file. ``strict`` only affects the exit status reported by the CLI.
    ``capture_run`` off lets generated programs write straight to the
    terminal instead of having their output collected and relayed.
    """

    translate: TranslateOptions = field(default_factory=TranslateOptions)
    run: bool = False
    optimize: bool = True
    strict: bool = False
    keep_going: bool = False
    capture_run: bool = True
    tools: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_TOOLS))

    def tool(self, name: str) -> str:
        return self.tools.get(name, DEFAULT_TOOLS[name])

    def with_environment(self, environ: Optional[Mapping[str, str]] = None) -> 'BuildOptions':
        env = os.environ if environ is None else environ
        tools = dict(self.tools)
        for name in DEFAULT_TOOLS:
            value = env.get(name, '').strip()
            if value:
                tools[name] = value
        return replace(self, tools=tools)
