from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple


class Target(Enum):
    INTERPRET = 'interpret'
    C = 'c'
    JAVA = 'java'
    PYTHON = 'python'
    JAVASCRIPT = 'javascript'
    RUST = 'rust'
    GO = 'go'

    def __str__(self) -> str:
        return self.value


# Command-line spellings for each target. The first spelling is the one
# shown in usage text.
TARGET_FLAGS: Dict[Target, Tuple[str, ...]] = {
    Target.C: ('-c',),
    Target.GO: ('-go',),
    Target.RUST: ('-rust',),
    Target.JAVASCRIPT: ('-js',),
    Target.JAVA: ('-j', '-java'),
    Target.PYTHON: ('-py', '-python'),
    Target.INTERPRET: ('-i', '-interpret'),
}
