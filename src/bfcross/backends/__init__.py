from __future__ import annotations

from typing import Callable, Dict, Optional

from ..config import BuildOptions
from ..errors import make_unsupported_target_error
from ..targets import Target
from .c import CBackend
from .go import GoBackend
from .javascript import JavaScriptBackend
from .protocol import Backend
from .rust import RustBackend


BackendFactory = Callable[[BuildOptions], Backend]

# Every Target must appear here. None marks a target that is recognised on
# the command line but has no generator yet.
BACKENDS: Dict[Target, Optional[BackendFactory]] = {
    Target.C: CBackend,
    Target.GO: GoBackend,
    Target.RUST: RustBackend,
    Target.JAVASCRIPT: JavaScriptBackend,
    Target.JAVA: None,
    Target.PYTHON: None,
    Target.INTERPRET: None,
}

_missing = set(Target) - set(BACKENDS)
if _missing:
    raise ImportError(f"no backend entry for: {', '.join(sorted(t.value for t in _missing))}")


def is_supported(target: Target) -> bool:
    return BACKENDS[target] is not None


def get_backend(target: Target, options: Optional[BuildOptions] = None) -> Backend:
    factory = BACKENDS[target]
    if factory is None:
        raise make_unsupported_target_error(target=target.value)
    return factory(options or BuildOptions())


__all__ = [
    'BACKENDS',
    'Backend',
    'CBackend',
    'GoBackend',
    'JavaScriptBackend',
    'RustBackend',
    'get_backend',
    'is_supported',
]
