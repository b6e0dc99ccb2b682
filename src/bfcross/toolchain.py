from __future__ import annotations

import logging
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, List, Optional, Sequence, TextIO, Union

from .errors import make_toolchain_exec_error, make_toolchain_not_found_error


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProcessResult:
    argv: List[str]
    returncode: int
    stdout: bytes
    stderr: bytes

    @property
    def ok(self) -> bool:
        return self.returncode == 0


@dataclass(frozen=True)
class CompileResult:
    executable: Path
    process: ProcessResult

    @property
    def ok(self) -> bool:
        return self.process.ok


def executable_path(source: Path) -> Path:
    """``hello.c`` -> ``hello.c.exe``."""
    return source.with_name(source.name + '.exe')


def invoke(argv: Sequence[Union[str, Path]], *, capture: bool = True) -> ProcessResult:
    """Run an external tool to completion.

    Blocks until the child exits; there is no timeout. Standard input is
    always inherited. With ``capture`` the child's output is collected as
    raw bytes for ``relay``; without it the child writes straight to the
    operator's stdout and stderr and the result holds empty streams.
    """
    args = [str(a) for a in argv]
    logger.debug("exec: %s", ' '.join(args))
    if not capture:
        sys.stdout.flush()
        sys.stderr.flush()
    try:
        p = subprocess.run(args, capture_output=capture)
    except FileNotFoundError as e:
        raise make_toolchain_not_found_error(tool=args[0]) from e
    except OSError as e:
        raise make_toolchain_exec_error(tool=args[0], cause=e) from e
    return ProcessResult(
        argv=args,
        returncode=p.returncode,
        stdout=p.stdout or b'',
        stderr=p.stderr or b'',
    )


def _binary(stream: Union[TextIO, BinaryIO]) -> BinaryIO:
    # Text streams are flushed first so earlier text lands before the bytes.
    buffer = getattr(stream, 'buffer', None)
    if buffer is None:
        return stream
    stream.flush()
    return buffer


def relay(
    result: ProcessResult,
    *,
    stdout: Optional[Union[TextIO, BinaryIO]] = None,
    stderr: Optional[Union[TextIO, BinaryIO]] = None,
) -> None:
    """Copy the captured streams byte for byte, stderr first."""
    out = _binary(sys.stdout if stdout is None else stdout)
    err = _binary(sys.stderr if stderr is None else stderr)
    if result.stderr:
        err.write(result.stderr)
        err.flush()
    if result.stdout:
        out.write(result.stdout)
        out.flush()


def run_tool(argv: Sequence[Union[str, Path]], *, capture: bool = True) -> ProcessResult:
    """Invoke, relay both streams, and report a non-zero exit without raising."""
    result = invoke(argv, capture=capture)
    relay(result)
    if not result.ok:
        logger.warning("%s exited with status %d", result.argv[0], result.returncode)
    return result
