from __future__ import annotations

import contextlib
from pathlib import Path
from typing import Iterator, TextIO

from .errors import make_emission_error


class EmissionTarget:
    """Line-oriented writer for one generated source file.

    Indentation depth lives here rather than on the backend, so backends
    stay stateless. An unmatched block close still writes its text; only
    the indentation is clamped at zero, leaving the host compiler to reject
    the result.
    """

    def __init__(self, stream: TextIO, *, indent: str = '    ', path: str = '<memory>'):
        self.stream = stream
        self.indent = indent
        self.path = path
        self.depth = 0

    def line(self, text: str) -> None:
        self._write(f"{self.indent * self.depth}{text}\n")

    def open_block(self, text: str) -> None:
        self.line(text)
        self.depth += 1

    def close_block(self, text: str) -> None:
        self.depth = max(0, self.depth - 1)
        self.line(text)

    def _write(self, text: str) -> None:
        try:
            self.stream.write(text)
        except OSError as e:
            raise make_emission_error(path=self.path, cause=e) from e

    @classmethod
    @contextlib.contextmanager
    def create(cls, path: Path, *, indent: str = '    ') -> Iterator['EmissionTarget']:
        try:
            f = open(path, 'w', encoding='utf-8', newline='\n')
        except OSError as e:
            raise make_emission_error(path=str(path), cause=e) from e
        try:
            yield cls(f, indent=indent, path=str(path))
        finally:
            try:
                f.close()
            except OSError as e:
                raise make_emission_error(path=str(path), cause=e) from e
