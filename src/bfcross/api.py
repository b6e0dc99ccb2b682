from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Optional

from .backends import Backend, get_backend
from .config import BuildOptions, TranslateOptions
from .emission import EmissionTarget
from .errors import make_input_error
from .targets import Target
from .translator import translate


logger = logging.getLogger(__name__)


def _backend_for(target: Target, options: Optional[TranslateOptions]) -> Backend:
    return get_backend(target, BuildOptions(translate=options or TranslateOptions()))


def translate_string(source: str, target: Target, *, options: Optional[TranslateOptions] = None) -> str:
    opts = options or TranslateOptions()
    buf = io.StringIO()
    translate(source, _backend_for(target, opts), EmissionTarget(buf, indent=opts.indent))
    return buf.getvalue()


def read_source(path: str | Path, *, encoding: str = 'utf-8') -> str:
    p = Path(path)
    try:
        return p.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise make_input_error(path=str(p), cause=e) from e


def artifact_path(path: str | Path, backend: Backend) -> Path:
    """``prog.b`` -> ``prog.<ext>`` next to the input."""
    return Path(path).with_suffix('.' + backend.extension)


def emit_file(path: str | Path, backend: Backend, *, options: Optional[TranslateOptions] = None) -> Path:
    """Translate the file at ``path`` with ``backend``; returns the artifact path.

    An existing artifact is overwritten.
    """
    opts = options or TranslateOptions()
    source = read_source(path)
    out_path = artifact_path(path, backend)
    if out_path.resolve() == Path(path).resolve():
        logger.warning("%s will be overwritten by its own translation", out_path)
    with EmissionTarget.create(out_path, indent=opts.indent) as out:
        count = translate(source, backend, out)
    logger.debug("%s: %d instructions", out_path, count)
    return out_path


def translate_file(path: str | Path, target: Target, *, options: Optional[TranslateOptions] = None) -> Path:
    opts = options or TranslateOptions()
    return emit_file(path, _backend_for(target, opts), options=opts)
