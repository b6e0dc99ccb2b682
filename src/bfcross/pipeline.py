from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from .api import emit_file
from .backends import get_backend
from .config import BuildOptions
from .errors import InputError
from .targets import Target
from .toolchain import ProcessResult


logger = logging.getLogger(__name__)

COMPILE = 'compile'
RUN = 'run'


@dataclass(frozen=True)
class StepResult:
    step: str
    target: Target
    path: Path
    process: ProcessResult

    @property
    def ok(self) -> bool:
        return self.process.ok


@dataclass
class BuildReport:
    artifacts: List[Path] = field(default_factory=list)
    steps: List[StepResult] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)

    @property
    def failures(self) -> List[StepResult]:
        return [s for s in self.steps if not s.ok]

    @property
    def ok(self) -> bool:
        return not self.failures and not self.skipped


def check_targets(targets: Sequence[Target]) -> None:
    """Fail before touching any file if a requested target has no backend."""
    for target in targets:
        get_backend(target)


def build(files: Sequence[str], targets: Sequence[Target], *, options: Optional[BuildOptions] = None) -> BuildReport:
    """Translate every file once per target, then compile and optionally run it.

    Work is strictly sequential: one (target, file) pair finishes before the
    next starts. Toolchain failures are recorded in the report; unreadable
    input is fatal unless ``options.keep_going`` is set.
    """
    opts = options or BuildOptions()
    check_targets(targets)
    report = BuildReport()

    for target in targets:
        logger.info("Target set to %s", target)
        backend = get_backend(target, opts)

        for file_path in files:
            logger.info("Parsing %s", file_path)
            try:
                artifact = emit_file(file_path, backend, options=opts.translate)
            except InputError as e:
                if not opts.keep_going:
                    raise
                logger.error("%s", e)
                report.skipped.append(file_path)
                continue
            report.artifacts.append(artifact)

            compiled = backend.compile(artifact)
            report.steps.append(StepResult(COMPILE, target, artifact, compiled.process))

            if opts.run:
                if not compiled.ok:
                    logger.warning("Not running %s: build failed", compiled.executable)
                    continue
                result = backend.run(compiled.executable)
                report.steps.append(StepResult(RUN, target, compiled.executable, result))

    return report
