from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


CONFIGURATION = 'configuration'
INPUT = 'input'
EMISSION = 'emission'
TOOLCHAIN = 'toolchain'


def _hint_for(message: str, *, kind: str) -> Optional[str]:
    msg = message.lower()
    if kind == CONFIGURATION:
        if 'not supported yet' in msg:
            return 'Implemented targets are -c, -go, -rust and -js.'
        if 'tape size' in msg:
            return 'Use a positive cell count, e.g. --tape-size 30000.'
        return None
    if kind == INPUT:
        if 'no such file' in msg:
            return 'Check the path; every token that is not an option is treated as a source file.'
        if 'decode' in msg:
            return 'Source files are read as UTF-8 text.'
        return None
    if kind == TOOLCHAIN:
        if 'not found' in msg:
            return 'Install the toolchain or point the matching environment variable (CC, GO, RUSTC, NODE) at it.'
        if 'cannot execute' in msg:
            return 'Check that the file is a binary built for this machine and that it is executable.'
        return None
    return None


@dataclass
class BFXError(Exception):
    message: str
    kind: str = CONFIGURATION

    def __str__(self) -> str:
        return self.message


@dataclass
class ConfigurationError(BFXError):
    kind: str = CONFIGURATION


@dataclass
class UnsupportedTargetError(ConfigurationError):
    target: str = ''


@dataclass
class InputError(BFXError):
    kind: str = INPUT
    path: str = ''


@dataclass
class EmissionError(BFXError):
    kind: str = EMISSION
    path: str = ''


@dataclass
class ToolchainError(BFXError):
    kind: str = TOOLCHAIN
    tool: str = ''


@dataclass
class ToolchainNotFoundError(ToolchainError):
    pass


def _with_hint(message: str, kind: str) -> str:
    hint = _hint_for(message, kind=kind)
    hint_block = f"\nHint: {hint}" if hint else ""
    return f"{message}{hint_block}"


def make_unsupported_target_error(*, target: str) -> UnsupportedTargetError:
    message = f"ConfigurationError: target '{target}' is not supported yet"
    return UnsupportedTargetError(message=_with_hint(message, CONFIGURATION), target=target)


def make_configuration_error(*, message: str) -> ConfigurationError:
    return ConfigurationError(message=_with_hint(f"ConfigurationError: {message}", CONFIGURATION))


def make_input_error(*, path: str, cause: Exception) -> InputError:
    reason = getattr(cause, 'strerror', None) or str(cause)
    message = f"InputError: cannot read {path}: {reason}"
    return InputError(message=_with_hint(message, INPUT), path=path)


def make_emission_error(*, path: str, cause: OSError) -> EmissionError:
    reason = cause.strerror or str(cause)
    return EmissionError(message=f"EmissionError: cannot write {path}: {reason}", path=path)


def make_toolchain_not_found_error(*, tool: str) -> ToolchainNotFoundError:
    message = f"ToolchainError: '{tool}' not found"
    return ToolchainNotFoundError(message=_with_hint(message, TOOLCHAIN), tool=tool)


def make_toolchain_exec_error(*, tool: str, cause: OSError) -> ToolchainError:
    reason = cause.strerror or str(cause)
    message = f"ToolchainError: cannot execute '{tool}': {reason}"
    return ToolchainError(message=_with_hint(message, TOOLCHAIN), tool=tool)
