from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .backends import is_supported
from .config import DEFAULT_TAPE_SIZE, BuildOptions, TranslateOptions
from .errors import BFXError
from .pipeline import build
from .targets import TARGET_FLAGS


logger = logging.getLogger('bfcross')

EXIT_USAGE = 1
EXIT_ERROR = 2
EXIT_TOOLCHAIN = 3


class UsageError(Exception):
    pass


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)


def _target_help(target) -> str:
    if is_supported(target):
        return f"emit {target} source"
    return f"emit {target} source (not supported yet)"


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog='bfcross',
        usage='%(prog)s <source> [options...]',
        description='Translate tape-machine programs to C, Go, Rust or JavaScript and build them.',
        allow_abbrev=False,
    )
    parser.add_argument('files', nargs='*', metavar='source', help='program files; options may appear anywhere')
    parser.add_argument('-r', '-run', dest='run', action='store_true', help='run the program after compilation')
    for target, flags in TARGET_FLAGS.items():
        parser.add_argument(*flags, dest='targets', action='append_const', const=target, help=_target_help(target))
    parser.add_argument('--strict', action='store_true', help='exit with status 3 if any build or run step fails')
    parser.add_argument('--keep-going', action='store_true', help='skip unreadable source files instead of aborting')
    parser.add_argument('--tape-size', type=int, default=DEFAULT_TAPE_SIZE, help=f'number of cells (default {DEFAULT_TAPE_SIZE})')
    parser.add_argument('--no-opt', action='store_true', help='build without optimisation')
    parser.add_argument('--no-capture', action='store_true', help='let the program write to the terminal directly when run')
    parser.add_argument('-v', '--verbose', action='store_true', help='log external commands')
    parser.add_argument('-q', '--quiet', action='store_true', help='only log warnings and errors')
    return parser


def _configure_logging(args: argparse.Namespace) -> None:
    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    logging.basicConfig(level=level, format='[%(levelname)s] %(message)s', stream=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_intermixed_args(argv)
    except UsageError as e:
        parser.print_usage(sys.stderr)
        print(f"{parser.prog}: error: {e}", file=sys.stderr)
        return EXIT_USAGE

    if not args.files or not args.targets:
        parser.print_help(sys.stderr)
        return EXIT_USAGE

    _configure_logging(args)

    try:
        options = BuildOptions(
            translate=TranslateOptions(tape_size=args.tape_size),
            run=args.run,
            optimize=not args.no_opt,
            strict=args.strict,
            keep_going=args.keep_going,
            capture_run=not args.no_capture,
        ).with_environment()
        report = build(args.files, args.targets, options=options)
    except BFXError as e:
        print(e, file=sys.stderr)
        return EXIT_ERROR

    for failure in report.failures:
        logger.warning("%s %s failed for %s (status %d)", failure.target, failure.step, failure.path, failure.process.returncode)

    if options.strict and not report.ok:
        return EXIT_TOOLCHAIN
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
