"""Command line interface for the coffee timer."""
from __future__ import annotations

import argparse
import sys
from typing import Iterable, Optional, TextIO

from . import timer
from .clock import CancelToken, SystemClock, install_interrupt_handler, restore_interrupt_handler
from .duration import DurationError, format_hhmmss, parse_duration
from .logger import logger, setup_logging

USAGE = "%(prog)s [--once|-o] [--message|-m MESSAGE] DURATION"

EPILOG = """\
DURATION formats:
  25m, 1h30m, 45s, 1h5m20s, 15:00, 01:15:00

Examples:
  %(prog)s 25m
  %(prog)s -m "Time for coffee!" 45m
  %(prog)s --once 1h
"""


class UsageError(Exception):
    """Raised for missing, extra or unknown command line arguments."""


_FLAGS = {"-o", "--once", "--dry-run", "--verbose", "-h", "--help"}
_MESSAGE_FLAGS = {"-m", "--message"}


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="coffeetimer",
        usage=USAGE,
        description="Count down DURATION, then print MESSAGE and ring the terminal bell. Repeats until interrupted.",
        epilog=EPILOG % {"prog": "coffeetimer"},
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("duration", nargs="?", metavar="DURATION", help="time to count down (e.g. 25m, 1h30m, 15:00)")
    parser.add_argument("-o", "--once", action="store_true", help="stop after the first alert instead of repeating")
    parser.add_argument("-m", "--message", default=timer.DEFAULTS["message"], help="message printed when time is up")
    parser.add_argument("--dry-run", action="store_true", help="show the parsed duration without running the timer")
    parser.add_argument("--verbose", action="store_true", help="enable debug logging on stderr")
    parser.add_argument("-h", "--help", action="store_true", help="show this help and exit")
    return parser


def normalize_argv(argv: Iterable[str]) -> list[str]:
    """Bind each ``-m``/``--message`` to the token after it and reject unknown flags.

    The message may itself start with a dash; only a missing token is an error.
    """
    tokens = list(argv)
    normalized = []
    index = 0
    while index < len(tokens):
        arg = tokens[index]
        if arg in _MESSAGE_FLAGS:
            if index + 1 >= len(tokens):
                raise UsageError(f"Missing MESSAGE after {arg}.")
            normalized.append(f"--message={tokens[index + 1]}")
            index += 2
            continue
        if arg.startswith("-") and arg not in _FLAGS and not arg.startswith("--message="):
            raise UsageError(f"Unknown option: {arg}")
        normalized.append(arg)
        index += 1
    return normalized


def parse_args(argv: Iterable[str]) -> argparse.Namespace:
    """Parse ``argv`` or raise :class:`UsageError`."""
    args = build_parser().parse_args(normalize_argv(argv))
    if args.help:
        return args
    if args.duration is None:
        raise UsageError("Missing DURATION.")
    return args


def print_usage(stream: Optional[TextIO] = None) -> None:
    build_parser().print_help(stream or sys.stderr)


def main(
    argv: Optional[Iterable[str]] = None,
    *,
    clock=None,
    token: Optional[CancelToken] = None,
    stream: Optional[TextIO] = None,
) -> int:
    """Run the timer and return the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    stream = stream or sys.stdout

    try:
        args = parse_args(argv)
    except UsageError as exc:
        print(exc, file=sys.stderr)
        print_usage()
        return 1

    if args.help:
        print_usage()
        return 0

    setup_logging(args.verbose)

    try:
        seconds = parse_duration(args.duration)
    except DurationError as exc:
        print(exc, file=sys.stderr)
        return 1
    logger.debug("Parsed %r as %d second(s)", args.duration, seconds)

    if args.dry_run:
        print(f"{args.duration} = {format_hhmmss(seconds)} ({seconds} seconds)", file=stream)
        return 0

    token = token or CancelToken()
    clock = clock or SystemClock()
    previous = install_interrupt_handler(token)
    try:
        completed = timer.run_timer(
            args.duration,
            seconds,
            message=args.message,
            once=args.once,
            token=token,
            clock=clock,
            stream=stream,
        )
    finally:
        restore_interrupt_handler(previous)
    logger.debug("Timer finished after %d completed cycle(s)", completed)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
