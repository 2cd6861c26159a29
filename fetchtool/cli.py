"""Command-line interface for fetchtool."""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from fetchtool.config.defaults import (
    DEFAULT_REPEAT,
    DEFAULT_RETRY,
    DEFAULT_TIMEOUT,
    HELP_MESSAGE,
    VERSION,
)
from fetchtool.exceptions import OutputError, TransportFailure, UsageError
from fetchtool.logging_config import setup_logging
from fetchtool.models import FetchConfig
from fetchtool.output import write_output
from fetchtool.utils import network

logger = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    """Parser that raises :class:`UsageError` instead of exiting with code 2."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(message)


def _create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = _ArgumentParser(prog="fetchtool", add_help=False)
    parser.add_argument("-u", "--url", type=str, default="", help="URL to fetch")
    parser.add_argument("-o", "--output", type=str, default="", help="Output file")
    parser.add_argument(
        "-t", "--timeout", type=int, default=DEFAULT_TIMEOUT, help="Timeout in seconds"
    )
    parser.add_argument("-r", "--retry", type=int, default=DEFAULT_RETRY, help="Retry count")
    parser.add_argument(
        "-f",
        "--for",
        dest="repeat",
        type=int,
        default=DEFAULT_REPEAT,
        help="Number of times to fetch",
    )
    parser.add_argument("-h", "--help", action="store_true", help="Show help message")
    parser.add_argument("-v", "--version", action="store_true", help="Show version")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def _print_error(message: str, show_help: bool = False) -> None:
    sys.stderr.write(f"Error: {message}\n")
    if show_help:
        sys.stderr.write(HELP_MESSAGE)
    sys.stderr.flush()


def _describe_validation_error(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error["loc"])
        parts.append(f"{field}: {error['msg']}")
    return "; ".join(parts)


def _build_config(args: argparse.Namespace) -> FetchConfig:
    return FetchConfig.from_raw(
        args.url,
        timeout=args.timeout,
        retry=args.retry,
        output=args.output or None,
        repeat=args.repeat,
    )


def run(config: FetchConfig) -> None:
    """Fetch ``config.url`` ``config.repeat`` times and write each body.

    Raises:
        TransportFailure: If every attempt of a fetch failed.
        OutputError: If a body could not be written.
    """
    for iteration in range(1, config.repeat + 1):
        logger.debug("Fetch %d/%d of %s", iteration, config.repeat, config.url)
        result = network.fetch(config)
        if not result.ok:
            raise TransportFailure(result.cause, attempts=config.attempts)
        write_output(result.body, config.output)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point; returns the process exit code."""
    try:
        args = _create_argument_parser().parse_args(argv)
    except UsageError as exc:
        _print_error(str(exc), show_help=True)
        return 1

    if args.help:
        sys.stdout.write(HELP_MESSAGE)
        sys.stdout.flush()
        return 0
    if args.version:
        sys.stdout.write(f"Version: {VERSION}\n")
        sys.stdout.flush()
        return 0

    setup_logging(debug=args.debug)

    try:
        config = _build_config(args)
    except UsageError as exc:
        _print_error(str(exc), show_help=True)
        return 1
    except ValidationError as exc:
        _print_error(_describe_validation_error(exc), show_help=True)
        return 1

    try:
        run(config)
    except TransportFailure as exc:
        logger.debug("Fetch of %s failed after %d attempt(s)", config.url, exc.attempts)
        _print_error(str(exc))
        return 1
    except OutputError as exc:
        _print_error(str(exc))
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover - direct script execution
    sys.exit(main())
