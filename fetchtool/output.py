"""Write fetched bodies to standard output or a file."""

from __future__ import annotations

import logging
import os
import sys
from typing import BinaryIO, Optional

from fetchtool.config.defaults import OUTPUT_FILE_MODE
from fetchtool.exceptions import OutputError

logger = logging.getLogger(__name__)


def _write_stream(body: bytes, stream: BinaryIO) -> None:
    try:
        stream.write(body)
        stream.write(b"\n")
        stream.flush()
    except OSError as exc:
        raise OutputError(f"failed to write to standard output: {exc}") from exc


def _write_file(body: bytes, destination: str) -> None:
    flags = os.O_WRONLY | os.O_CREAT | os.O_TRUNC | getattr(os, "O_BINARY", 0)
    try:
        fd = os.open(destination, flags, OUTPUT_FILE_MODE)
        with os.fdopen(fd, "wb") as handle:
            handle.write(body)
    except OSError as exc:
        raise OutputError(f"failed to write {destination}: {exc}") from exc
    logger.debug("Wrote %d bytes to %s", len(body), destination)


def write_output(
    body: bytes, destination: Optional[str] = None, *, stream: Optional[BinaryIO] = None
) -> None:
    """Write ``body`` to ``destination`` or, when it is empty, to stdout.

    Standard output gets the body followed by a newline. A file gets the body
    verbatim and is created or truncated.

    Raises:
        OutputError: If the body could not be written.
    """
    if destination:
        _write_file(body, destination)
        return
    _write_stream(body, stream if stream is not None else sys.stdout.buffer)
