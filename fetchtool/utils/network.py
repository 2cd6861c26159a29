"""HTTP helpers with retry support."""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional

import httpx

from fetchtool.config.defaults import RETRY_DELAY_SECONDS
from fetchtool.models import FetchConfig, FetchResult, Failure, Success
from fetchtool.utils.decorators import profile_performance, retry_on_failure

logger = logging.getLogger(__name__)

Executor = Callable[[str, int], FetchResult]

# Everything httpx raises for a request that did not complete. UnicodeError
# comes from IDNA encoding of host names with empty or over-long labels.
TRANSPORT_ERRORS = (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError, UnicodeError)


def _describe(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


class _Deadline:
    """Overall time limit for one attempt; ``timeout == 0`` never expires."""

    def __init__(self, timeout: int) -> None:
        self.timeout = timeout
        self.expires_at = time.monotonic() + timeout if timeout else None

    def check(self, request: httpx.Request, stage: str) -> None:
        if self.expires_at is not None and time.monotonic() > self.expires_at:
            raise httpx.ReadTimeout(
                f"deadline of {self.timeout}s exceeded {stage} {request.url}",
                request=request,
            )


@profile_performance
def execute(
    url: str, timeout: int, *, transport: Optional[httpx.BaseTransport] = None
) -> FetchResult:
    """Perform a single GET of ``url`` and read the whole body.

    ``timeout`` bounds the connection and the full body read; ``0`` disables
    it. Transport errors are returned as :class:`Failure` rather than raised.
    The HTTP status is not checked, so a 404 page is a :class:`Success`.

    httpx applies ``timeout`` to each network operation, so the overall
    deadline is also checked once the headers arrive, for every body chunk
    and after the body is complete.

    Parameters
    ----------
    url: str
        Absolute ``http://`` or ``https://`` URL.
    timeout: int
        Deadline in seconds for the whole attempt.
    transport: httpx.BaseTransport, optional
        Transport to use instead of the default network one.
    """

    deadline = _Deadline(timeout)
    try:
        with httpx.Client(
            timeout=timeout or None, follow_redirects=True, transport=transport
        ) as client:
            with client.stream("GET", url) as response:
                deadline.check(response.request, "waiting for headers from")
                chunks = []
                for chunk in response.iter_bytes():
                    deadline.check(response.request, "while reading")
                    chunks.append(chunk)
                deadline.check(response.request, "while reading")
                status_code = response.status_code
    except TRANSPORT_ERRORS as exc:
        logger.debug("GET %s failed: %r", url, exc)
        return Failure(cause=_describe(exc), error=exc)

    body = b"".join(chunks)
    logger.debug("GET %s returned %s with %d bytes", url, status_code, len(body))
    return Success(body=body, status_code=status_code)


def fetch_with_retry(
    url: str,
    timeout: int,
    retry: int,
    *,
    executor: Optional[Executor] = None,
    sleep: Optional[Callable[[float], None]] = None,
    delay: float = RETRY_DELAY_SECONDS,
) -> FetchResult:
    """Fetch ``url`` up to ``max(retry, 1)`` times until an attempt succeeds.

    Attempts run one after another with a fixed ``delay`` between them. The
    first :class:`Success` is returned as soon as it arrives; if every attempt
    fails, the last :class:`Failure` is returned.
    """

    run = executor or execute
    attempts = max(retry, 1)

    @retry_on_failure(attempts, delay, sleep=sleep)
    def _attempt() -> FetchResult:
        return run(url, timeout)

    result = _attempt()
    if not result.ok:
        logger.info("Giving up on %s after %d attempt(s): %s", url, attempts, result.cause)
    return result


def fetch(config: FetchConfig, **kwargs) -> FetchResult:
    """Run :func:`fetch_with_retry` with the settings from ``config``."""
    return fetch_with_retry(config.url, config.timeout, config.retry, **kwargs)
