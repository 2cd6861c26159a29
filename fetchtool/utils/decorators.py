import logging
import time
from functools import wraps
from typing import Any, Callable, Optional, TypeVar, cast

from tenacity import RetryCallState, retry, retry_if_result, stop_after_attempt, wait_fixed

from fetchtool.models import Failure

logger = logging.getLogger(__name__)


F = TypeVar("F", bound=Callable[..., Any])


def profile_performance(func: F) -> F:
    """Decorator to log the execution time of a function."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        start_time = time.monotonic()
        result = func(*args, **kwargs)
        execution_time = time.monotonic() - start_time
        logger.debug("%s took %.4f seconds to execute", func.__name__, execution_time)
        return result

    return cast(F, wrapper)


def _is_failure(result: Any) -> bool:
    return isinstance(result, Failure)


def _log_retry(retry_state: RetryCallState) -> None:
    outcome = retry_state.outcome
    cause = outcome.result().cause if outcome is not None else "unknown"
    delay = retry_state.next_action.sleep if retry_state.next_action else 0.0
    logger.info(
        "Attempt %d failed: %s; retrying in %.1f seconds",
        retry_state.attempt_number,
        cause,
        delay,
    )


def _last_result(retry_state: RetryCallState) -> Any:
    # Give back the final Failure instead of tenacity's RetryError.
    return retry_state.outcome.result()


def retry_on_failure(
    max_attempts: int, delay: float, sleep: Optional[Callable[[float], None]] = None
) -> Callable[[F], F]:
    """Retry the decorated function while it returns a :class:`Failure`.

    The function is called at most ``max_attempts`` times (at least once)
    with a fixed ``delay`` between attempts and no pause after the last one.
    When every attempt fails the last ``Failure`` is returned. Exceptions
    raised by the function are not retried.
    """

    def decorator(func: F) -> F:
        return cast(
            F,
            retry(
                retry=retry_if_result(_is_failure),
                stop=stop_after_attempt(max(max_attempts, 1)),
                wait=wait_fixed(delay),
                sleep=sleep or time.sleep,
                before_sleep=_log_retry,
                retry_error_callback=_last_result,
            )(func),
        )

    return decorator
