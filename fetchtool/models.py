from dataclasses import dataclass
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fetchtool.config.defaults import (
    ALLOWED_SCHEMES,
    DEFAULT_REPEAT,
    DEFAULT_RETRY,
    DEFAULT_TIMEOUT,
    MAX_TIMEOUT,
)
from fetchtool.exceptions import MissingURLError
from fetchtool.utils.url_utils import has_http_scheme, normalize


@dataclass(frozen=True)
class Success:
    """A completed fetch attempt.

    Any HTTP status counts as a completed fetch; ``status_code`` is kept for
    logging only.
    """

    body: bytes
    status_code: Optional[int] = None

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """A fetch attempt that raised a transport-level error."""

    cause: str
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return False


FetchResult = Union[Success, Failure]


class FetchConfig(BaseModel):
    """Settings for one invocation of the fetch command.

    ``url`` must already be normalized; use :meth:`from_raw` to build a
    config from user input.
    """

    model_config = ConfigDict(frozen=True)

    url: str
    timeout: int = Field(DEFAULT_TIMEOUT, ge=0, le=MAX_TIMEOUT)
    retry: int = Field(DEFAULT_RETRY, ge=0)
    output: Optional[str] = None
    repeat: int = Field(DEFAULT_REPEAT, ge=1)

    @field_validator("url")
    @classmethod
    def _require_http_scheme(cls, value: str) -> str:
        if not has_http_scheme(value):
            raise ValueError(f"URL must start with one of {', '.join(ALLOWED_SCHEMES)}")
        return value

    @classmethod
    def from_raw(cls, url: Optional[str], **kwargs: Any) -> "FetchConfig":
        """Normalize ``url`` and build a config from it.

        Raises:
            MissingURLError: If ``url`` is empty or ``None``.
            InvalidURLError: If ``url`` fails validation.
            pydantic.ValidationError: If another setting is out of range.
        """
        if not url:
            raise MissingURLError()
        return cls(url=normalize(url), **kwargs)

    @property
    def attempts(self) -> int:
        """Number of attempts; a retry count of 0 still fetches once."""
        return max(self.retry, 1)
