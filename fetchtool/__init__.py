"""Top-level package for the fetchtool Python API.

The module exposes a small, curated public surface: URL normalization, the
single-attempt executor, the retry loop and the output writer. Everything else
may change without notice.

Example
-------
>>> from fetchtool import FetchConfig, fetch
>>> config = FetchConfig.from_raw("example.com", retry=1)
>>> config.url
'http://example.com'
"""

from .config.defaults import VERSION as __version__
from .exceptions import (
    FetchToolError,
    InvalidURLError,
    MissingURLError,
    OutputError,
    TransportFailure,
    UsageError,
)
from .models import Failure, FetchConfig, FetchResult, Success
from .output import write_output
from .utils.network import execute, fetch, fetch_with_retry
from .utils.url_utils import is_valid_url, normalize

__all__ = [
    "__version__",
    "FetchConfig",
    "FetchResult",
    "Success",
    "Failure",
    "FetchToolError",
    "UsageError",
    "MissingURLError",
    "InvalidURLError",
    "TransportFailure",
    "OutputError",
    "normalize",
    "is_valid_url",
    "execute",
    "fetch",
    "fetch_with_retry",
    "write_output",
]
