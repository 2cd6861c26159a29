import re
import urllib.parse

from fetchtool.config.defaults import ALLOWED_SCHEMES, DEFAULT_SCHEME
from fetchtool.exceptions import InvalidURLError

# Unreserved, gen-delims and sub-delims from RFC 3986 plus "%" for escapes.
_URI_CHARS_RE = re.compile(r"[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=%]+")
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_SCHEME_RE = re.compile(r"^([^:/?#]+):")
_VALID_SCHEME_RE = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")
# "[" and "]" may only enclose the host of an http(s) URL, e.g. http://[::1]:8080/
_IP_LITERAL_RE = re.compile(
    r"https?://(?:[^/?#@\[\]]*@)?"  # optional userinfo
    r"\[[^/?#@\[\]]+\](?::[0-9]*)?(?:[/?#]|\Z)"
)


def _check_brackets(url: str) -> None:
    # Limited to http(s) URLs so that adding the default scheme can never
    # move a bracketed host into the path.
    if "[" not in url and "]" not in url:
        return
    if url.count("[") != 1 or url.count("]") != 1 or not _IP_LITERAL_RE.match(url):
        raise InvalidURLError(url, "Invalid URL: brackets outside an IP-literal host")


def _check_uri_reference(url: str) -> None:
    """Raise :class:`InvalidURLError` unless ``url`` is a URI reference.

    Both absolute URIs and relative references are accepted, so a bare
    ``example.com`` passes even though it has no scheme.
    """
    if not url:
        raise InvalidURLError(url, "Invalid URL: empty")
    if not _URI_CHARS_RE.fullmatch(url):
        raise InvalidURLError(url, "Invalid URL: disallowed characters")
    if _BAD_ESCAPE_RE.search(url):
        raise InvalidURLError(url, "Invalid URL: malformed percent-encoding")
    if url.count("#") > 1:
        raise InvalidURLError(url, "Invalid URL: more than one fragment")
    _check_brackets(url)

    # Text before the first ":" is a scheme only when no "/", "?" or "#"
    # comes first; it then has to follow the scheme grammar.
    match = _SCHEME_RE.match(url)
    if match and not _VALID_SCHEME_RE.fullmatch(match.group(1)):
        raise InvalidURLError(url, "Invalid URL: malformed scheme")

    try:
        urllib.parse.urlsplit(url)
    except ValueError as exc:
        raise InvalidURLError(url, f"Invalid URL: {exc}") from exc


def is_valid_url(url: str) -> bool:
    """Return ``True`` if ``url`` is a syntactically valid URI reference."""
    try:
        _check_uri_reference(url)
    except InvalidURLError:
        return False
    return True


def has_http_scheme(url: str) -> bool:
    # Case-sensitive on purpose: "HTTP://x" still gets the default scheme.
    return url.startswith(ALLOWED_SCHEMES)


def normalize(url: str) -> str:
    """Validate ``url`` and make sure it starts with ``http://`` or ``https://``.

    Validation runs on the string as given, before any scheme is added.
    Strings that already carry an HTTP scheme are returned unchanged.

    Raises:
        InvalidURLError: If ``url`` is empty or not a valid URI reference.
    """
    _check_uri_reference(url)
    if has_http_scheme(url):
        return url
    return f"{DEFAULT_SCHEME}{url}"
