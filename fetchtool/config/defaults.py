"""Default settings for the fetch command."""

VERSION = "1.0.0"

DEFAULT_TIMEOUT = 30  # seconds; 0 disables the deadline
MAX_TIMEOUT = 24 * 60 * 60  # larger values overflow socket timeouts
DEFAULT_RETRY = 3
DEFAULT_REPEAT = 1

# Fixed pause between a failed attempt and the next one
RETRY_DELAY_SECONDS = 1.0

DEFAULT_SCHEME = "http://"
ALLOWED_SCHEMES = ("http://", "https://")

# Mode for newly created output files (before umask)
OUTPUT_FILE_MODE = 0o644

HELP_MESSAGE = """
Usage: fetchtool [options]
Options:
  -u, --url     URL to fetch (required)
  -o, --output  Output file (default: stdout)
  -t, --timeout Timeout in seconds (default: 30)
  -r, --retry   Retry count (default: 3)
  -f, --for     Number of times to fetch (default: 1)
  -h, --help    Show this help message
  -v, --version Show version information
      --debug   Log diagnostic messages to stderr
"""
