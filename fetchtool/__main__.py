"""Allow ``python -m fetchtool``."""

import sys

from fetchtool.cli import main

if __name__ == "__main__":
    sys.exit(main())
