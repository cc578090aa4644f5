"""Allow running as ``python -m shift_tracker``."""

import sys

from shift_tracker.cli import main


if __name__ == "__main__":
    sys.exit(main())
