"""Cricket Darts - console entry point."""

import sys

from cricket.main import main

if __name__ == "__main__":
    sys.exit(main())
