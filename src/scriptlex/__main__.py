"""Entry point for ``python -m scriptlex``."""

import sys

from scriptlex.cli import main

if __name__ == "__main__":
    sys.exit(main())
