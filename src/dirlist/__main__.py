"""Entry point for ``python -m dirlist``."""

import sys

from dirlist.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
