"""Entry point for running as a module: python -m bookshelf"""

import sys

from bookshelf.cli import main

if __name__ == "__main__":
    sys.exit(main())
