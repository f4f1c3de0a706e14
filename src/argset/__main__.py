"""Entry point for running argset as a module."""

import sys

from argset.cli import main

if __name__ == "__main__":
    sys.exit(main())
