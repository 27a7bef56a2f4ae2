"""Development entrypoint for the immunesim command line."""

from __future__ import annotations

import sys

from immunesim.cli import main

if __name__ == "__main__":
    sys.exit(main())
