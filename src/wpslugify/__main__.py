"""Entry point for ``python -m wpslugify``."""

from __future__ import annotations

import sys

from wpslugify.cli import main

if __name__ == "__main__":
    sys.exit(main())
