"""Entry point for ``python -m fuzzyspan``."""

import sys

from .cli import main

sys.exit(main())
