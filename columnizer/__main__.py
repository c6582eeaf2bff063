"""Entry point for ``python -m columnizer``."""

import sys

from .cli import main

sys.exit(main())
