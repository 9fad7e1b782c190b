"""Allow running treefind with ``python -m treefind``."""

import sys

from .cli import main

sys.exit(main())
