"""Entry point for ``python -m formdfa``."""

import sys

from formdfa.cli import main

sys.exit(main())
