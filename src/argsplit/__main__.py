"""Allow running as ``python -m argsplit``."""

import sys

from argsplit.cli import main

sys.exit(main())
