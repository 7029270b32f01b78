"""Allow ``python -m cupslog``."""

import sys

from cupslog.cli import run

sys.exit(run())
