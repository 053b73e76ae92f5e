"""Allow ``python -m commentscan``."""

import sys

from commentscan.cli import main

sys.exit(main())
