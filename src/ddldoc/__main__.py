"""Allow ``python -m ddldoc``."""

import sys

from ddldoc.cli import main

sys.exit(main())
