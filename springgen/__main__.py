"""Allow ``python -m springgen``."""

import sys

from springgen.cli import main

sys.exit(main())
