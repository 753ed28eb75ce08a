"""Allow running as ``python -m search_viewer``."""

import sys

from search_viewer.cli import main

sys.exit(main())
