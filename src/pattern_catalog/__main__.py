"""Allow running the catalog with ``python -m pattern_catalog``."""

import sys

from pattern_catalog.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
