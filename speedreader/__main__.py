"""Allow running the reader with ``python -m speedreader``."""

import sys

from speedreader.cli import main

sys.exit(main())
