"""Allow running as ``python -m gtav_saveload``."""

import sys

from .app import main

sys.exit(main())
