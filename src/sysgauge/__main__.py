"""Allow ``python -m sysgauge``."""

import sys

from sysgauge.app import main

sys.exit(main())
