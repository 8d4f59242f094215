"""Allow ``python -m qtscaffold``."""

import sys

from qtscaffold.creator import main

sys.exit(main())
