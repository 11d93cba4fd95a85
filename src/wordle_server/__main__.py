"""Allow ``python -m wordle_server``."""

import sys

from .cli import main

sys.exit(main())
