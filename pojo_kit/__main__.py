"""Allow ``python -m pojo_kit``."""

import sys

from .cli import main

sys.exit(main())
