"""Allow ``python -m lingo``."""

import sys

from lingo.cli.main import main

sys.exit(main())
