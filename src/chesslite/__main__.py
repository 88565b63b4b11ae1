"""``python -m chesslite`` runs the terminal game."""

import sys

from chesslite.cli.main import main

sys.exit(main())
