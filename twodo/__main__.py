"""Run the 2DO console application with `python -m twodo`."""

import sys

from twodo.main import main

sys.exit(main())
