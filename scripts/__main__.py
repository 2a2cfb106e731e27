"""Allow `python -m scripts` by running the report script."""

import sys

from scripts.report import main

sys.exit(main())
