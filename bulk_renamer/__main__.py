"""Allow ``python -m bulk_renamer`` to run the CLI"""

import sys

from .cli import main

sys.exit(main())
