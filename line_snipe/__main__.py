"""python -m line_snipe"""

import sys

from .bolt_cli import main

sys.exit(main())
