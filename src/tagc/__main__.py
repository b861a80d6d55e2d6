"""
Entry point for module execution (``python -m tagc``).

Delegates to the CLI handler in ``tagc.cli.__main__``.
"""

import sys
from tagc.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
