"""
Module execution entry point.

Allows running with: python -m comment_cli
"""

import sys
from comment_cli.main import main

if __name__ == "__main__":
    sys.exit(main())
