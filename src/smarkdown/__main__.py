"""
Main entry point for the markdown renderer when run as a module.
"""

import sys
from smarkdown.cli import main

if __name__ == '__main__':
    sys.exit(main())
