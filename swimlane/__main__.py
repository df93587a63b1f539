"""
swimlane - Main entry point.
"""

import sys

from swimlane.cli import main

if __name__ == "__main__":
    sys.exit(main())
