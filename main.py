"""Application entry point for suffixstrip.

Runs the command-line interface with the process arguments.
"""

import sys

from suffixstrip.cli import main

if __name__ == "__main__":
    sys.exit(main())
