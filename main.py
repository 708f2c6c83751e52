"""
Emergency Response Simulation - root entry point.

All application logic lives in src/emergency_response. This file only lets the
game be started from a checkout with ``python main.py`` once the package is
installed.
"""

import sys

from emergency_response.main import main

if __name__ == "__main__":
    sys.exit(main())
