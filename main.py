"""
Salon scheduler entry point.

Usage:
    python main.py --date 2025-08-11 --service 1 --service 3
    python main.py --date 2025-08-11 --combo 1 --employee 1
"""

import sys

from salon_scheduler.cli import main

if __name__ == "__main__":
    sys.exit(main())
