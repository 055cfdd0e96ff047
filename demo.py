#!/usr/bin/env python3
"""
unibar demo - animated showcase of every progress bar style.

Run from a checkout without installing: python demo.py --help
"""

import sys

from unibar.demo import main


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\n\nCancelled by user.")
        sys.exit(0)
