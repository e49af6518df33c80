#!/usr/bin/env python3
"""
Score poker hands without installing the package.

Usage:
  python scripts/score_hands.py As Ks Qs Js Ts
  python scripts/score_hands.py -f hands.txt --show-hand
"""

import os
import sys

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from poker_rank.cli import main


if __name__ == "__main__":
    sys.exit(main())
