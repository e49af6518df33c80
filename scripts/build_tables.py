#!/usr/bin/env python3
"""
Build the flush and unsuited lookup tables; save to data/.
Run from project root: python scripts/build_tables.py [--verify]
"""

import os
import sys
import time
import argparse

# Project root
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from poker_rank.config import DEFAULT_TABLE_DIR, WORST_RANK
from poker_rank.tables import build_tables, save_tables, verify_tables


def main():
    ap = argparse.ArgumentParser(description="Build lookup tables for hand ranking")
    ap.add_argument("--out-dir", default=DEFAULT_TABLE_DIR, help="Output directory")
    ap.add_argument("--verify", action="store_true", help="Check tables against the reference evaluator before saving")
    args = ap.parse_args()

    out_dir = os.path.join(ROOT, args.out_dir)

    print(f"Building lookup tables ({WORST_RANK} classes)...")
    start = time.time()
    tables = build_tables()
    print(f"  {len(tables.flush)} flush, {len(tables.unsuited)} unsuited entries ({time.time() - start:.2f}s)")

    if args.verify:
        problems = verify_tables(tables, progress=True)
        if problems:
            for p in problems:
                print(f"  {p}")
            sys.exit(1)
        print("  Verified against reference evaluator")

    for path in save_tables(tables, out_dir):
        print(f"  Saved {path}")

    print("Done.")


if __name__ == "__main__":
    main()
