"""
Lookup tables: immutable key -> rank mappings, CSV persistence, builder, verification.
Run scripts/build_tables.py to generate data/*.csv.
"""

from poker_rank.tables.lookup import (
    LookupTables,
    load_tables,
    save_tables,
    get_default_tables,
)
from poker_rank.tables.build import build_tables
from poker_rank.tables.reference import reference_rank, verify_tables

__all__ = [
    "LookupTables",
    "load_tables",
    "save_tables",
    "get_default_tables",
    "build_tables",
    "reference_rank",
    "verify_tables",
]
