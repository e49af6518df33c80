"""
Lookup tables: equivalence-class key (prime product) -> rank in [1, 7462].
Loads precomputed tables from CSV when available; otherwise builds them in memory.
"""

import os
import threading
import warnings
from types import MappingProxyType

import numpy as np

from poker_rank.config import (
    DEFAULT_TABLE_DIR,
    TABLE_DIR_ENV,
    FLUSH_TABLE_FILE,
    UNSUITED_TABLE_FILE,
    BEST_RANK,
    WORST_RANK,
)
from poker_rank.errors import LookupMiss, TableLoadError


class LookupTables:
    """
    Immutable pair of mappings: one for flush keys, one for non-flush (unsuited) keys.
    Built once and shared read-only by every HandScorer.
    """

    __slots__ = ("_flush", "_unsuited")

    def __init__(self, flush, unsuited):
        object.__setattr__(self, "_flush", MappingProxyType(dict(flush)))
        object.__setattr__(self, "_unsuited", MappingProxyType(dict(unsuited)))

    def __setattr__(self, name, value):
        raise AttributeError("LookupTables is immutable")

    def __delattr__(self, name):
        raise AttributeError("LookupTables is immutable")

    @property
    def flush(self):
        return self._flush

    @property
    def unsuited(self):
        return self._unsuited

    def flush_rank(self, key):
        try:
            return self._flush[key]
        except KeyError:
            raise LookupMiss(key, "flush") from None

    def unsuited_rank(self, key):
        try:
            return self._unsuited[key]
        except KeyError:
            raise LookupMiss(key, "unsuited") from None

    def __len__(self):
        return len(self._flush) + len(self._unsuited)

    def __repr__(self):
        return f"LookupTables(flush={len(self._flush)}, unsuited={len(self._unsuited)})"


def table_paths(directory):
    return (
        os.path.join(directory, FLUSH_TABLE_FILE),
        os.path.join(directory, UNSUITED_TABLE_FILE),
    )


def has_tables(directory):
    return all(os.path.isfile(p) for p in table_paths(directory))


def load_tables(directory):
    """Read flush_lookup.csv and unsuited_lookup.csv from directory. Raises TableLoadError."""
    flush_path, unsuited_path = table_paths(directory)
    return LookupTables(_read_table(flush_path), _read_table(unsuited_path))


def _read_table(path):
    if not os.path.isfile(path):
        raise TableLoadError(path, "file not found")
    try:
        with warnings.catch_warnings():
            # empty files emit a UserWarning before returning an empty array
            warnings.simplefilter("ignore", UserWarning)
            data = np.loadtxt(path, delimiter=",", dtype=np.int64, ndmin=2)
    except (OSError, ValueError) as e:
        raise TableLoadError(path, str(e)) from e

    if data.size == 0:
        raise TableLoadError(path, "no rows")
    if data.shape[1] != 2:
        raise TableLoadError(path, f"expected 2 columns, got {data.shape[1]}")
    keys, ranks = data[:, 0], data[:, 1]
    if len(np.unique(keys)) != len(keys):
        raise TableLoadError(path, "duplicate keys")
    if ranks.min() < BEST_RANK or ranks.max() > WORST_RANK:
        raise TableLoadError(path, f"ranks outside {BEST_RANK}..{WORST_RANK}")
    return dict(zip(keys.tolist(), ranks.tolist()))


def save_tables(tables, directory):
    """Write both tables as `key,rank` rows ordered by rank. Returns the written paths."""
    os.makedirs(directory, exist_ok=True)
    paths = table_paths(directory)
    for path, mapping in zip(paths, (tables.flush, tables.unsuited)):
        rows = np.array(sorted(mapping.items(), key=lambda kv: kv[1]), dtype=np.int64)
        np.savetxt(path, rows.reshape(-1, 2), fmt="%d", delimiter=",")
    return paths


_default_tables = None
_default_lock = threading.Lock()


def default_table_dir():
    """$POKER_RANK_TABLE_DIR if set, else data/ under the project root."""
    env = os.environ.get(TABLE_DIR_ENV)
    if env:
        return env
    base = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
    return os.path.join(base, DEFAULT_TABLE_DIR)


def get_default_tables():
    """
    Process-wide tables, initialized once. An explicit $POKER_RANK_TABLE_DIR must hold
    both CSVs; the implicit data/ directory falls back to building the tables.
    """
    global _default_tables
    if _default_tables is not None:
        return _default_tables
    with _default_lock:
        if _default_tables is None:
            _default_tables = _load_default_tables()
    return _default_tables


def _load_default_tables():
    directory = default_table_dir()
    if os.environ.get(TABLE_DIR_ENV) or has_tables(directory):
        return load_tables(directory)
    from poker_rank.tables.build import build_tables
    return build_tables()
