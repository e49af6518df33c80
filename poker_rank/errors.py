"""
Error taxonomy for hand ranking.
Encoding and size errors are caller errors; LookupMiss and TableLoadError are fatal.
"""

from poker_rank.config import HAND_SIZES


class PokerRankError(Exception):
    """Base class for every error raised by poker_rank."""


class InvalidCardToken(PokerRankError, ValueError):
    def __init__(self, token, reason=None):
        self.token = token
        self.reason = reason
        msg = f"invalid card token {token!r}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class UnsupportedHandSize(PokerRankError, ValueError):
    def __init__(self, size, allowed=HAND_SIZES):
        self.size = size
        self.allowed = tuple(allowed)
        allowed_str = ", ".join(str(n) for n in self.allowed)
        super().__init__(f"unsupported hand size {size} (expected one of {allowed_str})")


class LookupMiss(PokerRankError, LookupError):
    """A computed key has no entry in its table. Indicates corrupt tables or an encoding bug."""

    def __init__(self, key, table):
        self.key = key
        self.table = table
        super().__init__(f"no entry for key {key} in {table} table")


class TableLoadError(PokerRankError):
    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"cannot load lookup table {path}: {reason}")
