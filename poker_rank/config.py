"""
Central configuration: table files, rank bands, CLI exit codes.
"""

# Lookup table files (relative to project root or an explicit directory)
DEFAULT_TABLE_DIR = "data"
TABLE_DIR_ENV = "POKER_RANK_TABLE_DIR"
FLUSH_TABLE_FILE = "flush_lookup.csv"
UNSUITED_TABLE_FILE = "unsuited_lookup.csv"

# Hand sizes with a combination table
HAND_SIZES = (5, 6, 7)

# Rank bands: worst (highest) rank of each hand class
MAX_STRAIGHT_FLUSH = 10
MAX_FOUR_OF_A_KIND = 166
MAX_FULL_HOUSE = 322
MAX_FLUSH = 1599
MAX_STRAIGHT = 1609
MAX_THREE_OF_A_KIND = 2467
MAX_TWO_PAIR = 3325
MAX_PAIR = 6185
MAX_HIGH_CARD = 7462

BEST_RANK = 1
WORST_RANK = MAX_HIGH_CARD

# Expected table sizes
FLUSH_TABLE_SIZE = 1287  # 10 straight flushes + 1277 flushes
UNSUITED_TABLE_SIZE = WORST_RANK - FLUSH_TABLE_SIZE  # 6175

# CLI exit codes
EXIT_OK = 0
EXIT_BAD_HAND = 1
EXIT_NO_INPUT = 2
EXIT_FILE_OPEN = 3
EXIT_FILE_READ = 4
EXIT_TABLES = 5
EXIT_INTERNAL = 70
