import os
import re

# --- Marks ---
# Grid cells hold these small integers; characters are only used in text.
EMPTY = 0
O = 1  # first player, connects left and right edges
X = 2  # second player, connects top and bottom edges

MARK_CHARS = {EMPTY: '.', O: 'O', X: 'X'}
CHAR_MARKS = {char: mark for mark, char in MARK_CHARS.items()}

# --- Board limits ---
MAX_DIMENSION = 1000

# --- Player types ---
MANUAL = 'm'
AUTOMATIC = 'a'
PLAYER_TYPES = (MANUAL, AUTOMATIC)

# --- Auto-move formula: t = (k * multiplier % modulus) + offset ---
AUTO_MOVE_CONSTANTS = {
    O: (9, 1000037, 17),
    X: (7, 1000213, 81),
}

# --- Console ---
SAVE_COMMAND = 's'

# Decimal integers as typed: ASCII digits, optional sign, nothing else.
INTEGER_RE = re.compile(r"[+-]?\d+", re.ASCII)

LOG_LEVEL = os.getenv("HEX_LOG_LEVEL", "WARNING").upper()
