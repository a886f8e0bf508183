"""
Project-wide constants.

Entry points (apps/cli/*) expose the user-facing ones as argparse flags;
everything else reads them from here.
"""

# Every word in the tables has exactly this many letters.
WORD_LEN = 5

# Letters are stored as 1..26 ('a' == 1); 0 is never a valid symbol.
ALPHABET = "abcdefghijklmnopqrstuvwxyz"

# Wordle turn budget used by the harness.
MAX_TURNS = 6

# Below this many candidates the selector ranks by worst-case bucket size
# (minimax); at or above it, by expected information (entropy).
# Heuristic value, not derived. Revisit if retuning.
MINIMAX_THRESHOLD = 31

# First suggestion of a fresh game; computing it from scratch over the full
# tables is the most expensive call of the whole game.
DEFAULT_OPENING = "soare"

# Guess rows scored per kernel call. Peak memory is roughly
# SCORE_CHUNK * |candidates| * 27 bytes.
SCORE_CHUNK = 256

DEFAULT_ANSWERS_PATH = "wordle_assist/datasets/data/answers_5.txt"
DEFAULT_ALLOWED_PATH = "wordle_assist/datasets/data/allowed_5.txt"
