import pytest

from wordle_assist.engine import WordTables

ANSWERS = [
    "crane", "raise", "stare", "trace", "cared", "racer", "adieu", "alone",
    "level", "belle", "lemon", "scoop", "cools", "speed", "erase", "slate",
]
EXTRA_GUESSES = ["soare", "roate", "salet", "lints", "dumpy"]


@pytest.fixture(scope="session")
def small_tables() -> WordTables:
    # guess table: extras first, then the answers (appended by from_wordlists)
    return WordTables.from_wordlists(EXTRA_GUESSES, ANSWERS)
