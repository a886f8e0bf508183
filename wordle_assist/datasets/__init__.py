from .validator import validate_wordlists, pretty_summary
from .io import read_lines, read_words
from .loader import load_tables

__all__ = ["validate_wordlists", "pretty_summary", "read_lines", "read_words", "load_tables"]
