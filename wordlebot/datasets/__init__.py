from .dictionary import (
    Dictionary, load_dictionary, fetch_words, read_words, write_words, DICTIONARY_URL, WORD_LENGTH,
)
from .validator import validate_wordlist, pretty_summary

__all__ = [
    "Dictionary", "load_dictionary", "fetch_words", "read_words", "write_words",
    "DICTIONARY_URL", "WORD_LENGTH", "validate_wordlist", "pretty_summary",
]
