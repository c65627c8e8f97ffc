"""Puzzles on strings."""

import string
from collections import Counter
from itertools import groupby, islice

_ALNUM = frozenset(string.ascii_letters + string.digits)
_VOWELS = frozenset("aeiou")


def make_fancy_string(s: str) -> str:
    """Drop characters so that no three consecutive characters are equal."""
    return "".join(
        "".join(islice(run, 2)) for _, run in groupby(s)
    )


def is_valid_word(word: str) -> bool:
    """Check a word: at least three ASCII letters or digits, a vowel and a consonant."""
    if len(word) < 3:
        return False
    if any(ch not in _ALNUM for ch in word):
        return False
    letters = [ch.lower() for ch in word if ch.isalpha()]
    has_vowel = any(ch in _VOWELS for ch in letters)
    has_consonant = any(ch not in _VOWELS for ch in letters)
    return has_vowel and has_consonant


def first_unique_char(s: str) -> int:
    """Return the index of the first character occurring once in ``s``, or -1."""
    counts = Counter(s)
    return next((index for index, ch in enumerate(s) if counts[ch] == 1), -1)