"""Normalization and phonetic rule stages"""

from polyphon.phonetics.normalize import normalize, replace_latin
from polyphon.phonetics.rules import (
    reduce_vowels,
    remove_repeats,
    replace_letters,
    replace_sequences,
)

__all__ = [
    "normalize",
    "replace_latin",
    "remove_repeats",
    "reduce_vowels",
    "replace_letters",
    "replace_sequences",
]
