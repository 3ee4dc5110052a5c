"""
Polyphon: phonetic keys for Russian text

Maps a word to a key shared by words that sound alike, in the spirit of
Soundex/Metaphone for Cyrillic.

Use: from polyphon import encode
"""

__version__ = "0.1.0"

from polyphon.encoder import EncoderConfig, PhoneticEncoder, encode, get_default_encoder
from polyphon.phonetics import (
    normalize,
    reduce_vowels,
    remove_repeats,
    replace_latin,
    replace_letters,
    replace_sequences,
)

__all__ = [
    "encode",
    "EncoderConfig",
    "PhoneticEncoder",
    "get_default_encoder",
    "normalize",
    "replace_latin",
    "remove_repeats",
    "reduce_vowels",
    "replace_letters",
    "replace_sequences",
]
