"""
Fixed lookup tables for the phonetic encoder.

All tables are read-only views built at import time. Lookups for keys that
are not present fall through to the key itself (see ``lookup``).
"""

from types import MappingProxyType
from typing import FrozenSet, Mapping

# ── Latin look-alikes → Cyrillic ─────────────────────────────────────────────
# Case-sensitive: uppercase Latin maps to uppercase Cyrillic.
HOMOGLYPHS: Mapping[str, str] = MappingProxyType({
    'a': 'а',
    'e': 'е',
    'o': 'о',
    'c': 'с',
    'x': 'х',
    'B': 'В',
    'M': 'М',
    'H': 'Н',
    'b': 'в',
    'm': 'м',
    'h': 'н',
})

VOWELS: FrozenSet[str] = frozenset('иаоуыэяёею')

# In the а..я range but silent; dropped by noise removal
SILENT_LETTERS: FrozenSet[str] = frozenset('ьъ')

COMBINING_DIAERESIS = '\u0308'
COMBINING_BREVE = '\u0306'

# ── Letter classes ───────────────────────────────────────────────────────────
# Unstressed vowels collapse to 'а', voiced consonants to their voiceless pair.
LETTER_CLASSES: Mapping[str, str] = MappingProxyType({
    'е': 'а',
    'ё': 'а',
    'и': 'а',
    'о': 'а',
    'ы': 'а',
    'э': 'а',
    'я': 'а',
    'б': 'п',
    'в': 'ф',
    'г': 'к',
    'д': 'т',
    'з': 'с',
    'щ': 'ш',
    'ж': 'ш',
    'м': 'н',
    'ю': 'у',
})

# ── Multi-character rewrites ─────────────────────────────────────────────────
# Applied after LETTER_CLASSES, so patterns are spelled in class letters.
# Order is significant only among patterns of equal length.
SEQUENCE_RULES: Mapping[str, str] = MappingProxyType({
    'ака': 'афа',
    'ан': 'н',
    'зч': 'ш',
    'лнц': 'нц',
    'лфстф': 'лстф',
    'нат': 'н',
    'нтц': 'нц',
    'нт': 'н',
    'нта': 'на',
    'нтк': 'нк',
    'нтс': 'нс',
    'нтск': 'нск',
    'нтш': 'нш',
    'око': 'офо',
    'пал': 'пл',
    'ртч': 'рч',
    'ртц': 'рц',
    'сп': 'сф',
    'тся': 'ц',
    'стл': 'сл',
    'стн': 'сн',
    'сч': 'ш',
    'сш': 'ш',
    'тат': 'т',
    'тса': 'ц',
    'таф': 'тф',
    'тс': 'тц',
    'тц': 'ц',
    'тч': 'ч',
    'фак': 'фк',
    'фстф': 'стф',
    'шч': 'ч',
})


def lookup(table: Mapping[str, str], key: str) -> str:
    """Return ``table[key]``, or ``key`` unchanged when it has no entry."""
    return table.get(key, key)
