"""
Text normalization: raw input → lowercase Cyrillic letter stream.

Steps, in order:

1. NFKD decomposition (precomposed letters split into base + combining mark)
2. Lowercasing
3. Latin homoglyph replacement
4. Diacritic repair (е + U+0308 → ё, и + U+0306 → й)
5. Noise removal (only а..я and ё survive, minus ь and ъ)
"""

import unicodedata

from polyphon.phonetics.tables import (
    COMBINING_BREVE,
    COMBINING_DIAERESIS,
    HOMOGLYPHS,
    SILENT_LETTERS,
    lookup,
)

# (base letter, combining mark) → precomposed letter
_DIACRITIC_PAIRS = {
    ('е', COMBINING_DIAERESIS): 'ё',
    ('и', COMBINING_BREVE): 'й',
}


def replace_latin(text: str) -> str:
    """Replace Latin letters that look like Cyrillic ones with the Cyrillic letter."""
    return ''.join(lookup(HOMOGLYPHS, char) for char in text)


def repair_diacritics(text: str) -> str:
    """
    Recompose ё and й from their decomposed forms.

    Other combining marks (stress accents, etc.) are left in place; the
    noise filter drops them afterwards.
    """
    result = []
    n = len(text)
    i = 0
    while i < n:
        char = text[i]
        if i + 1 < n:
            repaired = _DIACRITIC_PAIRS.get((char, text[i + 1]))
            if repaired is not None:
                result.append(repaired)
                i += 2
                continue
        result.append(char)
        i += 1
    return ''.join(result)


def _is_kept_letter(char: str) -> bool:
    return ('а' <= char <= 'я' or char == 'ё') and char not in SILENT_LETTERS


def remove_noise(text: str) -> str:
    """Keep lowercase Cyrillic letters only, dropping the soft and hard signs."""
    return ''.join(char for char in text if _is_kept_letter(char))


def normalize(text: str) -> str:
    """
    Canonicalize raw text into a clean lowercase Cyrillic character stream.

    Args:
        text: Any Unicode string

    Returns:
        The letters of ``text`` that take part in encoding; empty when none do.
    """
    if not text:
        return ''

    text = unicodedata.normalize('NFKD', text)
    text = text.lower()
    text = replace_latin(text)
    text = repair_diacritics(text)
    return remove_noise(text)
