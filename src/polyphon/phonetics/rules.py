"""
Phonetic rule stages applied to normalized text.

The stages run in a fixed order and each relies on the previous one:

* ``remove_repeats``    - collapse runs of the same character
* ``reduce_vowels``     - elide interior vowels of long enough words
* ``replace_letters``   - fold letters into phonetic classes
* ``replace_sequences`` - greedy longest-match rewrite of clusters
"""

import logging
import threading
from dataclasses import dataclass
from typing import List, Optional, Tuple

from polyphon.phonetics.tables import LETTER_CLASSES, SEQUENCE_RULES, VOWELS, lookup

logger = logging.getLogger(__name__)


def remove_repeats(text: str) -> str:
    """Replace every run of identical consecutive characters with one character."""
    result = []
    previous = None
    for char in text:
        if char != previous:
            result.append(char)
            previous = char
    return ''.join(result)


def _first_vowel_if_long_enough(chars: str) -> Optional[int]:
    """
    Index of the first vowel when the word is long enough to reduce, else None.

    A word qualifies once the forward scan has seen three vowels, or at least
    one vowel and four consonants.
    """
    syllables = 0
    consonants = 0
    first_vowel_idx = None

    for i, char in enumerate(chars):
        if char in VOWELS:
            if first_vowel_idx is None:
                first_vowel_idx = i
            syllables += 1
        else:
            consonants += 1
        if syllables >= 3 or (syllables >= 1 and consonants >= 4):
            return first_vowel_idx
    return None


def reduce_vowels(text: str) -> str:
    """
    Drop the interior vowels of a word, keeping its first and last vowel.

    Words below the syllable threshold are returned unchanged. Expects input
    without consecutive duplicates (see ``remove_repeats``).

    Examples:
        "молоко"      → "молко"
        "молокозавод" → "молкзвод"
        "тиран"       → "тиран"
    """
    first_vowel_idx = _first_vowel_if_long_enough(text)
    if first_vowel_idx is None:
        return text

    kept: List[str] = []
    one_skipped = False
    for i in reversed(range(len(text))):
        char = text[i]
        if char in VOWELS:
            if one_skipped and i != first_vowel_idx:
                continue
            one_skipped = True
        kept.append(char)
    return ''.join(reversed(kept))


def replace_letters(text: str) -> str:
    """Map each character to its letter class representative."""
    return ''.join(lookup(LETTER_CLASSES, char) for char in text)


# ── Sequence rewriting ───────────────────────────────────────────────────────

@dataclass(frozen=True)
class Pattern:
    """One rewrite rule prepared for scanning"""
    chars: str
    length: int
    replacement: str


_patterns: Optional[Tuple[Pattern, ...]] = None
_patterns_lock = threading.Lock()


def _build_patterns() -> Tuple[Pattern, ...]:
    patterns = [
        Pattern(chars=chars, length=len(chars), replacement=replacement)
        for chars, replacement in SEQUENCE_RULES.items()
        if chars
    ]
    # sorted() is stable: equal lengths keep table order
    patterns = sorted(patterns, key=lambda p: p.length, reverse=True)
    logger.debug(
        f"Built {len(patterns)} sequence patterns (longest: {patterns[0].length if patterns else 0})"
    )
    return tuple(patterns)


def get_patterns() -> Tuple[Pattern, ...]:
    """
    Return the rewrite patterns ordered longest first.

    Built once on first use; concurrent first callers wait for a single build,
    later callers read the published tuple without locking.
    """
    global _patterns
    patterns = _patterns
    if patterns is None:
        with _patterns_lock:
            if _patterns is None:
                _patterns = _build_patterns()
            patterns = _patterns
    return patterns


def replace_sequences(text: str) -> str:
    """
    Rewrite consonant/vowel clusters with a greedy leftmost longest match.

    At each position the longest matching pattern wins, its replacement is
    emitted and the scan resumes right after it. Unmatched characters are
    copied through one at a time.

    Example:
        "факталакачаскай" → "фкталафачаскай"
    """
    patterns = get_patterns()
    result = []
    n = len(text)
    i = 0
    while i < n:
        for pattern in patterns:
            if i + pattern.length <= n and text.startswith(pattern.chars, i):
                result.append(pattern.replacement)
                i += pattern.length
                break
        else:
            result.append(text[i])
            i += 1
    return ''.join(result)
