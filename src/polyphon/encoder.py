"""
Public encoding entry points.

``encode`` is the plain function; ``PhoneticEncoder`` wraps the same
pipeline with a per-instance LRU cache for callers that encode the same
words many times (dictionary building, deduplication passes).
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Union

from polyphon.phonetics.normalize import normalize
from polyphon.phonetics.rules import (
    reduce_vowels,
    remove_repeats,
    replace_letters,
    replace_sequences,
)

logger = logging.getLogger(__name__)

TextLike = Union[str, bytes, bytearray]


def _as_text(value: TextLike) -> str:
    """Accept str as is, decode bytes strictly as UTF-8, reject anything else."""
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        # UnicodeDecodeError (a ValueError) propagates to the caller
        return bytes(value).decode('utf-8')
    raise TypeError(f"expected str or UTF-8 bytes, got {type(value).__name__}")


def _encode_normalized(text: str) -> str:
    text = remove_repeats(text)
    text = reduce_vowels(text)
    text = replace_letters(text)
    return replace_sequences(text)


def encode(text: TextLike) -> str:
    """
    Encode Russian text into its phonetic key.

    Words that sound alike share a key::

        encode("Литие") == encode("ладо") == encode("леди") == "лата"

    Args:
        text: Text to encode; bytes are decoded as UTF-8

    Returns:
        Lowercase Cyrillic key, empty if ``text`` holds no Cyrillic letters

    Raises:
        TypeError: ``text`` is not str or bytes
        UnicodeDecodeError: ``text`` is bytes that are not valid UTF-8
    """
    return _encode_normalized(normalize(_as_text(text)))


@dataclass
class EncoderConfig:
    """Settings for a PhoneticEncoder instance"""

    # LRU size for encode/normalize caches; 0 disables caching, None is unbounded
    cache_size: Optional[int] = 1000

    def __post_init__(self):
        if self.cache_size is not None and self.cache_size < 0:
            raise ValueError("cache_size cannot be negative")


class PhoneticEncoder:
    """
    Phonetic encoder with per-instance caching.

    Caches are created in ``__init__`` rather than with a class-level
    ``@lru_cache`` so each instance owns (and frees) its own cache.
    """

    def __init__(self, config: Optional[EncoderConfig] = None):
        self.config = config or EncoderConfig()
        size = self.config.cache_size

        self._normalize = lru_cache(maxsize=size)(normalize)
        self._encode = lru_cache(maxsize=size)(self._encode_impl)
        logger.debug(f"PhoneticEncoder created (cache_size={size})")

    def _encode_impl(self, text: str) -> str:
        return _encode_normalized(self._normalize(text))

    def normalize(self, text: TextLike) -> str:
        """Normalized letter stream of ``text`` (first pipeline stage only)."""
        return self._normalize(_as_text(text))

    def encode(self, text: TextLike) -> str:
        """Same as module-level ``encode`` but cached."""
        return self._encode(_as_text(text))

    def sounds_alike(self, first: TextLike, second: TextLike) -> bool:
        """True when both texts reduce to the same phonetic key."""
        return self.encode(first) == self.encode(second)

    def cache_info(self):
        """``functools`` cache statistics of the encode cache."""
        return self._encode.cache_info()

    def clear_cache(self):
        """Clear both the encode and the normalize caches."""
        self._encode.cache_clear()
        self._normalize.cache_clear()
        logger.debug("PhoneticEncoder caches cleared")


_default_encoder: Optional[PhoneticEncoder] = None


def get_default_encoder() -> PhoneticEncoder:
    """Get or create the shared default encoder"""
    global _default_encoder
    if _default_encoder is None:
        _default_encoder = PhoneticEncoder()
    return _default_encoder
