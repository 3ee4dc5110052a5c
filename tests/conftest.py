"""
Pytest configuration and fixtures for polyphon tests
"""
import pytest


@pytest.fixture
def name_variants():
    """Spellings of one surname that should share a phonetic key"""
    return ["Литие", "ладо", "литье", "летие", "лeто", "леди"]
