"""
Tests for text normalization.

Features covered
────────────────
replace_latin      – Latin homoglyphs become Cyrillic, case preserved
repair_diacritics  – е + U+0308 → ё, и + U+0306 → й, other marks untouched
remove_noise       – only а..я / ё survive, ь and ъ dropped
normalize          – full NFKD → lower → homoglyph → repair → noise chain
"""

import unicodedata

import pytest

from polyphon.phonetics.normalize import (
    normalize,
    remove_noise,
    repair_diacritics,
    replace_latin,
)


class TestReplaceLatin:

    def test_latin_to_cyrillic_replacement(self):
        assert replace_latin("a e o c x B M H") == "а е о с х В М Н"

    def test_lowercase_lookalikes_of_uppercase_letters(self):
        assert replace_latin("b m h") == "в м н"

    def test_no_replacement_for_normal_cyrillic(self):
        assert replace_latin("привет") == "привет"

    def test_unmapped_latin_passes_through(self):
        assert replace_latin("qwz") == "qwz"


class TestRepairDiacritics:

    def test_diacritic_repairment(self):
        text = unicodedata.normalize('NFKD', "йо\u0301г на пе\u0301рекрё\u0301стке")
        expected = "йо\u0301г на пе\u0301рекрё\u0301стке"
        assert repair_diacritics(text) == expected

    def test_trailing_base_letter_is_kept(self):
        assert repair_diacritics("приве") == "приве"

    def test_mark_without_base_is_left_alone(self):
        assert repair_diacritics("\u0308а") == "\u0308а"

    def test_mark_after_other_base_is_not_merged(self):
        assert repair_diacritics("а\u0308") == "а\u0308"

    def test_empty(self):
        assert repair_diacritics("") == ""


class TestRemoveNoise:

    def test_noise_removing(self):
        assert remove_noise("hello ,  прохорёнокъ!") == "прохорёнок"

    @pytest.mark.parametrize("text,expected", [
        ("подъезд", "подезд"),
        ("соль", "сол"),
        ("2024 год", "год"),
        ("ПРИВЕТ", ""),  # uppercase is removed, normalize lowercases first
    ])
    def test_filtering(self, text, expected):
        assert remove_noise(text) == expected


class TestNormalize:

    def test_normalization(self):
        text = "Ивановъ ВаСилий Hиканор\u00d3вич"
        assert normalize(text) == "ивановвасилийниканорович"

    def test_empty_input(self):
        assert normalize("") == ""

    @pytest.mark.parametrize("text", [
        "qwrty uip 42 ðþ!?",
        "1234567890",
        "   \t\n",
        "ℕ ℤ ∑",
    ])
    def test_non_cyrillic_input_is_empty(self, text):
        assert normalize(text) == ""

    def test_yo_survives_decomposition(self):
        assert normalize("ёж") == "ёж"
        assert normalize("ЁЖ") == "ёж"

    def test_short_i_survives_decomposition(self):
        assert normalize("Йод") == "йод"

    def test_stress_marks_are_dropped(self):
        assert normalize("молоко\u0301") == "молоко"
        assert normalize("моло\u0301ко") == "молоко"

    def test_homoglyph_spelling(self):
        # Latin 'e' inside a Cyrillic word
        assert normalize("лeто") == "лето"

    def test_output_alphabet(self):
        result = normalize("Съешь же ещё этих мягких французских булок, да выпей чаю!")
        assert result
        assert all('а' <= ch <= 'я' or ch == 'ё' for ch in result)
        assert 'ь' not in result
        assert 'ъ' not in result
