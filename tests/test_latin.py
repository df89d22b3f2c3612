"""Tests for the classical Latin transforms."""

import pytest

from scribe_runes.latin import to_classical_latin, to_classical_latin_extended, to_roman


# =============================================================================
# to_roman
# =============================================================================


class TestToRoman:
    @pytest.mark.parametrize(
        "number, expected",
        [
            (1, "I"),
            (4, "IV"),
            (9, "IX"),
            (14, "XIV"),
            (40, "XL"),
            (90, "XC"),
            (400, "CD"),
            (1999, "MCMXCIX"),
            (2024, "MMXXIV"),
            (3999, "MMMCMXCIX"),
        ],
    )
    def test_in_range(self, number, expected):
        assert to_roman(number) == expected

    @pytest.mark.parametrize("number", [0, -5, 4000, 12345])
    def test_out_of_range(self, number):
        assert to_roman(number) == str(number)


# =============================================================================
# to_classical_latin
# =============================================================================


class TestClassicalLatin:
    def test_veni_vidi_vici(self):
        assert to_classical_latin("veni vidi vici 9") == "VENI VIDI VICI IX"

    def test_year(self):
        assert to_classical_latin("year 1999") == "YEAR MCMXCIX"

    def test_out_of_range_number(self):
        assert to_classical_latin("room 4000") == "ROOM 4000"

    def test_zero_kept(self):
        assert to_classical_latin("0") == "0"
        assert to_classical_latin("0000") == "0000"

    def test_leading_zeros(self):
        assert to_classical_latin("007") == "VII"

    def test_very_long_number_kept(self):
        digits = "9" * 5000
        assert to_classical_latin(digits) == digits

    def test_numbers_glued_to_letters(self):
        assert to_classical_latin("A1") == "A1"
        assert to_classical_latin("1a") == "1A"
        assert to_classical_latin("x_12") == "X_12"

    def test_number_in_punctuation(self):
        assert to_classical_latin("(12)") == "XII"
        assert to_classical_latin("liber 3.") == "LIBER III"

    def test_u_and_j(self):
        assert to_classical_latin("Julius") == "IVLIVS"
        assert to_classical_latin("urbs") == "VRBS"

    def test_punctuation_stripped(self):
        assert to_classical_latin("Veni, vidi, vici!") == "VENI VIDI VICI"
        assert to_classical_latin("\"quo [vadis]?\" {x}; y: z'") == "QVO VADIS X Y Z"

    def test_hyphen_kept(self):
        assert to_classical_latin("res-publica") == "RES-PVBLICA"

    def test_whitespace(self):
        assert to_classical_latin("  arma   virumque\n\tcano  ") == "ARMA VIRVMQVE CANO"

    def test_empty(self):
        assert to_classical_latin("") == ""


class TestClassicalLatinExtended:
    def test_hyphen_to_space(self):
        assert to_classical_latin_extended("senatus-populusque") == "SENATVS POPVLVSQVE"

    def test_dashes(self):
        assert to_classical_latin_extended("Caesar — imperator – dux") == "CAESAR IMPERATOR DVX"

    def test_diphthongs_unchanged(self):
        assert to_classical_latin_extended("aeneas poena") == "AENEAS POENA"

    def test_numbers(self):
        assert to_classical_latin_extended("anno 44") == "ANNO XLIV"

    def test_empty(self):
        assert to_classical_latin_extended("") == ""

    def test_base_result_preserved(self):
        text = "Gallia est omnis divisa in partes 3"
        assert to_classical_latin_extended(text) == to_classical_latin(text)
