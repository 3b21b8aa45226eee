"""Tests for ScalarValue formatting and classification properties.

Covers hex rendering, names, escape sequences, the info summary and the
character-class predicates, including how each treats the EOF sentinel.
"""

from __future__ import annotations

import pytest

from unicodescalar import BOM, EOF, NEL, ScalarValue

A = ScalarValue.of_code_unit("A")
ZERO = ScalarValue.of_code_unit("0")
SPACE = ScalarValue.of_code_unit(" ")
TAB = ScalarValue.of_code_unit("\t")
NL = ScalarValue.of_code_unit("\n")
CR = ScalarValue.of_code_unit("\r")
ARABIC_1 = ScalarValue.of(0x0661)
GRINNING_FACE = ScalarValue.of(0x1F600)


# ============================================================================
# HEX
# ============================================================================


class TestHex:
    """Shortest hex rendering without padding."""

    @pytest.mark.parametrize(
        ("scalar", "lower", "upper"),
        [
            (A, "41", "41"),
            (TAB, "9", "9"),
            (EOF, "ffffffff", "FFFFFFFF"),
            (GRINNING_FACE, "1f600", "1F600"),
            (ScalarValue.of(0), "0", "0"),
        ],
    )
    def test_hex(self, scalar: ScalarValue, lower: str, upper: str) -> None:
        """hex is lower case, hex_upper is upper case, neither is padded."""
        assert scalar.hex == lower
        assert scalar.hex_upper == upper


# ============================================================================
# NAME
# ============================================================================


class TestName:
    """Unicode character names."""

    def test_letter(self) -> None:
        """Named characters use the Unicode name."""
        assert A.name == "LATIN CAPITAL LETTER A"

    def test_grinning_face(self) -> None:
        """Supplementary characters have names too."""
        assert GRINNING_FACE.name == "GRINNING FACE"

    def test_eof(self) -> None:
        """EOF is not a character but has a name."""
        assert EOF.name == "END OF FILE"

    def test_null(self) -> None:
        """NULL is special-cased."""
        assert ScalarValue.of(0).name == "NULL"

    @pytest.mark.parametrize(
        ("scalar", "name"),
        [
            (TAB, "CHARACTER TABULATION"),
            (NL, "LINE FEED (LF)"),
            (CR, "CARRIAGE RETURN (CR)"),
            (NEL, "NEXT LINE (NEL)"),
            (ScalarValue.of(0x7F), "DELETE"),
            (ScalarValue.of(0x1B), "ESCAPE"),
        ],
    )
    def test_control_characters(self, scalar: ScalarValue, name: str) -> None:
        """Control characters use their control names."""
        assert scalar.name == name

    def test_unnamed(self) -> None:
        """Private use characters have no name."""
        assert ScalarValue.of(0xE000).name == "?"


# ============================================================================
# ESCAPED
# ============================================================================


class TestEscaped:
    """Escape sequences for string literals."""

    @pytest.mark.parametrize(
        ("scalar", "escaped"),
        [
            (TAB, "\\t"),
            (NL, "\\n"),
            (CR, "\\r"),
            (ScalarValue.of_code_unit("'"), "\\'"),
            (ScalarValue.of_code_unit('"'), '\\"'),
            (ScalarValue.of_code_unit("\\"), "\\\\"),
        ],
    )
    def test_simple_escapes(self, scalar: ScalarValue, escaped: str) -> None:
        """Backslash escapes for control and quote characters."""
        assert scalar.escaped == escaped

    def test_eof(self) -> None:
        """EOF escapes as the noncharacter U+FFFF."""
        assert EOF.escaped == "\\uFFFF"

    def test_bom(self) -> None:
        """BOM is invisible, so it is escaped."""
        assert BOM.escaped == "\\uFEFF"

    def test_nel_is_zero_padded(self) -> None:
        """Escapes are always four hex digits."""
        assert NEL.escaped == "\\u0085"

    def test_grinning_face(self) -> None:
        """Supplementary characters escape as a surrogate pair."""
        assert GRINNING_FACE.escaped == "\\uD83D\\uDE00"

    def test_first_supplementary_is_zero_padded(self) -> None:
        """Both surrogate halves are padded and upper case."""
        assert ScalarValue.of(0x10000).escaped == "\\uD800\\uDC00"

    def test_plain_characters(self) -> None:
        """Other characters, including non-ASCII digits, are not escaped."""
        assert A.escaped == "A"
        assert ARABIC_1.escaped == "١"


# ============================================================================
# INFO
# ============================================================================


class TestInfo:
    """Diagnostic summary "[escaped][name][0xhex]"."""

    @pytest.mark.parametrize(
        ("scalar", "info"),
        [
            (EOF, "[\\uFFFF][END OF FILE][0xffffffff]"),
            (TAB, "[\\t][CHARACTER TABULATION][0x9]"),
            (NL, "[\\n][LINE FEED (LF)][0xa]"),
            (CR, "[\\r][CARRIAGE RETURN (CR)][0xd]"),
            (A, "[A][LATIN CAPITAL LETTER A][0x41]"),
            (GRINNING_FACE, "[\\uD83D\\uDE00][GRINNING FACE][0x1f600]"),
        ],
    )
    def test_info(self, scalar: ScalarValue, info: str) -> None:
        """info combines escaped, name and hex."""
        assert scalar.info == info


# ============================================================================
# CLASSIFICATION
# ============================================================================


class TestSupplementary:
    """Supplementary plane detection."""

    def test_bmp(self) -> None:
        """BMP characters are not supplementary."""
        assert not A.is_supplementary
        assert not ARABIC_1.is_supplementary
        assert not ScalarValue.of(0xFFFF).is_supplementary

    def test_supplementary(self) -> None:
        """0x10000 and above are supplementary."""
        assert GRINNING_FACE.is_supplementary
        assert ScalarValue.of(0x10000).is_supplementary

    def test_eof(self) -> None:
        """EOF is not supplementary."""
        assert not EOF.is_supplementary


class TestIsHex:
    """ASCII hex digit characters."""

    @pytest.mark.parametrize("char", "0123456789abcdefABCDEF")
    def test_hex_digits(self, char: str) -> None:
        """All 22 hex digit characters."""
        assert ScalarValue.of_code_unit(char).is_hex

    @pytest.mark.parametrize("char", ["g", "G", "\t", "/", ":", "@", "`", "０"])
    def test_non_hex(self, char: str) -> None:
        """Neighbors of the hex ranges and a fullwidth digit are not hex."""
        assert not ScalarValue.of_code_unit(char).is_hex

    def test_arabic_one(self) -> None:
        """Non-ASCII digits are not hex digits."""
        assert not ARABIC_1.is_hex

    def test_eof(self) -> None:
        """EOF is not a hex digit."""
        assert not EOF.is_hex


class TestIsDigit:
    """Decimal digit numbers (Nd)."""

    def test_ascii_zero(self) -> None:
        """ASCII digits."""
        assert ZERO.is_digit

    def test_arabic_one(self) -> None:
        """Arabic-Indic digits."""
        assert ARABIC_1.is_digit

    def test_letter(self) -> None:
        """Letters are not digits."""
        assert not A.is_digit

    def test_tab(self) -> None:
        """Controls are not digits."""
        assert not TAB.is_digit

    def test_superscript_two(self) -> None:
        """Superscripts are No, not Nd."""
        assert not ScalarValue.of(0x00B2).is_digit

    def test_eof(self) -> None:
        """EOF is not a digit."""
        assert not EOF.is_digit


class TestIsAlphabetic:
    """Unicode Alphabetic property."""

    def test_letter(self) -> None:
        """Letters are alphabetic."""
        assert A.is_alphabetic
        assert ScalarValue.of(0x00E9).is_alphabetic

    def test_letter_number(self) -> None:
        """Letter numbers (Nl) are alphabetic: ROMAN NUMERAL ONE."""
        assert ScalarValue.of(0x2160).is_alphabetic

    def test_other_alphabetic_mark(self) -> None:
        """Other_Alphabetic marks count: DEVANAGARI VOWEL SIGN AA."""
        assert ScalarValue.of(0x093E).is_alphabetic

    def test_non_alphabetic(self) -> None:
        """Digits and controls are not alphabetic."""
        assert not ZERO.is_alphabetic
        assert not ARABIC_1.is_alphabetic
        assert not TAB.is_alphabetic

    def test_eof(self) -> None:
        """EOF is not alphabetic."""
        assert not EOF.is_alphabetic


class TestWhitespace:
    """Whitespace and space characters."""

    def test_tab_is_whitespace_but_not_space_char(self) -> None:
        """Tab is whitespace but a control, not a separator."""
        assert TAB.is_whitespace
        assert not TAB.is_space_char

    def test_new_line_is_not_space_char(self) -> None:
        """Line feed is not a separator character."""
        assert NL.is_whitespace
        assert not NL.is_space_char

    def test_space(self) -> None:
        """Space is both."""
        assert SPACE.is_whitespace
        assert SPACE.is_space_char

    @pytest.mark.parametrize("value", [0x00A0, 0x2028, 0x2029, 0x3000])
    def test_separators_are_space_chars(self, value: int) -> None:
        """Zs, Zl and Zp are space characters."""
        assert ScalarValue.of(value).is_space_char

    @pytest.mark.parametrize("value", [0x0B, 0x0C, 0x1C, 0x1D, 0x1E, 0x1F, 0x2028, 0x3000])
    def test_other_whitespace(self, value: int) -> None:
        """Whitespace controls, information separators and breaking separators."""
        assert ScalarValue.of(value).is_whitespace

    @pytest.mark.parametrize("value", [0x00A0, 0x2007, 0x202F])
    def test_no_break_spaces_are_not_whitespace(self, value: int) -> None:
        """No-break spaces are space characters but not whitespace."""
        scalar = ScalarValue.of(value)

        assert not scalar.is_whitespace
        assert scalar.is_space_char

    def test_nel_is_not_whitespace(self) -> None:
        """NEL is a C1 control, not whitespace."""
        assert not NEL.is_whitespace
        assert not NEL.is_space_char

    @pytest.mark.parametrize("value", [0x08, 0x0E, 0x1B, 0x7F, 0x200B])
    def test_near_misses(self, value: int) -> None:
        """Neighboring controls and the zero width space are not whitespace."""
        assert not ScalarValue.of(value).is_whitespace

    def test_letter(self) -> None:
        """Letters are neither."""
        assert not A.is_whitespace
        assert not A.is_space_char

    def test_eof(self) -> None:
        """EOF is neither."""
        assert not EOF.is_whitespace
        assert not EOF.is_space_char


class TestIsNewLine:
    """Line feed and carriage return only."""

    def test_line_feed(self) -> None:
        """LF is a new line."""
        assert NL.is_new_line

    def test_carriage_return(self) -> None:
        """CR is a new line."""
        assert CR.is_new_line

    @pytest.mark.parametrize("scalar", [TAB, SPACE, A, NEL, EOF])
    def test_others(self, scalar: ScalarValue) -> None:
        """Nothing else is, not even NEL."""
        assert not scalar.is_new_line
