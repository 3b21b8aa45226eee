"""Unicode scalar value type.

A UTF-16 code unit holds only 16 bits, while Unicode characters need up to
21, so characters outside the Basic Multilingual Plane show up as two code
units (a surrogate pair) whenever text crosses a UTF-16 boundary.
ScalarValue wraps one complete Unicode character as an object in its own
right: it can be built from an integer, a code unit, a surrogate pair, a
one-character string or a numeric literal, and it knows its name, its
escape sequence and its character class.

Besides real characters, a ScalarValue can hold the EOF sentinel (-1),
which text readers hand out once the input is exhausted. EOF renders as
the empty string, is named "END OF FILE", and answers False to every
character-class predicate.

Thread Safety:
    ScalarValue is a frozen dataclass; instances can be shared freely.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Protocol

import regex

from unicodescalar.constants import (
    BOM_VALUE,
    EOF_ESCAPE,
    EOF_VALUE,
    INT32_MAX,
    INT32_MIN,
    MAX_CODE_POINT,
    MAX_CODE_UNIT,
    MIN_CODE_POINT,
    MIN_SUPPLEMENTARY_CODE_POINT,
    NEL_VALUE,
)
from unicodescalar.core import (
    character_name,
    high_surrogate,
    is_high_surrogate,
    is_low_surrogate,
    is_surrogate,
    is_surrogate_pair,
    iter_code_points,
    low_surrogate,
    to_code_point,
    to_hex,
    to_hex_upper,
    unicode_escape,
)
from unicodescalar.diagnostics import ErrorTemplate, ScalarValueError

if TYPE_CHECKING:
    from unicodescalar.range import ScalarRange

__all__ = ["BOM", "EOF", "NEL", "ScalarValue", "TextSink"]

# Unicode derived property Alphabetic: letters, letter numbers and
# Other_Alphabetic marks. The stdlib only exposes general categories.
_ALPHABETIC: regex.Pattern[str] = regex.compile(r"\p{Alphabetic}")

_SPACE_CATEGORIES: frozenset[str] = frozenset({"Zs", "Zl", "Zp"})

# Separators that must not break a line are not whitespace.
_NO_BREAK_SPACES: frozenset[int] = frozenset({0x00A0, 0x2007, 0x202F})

# Tab, line feed, vertical tab, form feed, carriage return and the four
# information separators.
_WHITESPACE_CONTROLS: frozenset[int] = frozenset({*range(0x09, 0x0E), *range(0x1C, 0x20)})

_HEX_DIGIT_VALUES: frozenset[int] = frozenset(map(ord, "0123456789abcdefABCDEF"))

_NEW_LINE_VALUES: frozenset[int] = frozenset({0x0A, 0x0D})

# Characters with a dedicated backslash escape in string literals.
_SIMPLE_ESCAPES: dict[int, str] = {
    0x09: "\\t",
    0x0A: "\\n",
    0x0D: "\\r",
    0x27: "\\'",
    0x22: '\\"',
    0x5C: "\\\\",
}

# Integer literal digits per radix, see ScalarValue.decode().
_RADIX_DIGITS: dict[int, frozenset[str]] = {
    8: frozenset("01234567"),
    10: frozenset("0123456789"),
    16: frozenset("0123456789abcdefABCDEF"),
}


class TextSink(Protocol):
    """Anything text can be appended to, e.g. io.StringIO or a text file."""

    def write(self, s: str, /) -> object: ...


def _is_valid(value: int) -> bool:
    if value == EOF_VALUE:
        return True
    return MIN_CODE_POINT <= value <= MAX_CODE_POINT and not is_surrogate(value)


def _require_int(value: object, what: str) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        msg = f"{what} requires int, got {type(value).__name__}"
        raise TypeError(msg)


def _as_code_unit(unit: int | str) -> int:
    """Normalize a code unit given as int or one-character str.

    Raises:
        TypeError: If unit is neither str nor int (bool is rejected too)
        ScalarValueError: If unit does not fit in 16 bits
    """
    if isinstance(unit, str):
        if len(unit) != 1:
            raise ScalarValueError(ErrorTemplate.not_a_single_code_unit(unit))
        unit = ord(unit)
    _require_int(unit, "code unit")
    if not 0 <= unit <= MAX_CODE_UNIT:
        raise ScalarValueError(ErrorTemplate.not_a_code_unit(unit))
    return unit


def _parse_int_literal(text: str) -> int:
    """Parse an integer literal with optional sign and radix prefix.

    Accepts "65", "-1", "0x41", "0X41", "#41" and "0101" (octal).
    Stricter than int(): no whitespace, underscores, or non-ASCII digits,
    and the value must fit in a signed 32-bit integer.

    Raises:
        ValueError: If text is not a well-formed literal
    """
    body = text
    sign = 1
    if body[:1] in ("+", "-"):
        sign = -1 if body[0] == "-" else 1
        body = body[1:]

    if body[:2] in ("0x", "0X"):
        radix, body = 16, body[2:]
    elif body[:1] == "#":
        radix, body = 16, body[1:]
    elif body[:1] == "0" and len(body) > 1:
        radix, body = 8, body[1:]
    else:
        radix = 10

    if not body or not set(body) <= _RADIX_DIGITS[radix]:
        msg = f"invalid literal for base {radix}: {text!r}"
        raise ValueError(msg)
    value = sign * int(body, radix)
    if not INT32_MIN <= value <= INT32_MAX:
        msg = f"literal out of 32-bit range: {text!r}"
        raise ValueError(msg)
    return value


@dataclass(frozen=True, slots=True, order=True)
class ScalarValue:
    """A single Unicode scalar value, or the EOF sentinel.

    Valid values are 0x0-0xD7FF and 0xE000-0x10FFFF (every code point
    except the surrogates), plus -1 for EOF. Anything else is rejected
    at construction, so an existing ScalarValue is always valid.

    Equality, hashing and ordering follow the integer value.

    Attributes:
        value: The code point, or -1 for EOF

    Example:
        >>> a = ScalarValue.of_string("A")
        >>> a.name
        'LATIN CAPITAL LETTER A'
        >>> (a + 2).info
        '[C][LATIN CAPITAL LETTER C][0x43]'
        >>> ScalarValue.of_surrogate_pair(0xD83D, 0xDE00).escaped
        '\\\\uD83D\\\\uDE00'
    """

    EOF: ClassVar[ScalarValue]
    BOM: ClassVar[ScalarValue]
    NEL: ClassVar[ScalarValue]

    value: int

    def __post_init__(self) -> None:
        """Validate the scalar value invariant.

        Raises:
            TypeError: If value is not an int (bool is rejected too)
            ScalarValueError: If value is a surrogate or out of range
        """
        _require_int(self.value, "ScalarValue")
        if not _is_valid(self.value):
            raise ScalarValueError(ErrorTemplate.invalid_code_point(self.value))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def of(cls, value: int) -> ScalarValue:
        """Construct from an integer value."""
        return cls(value)

    @classmethod
    def of_code_unit(cls, unit: int | str) -> ScalarValue:
        """Construct from a single UTF-16 code unit.

        Not every scalar value can be built like this: supplementary
        characters need two code units, see of_surrogate_pair().

        Args:
            unit: Code unit as int (0-0xFFFF) or one-character str

        Returns:
            The scalar value of the code unit

        Raises:
            ScalarValueError: If unit is a lone surrogate or not a code unit
        """
        unit = _as_code_unit(unit)
        if is_high_surrogate(unit):
            raise ScalarValueError(ErrorTemplate.lone_surrogate(unit, high=True))
        if is_low_surrogate(unit):
            raise ScalarValueError(ErrorTemplate.lone_surrogate(unit, high=False))
        return cls(unit)

    @classmethod
    def of_surrogate_pair(cls, high: int | str, low: int | str) -> ScalarValue:
        """Construct from a high and a low surrogate code unit.

        Args:
            high: Leading surrogate (D800-DBFF)
            low: Trailing surrogate (DC00-DFFF)

        Returns:
            The supplementary scalar value encoded by the pair

        Raises:
            ScalarValueError: If the units do not form a surrogate pair
        """
        high = _as_code_unit(high)
        low = _as_code_unit(low)
        if not is_surrogate_pair(high, low):
            raise ScalarValueError(ErrorTemplate.invalid_surrogate_pair(high, low))
        return cls(to_code_point(high, low))

    @classmethod
    def of_string(cls, text: str) -> ScalarValue:
        """Construct from a string holding exactly one code point.

        The string may hold the character itself or, as text decoded
        from UTF-16 sometimes does, its two surrogate halves.

        Raises:
            ScalarValueError: If text holds zero or several code points
        """
        code_points = [code_point for _, code_point in iter_code_points(text)]
        if len(code_points) != 1:
            raise ScalarValueError(
                ErrorTemplate.code_point_count_mismatch(len(code_points), text)
            )
        return cls(code_points[0])

    @classmethod
    def all_of(cls, text: str) -> tuple[ScalarValue, ...]:
        """Extract every scalar value of a string, in order.

        Surrogate pairs are folded into one scalar value. An unpaired
        surrogate character is not a scalar value and fails validation.

        Example:
            >>> [s.hex for s in ScalarValue.all_of("AB\\U0001F600")]
            ['41', '42', '1f600']
        """
        return tuple(cls(code_point) for _, code_point in iter_code_points(text))

    @classmethod
    def decode(cls, literal: str) -> ScalarValue:
        """Construct from the integer literal in a string.

        Decimal, hexadecimal (0x, 0X or # prefix) and octal (leading 0)
        literals are accepted, with an optional sign, so "-1" yields EOF.

        Example:
            >>> str(ScalarValue.decode("65")), str(ScalarValue.decode("0x43"))
            ('A', 'C')

        Raises:
            ScalarValueError: If literal is malformed (chained from the
                underlying ValueError) or names an invalid code point
        """
        try:
            value = _parse_int_literal(literal)
        except ValueError as e:
            raise ScalarValueError(ErrorTemplate.invalid_literal(literal)) from e
        return cls(value)

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def to_int(self) -> int:
        """The integer value, -1 for EOF."""
        return self.value

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        """The character itself; the empty string for EOF."""
        if self.value < 0:
            return ""
        return chr(self.value)

    @property
    def code_units(self) -> tuple[int, ...]:
        """UTF-16 code units: one for BMP characters, two for supplementary, none for EOF."""
        if self.value < 0:
            return ()
        if self.is_supplementary:
            return (high_surrogate(self.value), low_surrogate(self.value))
        return (self.value,)

    def append_to(self, out: TextSink) -> TextSink:
        """Append the character to a text sink and return the sink.

        Example:
            >>> import io
            >>> ScalarValue.of(0x41).append_to(io.StringIO()).getvalue()
            'A'
        """
        out.write(str(self))
        return out

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    @property
    def hex(self) -> str:
        """Shortest lower-case hex representation, e.g. "1f600"."""
        return to_hex(self.value)

    @property
    def hex_upper(self) -> str:
        """Shortest upper-case hex representation, e.g. "1F600"."""
        return to_hex_upper(self.value)

    @property
    def name(self) -> str:
        """Unicode name, e.g. "LATIN CAPITAL LETTER A".

        EOF is "END OF FILE"; control characters use their control
        names ("CHARACTER TABULATION"); code points without a name
        yield "?".
        """
        if self.is_eof:
            return "END OF FILE"
        if self.value == 0:
            return "NULL"
        return character_name(self.value)

    @property
    def escaped(self) -> str:
        """Rendering of this character inside a quoted string literal.

        The usual backslash escapes apply to tab, line feed, carriage
        return, quotes and the backslash. EOF becomes \\uFFFF; BOM and
        NEL get a \\u escape because they are invisible; supplementary
        characters are written as their escaped surrogate pair. Every
        other character stands for itself.
        """
        value = self.value
        if value in _SIMPLE_ESCAPES:
            return _SIMPLE_ESCAPES[value]
        if self.is_eof:
            return EOF_ESCAPE
        if value in (BOM_VALUE, NEL_VALUE):
            return unicode_escape(value)
        if self.is_supplementary:
            return unicode_escape(high_surrogate(value)) + unicode_escape(low_surrogate(value))
        return str(self)

    @property
    def info(self) -> str:
        """Diagnostic summary: "[<escaped>][<name>][0x<hex>]"."""
        return f"[{self.escaped}][{self.name}][0x{self.hex}]"

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    @property
    def is_eof(self) -> bool:
        return self.value == EOF_VALUE

    @property
    def is_supplementary(self) -> bool:
        """True for characters outside the BMP (needing a surrogate pair)."""
        return self.value >= MIN_SUPPLEMENTARY_CODE_POINT

    @property
    def high_surrogate(self) -> int:
        """Leading UTF-16 surrogate.

        Raises:
            ValueError: If this is not a supplementary character
        """
        if not self.is_supplementary:
            msg = f"0x{self.hex_upper} is not a supplementary code point"
            raise ValueError(msg)
        return high_surrogate(self.value)

    @property
    def low_surrogate(self) -> int:
        """Trailing UTF-16 surrogate.

        Raises:
            ValueError: If this is not a supplementary character
        """
        if not self.is_supplementary:
            msg = f"0x{self.hex_upper} is not a supplementary code point"
            raise ValueError(msg)
        return low_surrogate(self.value)

    @property
    def is_hex(self) -> bool:
        """True for the ASCII hex digit characters 0-9, A-F and a-f.

        Other digit characters, e.g. fullwidth or Arabic-Indic digits,
        are not hex digits.
        """
        return self.value in _HEX_DIGIT_VALUES

    @property
    def is_digit(self) -> bool:
        """True for general category Nd (decimal digit number).

        This includes ASCII 0-9, Arabic-Indic digits and the decimal
        digits of many other scripts.
        """
        return not self.is_eof and unicodedata.category(chr(self.value)) == "Nd"

    @property
    def is_alphabetic(self) -> bool:
        """True for characters with the Unicode Alphabetic property.

        That is general categories Lu, Ll, Lt, Lm, Lo and Nl, plus the
        characters with the contributory property Other_Alphabetic.
        """
        return not self.is_eof and _ALPHABETIC.match(chr(self.value)) is not None

    @property
    def is_whitespace(self) -> bool:
        """True for separators that break text apart, and whitespace controls.

        That is space, line and paragraph separators (Zs, Zl, Zp) except
        the no-break spaces U+00A0, U+2007 and U+202F, plus tab, line
        feed, vertical tab, form feed, carriage return and the
        information separators U+001C-U+001F. NEL is not whitespace.
        """
        if self.value in _WHITESPACE_CONTROLS:
            return True
        if self.value in _NO_BREAK_SPACES:
            return False
        return self.is_space_char

    @property
    def is_space_char(self) -> bool:
        """True for space, line and paragraph separators (Zs, Zl, Zp).

        Unlike is_whitespace, control characters such as tab or line
        feed are not space characters.
        """
        return not self.is_eof and unicodedata.category(chr(self.value)) in _SPACE_CATEGORIES

    @property
    def is_new_line(self) -> bool:
        """Line feed (\\n, 0x0A) or carriage return (\\r, 0x0D)."""
        return self.value in _NEW_LINE_VALUES

    # ------------------------------------------------------------------
    # Arithmetic and ranges
    # ------------------------------------------------------------------

    def plus(self, offset: int) -> ScalarValue:
        """Scalar value offset positions higher, e.g. "A" plus 2 is "C".

        Raises:
            TypeError: If offset is not an int (bool is rejected too)
            ScalarValueError: If the result is not a valid scalar value
        """
        _require_int(offset, "offset")
        return ScalarValue(self.value + offset)

    def minus(self, offset: int) -> ScalarValue:
        """Scalar value offset positions lower, e.g. "C" minus 2 is "A".

        Raises:
            TypeError: If offset is not an int (bool is rejected too)
            ScalarValueError: If the result is not a valid scalar value
        """
        _require_int(offset, "offset")
        return ScalarValue(self.value - offset)

    def __add__(self, offset: object) -> ScalarValue:
        if not isinstance(offset, int) or isinstance(offset, bool):
            return NotImplemented
        return self.plus(offset)

    def __sub__(self, offset: object) -> ScalarValue:
        if not isinstance(offset, int) or isinstance(offset, bool):
            return NotImplemented
        return self.minus(offset)

    def range_to(self, other: ScalarValue) -> ScalarRange:
        """Closed range from this scalar value to other (inclusive)."""
        from unicodescalar.range import ScalarRange  # noqa: PLC0415 - circular

        return ScalarRange(self, other)

    def until(self, other: ScalarValue) -> ScalarRange:
        """Range from this scalar value up to, but excluding, other.

        Raises:
            ScalarValueError: If the scalar value before other is invalid
        """
        from unicodescalar.range import ScalarRange  # noqa: PLC0415 - circular

        return ScalarRange(self, other.minus(1))


EOF = ScalarValue(EOF_VALUE)
"""End of input. Not a Unicode code point: readers return it once exhausted."""

BOM = ScalarValue(BOM_VALUE)
"""Byte order mark (ZERO WIDTH NO-BREAK SPACE at the start of a file)."""

NEL = ScalarValue(NEL_VALUE)
"""Next line, the C1 line break."""

ScalarValue.EOF = EOF
ScalarValue.BOM = BOM
ScalarValue.NEL = NEL
