"""Error message templates.

Centralized error message templates for testable, consistent error messages.
"""

from unicodescalar.core.formatting import hex_literal

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Messages are part of the public contract: callers and tests match on
    them verbatim, so wording changes are breaking changes.
    """

    @staticmethod
    def invalid_code_point(value: int) -> Diagnostic:
        """Integer outside the scalar value space.

        Args:
            value: The rejected integer

        Returns:
            Diagnostic for INVALID_CODE_POINT
        """
        msg = f"invalid code point {hex_literal(value)}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_CODE_POINT,
            message=msg,
            hint="Scalar values are 0x0-0xD7FF and 0xE000-0x10FFFF, or -1 for EOF",
            input_value=repr(value),
        )

    @staticmethod
    def lone_surrogate(unit: int, *, high: bool) -> Diagnostic:
        """Single code unit that is half of a surrogate pair.

        Args:
            unit: The surrogate code unit
            high: True for a high (leading) surrogate, False for a low one

        Returns:
            Diagnostic for LONE_SURROGATE
        """
        kind = "high" if high else "low"
        msg = f"expected non-surrogate but got {kind} surrogate {hex_literal(unit)}"
        return Diagnostic(
            code=DiagnosticCode.LONE_SURROGATE,
            message=msg,
            hint="Combine both surrogate halves with ScalarValue.of_surrogate_pair()",
            input_value=repr(unit),
        )

    @staticmethod
    def invalid_surrogate_pair(high: int, low: int) -> Diagnostic:
        """Two code units that do not form a high/low surrogate pair.

        Args:
            high: The unit expected to be a high surrogate
            low: The unit expected to be a low surrogate

        Returns:
            Diagnostic for INVALID_SURROGATE_PAIR
        """
        msg = f"expected surrogate pair but got {hex_literal(high)} {hex_literal(low)}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_SURROGATE_PAIR,
            message=msg,
            hint="A pair is a high surrogate (D800-DBFF) followed by a low one (DC00-DFFF)",
            input_value=repr((high, low)),
        )

    @staticmethod
    def not_a_code_unit(value: int) -> Diagnostic:
        """Integer too wide (or negative) for a UTF-16 code unit.

        Args:
            value: The rejected integer

        Returns:
            Diagnostic for NOT_A_CODE_UNIT
        """
        msg = f"expected a 16-bit code unit but got {hex_literal(value)}"
        return Diagnostic(
            code=DiagnosticCode.NOT_A_CODE_UNIT,
            message=msg,
            hint="Use ScalarValue.of() for values above 0xFFFF",
            input_value=repr(value),
        )

    @staticmethod
    def not_a_single_code_unit(text: str) -> Diagnostic:
        """String that is not exactly one character long.

        Args:
            text: The rejected string

        Returns:
            Diagnostic for NOT_A_CODE_UNIT
        """
        msg = f'expected a single code unit but got {len(text)} in "{text}"'
        return Diagnostic(
            code=DiagnosticCode.NOT_A_CODE_UNIT,
            message=msg,
            hint="Use ScalarValue.of_string() for text",
            input_value=repr(text),
        )

    @staticmethod
    def code_point_count_mismatch(count: int, text: str) -> Diagnostic:
        """String that does not hold exactly one code point.

        Args:
            count: Number of code points found
            text: The rejected string

        Returns:
            Diagnostic for CODE_POINT_COUNT_MISMATCH
        """
        msg = f'expected a string with one code point but got {count} in "{text}"'
        return Diagnostic(
            code=DiagnosticCode.CODE_POINT_COUNT_MISMATCH,
            message=msg,
            hint="Use ScalarValue.all_of() to extract every scalar value",
            input_value=repr(text),
        )

    @staticmethod
    def invalid_literal(text: str) -> Diagnostic:
        """Text that is not a decimal, hex, or octal integer literal.

        Args:
            text: The rejected literal

        Returns:
            Diagnostic for INVALID_LITERAL
        """
        msg = f'invalid numeric literal "{text}"'
        return Diagnostic(
            code=DiagnosticCode.INVALID_LITERAL,
            message=msg,
            hint="Write a decimal (65), hex (0x41, #41), or octal (0101) integer",
            input_value=repr(text),
        )
