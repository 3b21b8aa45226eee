"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for scalar value validation.
Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Value errors (integer outside the scalar value space)
        2000-2999: Encoding errors (malformed UTF-16 input)
        3000-3999: Literal errors (text that is not a number)
    """

    # Value errors (1000-1999)
    INVALID_CODE_POINT = 1001

    # Encoding errors (2000-2999)
    LONE_SURROGATE = 2001
    INVALID_SURROGATE_PAIR = 2002
    NOT_A_CODE_UNIT = 2003
    CODE_POINT_COUNT_MISMATCH = 2004

    # Literal errors (3000-3999)
    INVALID_LITERAL = 3001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        input_value: The offending input as the caller passed it, rendered
            with repr() so control and surrogate characters stay visible
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    input_value: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler error.

        Example output:
            error[LONE_SURROGATE]: expected non-surrogate but got high surrogate 0xD83D
              = input: 55357
              = help: Combine the surrogate with its low half via of_surrogate_pair()

        Returns:
            Formatted multi-line error message
        """
        lines = [f"error[{self.code.name}]: {self.message}"]
        if self.input_value is not None:
            lines.append(f"  = input: {self.input_value}")
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
