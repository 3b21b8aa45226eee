"""Scalar value exception.

All validation failures raised by the value types carry a Diagnostic.
Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ScalarValueError"]


class ScalarValueError(ValueError):
    """Invalid input for a scalar value or scalar range.

    Subclasses ValueError, so callers that treat any illegal argument
    alike can keep catching the builtin.

    Unlike the formatted diagnostic, str(error) is the bare message:
    it is part of the public contract and stays byte-for-byte stable.

    Attributes:
        diagnostic: Structured diagnostic information
    """

    def __init__(self, diagnostic: Diagnostic) -> None:
        """Initialize ScalarValueError.

        Args:
            diagnostic: Diagnostic produced by ErrorTemplate
        """
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic

    @property
    def code(self) -> DiagnosticCode:
        """Diagnostic code of this failure."""
        return self.diagnostic.code
