"""Diagnostic system for scalar value errors.

Provides the validation exception, diagnostic codes and message templates.

Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import ScalarValueError
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "ScalarValueError",
]
