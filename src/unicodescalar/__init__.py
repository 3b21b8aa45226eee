"""unicodescalar - Unicode scalar values without surrogate bookkeeping.

Work with complete Unicode characters (21-bit code points) instead of
16-bit code units: build them from integers, code units, surrogate pairs,
strings or numeric literals, then ask for their name, escape sequence,
hex code or character class.

Public API:
    ScalarValue - A single Unicode scalar value, or the EOF sentinel
    ScalarRange - Closed interval of scalar values for membership tests
    EOF, BOM, NEL - Named scalar values
    code_point_count - Count code points in a string
    escape - Render a string for use inside a string literal
    describe - Per-character diagnostics for a string

Exceptions:
    ScalarValueError - Invalid input (subclass of ValueError)

Submodules:
    unicodescalar.core - UTF-16 primitives, hex formatting, character names
    unicodescalar.diagnostics - Diagnostic codes and message templates
    unicodescalar.constants - Code space bounds and sentinel values
"""

from .diagnostics import ScalarValueError
from .range import ScalarRange
from .scalar import BOM, EOF, NEL, ScalarValue
from .text import ScalarInfo, code_point_count, describe, escape

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("unicodescalar")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BOM",
    "EOF",
    "NEL",
    "ScalarInfo",
    "ScalarRange",
    "ScalarValue",
    "ScalarValueError",
    "__version__",
    "code_point_count",
    "describe",
    "escape",
]
