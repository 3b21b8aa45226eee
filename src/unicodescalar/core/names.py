"""Character name lookup.

The Unicode Character Database assigns no Name property to the C0 and
C1 control characters, so unicodedata.name() has nothing to return for
them. Text tools still want to print "CHARACTER TABULATION" rather than
"?" for a tab, so the control characters fall back to their Unicode 1.0
names (or, for C1 controls without one, their formal name aliases).
"""

from __future__ import annotations

import unicodedata
from types import MappingProxyType

__all__ = ["UNNAMED", "character_name"]

# Returned for code points without any name (unassigned, private use, ...).
UNNAMED: str = "?"

_CONTROL_NAMES: MappingProxyType[int, str] = MappingProxyType({
    # C0
    0x00: "NULL",
    0x01: "START OF HEADING",
    0x02: "START OF TEXT",
    0x03: "END OF TEXT",
    0x04: "END OF TRANSMISSION",
    0x05: "ENQUIRY",
    0x06: "ACKNOWLEDGE",
    0x07: "BELL",
    0x08: "BACKSPACE",
    0x09: "CHARACTER TABULATION",
    0x0A: "LINE FEED (LF)",
    0x0B: "LINE TABULATION",
    0x0C: "FORM FEED (FF)",
    0x0D: "CARRIAGE RETURN (CR)",
    0x0E: "SHIFT OUT",
    0x0F: "SHIFT IN",
    0x10: "DATA LINK ESCAPE",
    0x11: "DEVICE CONTROL ONE",
    0x12: "DEVICE CONTROL TWO",
    0x13: "DEVICE CONTROL THREE",
    0x14: "DEVICE CONTROL FOUR",
    0x15: "NEGATIVE ACKNOWLEDGE",
    0x16: "SYNCHRONOUS IDLE",
    0x17: "END OF TRANSMISSION BLOCK",
    0x18: "CANCEL",
    0x19: "END OF MEDIUM",
    0x1A: "SUBSTITUTE",
    0x1B: "ESCAPE",
    0x1C: "INFORMATION SEPARATOR FOUR",
    0x1D: "INFORMATION SEPARATOR THREE",
    0x1E: "INFORMATION SEPARATOR TWO",
    0x1F: "INFORMATION SEPARATOR ONE",
    0x7F: "DELETE",
    # C1
    0x80: "PADDING CHARACTER",
    0x81: "HIGH OCTET PRESET",
    0x82: "BREAK PERMITTED HERE",
    0x83: "NO BREAK HERE",
    0x84: "INDEX",
    0x85: "NEXT LINE (NEL)",
    0x86: "START OF SELECTED AREA",
    0x87: "END OF SELECTED AREA",
    0x88: "CHARACTER TABULATION SET",
    0x89: "CHARACTER TABULATION WITH JUSTIFICATION",
    0x8A: "LINE TABULATION SET",
    0x8B: "PARTIAL LINE FORWARD",
    0x8C: "PARTIAL LINE BACKWARD",
    0x8D: "REVERSE LINE FEED",
    0x8E: "SINGLE SHIFT TWO",
    0x8F: "SINGLE SHIFT THREE",
    0x90: "DEVICE CONTROL STRING",
    0x91: "PRIVATE USE ONE",
    0x92: "PRIVATE USE TWO",
    0x93: "SET TRANSMIT STATE",
    0x94: "CANCEL CHARACTER",
    0x95: "MESSAGE WAITING",
    0x96: "START OF GUARDED AREA",
    0x97: "END OF GUARDED AREA",
    0x98: "START OF STRING",
    0x99: "SINGLE GRAPHIC CHARACTER INTRODUCER",
    0x9A: "SINGLE CHARACTER INTRODUCER",
    0x9B: "CONTROL SEQUENCE INTRODUCER",
    0x9C: "STRING TERMINATOR",
    0x9D: "OPERATING SYSTEM COMMAND",
    0x9E: "PRIVACY MESSAGE",
    0x9F: "APPLICATION PROGRAM COMMAND",
})


def character_name(code_point: int) -> str:
    """Get the Unicode name of a code point.

    Args:
        code_point: Valid Unicode code point (not the EOF sentinel)

    Returns:
        The character name, the control character name for C0/C1
        controls, or UNNAMED ("?") if the code point has no name

    Example:
        >>> character_name(0x41)
        'LATIN CAPITAL LETTER A'
        >>> character_name(0x0A)
        'LINE FEED (LF)'
        >>> character_name(0xE000)
        '?'
    """
    name = unicodedata.name(chr(code_point), None)
    if name is not None:
        return name
    return _CONTROL_NAMES.get(code_point, UNNAMED)
