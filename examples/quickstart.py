"""Quickstart example for unicodescalar.

This example demonstrates building scalar values, inspecting them, and
using ranges the way a hand-written lexer would.

Note: Examples print diagnostics to the terminal. In production, catch
ScalarValueError at your input boundary and report error.diagnostic.
"""

import io
import logging

from unicodescalar import EOF, ScalarRange, ScalarValue, ScalarValueError, describe, escape

# Example 1: Construction
print("=" * 50)
print("Example 1: Construction")
print("=" * 50)

a = ScalarValue.of_string("A")
face = ScalarValue.of_surrogate_pair(0xD83D, 0xDE00)
print(a.info)
# Output: [A][LATIN CAPITAL LETTER A][0x41]
print(face.info)
# Output: [\uD83D\uDE00][GRINNING FACE][0x1f600]
print(ScalarValue.decode("0x43"), ScalarValue.decode("#44"), ScalarValue.decode("0105"))
# Output: C D E
print(EOF.info)
# Output: [\uFFFF][END OF FILE][0xffffffff]

# Example 2: Whole strings
print("\n" + "=" * 50)
print("Example 2: Whole Strings")
print("=" * 50)

text = 'say "hi"\t\U0001F600'
print(escape(text))
# Output: say \"hi\"\t\uD83D\uDE00
print([scalar.hex for scalar in ScalarValue.all_of(text)][-2:])
# Output: ['9', '1f600']

# Example 3: A tiny identifier lexer
print("\n" + "=" * 50)
print("Example 3: Character Classes")
print("=" * 50)

LOWER = ScalarRange.of_code_units("a", "z")
DIGITS = ScalarValue.of_code_unit("0").range_to(ScalarValue.of_code_unit("9"))


def read_identifier(source: str) -> str:
    """Consume a lower-case identifier followed by optional digits."""
    out = io.StringIO()
    for scalar in ScalarValue.all_of(source):
        if scalar in LOWER or (out.tell() and scalar in DIGITS):
            scalar.append_to(out)
        else:
            break
    return out.getvalue()


print(read_identifier("abc42 = 1"))
# Output: abc42

# Example 4: Diagnostics
print("\n" + "=" * 50)
print("Example 4: Diagnostics")
print("=" * 50)

try:
    ScalarValue.of_code_unit(0xD83D)
except ScalarValueError as e:
    print(e.diagnostic.format_error())
# Output:
# error[LONE_SURROGATE]: expected non-surrogate but got high surrogate 0xD83D
#   = input: 55357
#   = help: Combine both surrogate halves with ScalarValue.of_surrogate_pair()

logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
for item in describe("a\tb"):
    print(item)
# Output:
# unicodescalar.text: Described 3 scalar values in 3 characters
# 0: [a][LATIN SMALL LETTER A][0x61]
# 1: [\t][CHARACTER TABULATION][0x9]
# 2: [b][LATIN SMALL LETTER B][0x62]

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)
