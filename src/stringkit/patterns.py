"""Regex patterns and constants shared by the string utilities.
"""

__docformat__ = 'google'

import re

# Base character sets for patterns
SEPARATORS: str = ':-_.'
"""Characters treated as word separators by `stringkit.casing.camel_case`."""

SEPARATOR_CLASS = f"[{re.escape(SEPARATORS)}]"
"""@private"""

## Defaults
DEFAULT_SEPARATOR: str = '-'
"""Separator inserted by `stringkit.casing.hyphenate` when none is given."""

DEFAULT_QUOTE_CHAR: str = '"'
"""Quote character used by `stringkit.quoting.quote` and `stringkit.quoting.unquote`."""

ESCAPE_CHAR: str = '\\'
"""Prefix marking an escaped quote character."""

HASH_MULTIPLIER: int = 31
"""Multiplier of the polynomial accumulator in `stringkit.hashing.string_hash`."""

HASH_BITS: int = 32
"""Width of the signed integer the hash wraps to after every step."""

## Patterns
LINE_TERMINATORS = "\\n\\r\\u2028\\u2029"
"""@private"""

SEPARATED_CHAR_PATTERN: re.Pattern = re.compile(f"{SEPARATOR_CLASS}+([^{LINE_TERMINATORS}])")
"""Pattern for a run of separators and the character that follows it.

The following character may be anything but a line terminator (`\\n`, `\\r`,
`\\u2028`, `\\u2029`); a separator run before one is left in place.

The run is greedy but backtracks, so a run of two or more trailing separators
gives up its last separator as the following character.

Used in `stringkit.casing.camel_case`."""

UPPER_PATTERN: re.Pattern = re.compile("[A-Z]")
"""ASCII upper-case letters.

Used in `stringkit.casing.hyphenate`."""

PLACEHOLDER_PATTERN: re.Pattern = re.compile(r"{([0-9]+)}")
"""Positional placeholders such as `{0}` or `{12}`.

Used in `stringkit.formatting.format_string`."""
