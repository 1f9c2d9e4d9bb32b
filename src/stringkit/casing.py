"""Case conversion between separated words and camelCase.

`camel_case` joins words delimited by any of `:`, `-`, `_` or `.`;
`hyphenate` splits a camelCase string back apart on its capitals.

The two are not inverses: `hyphenate(camel_case('foo_bar'))` gives
`'foo-bar'`, since the separator used is not kept.
"""

__docformat__ = 'google'

__all__ = [
    # Functions
    'camel_case',
    'hyphenate'
]

import re
from stringkit.patterns import (
    SEPARATED_CHAR_PATTERN,
    UPPER_PATTERN,
    DEFAULT_SEPARATOR
)

def camel_case(text: str, upper_first: bool = False) -> str:
    """
    Transform a string separated with `:`, `-`, `_` or `.` to camelCase.

    Each run of separators is dropped together with the character that follows
    it, which is upper-cased unless the run starts the string. With
    `upper_first` set, the first character of the result is capitalized too.
    A separator run followed by nothing or by a line terminator is kept.

    Args:
        text: The string to convert
        upper_first: If True, capitalize the first letter

    Returns:
        The camelCased string

    Example:
        >>> camel_case('foo-bar')
        'fooBar'
        >>> camel_case('foo-bar', True)
        'FooBar'
        >>> camel_case('a.b:c_d')
        'aBCD'
        >>> camel_case('-foo')
        'foo'
        >>> camel_case('foo-')
        'foo-'
    """
    def replace(match: re.Match) -> str:
        letter = match.group(1)
        return letter.upper() if match.start() else letter

    camelized = SEPARATED_CHAR_PATTERN.sub(replace, text)

    if upper_first:
        return camelized[:1].upper() + camelized[1:]
    return camelized

def hyphenate(text: str, sep: str = DEFAULT_SEPARATOR) -> str:
    """
    Hyphenate a camelCase string.

    Every ASCII capital is lower-cased and prefixed with `sep`. A single
    leading `sep` produced this way (or already present) is removed.

    Args:
        text: The camelCase string
        sep: The separator to insert, defaults to '-'

    Returns:
        The separated, lower-cased string

    Example:
        >>> hyphenate('fooBar')
        'foo-bar'
        >>> hyphenate('FooBar')
        'foo-bar'
        >>> hyphenate('fooBarBaz', '_')
        'foo_bar_baz'
    """
    hyphenated = UPPER_PATTERN.sub(lambda m: sep + m.group().lower(), str(text))

    if sep and hyphenated.startswith(sep):
        return hyphenated[len(sep):]
    return hyphenated
