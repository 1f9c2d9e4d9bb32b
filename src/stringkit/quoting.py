"""Quoting and unquoting of string values.
"""

__docformat__ = 'google'

__all__ = [
    # Functions
    'quote',
    'unquote'
]

from stringkit.patterns import DEFAULT_QUOTE_CHAR, ESCAPE_CHAR

def quote(text: str) -> str:
    """
    Wrap a string in double quotes, escaping the quotes it contains.

    Args:
        text: The string to quote

    Returns:
        Quoted string with every inner `"` escaped by a backslash

    Example:
        >>> quote('abc')
        '"abc"'
        >>> print(quote('he said "hi"'))
        "he said \\"hi\\""
    """
    escaped = text.replace(DEFAULT_QUOTE_CHAR, ESCAPE_CHAR + DEFAULT_QUOTE_CHAR)
    return f'{DEFAULT_QUOTE_CHAR}{escaped}{DEFAULT_QUOTE_CHAR}'

def unquote(text: str, quote_char: str = DEFAULT_QUOTE_CHAR) -> str:
    """
    Unquote a string only if it starts and ends with `quote_char`.

    The input is expected to be trimmed already. After stripping the outer
    quotes, only the first escaped quote character is unescaped; any later
    ones are left as they are.

    Args:
        text: The string to unquote
        quote_char: The quote character, defaults to '"'

    Returns:
        The unquoted string, or the input unchanged if it is not quoted

    Example:
        >>> unquote('"abc"')
        'abc'
        >>> unquote('abc')
        'abc'
        >>> unquote('"')
        ''
        >>> unquote("'abc'", "'")
        'abc'
    """
    if text[:1] != quote_char or text[-1:] != quote_char:
        return text

    body = text[1:-1]
    return body.replace(ESCAPE_CHAR + quote_char, quote_char, 1)
