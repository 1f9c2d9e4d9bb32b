"""Positional template formatting with `{0}`, `{1}`, ... placeholders.
"""

__docformat__ = 'google'

__all__ = [
    'format_string'
]

import re
from stringkit.patterns import PLACEHOLDER_PATTERN

def format_string(template: str, *args) -> str:
    """
    Format a string with {0}, {1} etc.

    Each placeholder is replaced with the string form of the positional
    argument at that index. Placeholders with no matching argument are left
    as they are. The template is scanned once, so text coming from an
    argument is never substituted again.

    Args:
        template: The string containing placeholders
        *args: Values to substitute, any type

    Returns:
        The formatted string

    Example:
        >>> format_string('{0} and {1}', 'x', 'y')
        'x and y'
        >>> format_string('{0} {2}', 'x', 'y')
        'x {2}'
        >>> format_string('{1}{0}{1}', 1, '-')
        '-1-'
    """
    def replace(match: re.Match) -> str:
        index = match.group(1)
        # leading zeros do not address an argument
        if len(index) > 1 and index[0] == '0':
            return match.group()
        if len(index) > len(str(len(args))) or int(index) >= len(args):
            return match.group()
        return str(args[int(index)])

    return PLACEHOLDER_PATTERN.sub(replace, template)
