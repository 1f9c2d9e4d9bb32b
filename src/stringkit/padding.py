"""Left and right padding with a fill of one or more characters.
"""

__docformat__ = 'google'

__all__ = [
    # Functions
    'pad_left',
    'pad_right'
]

from typing import Tuple
from stringkit.errors import InvalidArgument

def _padding(text: str, max_len: int, pad_with: str) -> Tuple[int, int]:
    if not pad_with:
        raise InvalidArgument("pad_with must contain at least one character")

    padding_width = max_len - len(text)
    if padding_width <= 0:
        return 0, 0
    return divmod(padding_width, len(pad_with))

def pad_left(value: str|int|float, max_len: int, pad_with: str) -> str:
    """
    Pad a string or number from the left side.

    If the length of `pad_with` does not divide the padding width exactly,
    the extra characters are sliced from the back of `pad_with` and placed
    first. Values already `max_len` long or longer are returned as strings,
    never truncated.

    Args:
        value: The string or number to pad
        max_len: The length of the resulting string
        pad_with: The content to pad with, can be longer than one character

    Returns:
        The padded string

    Raises:
        InvalidArgument: If `pad_with` is empty

    Example:
        >>> pad_left(5, 4, '0')
        '0005'
        >>> pad_left('ab', 5, 'xy')
        'yxyab'
        >>> pad_left('abcdef', 3, '0')
        'abcdef'
    """
    text = str(value)
    pad_count, remainder_len = _padding(text, max_len, pad_with)
    remainder = pad_with[-remainder_len:] if remainder_len else ''
    return remainder + pad_with * pad_count + text

def pad_right(value: str|int|float, max_len: int, pad_with: str) -> str:
    """
    Pad a string or number from the right side.

    The partial tile, if any, is sliced from the front of `pad_with` and
    placed last.

    Args:
        value: The string or number to pad
        max_len: The length of the resulting string
        pad_with: The content to pad with, can be longer than one character

    Returns:
        The padded string

    Raises:
        InvalidArgument: If `pad_with` is empty

    Example:
        >>> pad_right('ab', 5, 'xy')
        'abxyx'
        >>> pad_right(7, 3, '.')
        '7..'
    """
    text = str(value)
    pad_count, remainder_len = _padding(text, max_len, pad_with)
    return text + pad_with * pad_count + pad_with[:remainder_len]
