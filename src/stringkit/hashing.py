"""Non-cryptographic string hashing.
"""

__docformat__ = 'google'

__all__ = [
    'string_hash'
]

from stringkit.patterns import HASH_MULTIPLIER, HASH_BITS

_MASK = (1 << HASH_BITS) - 1
_SIGN_BIT = 1 << (HASH_BITS - 1)

def _utf16_units(text: str):
    data = text.encode('utf-16-le', 'surrogatepass')
    for i in range(0, len(data), 2):
        yield data[i] | (data[i + 1] << 8)

def string_hash(text: str) -> int:
    """
    Hash a string to a signed 32-bit integer, as Java's `String.hashCode` does.

    The accumulator is `h * 31 + unit` over the UTF-16 code units of the
    string, wrapped to 32 bits after each step. Characters outside the Basic
    Multilingual Plane therefore count as two units. Collisions are expected.

    Args:
        text: The string to hash

    Returns:
        Integer in the range [-2**31, 2**31 - 1]

    Example:
        >>> string_hash('')
        0
        >>> string_hash('a')
        97
        >>> string_hash('hello')
        99162322
        >>> string_hash('polygenelubricants')
        -2147483648
    """
    h = 0
    for unit in _utf16_units(text):
        h = (h * HASH_MULTIPLIER + unit) & _MASK

    return h - (1 << HASH_BITS) if h & _SIGN_BIT else h
