"""Cosine similarity of two strings over their character counts.

Each string is reduced to a bag-of-characters vector, a mapping from
character to the number of times it occurs. The order of characters is
ignored, so anagrams are as similar as identical strings.
"""

__docformat__ = 'google'

__all__ = [
    'similarity'
]

import math
from collections import Counter
from typing import Dict

def similarity(str1: str, str2: str) -> float:
    """
    Compute the similarity of two strings using the cosine algorithm.

    Args:
        str1: The first string
        str2: The second string

    Returns:
        A float in [0, 1], up to floating-point rounding. Identical strings
        (including two empty strings) give exactly 1.0; an empty string
        against a non-empty one gives 0.0.

    Example:
        >>> similarity('abc', 'abc')
        1.0
        >>> similarity('abc', '')
        0.0
        >>> similarity('abc', 'xyz')
        0.0
        >>> round(similarity('ab', 'ba'), 12)
        1.0
    """
    if str1 == str2:
        return 1.0
    if len(str1) == 0 or len(str2) == 0:
        return 0.0

    v1 = _vector(str1)
    v2 = _vector(str2)

    dot = _dot(v1, v2)
    magnitude = _magnitude(v1) * _magnitude(v2)

    return dot / magnitude

def _vector(text: str) -> Dict[str, int]:
    return Counter(text)

def _dot(v1: Dict[str, int], v2: Dict[str, int]) -> int:
    return sum(count * v2.get(char, 0) for char, count in v1.items())

def _magnitude(v: Dict[str, int]) -> float:
    return math.sqrt(sum(count * count for count in v.values()))
