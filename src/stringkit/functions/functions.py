__docformat__ = 'google'

__all__ = [
    'camel_case',
    'hyphenate',
    'quote',
    'unquote',
    'string_hash',
    'format_string',
    'pad_left',
    'pad_right',
    'similarity'
]

from stringkit.casing import camel_case, hyphenate
from stringkit.quoting import quote, unquote
from stringkit.hashing import string_hash
from stringkit.formatting import format_string
from stringkit.padding import pad_left, pad_right
from stringkit.similarity import similarity
