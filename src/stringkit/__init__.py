"""
Stateless string transformation utilities.

See individual module documentation for detailed information.
"""
from . import casing
from . import quoting
from . import hashing
from . import formatting
from . import padding
from . import similarity
from . import functions
from .errors import InvalidArgument

__version__ = "0.1.0"

__all__ = [
    'casing',
    'quoting',
    'hashing',
    'formatting',
    'padding',
    'similarity',
    'functions',
    'InvalidArgument'
]
