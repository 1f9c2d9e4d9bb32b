"""
String manipulation utility functions.

This module collects the case conversion, quoting, hashing, formatting,
padding and similarity functions under one namespace.
"""

from .functions import __all__
from .functions import *

__all__ = __all__
