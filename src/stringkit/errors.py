__all__ = [
    'InvalidArgument'
]

class InvalidArgument(ValueError):
    """
    Raised when an argument has a value the operation cannot work with,
    such as an empty padding fill.
    """
    pass
