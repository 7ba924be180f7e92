"""
Custom exceptions for the accessor encoders.
"""


class AccessorError(Exception):
    """Base exception for accessor encoding errors."""
    pass


class TypeMismatchError(AccessorError):
    """Raised when input elements do not match the bound element type."""
    pass


class CountOverflowError(AccessorError):
    """Raised when an element count or index exceeds the representable range."""
    pass
