"""
Exception types for stellar ID generation.
"""

from typing import Optional


class StellarIDError(Exception):
    """Base class for all stellar ID errors."""
    pass


class InvalidInputError(StellarIDError):
    """Raised when the input string is empty, blank, oversized or not a string."""
    pass


class InvalidOptionsError(StellarIDError):
    """
    Raised when generation options fail validation.

    Attributes:
        field: Name of the offending option (None when not field-specific)
    """

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field
