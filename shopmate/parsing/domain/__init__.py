"""
Domain слой домена Parsing.

Содержит исключения разбора чеков.
"""

from .exceptions import (
    ReceiptProcessingError,
    UnsupportedFormatError,
    FieldNotFoundError,
    NoItemsFoundError,
    FormatConfigurationError,
)

__all__ = [
    "ReceiptProcessingError",
    "UnsupportedFormatError",
    "FieldNotFoundError",
    "NoItemsFoundError",
    "FormatConfigurationError",
]
