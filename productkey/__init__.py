"""
Product Key Validation.

Validates and identifies legacy software product keys, starting with the
Windows 95 retail format.
"""

from productkey.catalogue import get_format_info, list_formats
from productkey.checksum import digit_sum, mod7
from productkey.errors import ProductKeyError, ValidationError
from productkey.models import (
    KeyFormat,
    ValidatedKey,
    ValidationResult,
    implemented_formats,
)
from productkey.validator import (
    check,
    validate,
    validate_format_a,
    validate_windows95,
)

__all__ = [
    "KeyFormat",
    "ProductKeyError",
    "ValidatedKey",
    "ValidationError",
    "ValidationResult",
    "check",
    "digit_sum",
    "get_format_info",
    "implemented_formats",
    "list_formats",
    "mod7",
    "validate",
    "validate_format_a",
    "validate_windows95",
]
