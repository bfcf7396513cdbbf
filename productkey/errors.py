"""Rejection reasons for product key validation."""

from enum import Enum


class ValidationError(str, Enum):
    """Why a product key was rejected."""

    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    BAD_MOD7 = "bad_mod7"                        # Digit sum not divisible by 7
    EXPECTED_DIGIT = "expected_digit"
    INVALID_DIGIT_POSITION = "invalid_digit_position"
    BAD_ACCESS = "bad_access"                    # Read past the end of the key

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    ValidationError.TOO_SHORT: "No key format is that short",
    ValidationError.TOO_LONG: "No key format is that long",
    ValidationError.BAD_MOD7: "Sum of the checked digits is not divisible by 7",
    ValidationError.EXPECTED_DIGIT: "Expected a digit, found another character",
    ValidationError.INVALID_DIGIT_POSITION: "Key starts with a forbidden digit group",
    ValidationError.BAD_ACCESS: "Key is too short for the requested range",
}


class ProductKeyError(Exception):
    """Raised when a key fails validation and the caller asked for an exception."""

    def __init__(self, reason: ValidationError):
        super().__init__(reason.description)
        self.reason = reason

    def __repr__(self) -> str:
        return f"ProductKeyError({self.reason.value!r})"
