"""Data model for validated product keys."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from productkey.errors import ProductKeyError, ValidationError


class KeyFormat(str, Enum):
    """Known product key releases.

    Only WINDOWS_95 has validation logic. The others are reserved so callers
    can already refer to them; a successful validation never returns them.
    """

    WINDOWS_95 = "windows_95"
    WINDOWS_95_OEM = "windows_95_oem"
    WINDOWS_98 = "windows_98"
    UNKNOWN = "unknown"

    @property
    def is_implemented(self) -> bool:
        return self in _IMPLEMENTED


_IMPLEMENTED = frozenset({KeyFormat.WINDOWS_95})


def implemented_formats() -> list[KeyFormat]:
    """Formats the validator can actually recognise."""
    return [fmt for fmt in KeyFormat if fmt.is_implemented]


@dataclass(frozen=True)
class ValidatedKey:
    """A key that passed every rule of its format."""

    release: KeyFormat

    def __post_init__(self):
        if not self.release.is_implemented:
            raise ValueError(
                f"Cannot validate keys for placeholder format '{self.release.value}'"
            )


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one product key.

    Exactly one of ``key`` and ``error`` is set.
    """

    product_key: str
    key: Optional[ValidatedKey] = None
    error: Optional[ValidationError] = None

    def __post_init__(self):
        if (self.key is None) == (self.error is None):
            raise ValueError("ValidationResult needs exactly one of key or error")

    @classmethod
    def ok(cls, product_key: str, release: KeyFormat) -> "ValidationResult":
        return cls(product_key=product_key, key=ValidatedKey(release=release))

    @classmethod
    def fail(cls, product_key: str, error: ValidationError) -> "ValidationResult":
        return cls(product_key=product_key, error=error)

    @property
    def is_valid(self) -> bool:
        return self.error is None

    @property
    def release(self) -> Optional[KeyFormat]:
        return self.key.release if self.key else None

    def unwrap(self) -> ValidatedKey:
        """Return the validated key, or raise ProductKeyError with the reason."""
        if self.error is not None:
            raise ProductKeyError(self.error)
        return self.key

    def to_dict(self) -> dict:
        return {
            "product_key": self.product_key,
            "is_valid": self.is_valid,
            "release": self.release.value if self.release else None,
            "error": self.error.value if self.error else None,
        }
