"""
Product key validation.

``validate`` picks a format by key length and runs that format's rules.
Format validators can also be called directly when the caller already knows
which release a key belongs to.

Some accepted keys look wrong on purpose. Windows 95 retail keys are meant to
be numeric ``DDD-DDDDDDD``, but the installer ignores the fourth character and
only rejects seven specific three-digit prefixes, so ``YOLO1111111`` is a valid
key. The validators reproduce the installer, not the documentation.
"""

from typing import Callable

from productkey.checksum import key_bytes, mod7
from productkey.errors import ProductKeyError, ValidationError
from productkey.models import KeyFormat, ValidatedKey, ValidationResult

WINDOWS95_FORBIDDEN_PREFIXES = frozenset(
    {"333", "444", "555", "666", "777", "888", "999"}
)


def _text_range(raw: bytes, start: int, stop: int) -> str:
    """Decode raw[start:stop], failing instead of truncating or splitting a character."""
    if stop > len(raw):
        raise ProductKeyError(ValidationError.BAD_ACCESS)
    try:
        return raw[start:stop].decode("utf-8")
    except UnicodeDecodeError:
        raise ProductKeyError(ValidationError.BAD_ACCESS) from None


def _require_str(key) -> None:
    if not isinstance(key, str):
        raise TypeError(f"Product key must be str, not {type(key).__name__}")


def _byte_range(raw: bytes, start: int) -> bytes:
    if start > len(raw):
        raise ProductKeyError(ValidationError.BAD_ACCESS)
    return raw[start:]


def validate_windows95(key: str) -> ValidationResult:
    """Validate a Windows 95 retail key (``DDD-DDDDDDD``).

    Rules, in order:
        1. The first three characters must not be 333, 444, ... 999.
        2. The fourth character is skipped.
        3. The remaining seven must be digits summing to a multiple of 7.

    Keys too short to slice fail with BAD_ACCESS rather than being read past
    their end.

    Based on stacksmashing's decompilation of the Windows 95 installer:
    https://youtu.be/cwyH59nACzQ
    """
    _require_str(key)
    raw = key_bytes(key)
    try:
        if _text_range(raw, 0, 3) in WINDOWS95_FORBIDDEN_PREFIXES:
            return ValidationResult.fail(key, ValidationError.INVALID_DIGIT_POSITION)
        if not mod7(_byte_range(raw, 4)):
            return ValidationResult.fail(key, ValidationError.BAD_MOD7)
    except ProductKeyError as exc:
        return ValidationResult.fail(key, exc.reason)

    return ValidationResult.ok(key, KeyFormat.WINDOWS_95)


# Windows 95 retail is the first, 11-character layout
validate_format_a = validate_windows95


# Fixed key length -> validator for the format with that length
FORMAT_VALIDATORS: dict[int, Callable[[str], ValidationResult]] = {
    11: validate_windows95,     # 000-0000000
}


def validate(key: str) -> ValidationResult:
    """Validate ``key`` against whichever known format has its length.

    Length is counted in UTF-8 bytes, which equals the character count for
    the ASCII keys printed on retail packaging. Bytes that could not be decoded
    (surrogate-escaped command-line input) count as the original bytes.
    """
    _require_str(key)
    length = len(key_bytes(key))
    validator = FORMAT_VALIDATORS.get(length)
    if validator is not None:
        return validator(key)
    if length < min(FORMAT_VALIDATORS):
        return ValidationResult.fail(key, ValidationError.TOO_SHORT)
    return ValidationResult.fail(key, ValidationError.TOO_LONG)


def check(key: str) -> ValidatedKey:
    """Like ``validate`` but raises ProductKeyError for rejected keys."""
    return validate(key).unwrap()
