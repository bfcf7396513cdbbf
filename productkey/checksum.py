"""
Microsoft's "mod 7" checksum.

Several retail key formats require the digits of one key segment to add up
to a multiple of 7. The helpers here work on any number of bytes so every
format in that family can share them.
"""

from typing import Union

from productkey.errors import ProductKeyError, ValidationError

BytesLike = Union[bytes, bytearray, memoryview, str]

_ZERO = ord("0")
_NINE = ord("9")


def key_bytes(text: str) -> bytes:
    """Encode text as UTF-8 without failing on lone surrogates.

    Undecodable command-line bytes (\\udc80-\\udcff) map back to the original
    bytes; any other lone surrogate is encoded as-is.
    """
    try:
        return text.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        return text.encode("utf-8", "surrogatepass")


def digit_sum(data: BytesLike) -> int:
    """Add up the ASCII digits in ``data``.

    Raises:
        ProductKeyError: EXPECTED_DIGIT at the first byte that is not 0-9.
    """
    if isinstance(data, str):
        data = key_bytes(data)

    total = 0
    for byte in bytes(data):
        if not _ZERO <= byte <= _NINE:
            raise ProductKeyError(ValidationError.EXPECTED_DIGIT)
        total += byte - _ZERO
    return total


def mod7(data: BytesLike) -> bool:
    """Return True if the digits in ``data`` sum to a multiple of 7.

    A False result means the checksum failed; it is up to the caller to turn
    that into BAD_MOD7. Non-digit input raises instead.

    Reference: https://youtu.be/cwyH59nACzQ?t=306
    """
    return digit_sum(data) % 7 == 0
