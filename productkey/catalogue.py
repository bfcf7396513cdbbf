"""
Catalogue of known product key formats.

Descriptive data only: the rules themselves live in productkey.validator.
Formats without validation logic are listed so tooling can show what is
planned.
"""

from productkey.models import KeyFormat

# Format: {KeyFormat: {metadata}}
# ``length`` is None where the layout has not been pinned down yet.

KEY_FORMATS = {
    KeyFormat.WINDOWS_95: {
        "name": "Windows 95 (retail)",
        "layout": "DDD-DDDDDDD",
        "example": "757-2573155",
        "length": 11,
        "notes": "Fourth character ignored; last seven digits must sum to a multiple of 7",
    },
    KeyFormat.WINDOWS_95_OEM: {
        "name": "Windows 95 (OEM)",
        "layout": "DDDYY-OEM-DDDDDDD-DDDDD",
        "example": "",
        "length": 23,
        "notes": "Placeholder",
    },
    KeyFormat.WINDOWS_98: {
        "name": "Windows 98",
        "layout": "XXXXX-XXXXX-XXXXX-XXXXX-XXXXX",
        "example": "",
        "length": 29,
        "notes": "Placeholder",
    },
    KeyFormat.UNKNOWN: {
        "name": "Unknown",
        "layout": "",
        "example": "",
        "length": None,
        "notes": "Placeholder for keys that match no known layout",
    },
}


def get_format_info(key_format) -> dict:
    """Look up catalogue data for a key format.

    Args:
        key_format: a KeyFormat member or its value, e.g. "windows_95".

    Returns:
        Dict of metadata, or empty dict if not found.
    """
    try:
        key_format = KeyFormat(key_format)
    except ValueError:
        return {}
    return dict(KEY_FORMATS.get(key_format, {}))


def list_formats() -> list[dict]:
    """List every known key format with its implementation status."""
    results = []
    for key_format, info in KEY_FORMATS.items():
        results.append({
            "format": key_format.value,
            "implemented": key_format.is_implemented,
            **info,
        })
    return results
