"""Vendor prefix derivation."""

from vendor_barcodes.core.errors import ValidationError

INITIALS_LENGTH = 2
SUFFIX_LENGTH = 2
PAD_CHAR = "V"


def _is_blank(value: object) -> bool:
    return not isinstance(value, str) or not value.strip()


def derive_vendor_prefix(business_name: str, vendor_id: str) -> str:
    """Derive a short vendor prefix from a business name and vendor id.

    Takes the uppercased first letter of up to two whitespace-separated words
    that start with a letter, pads to two characters with ``V``, then appends
    the last two characters of the vendor id verbatim.

    Args:
        business_name: Free-form business name
        vendor_id: Opaque vendor identifier (e.g. a database object id)

    Returns:
        Vendor prefix such as ``"TS11"``

    Raises:
        ValidationError: If either argument is not a non-empty string

    Examples:
        >>> derive_vendor_prefix("Tech Solutions Inc.", "507f1f77bcf86cd799439011")
        'TS11'
        >>> derive_vendor_prefix("123", "12345678")
        'VV78'
    """
    if _is_blank(business_name):
        raise ValidationError("Business name must be a non-empty string")
    if _is_blank(vendor_id):
        raise ValidationError("Vendor ID must be a non-empty string")

    letters = "".join(
        word[0].upper() for word in business_name.split() if word[0].isalpha()
    )[:INITIALS_LENGTH]

    return letters.ljust(INITIALS_LENGTH, PAD_CHAR) + vendor_id[-SUFFIX_LENGTH:]
