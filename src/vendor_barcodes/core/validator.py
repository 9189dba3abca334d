"""Barcode grammar validation."""

import re

from vendor_barcodes.core.encoder import MAX_BARCODE_LENGTH, SEPARATOR

# Price segment anchored at the end of the string, including its leading separator
PRICE_TAIL_PATTERN = re.compile(r"-([0-9]+\.[0-9]{2})\$\Z")


def split_barcode(candidate: str) -> tuple[str, str, str] | None:
    """Split a barcode into prefix, name and price segments.

    Phase one strips the ``-D+.DD$`` price tail from the end. Phase two splits
    what remains at its first hyphen into prefix and name.

    Returns:
        ``(vendor_prefix, product_name, price_str)``, or None if the
        candidate does not conform to the grammar
    """
    if not isinstance(candidate, str) or len(candidate) > MAX_BARCODE_LENGTH:
        return None

    match = PRICE_TAIL_PATTERN.search(candidate)
    if match is None:
        return None
    head = candidate[: match.start()]

    vendor_prefix, sep, product_name = head.partition(SEPARATOR)
    if not sep or not vendor_prefix or not product_name:
        return None

    return vendor_prefix, product_name, match.group(1)


def is_valid_barcode(candidate: str) -> bool:
    """Check whether a string conforms to the barcode grammar.

    Examples:
        >>> is_valid_barcode("VD01-USB-3.00$")
        True
        >>> is_valid_barcode("VD01-USB-3$")
        False
    """
    return split_barcode(candidate) is not None
