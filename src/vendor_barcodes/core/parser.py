"""Barcode parsing for the vendor barcode codec."""

from vendor_barcodes.core.errors import FormatError
from vendor_barcodes.core.models import ParsedBarcode
from vendor_barcodes.core.validator import split_barcode


def parse_barcode(barcode: str) -> ParsedBarcode:
    """Parse barcode in format: <vendor_prefix>-<product_name>-<price>$

    Args:
        barcode: Barcode string to parse

    Returns:
        ParsedBarcode with extracted vendor prefix, product name and price

    Raises:
        FormatError: If barcode format is invalid

    Examples:
        >>> parse_barcode("TS-USB Cable-15.99$")
        ParsedBarcode(vendor_prefix='TS', product_name='USB Cable', price=15.99)
    """
    segments = split_barcode(barcode)
    if segments is None:
        raise FormatError("Invalid barcode format")

    vendor_prefix, product_name, price_str = segments
    return ParsedBarcode(
        vendor_prefix=vendor_prefix,
        product_name=product_name,
        price=float(price_str),
    )
