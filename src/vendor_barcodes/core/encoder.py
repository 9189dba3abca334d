"""Barcode encoding: ``<vendor_prefix>-<product_name>-<price>$``."""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

from vendor_barcodes.core.errors import LengthConstraintError, ValidationError

MAX_BARCODE_LENGTH = 32
SEPARATOR = "-"
TERMINATOR = "$"

# Two separators plus the terminator
STRUCTURAL_LENGTH = 2 * len(SEPARATOR) + len(TERMINATOR)

CENT = Decimal("0.01")

# Enough digits to quantize any finite float without overflowing the context
PRICE_PRECISION = 400


def format_price(price: int | float | Decimal) -> str:
    """Format a price with exactly two decimal places, rounding ties up.

    Raises:
        ValidationError: If price is not a finite number greater than zero

    Examples:
        >>> format_price(15.99)
        '15.99'
        >>> format_price(3)
        '3.00'
    """
    if isinstance(price, bool) or not isinstance(price, (int, float, Decimal)):
        raise ValidationError("Price must be a valid positive number")
    if isinstance(price, Decimal):
        finite = price.is_finite()
    else:
        finite = math.isfinite(price)
    if not finite or price <= 0:
        raise ValidationError("Price must be a valid positive number")
    with localcontext() as ctx:
        ctx.prec = PRICE_PRECISION
        cents = Decimal(price).quantize(CENT, rounding=ROUND_HALF_UP)
    return f"{cents:f}"


def truncate_product_name(product_name: str, max_length: int) -> str:
    """Keep the first ``max_length`` characters of a product name."""
    if max_length < 0:
        raise ValueError(f"max_length must not be negative, got: {max_length}")
    return product_name[:max_length]


def name_budget(vendor_prefix: str, price_str: str) -> int:
    """Number of characters left for the product name."""
    return MAX_BARCODE_LENGTH - (len(vendor_prefix) + len(price_str) + STRUCTURAL_LENGTH)


def encode_barcode(vendor_prefix: str, product_name: str, price: int | float | Decimal) -> str:
    """Encode a vendor prefix, product name and price into a barcode.

    The product name is hard-truncated from the end when the full barcode
    would exceed ``MAX_BARCODE_LENGTH`` characters.

    Args:
        vendor_prefix: Vendor prefix, must not contain ``-``
        product_name: Product name, may contain spaces and hyphens
        price: Finite price greater than zero

    Returns:
        Barcode string of at most 32 characters

    Raises:
        ValidationError: If any input is missing or malformed
        LengthConstraintError: If prefix and price leave no room for a name

    Examples:
        >>> encode_barcode("TS", "USB Cable", 15.99)
        'TS-USB Cable-15.99$'
    """
    if not isinstance(vendor_prefix, str) or not vendor_prefix:
        raise ValidationError("Vendor prefix must be a non-empty string")
    if SEPARATOR in vendor_prefix:
        raise ValidationError(f"Vendor prefix must not contain '{SEPARATOR}'")
    if not isinstance(product_name, str) or not product_name:
        raise ValidationError("Product name must be a non-empty string")

    price_str = format_price(price)

    max_name_length = name_budget(vendor_prefix, price_str)
    if max_name_length <= 0:
        raise LengthConstraintError(
            "Vendor prefix and price are too long to generate a valid barcode"
        )

    name = truncate_product_name(product_name, max_name_length)
    return f"{vendor_prefix}{SEPARATOR}{name}{SEPARATOR}{price_str}{TERMINATOR}"
