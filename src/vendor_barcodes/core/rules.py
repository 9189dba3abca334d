"""Business rules applied on top of the barcode grammar."""

from __future__ import annotations

import re

from vendor_barcodes.config import BarcodeRuleSettings
from vendor_barcodes.core.models import BarcodeRuleReport, ParsedBarcode
from vendor_barcodes.core.parser import parse_barcode
from vendor_barcodes.core.validator import is_valid_barcode

INVALID_CHARS_PATTERN = re.compile(r'[<>:"\\|?*]')


def effective_price(price: float, discount_price: float | None = None) -> float:
    """Price a product's barcode should carry.

    The discount price wins when it is set and greater than zero.
    """
    if discount_price is not None and discount_price > 0:
        return discount_price
    return price


def _rule_errors(
    parsed: ParsedBarcode,
    settings: BarcodeRuleSettings,
    product_price: float | None,
    discount_price: float | None,
) -> list[str]:
    errors = []

    if not 1 <= len(parsed.vendor_prefix) <= settings.max_prefix_length:
        errors.append(
            f"Vendor prefix should be between 1-{settings.max_prefix_length} characters"
        )
    if len(parsed.product_name) > settings.max_name_length:
        errors.append(
            "Product name in barcode is too long "
            f"(max {settings.max_name_length} characters)"
        )

    if parsed.price <= 0:
        errors.append("Price must be greater than 0")
    if parsed.price > settings.max_price:
        errors.append(f"Price is too large (max ${settings.max_price:,.2f})")

    if product_price and abs(parsed.price - product_price) > settings.price_tolerance:
        if not discount_price or abs(parsed.price - discount_price) > settings.price_tolerance:
            errors.append("Barcode price does not match product price or discount price")

    if "  " in parsed.product_name:
        errors.append("Product name contains multiple consecutive spaces")
    if " " in parsed.vendor_prefix:
        errors.append("Vendor prefix should not contain spaces")
    if INVALID_CHARS_PATTERN.search(parsed.vendor_prefix) or INVALID_CHARS_PATTERN.search(
        parsed.product_name
    ):
        errors.append("Barcode contains invalid characters")

    return errors


def validate_business_rules(
    barcode: str,
    product_price: float | None = None,
    discount_price: float | None = None,
    settings: BarcodeRuleSettings | None = None,
) -> BarcodeRuleReport:
    """Check a barcode against catalog business rules.

    Grammar is checked first; rule checks only run on conforming barcodes.
    Every violated rule is reported, nothing is raised.

    Args:
        barcode: Barcode string to check
        product_price: Catalog list price to compare against, if known
        discount_price: Catalog discount price to compare against, if known
        settings: Rule limits. If None, uses BarcodeRuleSettings from the environment.

    Returns:
        BarcodeRuleReport; ``parsed`` is only set when no rule is violated
    """
    if not is_valid_barcode(barcode):
        return BarcodeRuleReport(is_valid=False, errors=["Barcode format is invalid"])

    settings = settings or BarcodeRuleSettings()
    parsed = parse_barcode(barcode)
    errors = _rule_errors(parsed, settings, product_price, discount_price)

    if errors:
        return BarcodeRuleReport(is_valid=False, errors=errors)
    return BarcodeRuleReport(is_valid=True, errors=[], parsed=parsed)
