import pytest

from vendor_barcodes.config import BarcodeRuleSettings
from vendor_barcodes.core.models import ParsedBarcode
from vendor_barcodes.core.rules import effective_price, validate_business_rules


def test_valid_barcode_passes(rules):
    report = validate_business_rules("TS-USB Cable-15.99$", settings=rules)
    assert report.is_valid
    assert report.errors == []
    assert report.parsed == ParsedBarcode("TS", "USB Cable", 15.99)


def test_format_failure_short_circuits(rules):
    report = validate_business_rules("TS-USB Cable-15.99", settings=rules)
    assert not report.is_valid
    assert report.errors == ["Barcode format is invalid"]
    assert report.parsed is None


@pytest.mark.parametrize(
    ("barcode", "error"),
    [
        ("ABCDEFGHIJK-X-1.00$", "Vendor prefix should be between 1-10 characters"),
        ("TS-" + "N" * 21 + "-1.00$", "Product name in barcode is too long (max 20 characters)"),
        ("TS-X-0.00$", "Price must be greater than 0"),
        ("TS-X-1000000.00$", "Price is too large (max $999,999.99)"),
        ("TS-USB  Cable-1.00$", "Product name contains multiple consecutive spaces"),
        ("T S-X-1.00$", "Vendor prefix should not contain spaces"),
        ("TS-A<B-1.00$", "Barcode contains invalid characters"),
        ("T|S-AB-1.00$", "Barcode contains invalid characters"),
    ],
)
def test_rule_violations(rules, barcode, error):
    report = validate_business_rules(barcode, settings=rules)
    assert not report.is_valid
    assert error in report.errors
    assert report.parsed is None


def test_multiple_violations_are_collected(rules):
    report = validate_business_rules("T S-A  <B-0.00$", settings=rules)
    assert len(report.errors) == 4


def test_price_must_match_catalog(rules):
    report = validate_business_rules("TS-USB Cable-15.99$", product_price=20.0, settings=rules)
    assert report.errors == ["Barcode price does not match product price or discount price"]


def test_discount_price_satisfies_catalog_match(rules):
    report = validate_business_rules(
        "TS-USB Cable-15.99$", product_price=20.0, discount_price=15.99, settings=rules
    )
    assert report.is_valid


def test_price_within_tolerance_matches(rules):
    report = validate_business_rules("TS-USB Cable-15.99$", product_price=15.995, settings=rules)
    assert report.is_valid


def test_custom_limits():
    settings = BarcodeRuleSettings(max_name_length=5)
    report = validate_business_rules("TS-USB Cable-15.99$", settings=settings)
    assert report.errors == ["Product name in barcode is too long (max 5 characters)"]


def test_limits_from_environment(monkeypatch):
    monkeypatch.setenv("BARCODE_MAX_PREFIX_LENGTH", "1")
    report = validate_business_rules("TS-USB Cable-15.99$")
    assert report.errors == ["Vendor prefix should be between 1-1 characters"]


@pytest.mark.parametrize(
    ("price", "discount_price", "expected"),
    [(10.0, 8.0, 8.0), (10.0, 0, 10.0), (10.0, None, 10.0), (10.0, -1.0, 10.0)],
)
def test_effective_price(price, discount_price, expected):
    assert effective_price(price, discount_price) == expected
