import pytest

from vendor_barcodes.core.errors import ValidationError
from vendor_barcodes.core.prefix import derive_vendor_prefix


@pytest.mark.parametrize(
    ("business_name", "vendor_id", "expected"),
    [
        ("Tech Solutions Inc.", "507f1f77bcf86cd799439011", "TS11"),
        ("123", "12345678", "VV78"),
        ("A", "12345678", "AV78"),
        ("acme", "x", "AVx"),
        ("  tech   solutions  ", "ab12", "TS12"),
        ("1st Choice Goods", "xxcD", "CGcD"),
        ("& Sons Trading", "99", "ST99"),
        ("Big Blue Box Co", "0042", "BB42"),
        ("Über Foods", "12", "ÜF12"),
        ("école Verte", "ab", "ÉVab"),
    ],
)
def test_derive_vendor_prefix(business_name, vendor_id, expected):
    assert derive_vendor_prefix(business_name, vendor_id) == expected


def test_derive_is_deterministic_and_never_empty():
    first = derive_vendor_prefix("Tech Solutions Inc.", "507f1f77bcf86cd799439011")
    second = derive_vendor_prefix("Tech Solutions Inc.", "507f1f77bcf86cd799439011")
    assert first == second
    assert first


@pytest.mark.parametrize("business_name", ["", "   ", None, 42])
def test_rejects_missing_business_name(business_name):
    with pytest.raises(ValidationError, match="Business name must be a non-empty string"):
        derive_vendor_prefix(business_name, "12345678")


@pytest.mark.parametrize("vendor_id", ["", "  ", None, 12345678])
def test_rejects_missing_vendor_id(vendor_id):
    with pytest.raises(ValidationError, match="Vendor ID must be a non-empty string"):
        derive_vendor_prefix("Tech Solutions", vendor_id)
