import pytest

from vendor_barcodes.core.validator import is_valid_barcode, split_barcode


@pytest.mark.parametrize(
    "candidate",
    [
        "VD01-USB-3.00$",
        "TS-USB Cable-15.99$",
        "A-B-0.00$",
        "VD01-USB-C Cable-3.00$",
        "VD01-Multi-Dash-Name-12.50$",
        "P--X-1.00$",
        "VD01-X--1.00$",
        "A-" + "B" * 24 + "-1.00$",
    ],
)
def test_valid_barcodes(candidate):
    assert is_valid_barcode(candidate) is True


@pytest.mark.parametrize(
    "candidate",
    [
        "",
        "VD01-USB-3.00",
        "VD01-USB-3$",
        "VD01-USB-3.0$",
        "VD01-USB-3.000$",
        "VD01-3.00$",
        "VD01USB3.00$",
        "-USB-3.00$",
        "VD01--3.00$",
        "VD01-USB-3.00$x",
        "VD01-USB-3.00$\n",
        "VD01-USB-.50$",
        "VD01-USB-1,000.00$",
        "VD01-USB-$3.00",
        "VD01-USB-٣.٠٠$",
        "A-" + "B" * 25 + "-1.00$",
    ],
)
def test_invalid_barcodes(candidate):
    assert is_valid_barcode(candidate) is False


@pytest.mark.parametrize("candidate", [None, 123, b"VD01-USB-3.00$", ["VD01-USB-3.00$"]])
def test_non_strings_are_invalid(candidate):
    assert is_valid_barcode(candidate) is False


def test_split_anchors_price_at_last_hyphen():
    assert split_barcode("VD01-USB-C Cable-3.00$") == ("VD01", "USB-C Cable", "3.00")


def test_split_prefix_stops_at_first_hyphen():
    assert split_barcode("P--X-1.00$") == ("P", "-X", "1.00")


def test_split_returns_none_for_invalid():
    assert split_barcode("VD01-3.00$") is None
