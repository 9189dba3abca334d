"""Barcode codec: vendor prefix derivation, encoding, validation and parsing."""

from vendor_barcodes.core.encoder import MAX_BARCODE_LENGTH, encode_barcode
from vendor_barcodes.core.errors import (
    BarcodeError,
    FormatError,
    LengthConstraintError,
    ValidationError,
)
from vendor_barcodes.core.models import ParsedBarcode
from vendor_barcodes.core.parser import parse_barcode
from vendor_barcodes.core.prefix import derive_vendor_prefix
from vendor_barcodes.core.validator import is_valid_barcode

__all__ = [
    "MAX_BARCODE_LENGTH",
    "BarcodeError",
    "FormatError",
    "LengthConstraintError",
    "ParsedBarcode",
    "ValidationError",
    "derive_vendor_prefix",
    "encode_barcode",
    "is_valid_barcode",
    "parse_barcode",
]
