"""Errors raised by the barcode codec."""


class BarcodeError(ValueError):
    """Base class for barcode codec errors."""

    kind = "barcode_error"


class ValidationError(BarcodeError):
    """Raised when a required input is missing or malformed."""

    kind = "validation_error"


class LengthConstraintError(BarcodeError):
    """Raised when prefix and price leave no room for a product name."""

    kind = "length_constraint_error"


class FormatError(BarcodeError):
    """Raised when a string does not conform to the barcode grammar."""

    kind = "format_error"
