"""Value types for the barcode codec."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ParsedBarcode:
    """Fields recovered from a conforming barcode string."""

    vendor_prefix: str
    product_name: str
    price: float


@dataclass(frozen=True)
class BarcodeRuleReport:
    """Outcome of business-rule validation."""

    is_valid: bool
    errors: list[str] = field(default_factory=list)
    parsed: ParsedBarcode | None = None
