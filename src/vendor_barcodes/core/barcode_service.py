"""Barcode service orchestrating the codec for API and CLI callers."""

from __future__ import annotations

from dataclasses import dataclass, field

import structlog

from vendor_barcodes.config import BarcodeRuleSettings, get_settings
from vendor_barcodes.core.encoder import SEPARATOR, encode_barcode
from vendor_barcodes.core.errors import BarcodeError
from vendor_barcodes.core.models import ParsedBarcode
from vendor_barcodes.core.parser import parse_barcode
from vendor_barcodes.core.prefix import derive_vendor_prefix
from vendor_barcodes.core.rules import effective_price, validate_business_rules
from vendor_barcodes.core.validator import is_valid_barcode

logger = structlog.get_logger()


@dataclass
class ProductInput:
    """A product to encode in a bulk request."""

    name: str
    price: float
    discount_price: float | None = None
    product_id: str | None = None


@dataclass
class GeneratedBarcode:
    """A freshly encoded barcode."""

    barcode: str
    truncated: bool

    @property
    def length(self) -> int:
        return len(self.barcode)

    @property
    def display(self) -> str:
        return format_for_display(self.barcode)


@dataclass
class BulkItemResult:
    """Outcome for one product in a bulk request."""

    product_name: str
    product_id: str | None = None
    barcode: str | None = None
    truncated: bool = False
    error: str | None = None
    error_kind: str | None = None

    @property
    def success(self) -> bool:
        return self.error is None


@dataclass
class BulkBarcodeResult:
    """Outcome of a bulk request."""

    results: list[BulkItemResult] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return sum(1 for r in self.results if r.success)

    @property
    def failed(self) -> int:
        return len(self.results) - self.succeeded


@dataclass
class BarcodeInspection:
    """Combined grammar and business-rule view of a barcode."""

    barcode: str
    format_valid: bool
    business_rules_valid: bool
    parsed: ParsedBarcode | None
    errors: list[str]

    @property
    def length(self) -> int:
        return len(self.barcode)

    @property
    def is_valid(self) -> bool:
        return self.format_valid and self.business_rules_valid


def format_for_display(barcode: str) -> str:
    """Space out separators for readability.

    Examples:
        >>> format_for_display("TS-USB Cable-15.99$")
        'TS - USB Cable - 15.99$'
    """
    return barcode.replace(SEPARATOR, f" {SEPARATOR} ")


class BarcodeService:
    """Caller-side barcode operations with logging."""

    def __init__(self, rules: BarcodeRuleSettings | None = None):
        """Initialize barcode service.

        Args:
            rules: Business-rule limits. If None, uses configured settings.
        """
        self._rules = rules or get_settings().barcode

    def derive_prefix(self, business_name: str, vendor_id: str) -> str:
        """Derive a vendor prefix.

        Uniqueness across vendors is enforced by the vendor store, not here.
        """
        prefix = derive_vendor_prefix(business_name, vendor_id)
        logger.info("vendor_prefix_derived", vendor_id=vendor_id, vendor_prefix=prefix)
        return prefix

    def generate(
        self,
        vendor_prefix: str,
        product_name: str,
        price: float,
        discount_price: float | None = None,
    ) -> GeneratedBarcode:
        """Encode a barcode for one product.

        Raises:
            ValidationError: If any input is missing or malformed
            LengthConstraintError: If prefix and price leave no room for a name
        """
        barcode = encode_barcode(
            vendor_prefix, product_name, effective_price(price, discount_price)
        )
        truncated = parse_barcode(barcode).product_name != product_name

        logger.info(
            "barcode_generated",
            vendor_prefix=vendor_prefix,
            length=len(barcode),
            truncated=truncated,
        )
        return GeneratedBarcode(barcode=barcode, truncated=truncated)

    def generate_bulk(
        self, vendor_prefix: str, products: list[ProductInput]
    ) -> BulkBarcodeResult:
        """Encode barcodes for a batch of one vendor's products.

        Each product succeeds or fails on its own; the batch is never aborted.
        """
        result = BulkBarcodeResult()
        for product in products:
            item = BulkItemResult(product_name=product.name, product_id=product.product_id)
            try:
                generated = self.generate(
                    vendor_prefix, product.name, product.price, product.discount_price
                )
            except BarcodeError as e:
                logger.warning(
                    "bulk_barcode_failed",
                    product_id=product.product_id,
                    error=str(e),
                    kind=e.kind,
                )
                item.error = str(e)
                item.error_kind = e.kind
            else:
                item.barcode = generated.barcode
                item.truncated = generated.truncated
            result.results.append(item)

        logger.info(
            "bulk_barcodes_generated",
            vendor_prefix=vendor_prefix,
            succeeded=result.succeeded,
            failed=result.failed,
        )
        return result

    def parse(self, barcode: str) -> ParsedBarcode:
        """Parse a barcode.

        Raises:
            FormatError: If barcode format is invalid
        """
        return parse_barcode(barcode)

    def inspect(
        self,
        barcode: str,
        product_price: float | None = None,
        discount_price: float | None = None,
    ) -> BarcodeInspection:
        """Run grammar and business-rule checks on a barcode."""
        format_valid = is_valid_barcode(barcode)
        report = validate_business_rules(
            barcode,
            product_price=product_price,
            discount_price=discount_price,
            settings=self._rules,
        )
        inspection = BarcodeInspection(
            barcode=barcode,
            format_valid=format_valid,
            business_rules_valid=report.is_valid,
            parsed=parse_barcode(barcode) if format_valid else None,
            errors=report.errors,
        )

        logger.debug(
            "barcode_inspected",
            barcode=barcode,
            is_valid=inspection.is_valid,
            error_count=len(inspection.errors),
        )
        return inspection


# Global service instance
_service: BarcodeService | None = None


def get_service() -> BarcodeService:
    """Get the global barcode service instance."""
    global _service
    if _service is None:
        _service = BarcodeService()
    return _service
