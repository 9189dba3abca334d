"""Pydantic request/response schemas for Vendor Barcodes API."""

from pydantic import BaseModel, Field


# Request models


class VendorPrefixRequest(BaseModel):
    """Request body for vendor prefix derivation."""

    business_name: str = Field(..., description="Vendor business name")
    vendor_id: str = Field(..., description="Opaque vendor identifier")


class GenerateBarcodeRequest(BaseModel):
    """Request body for single barcode generation."""

    vendor_prefix: str = Field(..., description="Vendor prefix, e.g. TS11")
    product_name: str = Field(..., description="Product name")
    price: float = Field(..., description="List price")
    discount_price: float | None = Field(default=None, description="Discount price, wins when > 0")


class BulkProduct(BaseModel):
    """A single product in a bulk generation request."""

    name: str
    price: float
    discount_price: float | None = None
    product_id: str | None = None


class BulkGenerateRequest(BaseModel):
    """Request body for bulk barcode generation."""

    vendor_prefix: str = Field(..., description="Vendor prefix shared by all products")
    products: list[BulkProduct] = Field(..., min_length=1, description="Products to encode")


class ValidateBarcodeRequest(BaseModel):
    """Request body for barcode validation."""

    barcode: str = Field(..., description="Barcode string to check")
    product_price: float | None = Field(default=None, description="Catalog price to compare")
    discount_price: float | None = Field(default=None, description="Catalog discount price")


class ParseBarcodeRequest(BaseModel):
    """Request body for barcode parsing."""

    barcode: str = Field(..., description="Barcode string to parse")


# Response models


class VendorPrefixResponse(BaseModel):
    """Response for vendor prefix derivation."""

    vendor_prefix: str


class GeneratedBarcodeResponse(BaseModel):
    """Response for a generated barcode."""

    barcode: str
    length: int
    truncated: bool
    display: str


class ParsedBarcodeResponse(BaseModel):
    """Response for a parsed barcode."""

    vendor_prefix: str
    product_name: str
    price: float


class BulkItemResponse(BaseModel):
    """Outcome for one product in a bulk request."""

    product_name: str
    product_id: str | None = None
    success: bool
    barcode: str | None = None
    truncated: bool = False
    error: str | None = None
    error_kind: str | None = None


class BulkGenerateResponse(BaseModel):
    """Response for bulk generation."""

    results: list[BulkItemResponse]
    succeeded: int
    failed: int


class BarcodeInspectionResponse(BaseModel):
    """Response for barcode validation."""

    barcode: str
    length: int
    is_valid: bool
    format_valid: bool
    business_rules_valid: bool
    parsed: ParsedBarcodeResponse | None = None
    errors: list[str]


class BarcodeFormatResponse(BaseModel):
    """Description of the barcode grammar."""

    pattern: str
    max_length: int
    separator: str
    terminator: str
    price_pattern: str
    example: str


class HealthResponse(BaseModel):
    """Response for health check."""

    status: str
    version: str


class ErrorResponse(BaseModel):
    """Error body returned for codec failures."""

    detail: str
    error: str
