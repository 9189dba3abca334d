"""FastAPI application for Vendor Barcodes."""

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from vendor_barcodes import __version__
from vendor_barcodes.api.schemas import (
    BarcodeFormatResponse,
    BarcodeInspectionResponse,
    BulkGenerateRequest,
    BulkGenerateResponse,
    BulkItemResponse,
    GenerateBarcodeRequest,
    GeneratedBarcodeResponse,
    HealthResponse,
    ParseBarcodeRequest,
    ParsedBarcodeResponse,
    ValidateBarcodeRequest,
    VendorPrefixRequest,
    VendorPrefixResponse,
)
from vendor_barcodes.config import configure_logging
from vendor_barcodes.core.barcode_service import ProductInput, get_service
from vendor_barcodes.core.encoder import MAX_BARCODE_LENGTH, SEPARATOR, TERMINATOR
from vendor_barcodes.core.errors import BarcodeError, FormatError
from vendor_barcodes.core.models import ParsedBarcode

logger = structlog.get_logger()

configure_logging()

app = FastAPI(
    title="Vendor Barcodes API",
    description="Vendor prefix derivation and product barcode encoding",
    version=__version__,
)

# CORS for frontend development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(BarcodeError)
async def barcode_error_handler(request: Request, exc: BarcodeError) -> JSONResponse:
    """Translate codec errors into HTTP responses.

    Malformed barcodes are a bad request; rejected encode inputs are unprocessable.
    """
    status_code = 400 if isinstance(exc, FormatError) else 422
    logger.info("barcode_request_rejected", path=request.url.path, kind=exc.kind, error=str(exc))
    return JSONResponse(
        status_code=status_code,
        content={"detail": str(exc), "error": exc.kind},
    )


def _parsed_response(parsed: ParsedBarcode) -> ParsedBarcodeResponse:
    return ParsedBarcodeResponse(
        vendor_prefix=parsed.vendor_prefix,
        product_name=parsed.product_name,
        price=parsed.price,
    )


@app.get("/api/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="ok", version=__version__)


@app.post("/api/vendors/prefix", response_model=VendorPrefixResponse)
async def derive_prefix(request: VendorPrefixRequest) -> VendorPrefixResponse:
    """Derive a vendor prefix from business name and vendor id.

    The caller persists the prefix; a unique index there rejects collisions.
    """
    prefix = get_service().derive_prefix(request.business_name, request.vendor_id)
    return VendorPrefixResponse(vendor_prefix=prefix)


@app.post("/api/barcodes/generate", response_model=GeneratedBarcodeResponse)
async def generate_barcode(request: GenerateBarcodeRequest) -> GeneratedBarcodeResponse:
    """Generate a barcode for one product.

    Uses the discount price when it is set and greater than zero.
    """
    generated = get_service().generate(
        vendor_prefix=request.vendor_prefix,
        product_name=request.product_name,
        price=request.price,
        discount_price=request.discount_price,
    )
    return GeneratedBarcodeResponse(
        barcode=generated.barcode,
        length=generated.length,
        truncated=generated.truncated,
        display=generated.display,
    )


@app.post("/api/barcodes/bulk", response_model=BulkGenerateResponse)
async def generate_bulk(request: BulkGenerateRequest) -> BulkGenerateResponse:
    """Generate barcodes for many products of one vendor.

    Failures are reported per product and do not abort the batch.
    """
    result = get_service().generate_bulk(
        request.vendor_prefix,
        [
            ProductInput(
                name=p.name,
                price=p.price,
                discount_price=p.discount_price,
                product_id=p.product_id,
            )
            for p in request.products
        ],
    )
    return BulkGenerateResponse(
        results=[
            BulkItemResponse(
                product_name=r.product_name,
                product_id=r.product_id,
                success=r.success,
                barcode=r.barcode,
                truncated=r.truncated,
                error=r.error,
                error_kind=r.error_kind,
            )
            for r in result.results
        ],
        succeeded=result.succeeded,
        failed=result.failed,
    )


@app.post("/api/barcodes/validate", response_model=BarcodeInspectionResponse)
async def validate_barcode(request: ValidateBarcodeRequest) -> BarcodeInspectionResponse:
    """Check a barcode's grammar and business rules."""
    inspection = get_service().inspect(
        request.barcode,
        product_price=request.product_price,
        discount_price=request.discount_price,
    )
    return BarcodeInspectionResponse(
        barcode=inspection.barcode,
        length=inspection.length,
        is_valid=inspection.is_valid,
        format_valid=inspection.format_valid,
        business_rules_valid=inspection.business_rules_valid,
        parsed=_parsed_response(inspection.parsed) if inspection.parsed else None,
        errors=inspection.errors,
    )


@app.post("/api/barcodes/parse", response_model=ParsedBarcodeResponse)
async def parse_barcode(request: ParseBarcodeRequest) -> ParsedBarcodeResponse:
    """Parse a barcode into vendor prefix, product name and price."""
    return _parsed_response(get_service().parse(request.barcode))


@app.get("/api/barcodes/format", response_model=BarcodeFormatResponse)
async def barcode_format() -> BarcodeFormatResponse:
    """Describe the barcode grammar for clients."""
    return BarcodeFormatResponse(
        pattern=f"PREFIX{SEPARATOR}NAME{SEPARATOR}PRICE{TERMINATOR}",
        max_length=MAX_BARCODE_LENGTH,
        separator=SEPARATOR,
        terminator=TERMINATOR,
        price_pattern=r"\d+\.\d{2}",
        example="TS-USB Cable-15.99$",
    )
