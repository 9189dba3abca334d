import pytest
from fastapi.testclient import TestClient
from typer.testing import CliRunner

from vendor_barcodes.config import BarcodeRuleSettings, get_settings
from vendor_barcodes.core import barcode_service


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Keep environment overrides and cached singletons out of each test."""
    for name in (
        "LOG_LEVEL",
        "BARCODE_MAX_PREFIX_LENGTH",
        "BARCODE_MAX_NAME_LENGTH",
        "BARCODE_MAX_PRICE",
        "BARCODE_PRICE_TOLERANCE",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    monkeypatch.setattr(barcode_service, "_service", None)
    yield
    get_settings.cache_clear()


@pytest.fixture()
def rules():
    return BarcodeRuleSettings(
        max_prefix_length=10, max_name_length=20, max_price=999999.99, price_tolerance=0.01
    )


@pytest.fixture()
def service(rules):
    return barcode_service.BarcodeService(rules=rules)


@pytest.fixture()
def client():
    from vendor_barcodes.api.main import app

    return TestClient(app)


@pytest.fixture()
def runner():
    return CliRunner()
