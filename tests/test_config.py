import pytest

from vendor_barcodes.config import configure_logging, get_settings


def test_settings_defaults():
    settings = get_settings()
    assert settings.log_level == "INFO"
    assert settings.barcode.max_prefix_length == 10
    assert settings.barcode.max_name_length == 20


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("BARCODE_MAX_NAME_LENGTH", "12")
    settings = get_settings()
    assert settings.log_level == "DEBUG"
    assert settings.barcode.max_name_length == 12


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ValueError, match="Unknown log level"):
        configure_logging("LOUD")


def test_configure_logging_accepts_lowercase():
    configure_logging("warning")
