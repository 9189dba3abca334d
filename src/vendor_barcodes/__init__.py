"""Vendor barcode codec for the multi-vendor inventory back office."""

__version__ = "0.1.0"
