"""Run the barcode API with uvicorn from a source checkout.

Puts ``src`` on the import path so the package works without installation.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from vendor_barcodes.api.main import app  # noqa: E402

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
