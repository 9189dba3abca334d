"""CLI for Vendor Barcodes."""

from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel
from rich.markup import escape
from rich.table import Table

from vendor_barcodes.config import configure_logging
from vendor_barcodes.core.barcode_service import get_service
from vendor_barcodes.core.errors import BarcodeError
from vendor_barcodes.core.validator import is_valid_barcode

app = typer.Typer(
    name="vendor-barcodes",
    help="Vendor Barcodes CLI - derive prefixes, encode and check barcodes",
    add_completion=False,
)
console = Console()


@app.callback()
def main(
    log_level: str = typer.Option(None, "--log-level", help="Override LOG_LEVEL"),
):
    """Vendor Barcodes CLI."""
    try:
        configure_logging(log_level)
    except ValueError as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        raise typer.Exit(1)


@app.command()
def derive_prefix(
    business_name: str = typer.Argument(..., help="Vendor business name"),
    vendor_id: str = typer.Argument(..., help="Vendor identifier"),
):
    """Derive a vendor prefix from a business name and vendor id."""
    try:
        prefix = get_service().derive_prefix(business_name, vendor_id)
    except BarcodeError as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        raise typer.Exit(1)

    console.print(prefix, markup=False)


@app.command()
def encode(
    vendor_prefix: str = typer.Argument(..., help="Vendor prefix, e.g. TS11"),
    product_name: str = typer.Argument(..., help="Product name"),
    price: float = typer.Argument(..., help="List price"),
    discount_price: float = typer.Option(None, "--discount-price", help="Discount price"),
):
    """Encode a product barcode."""
    try:
        generated = get_service().generate(vendor_prefix, product_name, price, discount_price)
    except BarcodeError as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        raise typer.Exit(1)

    console.print(generated.barcode, markup=False)
    if generated.truncated:
        console.print(
            f"[yellow]Product name truncated to fit {generated.length} characters[/yellow]"
        )


@app.command()
def parse(
    barcode: str = typer.Argument(..., help="Barcode string"),
):
    """Parse a barcode into its fields."""
    try:
        parsed = get_service().parse(barcode)
    except BarcodeError as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        raise typer.Exit(1)

    table = Table(title="Barcode")
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Vendor prefix", escape(parsed.vendor_prefix))
    table.add_row("Product name", escape(parsed.product_name))
    table.add_row("Price", f"{parsed.price:.2f}")
    console.print(table)


@app.command()
def validate(
    barcode: str = typer.Argument(..., help="Barcode string"),
    product_price: float = typer.Option(None, "--product-price", help="Catalog price"),
    discount_price: float = typer.Option(None, "--discount-price", help="Catalog discount price"),
):
    """Check a barcode's grammar and business rules."""
    inspection = get_service().inspect(barcode, product_price, discount_price)

    console.print(Panel.fit(
        f"[bold]Barcode:[/bold] {escape(inspection.barcode)}\n"
        f"[bold]Length:[/bold] {inspection.length}\n"
        f"[bold]Format:[/bold] {'valid' if inspection.format_valid else 'invalid'}\n"
        f"[bold]Business rules:[/bold] "
        f"{'valid' if inspection.business_rules_valid else 'invalid'}",
        title="Barcode Validation",
    ))

    if inspection.is_valid:
        console.print("[green]✓ Barcode is valid[/green]")
        return

    for error in inspection.errors:
        console.print(f"  • {error}", markup=False)
    console.print("[red]✗ Barcode validation failed[/red]")
    raise typer.Exit(1)


@app.command()
def check_file(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="File with one barcode per line"),
):
    """Check every barcode in an import file (one per line)."""
    invalid = []
    checked = 0
    for line_no, line in enumerate(path.read_text(encoding="utf-8").splitlines(), start=1):
        if not line.strip():
            continue
        checked += 1
        if not is_valid_barcode(line):
            invalid.append((line_no, line))

    if not invalid:
        console.print(f"[green]✓ All {checked} barcodes are valid[/green]")
        return

    table = Table(title=f"Invalid barcodes in {path.name}")
    table.add_column("Line", justify="right")
    table.add_column("Barcode")
    table.add_column("Length", justify="right")
    for line_no, line in invalid:
        table.add_row(str(line_no), escape(line), str(len(line)))
    console.print(table)
    console.print(f"[red]✗ {len(invalid)} of {checked} barcodes are invalid[/red]")
    raise typer.Exit(1)


if __name__ == "__main__":
    app()
