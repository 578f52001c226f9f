"""CSV import and export commands."""

import sys
from pathlib import Path

import pandas as pd
from rich.console import Console

from fintrack.commands.transactions import open_store, report_save
from fintrack.domain.transactions import analyze_csv_columns, parse_csv_rows
from fintrack.errors import InvalidInputError
from fintrack.store.codec import FIELDS, transaction_to_dict

console = Console()


def export_command(output: str) -> None:
    """Write all transactions to a CSV file.

    Args:
        output: Destination CSV path.
    """
    store = open_store()
    transactions = store.list_transactions()
    output_path = Path(output).expanduser()

    frame = pd.DataFrame([transaction_to_dict(txn) for txn in transactions], columns=list(FIELDS))

    try:
        frame.to_csv(output_path, index=False)
    except OSError as e:
        console.print(f"[red]Export failed: {e}[/red]", style="bold")
        sys.exit(1)

    console.print(f"[green]✓[/green] Exported {len(transactions)} transactions to: {output_path}")


def import_command(input_file: str) -> None:
    """Add transactions from a CSV file with type, amount and description columns.

    Rows are parsed before any are added; one invalid row aborts the import.

    Args:
        input_file: Source CSV path.
    """
    input_path = Path(input_file).expanduser()

    try:
        frame = pd.read_csv(input_path, dtype=str, keep_default_na=False)
    except FileNotFoundError:
        console.print(f"[red]File not found: {input_path}[/red]", style="bold")
        sys.exit(1)
    except (ValueError, pd.errors.ParserError) as e:
        console.print(f"[red]Could not read {input_path}: {e}[/red]", style="bold")
        sys.exit(1)

    mapping = analyze_csv_columns(list(frame.columns))

    try:
        rows = parse_csv_rows(frame.to_dict("records"), mapping)
    except InvalidInputError as e:
        console.print(f"[red]{e}[/red]")
        console.print("[dim]Nothing was imported[/dim]")
        sys.exit(1)

    if not rows:
        console.print("[yellow]No transactions in file[/yellow]")
        return

    store = open_store()
    for row in rows:
        _, result = store.add_new(row.category, row.amount, row.description)
        report_save(result)

    console.print(f"[green]✓[/green] Imported {len(rows)} transactions from: {input_path}")
