"""CLI entry point for fintrack."""

import typer
from rich.console import Console
from rich.markup import escape

from fintrack.commands.admin import backup_command, init_command
from fintrack.commands.csv_io import export_command, import_command
from fintrack.commands.report import summary_command
from fintrack.commands.transactions import add_command, delete_command, edit_command, list_command
from fintrack.config import check_config, get_config_path, get_log_level
from fintrack.logging_setup import configure_logging

console = Console()

app = typer.Typer(
    name="fintrack",
    help="Personal finance tracker - record income and expenses",
    add_completion=False,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Personal finance tracker - record income and expenses."""
    config_error = check_config()
    if config_error:
        console.print(f"[yellow]Invalid config file, using defaults: {get_config_path()}[/yellow]")
        console.print(f"[yellow]  {escape(config_error)}[/yellow]")
        console.print("[dim]Run 'fintrack init --force' to recreate it[/dim]")

    configure_logging("DEBUG" if verbose else get_log_level())


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing data file and config"),
) -> None:
    """Initialize fintrack data file and configuration."""
    init_command(force)


@app.command(name="backup")
def backup(
    output_dir: str = typer.Option(None, "--output", "-o", help="Backup directory (default: ~/.fintrack/backups)"),
) -> None:
    """Backup your transactions and configuration files."""
    backup_command(output_dir)


@app.command()
def add(
    category: str = typer.Argument(..., help="Transaction type, e.g. Income or Expense"),
    amount: str = typer.Argument(..., help="Amount (use -- before negative amounts)"),
    description: str = typer.Argument(..., help="What the transaction was for"),
) -> None:
    """Add a transaction."""
    add_command(category, amount, description)


@app.command()
def edit(
    transaction_id: str = typer.Argument(..., help="ID of the transaction to edit"),
    category: str = typer.Argument(..., help="New transaction type"),
    amount: str = typer.Argument(..., help="New amount"),
    description: str = typer.Argument(..., help="New description"),
) -> None:
    """Edit a transaction."""
    edit_command(transaction_id, category, amount, description)


@app.command()
def delete(
    transaction_id: str = typer.Argument(..., help="ID of the transaction to delete"),
) -> None:
    """Delete a transaction."""
    delete_command(transaction_id)


@app.command(name="list")
def list_transactions() -> None:
    """List your transactions."""
    list_command()


@app.command()
def summary() -> None:
    """Show your income, expenses and net flow."""
    summary_command()


@app.command(name="export")
def export(
    output: str = typer.Argument(..., help="CSV file to write"),
) -> None:
    """Export your transactions to CSV."""
    export_command(output)


@app.command(name="import")
def import_(
    input_file: str = typer.Argument(..., help="CSV file with type, amount and description columns"),
) -> None:
    """Import transactions from CSV."""
    import_command(input_file)


if __name__ == "__main__":
    app()
