"""Transaction management commands (add, edit, delete, list)."""

import sys

from rich.console import Console
from rich.table import Table

from fintrack.config import get_data_path
from fintrack.domain.models import Category, Description
from fintrack.domain.transactions import format_amount, parse_amount, parse_transaction_id
from fintrack.errors import InvalidInputError
from fintrack.store.ledger import LoadStatus, MutationResult, TransactionStore

console = Console()


def open_store() -> TransactionStore:
    """Open the configured store and report how the data file loaded."""
    store = TransactionStore(get_data_path())
    result = store.load_result

    if result.status is LoadStatus.NO_PRIOR_DATA:
        console.print("[dim]No data found, starting fresh[/dim]")
    elif result.status is LoadStatus.LOAD_FAILED:
        console.print(f"[yellow]Could not load {store.data_path}: {result.error}[/yellow]")
        console.print("[yellow]Continuing with no transactions[/yellow]")

    return store


def report_save(result: MutationResult) -> None:
    """Print a save failure and exit, if there was one."""
    if result.error:
        console.print(f"[red]Could not save transactions: {result.error}[/red]", style="bold")
        sys.exit(1)


def add_command(category: str, amount: str, description: str) -> None:
    """Add a transaction with the next available ID.

    Args:
        category: Transaction type, usually Income or Expense.
        amount: Amount as typed; rejected before the store is touched if invalid.
        description: Transaction description.
    """
    try:
        parsed_amount = parse_amount(amount)
    except InvalidInputError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)

    store = open_store()
    txn, result = store.add_new(Category(category), parsed_amount, Description(description))
    report_save(result)

    console.print(f"[green]✓[/green] Transaction {txn.id} added:")
    console.print(f"  Type: {txn.category}")
    console.print(f"  Amount: {format_amount(txn.amount)}")
    console.print(f"  Description: {txn.description}")


def edit_command(transaction_id: str, category: str, amount: str, description: str) -> None:
    """Replace the type, amount and description of a transaction."""
    try:
        parsed_id = parse_transaction_id(transaction_id)
        parsed_amount = parse_amount(amount)
    except InvalidInputError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)

    store = open_store()
    result = store.edit(parsed_id, Category(category), parsed_amount, Description(description))

    if not result.matched:
        console.print(f"[yellow]No transaction with ID {parsed_id}, nothing changed[/yellow]")
        return

    report_save(result)
    console.print(f"[green]✓[/green] Transaction {parsed_id} updated")


def delete_command(transaction_id: str) -> None:
    """Delete a transaction."""
    try:
        parsed_id = parse_transaction_id(transaction_id)
    except InvalidInputError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)

    store = open_store()
    result = store.delete(parsed_id)

    if not result.matched:
        console.print(f"[yellow]No transaction with ID {parsed_id}, nothing changed[/yellow]")
        return

    report_save(result)
    console.print(f"[green]✓[/green] Transaction {parsed_id} deleted")


def list_command() -> None:
    """List transactions in the order they were added."""
    store = open_store()
    transactions = store.list_transactions()

    if not transactions:
        console.print("[yellow]No transactions found[/yellow]")
        return

    table = Table(title=f"Transactions ({len(transactions)})")
    table.add_column("ID", justify="right", style="dim")
    table.add_column("Type", style="magenta")
    table.add_column("Amount", justify="right")
    table.add_column("Description", style="white")

    for txn in transactions:
        if txn.amount < 0:
            amount_display = f"[red]{format_amount(txn.amount)}[/red]"
        else:
            amount_display = f"[green]{format_amount(txn.amount)}[/green]"
        table.add_row(str(txn.id), txn.category, amount_display, txn.description)

    console.print(table)
