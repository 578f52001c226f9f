"""Summary command for income, expenses and net flow."""

from rich.console import Console
from rich.table import Table

from fintrack.commands.transactions import open_store
from fintrack.domain.transactions import Summary, format_amount

console = Console()


def format_net_flow(net_flow: float) -> str:
    """Format net flow in green when positive or zero, red when negative."""
    if net_flow < 0:
        return f"[red]{format_amount(net_flow)}[/red]"
    return f"[green]{format_amount(net_flow)}[/green]"


def render_summary(summary: Summary) -> None:
    """Render summary totals as a table."""
    table = Table(title="Summary", show_header=False)
    table.add_column("Total", style="cyan")
    table.add_column("Amount", justify="right")

    table.add_row("Income", format_amount(summary.income_total))
    table.add_row("Expense", format_amount(summary.expense_total))
    table.add_row("Net flow", format_net_flow(summary.net_flow))

    console.print(table)


def summary_command() -> None:
    """Show income and expense totals and the net flow."""
    store = open_store()
    render_summary(store.summarize())
