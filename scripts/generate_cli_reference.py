#!/usr/bin/env python3
"""Generate CLI and data file reference documentation from the typer app."""

import inspect
import sys
from pathlib import Path

# Add parent directory to path to import fintrack
sys.path.insert(0, str(Path(__file__).parent.parent))

from typing import Any

from typer.models import ArgumentInfo, OptionInfo

from fintrack.cli import app
from fintrack.domain.models import Amount, Category, Description, TransactionId
from fintrack.domain.transactions import Transaction
from fintrack.store.codec import encode

FIELD_DOCS = {
    "id": "Integer ID, taken from the last transaction's ID plus one",
    "type": "Transaction type; Income and Expense count towards the summary",
    "amount": "Signed amount, stored unrounded",
    "description": "Free text",
}


def format_option(param_name: str, param: OptionInfo) -> str:
    """Format an option with its flags and help text."""
    flags = list(param.param_decls or [])
    if not flags:
        flags = [f"--{param_name.replace('_', '-')}"]

    parts = [f"- {', '.join(f'`{flag}`' for flag in flags)}"]

    if param.help:
        parts.append(f": {param.help}")

    if param.default is not None and param.default is not False:
        parts.append(f" (default: {param.default})")

    return "".join(parts)


def generate_command_doc(command_name: str, command_obj: Any) -> str:
    """Generate documentation for a single command."""
    callback = command_obj.callback

    doc = (callback.__doc__ or "No description available.").strip()

    sig = inspect.signature(callback)
    arguments = [(name, p.default) for name, p in sig.parameters.items() if isinstance(p.default, ArgumentInfo)]
    options = [(name, p.default) for name, p in sig.parameters.items() if isinstance(p.default, OptionInfo)]

    usage = " ".join(["fintrack", command_name, *(name.upper() for name, _ in arguments)])

    lines = [
        f"### {command_name}",
        "",
        doc,
        "",
        "**Usage:**",
        "",
        "```bash",
        usage,
        "```",
        "",
    ]

    if arguments:
        lines.append("**Arguments:**")
        lines.append("")
        for name, info in arguments:
            lines.append(f"- `{name.upper()}`: {info.help}" if info.help else f"- `{name.upper()}`")
        lines.append("")

    if options:
        lines.append("**Options:**")
        lines.append("")
        for name, info in options:
            lines.append(format_option(name, info))
        lines.append("")

    return "\n".join(lines)


def generate_data_file_doc() -> str:
    """Generate documentation for the transactions data file."""
    example = [
        Transaction(TransactionId(1), Category("Income"), Amount(2500.0), Description("Salary")),
        Transaction(TransactionId(2), Category("Expense"), Amount(42.5), Description("Groceries")),
    ]

    lines = [
        "## Data File",
        "",
        "All transactions are stored in one JSON file, rewritten on every change.",
        "",
        "| Field | Description |",
        "|-------|-------------|",
    ]
    for field, description in FIELD_DOCS.items():
        lines.append(f"| `{field}` | {description} |")

    lines.extend(["", "```json", encode(example), "```", ""])
    return "\n".join(lines)


def generate_cli_reference() -> str:
    """Generate complete CLI reference documentation."""
    lines = [
        "---",
        "tags: [reference]",
        "---",
        "",
        "# CLI Commands Reference",
        "",
        "Complete reference for all fintrack CLI commands and options.",
        "",
        "## Usage",
        "",
        "```bash",
        "fintrack [--verbose] [COMMAND] [ARGS]",
        "```",
        "",
        "## Commands",
        "",
    ]

    commands = sorted(
        app.registered_commands,
        key=lambda x: x.name or (x.callback.__name__ if x.callback else ""),
    )
    for command_obj in commands:
        command_name = command_obj.name or (command_obj.callback.__name__ if command_obj.callback else "unknown")
        lines.append(generate_command_doc(command_name, command_obj))
        lines.append("")

    lines.append(generate_data_file_doc())
    return "\n".join(lines)


def main() -> None:
    """Generate and write CLI reference documentation."""
    output_path = Path(__file__).parent.parent / "docs" / "reference" / "cli-commands.md"
    output_path.parent.mkdir(parents=True, exist_ok=True)

    output_path.write_text(generate_cli_reference())
    print(f"Generated CLI reference at {output_path}")


if __name__ == "__main__":
    main()
