"""Admin commands for init and backup."""

import shutil
import sys
from datetime import datetime
from pathlib import Path

from rich.console import Console

from fintrack.config import create_default_config, get_config_path, get_data_path
from fintrack.store.codec import encode

console = Console()


def backup_command(
    output_dir: str | None = None,
) -> None:
    """Backup data file and configuration."""
    data_path = get_data_path()
    config_path = get_config_path()

    if not data_path.exists():
        console.print("[red]Data file not found. Run 'fintrack init' first.[/red]", style="bold")
        sys.exit(1)

    if output_dir:
        backup_dir = Path(output_dir).expanduser()
    else:
        backup_dir = Path.home() / ".fintrack" / "backups"

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

    data_backup = backup_dir / f"transactions_{timestamp}.json"
    config_backup = backup_dir / f"config_{timestamp}.toml"

    try:
        backup_dir.mkdir(parents=True, exist_ok=True)

        shutil.copy2(data_path, data_backup)
        console.print(f"[green]✓[/green] Transactions backed up to: {data_backup}")

        # Config is optional; defaults apply without it
        if config_path.exists():
            shutil.copy2(config_path, config_backup)
            console.print(f"[green]✓[/green] Config backed up to: {config_backup}")

        console.print("\n[green]Backup complete![/green]", style="bold")
        console.print(f"[dim]Backup directory: {backup_dir}[/dim]")

    except OSError as e:
        console.print(f"[red]Backup failed: {e}[/red]", style="bold")
        sys.exit(1)


def run_full_init(config_path: Path) -> None:
    """Create config and an empty data file at the path it names."""
    console.print(f"[cyan]Creating config file at {config_path}...[/cyan]")
    create_default_config(config_path)
    console.print("[green]✓[/green] Config file created (permissions: 600)")

    data_path = get_data_path(config_path)
    console.print(f"[cyan]Creating data file at {data_path}...[/cyan]")
    data_path.parent.mkdir(parents=True, exist_ok=True)
    data_path.write_text(encode([]), encoding="utf-8")
    console.print("[green]✓[/green] Data file created")

    console.print("\n[green]Initialization complete![/green]", style="bold")
    console.print(f"[dim]Data file: {data_path}[/dim]")
    console.print(f"[dim]Config: {config_path}[/dim]")


def init_command(force: bool = False) -> None:
    """Initialize fintrack data file and configuration."""
    data_path = get_data_path()
    config_path = get_config_path()

    data_exists = data_path.exists()
    config_exists = config_path.exists()

    try:
        # Guard: refuse to overwrite without force flag
        if not force and (data_exists or config_exists):
            console.print("[red]Initialization failed:[/red]", style="bold")
            if data_exists:
                console.print(f"  Data file already exists: {data_path}")
            if config_exists:
                console.print(f"  Config already exists: {config_path}")
            console.print("\n[yellow]Use 'fintrack init --force' to overwrite[/yellow]")
            sys.exit(1)

        run_full_init(config_path)

    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)
