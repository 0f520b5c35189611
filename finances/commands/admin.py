"""Admin commands for initializing and showing configuration."""

import sys
import tomllib

from rich.console import Console
from rich.table import Table

from finances.config import create_default_config, get_config_path, get_projection_settings

console = Console()


def init_command(force: bool = False) -> None:
    """Initialize finances configuration."""
    config_path = get_config_path()

    if config_path.exists() and not force:
        console.print("[red]Initialization failed:[/red]", style="bold")
        console.print(f"  Config already exists: {config_path}")
        console.print("\n[yellow]Use 'finances init --force' to overwrite[/yellow]")
        sys.exit(1)

    try:
        console.print(f"[cyan]Creating config file at {config_path}...[/cyan]")
        create_default_config(config_path)
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)

    console.print("[green]✓[/green] Config file created (permissions: 600)")
    console.print(f"[dim]Config: {config_path}[/dim]")


def config_command() -> None:
    """Show the effective projection settings."""
    config_path = get_config_path()

    try:
        settings = get_projection_settings(config_path)
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        console.print(f"[red]Invalid config file {config_path}: {e}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Could not read config file {config_path}: {e}[/red]", style="bold")
        sys.exit(1)

    table = Table(title="Projection Settings")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", justify="right")

    for key, value in settings.items():
        table.add_row(key, str(value))

    console.print(table)

    if not config_path.exists():
        console.print(f"[dim]No config file at {config_path}, showing defaults[/dim]")
    else:
        console.print(f"[dim]Config: {config_path}[/dim]")
