"""CLI entry point for finances."""

import typer

from finances.commands.admin import config_command, init_command
from finances.commands.project import project_command
from finances.log import setup_logging

app = typer.Typer(
    name="finances",
    help="Project a savings account year by year, before and after capital gains tax",
    add_completion=False,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Project a savings account year by year, before and after capital gains tax."""
    setup_logging("DEBUG" if verbose else "WARNING")


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
) -> None:
    """Create a config file with default projection settings."""
    init_command(force)


@app.command(name="config")
def config() -> None:
    """Show your projection settings."""
    config_command()


@app.command()
def project(
    years: int = typer.Option(None, "--years", "-y", help="Years to project after the first (overrides config)"),
    start_year: int = typer.Option(None, "--start-year", help="First year of the projection"),
    principal: str = typer.Option(None, "--principal", help="Starting principal (in €)"),
    profit: str = typer.Option(None, "--profit", help="Starting profit (in €)"),
    interest: int = typer.Option(None, "--interest", help="Annual interest rate (%)"),
    tax: int = typer.Option(None, "--tax", help="Capital gains tax rate (%)"),
    deposit: str = typer.Option(None, "--deposit", help="Deposit in the first year (in €, negative to withdraw)"),
    csv_path: str = typer.Option(None, "--csv", help="Also write the projection to a CSV file"),
) -> None:
    """Show your account projected year by year."""
    project_command(years, start_year, principal, profit, interest, tax, deposit, csv_path)


if __name__ == "__main__":
    app()
