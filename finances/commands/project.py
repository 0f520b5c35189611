"""Project command for forecasting an account year by year."""

import logging
import sys
import tomllib
from pathlib import Path
from typing import Any

import pandas as pd
from rich.console import Console
from rich.table import Table

from finances.config import get_projection_settings
from finances.domain import (
    AccountYear,
    Euro,
    FinancesError,
    ForecastTable,
    Percentage,
    Projection,
    Year,
)

console = Console()
logger = logging.getLogger(__name__)


def build_projection(settings: dict[str, Any], deposit: Euro | None = None) -> Projection:
    """Build a projection from projection settings.

    Args:
        settings: Dictionary with the keys of config.PROJECTION_KEYS. Amounts are in euros.
        deposit: Optional deposit (negative for a withdrawal) in the first year.

    Returns:
        Fully computed Projection.

    Raises:
        InvalidArgument: If any setting is out of range or malformed.
    """
    first_year = AccountYear(
        year=Year(settings["start_year"]),
        start_principal=Euro.parse(str(settings["principal"])),
        start_profit=Euro.parse(str(settings["profit"])),
        interest_rate=Percentage(settings["interest_rate"]),
        capital_gains_tax_rate=Percentage(settings["capital_gains_tax_rate"]),
    )
    if deposit is not None:
        first_year = first_year.with_deposits(deposit)

    return Projection(settings["duration"], first_year)


def format_cell(value: Any) -> str:
    """Format a table cell for the terminal, negative amounts in red."""
    if isinstance(value, Euro) and value.cents < 0:
        return f"[red]{value}[/red]"
    return str(value)


def render_table(table: ForecastTable) -> Table:
    """Render a forecast table as a Rich table."""
    projection = table.projection
    rich_table = Table(title=f"Projection {projection.first_year().year}-{projection.last_year()}")

    for column, name in enumerate(table.column_names()):
        if column == 0:
            rich_table.add_column(name, style="cyan")
        else:
            rich_table.add_column(name, justify="right")

    for row in table.rows():
        rich_table.add_row(*(format_cell(value) for value in row))

    return rich_table


def table_to_frame(table: ForecastTable) -> pd.DataFrame:
    """Convert a forecast table to a DataFrame with years as ints and amounts in euros."""
    records = [
        [int(value) if isinstance(value, Year) else round(value.cents / 100, 2) for value in row]
        for row in table.rows()
    ]
    return pd.DataFrame(records, columns=table.column_names())


def project_command(
    years: int | None = None,
    start_year: int | None = None,
    principal: str | None = None,
    profit: str | None = None,
    interest: int | None = None,
    tax: int | None = None,
    deposit: str | None = None,
    csv_path: str | None = None,
) -> None:
    """Show a year-by-year projection of the account."""
    try:
        settings = get_projection_settings()
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        console.print(f"[red]Invalid config file: {e}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Could not read config file: {e}[/red]", style="bold")
        sys.exit(1)

    overrides = {
        "duration": years,
        "start_year": start_year,
        "principal": principal,
        "profit": profit,
        "interest_rate": interest,
        "capital_gains_tax_rate": tax,
    }
    settings.update({key: value for key, value in overrides.items() if value is not None})
    logger.debug("Projection settings: %s", settings)

    try:
        first_deposit = Euro.parse(deposit) if deposit is not None else None
        table = ForecastTable(build_projection(settings, first_deposit))
    except FinancesError as e:
        console.print(f"[red]Invalid projection: {e}[/red]", style="bold")
        sys.exit(1)

    console.print(render_table(table))

    if csv_path:
        output = Path(csv_path).expanduser()
        try:
            table_to_frame(table).to_csv(output, index=False)
        except OSError as e:
            console.print(f"[red]Could not write CSV: {e}[/red]", style="bold")
            sys.exit(1)
        console.print(f"[green]✓[/green] Projection written to: {output}")
