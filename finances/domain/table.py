"""Forecast table layout over a projection.

Presentation-neutral grid: one row per projection year, nine columns read
by index. Front ends (the CLI, a CSV export) render whatever value_at()
returns. Replacing the projection notifies listeners that the whole table
changed.
"""

import sys
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

from finances.domain.account import AccountYear
from finances.domain.errors import InvalidArgument, OutOfRange
from finances.domain.projection import Projection

# Sentinel last row meaning "every row from first_row onwards"
ALL_ROWS = sys.maxsize

COLUMNS: tuple[tuple[str, Callable[[AccountYear], Any]], ...] = (
    ("Year", lambda year: year.year),
    ("Start Net Total", lambda year: year.start_net_total()),
    ("Deposits & Withdrawals", lambda year: year.deposits),
    ("Full-term Principal", lambda year: year.start_principal),
    ("End Principal", lambda year: year.end_principal()),
    ("Full-term Profit", lambda year: year.start_profit),
    ("Interest", lambda year: year.interest()),
    ("End Profit", lambda year: year.end_profit()),
    ("End Net Total", lambda year: year.end_net_total()),
)


@dataclass(frozen=True)
class TableChange:
    """Immutable description of the rows that changed."""

    first_row: int
    last_row: int


TableListener = Callable[[TableChange], None]


class ForecastTable:
    """Nine-column view of a projection with change notification."""

    def __init__(self, projection: Projection) -> None:
        self._projection = self._check_projection(projection)
        self._listeners: list[TableListener] = []

    @staticmethod
    def _check_projection(projection: Projection) -> Projection:
        if not isinstance(projection, Projection):
            raise InvalidArgument(f"projection must be a Projection, was: {projection!r}")
        return projection

    @property
    def projection(self) -> Projection:
        return self._projection

    def set_projection(self, projection: Projection) -> None:
        """Swap in a new projection and tell listeners every row changed.

        Args:
            projection: Replacement projection.
        """
        self._projection = self._check_projection(projection)
        self._fire(TableChange(first_row=0, last_row=ALL_ROWS))

    def add_listener(self, listener: TableListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: TableListener) -> None:
        self._listeners.remove(listener)

    def _fire(self, change: TableChange) -> None:
        for listener in list(self._listeners):
            listener(change)

    def column_count(self) -> int:
        return len(COLUMNS)

    def column_name(self, column: int) -> str:
        return COLUMNS[self._check_column(column)][0]

    def column_names(self) -> list[str]:
        return [name for name, _ in COLUMNS]

    def row_count(self) -> int:
        return self._projection.duration()

    def value_at(self, row: int, column: int) -> Any:
        """Return the value displayed in a cell.

        Args:
            row: Zero-based projection offset.
            column: Zero-based column index.

        Returns:
            Year or Euro value for the cell.

        Raises:
            OutOfRange: If row or column is outside the table.
        """
        column = self._check_column(column)
        return COLUMNS[column][1](self._projection.projection_year(row))

    def rows(self) -> Iterator[tuple[Any, ...]]:
        """Yield each row of the table as a tuple of cell values."""
        for account_year in self._projection:
            yield tuple(value(account_year) for _, value in COLUMNS)

    def _check_column(self, column: int) -> int:
        if isinstance(column, bool) or not isinstance(column, int) or not 0 <= column < len(COLUMNS):
            raise OutOfRange(f"column must be between 0 and {len(COLUMNS) - 1}, was: {column!r}")
        return column
