"""Domain models and logic for finances.

This package contains the functional core:
- Pure value types and calculations
- No I/O operations
- Easy to test
- Business logic separated from the CLI
"""

from finances.domain.account import AccountYear
from finances.domain.errors import FinancesError, InvalidArgument, OutOfRange
from finances.domain.models import MAX_YEAR, MIN_YEAR, ZERO, Euro, Percentage, Year
from finances.domain.projection import Projection
from finances.domain.table import ALL_ROWS, COLUMNS, ForecastTable, TableChange

__all__ = [
    "ALL_ROWS",
    "COLUMNS",
    "MAX_YEAR",
    "MIN_YEAR",
    "ZERO",
    "AccountYear",
    "Euro",
    "FinancesError",
    "ForecastTable",
    "InvalidArgument",
    "OutOfRange",
    "Percentage",
    "Projection",
    "TableChange",
    "Year",
]
