"""Eagerly computed sequence of account years."""

import logging
from collections.abc import Iterator

from finances.domain.account import AccountYear
from finances.domain.errors import InvalidArgument, OutOfRange
from finances.domain.models import Year

logger = logging.getLogger(__name__)


class Projection:
    """Fixed-length, read-only chain of AccountYear entries.

    Entry 0 is the supplied first year and entry i + 1 is always
    entry[i].new_year(). The whole chain is built by the constructor;
    to change the horizon or starting point build a new Projection.
    """

    def __init__(self, duration: int, first_year: AccountYear) -> None:
        if isinstance(duration, bool) or not isinstance(duration, int):
            raise InvalidArgument(f"duration must be an integer, was: {duration!r}")
        if duration < 0:
            raise InvalidArgument(f"duration must not be negative, was: {duration}")
        if not isinstance(first_year, AccountYear):
            raise InvalidArgument(f"first_year must be an AccountYear, was: {first_year!r}")

        years = [first_year]
        for _ in range(duration):
            years.append(years[-1].new_year())
        self._years: tuple[AccountYear, ...] = tuple(years)

        logger.debug("Projected %d years from %s to %s", len(self._years), first_year.year, self.last_year())

    def duration(self) -> int:
        """Number of years in the projection, including the first."""
        return len(self._years)

    def first_year(self) -> AccountYear:
        return self._years[0]

    def last_year(self) -> Year:
        """Calendar year of the final entry."""
        return self._years[-1].year

    def projection_year(self, offset: int) -> AccountYear:
        """Return the account year at a zero-based offset.

        Args:
            offset: Offset from the first year.

        Returns:
            The AccountYear at that offset.

        Raises:
            OutOfRange: If offset is outside [0, duration()).
        """
        if isinstance(offset, bool) or not isinstance(offset, int) or not 0 <= offset < self.duration():
            raise OutOfRange(f"projection year must be between 0 and {self.duration() - 1}, was: {offset!r}")
        return self._years[offset]

    def __getitem__(self, offset: int) -> AccountYear:
        return self.projection_year(offset)

    def __len__(self) -> int:
        return self.duration()

    def __iter__(self) -> Iterator[AccountYear]:
        return iter(self._years)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Projection):
            return NotImplemented
        return self._years == other._years

    def __hash__(self) -> int:
        return hash(self._years)

    def __repr__(self) -> str:
        return f"Projection(duration={self.duration() - 1}, first_year={self._years[0]!r})"
