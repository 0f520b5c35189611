"""One year of an account's life and the rule that derives the next one.

The compounding rule:
- Principal grows only by deposits (negative deposits are withdrawals)
- Interest accrues on principal plus profit as they stood at the start of the year
- Interest is added to profit
- Net totals deduct capital gains tax on the profit portion only

All monetary amounts are in cents (Euro type).
"""

from dataclasses import dataclass, field, replace

from finances.domain.errors import InvalidArgument
from finances.domain.models import ZERO, Euro, Percentage, Year


@dataclass(frozen=True)
class AccountYear:
    """Immutable snapshot of an account for a single year.

    The start balances are the full-term values carried in from the prior
    year. Rates are fixed for the lifetime of the account and are carried
    forward unchanged by new_year().
    """

    year: Year
    start_principal: Euro
    start_profit: Euro
    interest_rate: Percentage
    capital_gains_tax_rate: Percentage
    deposits: Euro = field(default=ZERO)

    def __post_init__(self) -> None:
        expected = (
            ("year", Year),
            ("start_principal", Euro),
            ("start_profit", Euro),
            ("interest_rate", Percentage),
            ("capital_gains_tax_rate", Percentage),
            ("deposits", Euro),
        )
        for name, kind in expected:
            value = getattr(self, name)
            if not isinstance(value, kind):
                raise InvalidArgument(f"{name} must be a {kind.__name__}, was: {value!r}")

    def end_principal(self) -> Euro:
        """Principal at year end: start principal plus deposits."""
        return self.start_principal + self.deposits

    def interest(self) -> Euro:
        """Interest earned on the combined start-of-year balance."""
        return self.interest_rate.apply(self.start_principal + self.start_profit)

    def end_profit(self) -> Euro:
        """Full-term profit at year end."""
        return self.start_profit + self.interest()

    def start_net_total(self) -> Euro:
        """Balance if withdrawn at the start of the year, after capital gains tax."""
        return self._net_total(self.start_principal, self.start_profit)

    def end_net_total(self) -> Euro:
        """Balance if withdrawn at the end of the year, after capital gains tax."""
        return self._net_total(self.end_principal(), self.end_profit())

    def capital_gains_tax(self) -> Euro:
        """Tax due on the profit if the account is emptied at year end."""
        return self.capital_gains_tax_rate.apply(self.end_profit())

    def _net_total(self, principal: Euro, profit: Euro) -> Euro:
        return principal + profit - self.capital_gains_tax_rate.apply(profit)

    def with_deposits(self, deposits: Euro) -> "AccountYear":
        """Return a copy of this year with a different deposit figure.

        Args:
            deposits: Net deposits for the year (negative for withdrawals).

        Returns:
            New AccountYear; this one is left unchanged.
        """
        return replace(self, deposits=deposits)

    def new_year(self) -> "AccountYear":
        """Derive the following year.

        End balances become the next year's start balances, deposits reset
        to zero and both rates carry forward.

        Returns:
            New AccountYear for year + 1.
        """
        return AccountYear(
            year=self.year.next(),
            start_principal=self.end_principal(),
            start_profit=self.end_profit(),
            interest_rate=self.interest_rate,
            capital_gains_tax_rate=self.capital_gains_tax_rate,
        )
