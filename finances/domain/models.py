"""Value types for the projection domain.

These are small immutable wrappers that validate on construction:
- Year: Calendar year between MIN_YEAR and MAX_YEAR
- Euro: Amount in euro cents (minor units)
- Percentage: Whole-number rate, 10 meaning 10%

All arithmetic is integer arithmetic to avoid floating point errors.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from finances.domain.errors import InvalidArgument

MIN_YEAR = 1900
MAX_YEAR = 9999


def _require_int(value: object, name: str) -> int:
    # bool is an int subclass but never a meaningful amount
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{name} must be an integer, was: {value!r}")
    return value


@dataclass(frozen=True, order=True)
class Year:
    """Immutable calendar year."""

    value: int

    def __post_init__(self) -> None:
        _require_int(self.value, "year")
        if not MIN_YEAR <= self.value <= MAX_YEAR:
            raise InvalidArgument(f"year must be between {MIN_YEAR} and {MAX_YEAR}, was: {self.value}")

    def next(self) -> "Year":
        """Return the following year."""
        return Year(self.value + 1)

    def __add__(self, years: int) -> "Year":
        if isinstance(years, bool) or not isinstance(years, int):
            return NotImplemented
        return Year(self.value + years)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, order=True)
class Euro:
    """Immutable amount of money in euro cents."""

    cents: int

    def __post_init__(self) -> None:
        _require_int(self.cents, "amount")

    @classmethod
    def from_euros(cls, euros: int) -> "Euro":
        """Create an amount from whole euros."""
        return cls(_require_int(euros, "euros") * 100)

    @classmethod
    def parse(cls, text: str) -> "Euro":
        """Parse a user supplied amount such as "€1,234.56".

        Args:
            text: Amount in euros, optionally with a euro sign and thousands separators.

        Returns:
            Euro amount.

        Raises:
            InvalidArgument: If the text is not a number or has fractions of a cent.
        """
        cleaned = str(text).strip().replace("€", "").replace(",", "")
        try:
            euros = Decimal(cleaned)
        except InvalidOperation as e:
            raise InvalidArgument(f"Could not parse amount '{text}'") from e

        if not euros.is_finite():
            raise InvalidArgument(f"Could not parse amount '{text}'")

        try:
            cents = euros * 100
            whole = cents == cents.to_integral_value()
        except ArithmeticError as e:
            raise InvalidArgument(f"Amount '{text}' is out of range") from e

        if not whole:
            raise InvalidArgument(f"Amount '{text}' has fractions of a cent")
        return cls(int(cents))

    @property
    def euros(self) -> Decimal:
        return Decimal(self.cents) / 100

    def __add__(self, other: "Euro") -> "Euro":
        if not isinstance(other, Euro):
            return NotImplemented
        return Euro(self.cents + other.cents)

    def __sub__(self, other: "Euro") -> "Euro":
        if not isinstance(other, Euro):
            return NotImplemented
        return Euro(self.cents - other.cents)

    def __neg__(self) -> "Euro":
        return Euro(-self.cents)

    def __str__(self) -> str:
        sign = "-" if self.cents < 0 else ""
        return f"{sign}€{abs(self.cents) / 100:,.2f}"


ZERO = Euro(0)


@dataclass(frozen=True, order=True)
class Percentage:
    """Immutable whole-number percentage between 0 and 100."""

    value: int

    def __post_init__(self) -> None:
        _require_int(self.value, "percentage")
        if not 0 <= self.value <= 100:
            raise InvalidArgument(f"percentage must be between 0 and 100, was: {self.value}")

    def apply(self, amount: Euro) -> Euro:
        """Return this percentage of an amount, truncated toward zero to the cent.

        Args:
            amount: Amount to take the percentage of.

        Returns:
            New Euro amount.
        """
        if not isinstance(amount, Euro):
            raise InvalidArgument(f"amount must be a Euro, was: {amount!r}")
        scaled = abs(amount.cents) * self.value // 100
        return Euro(scaled if amount.cents >= 0 else -scaled)

    def __str__(self) -> str:
        return f"{self.value}%"
