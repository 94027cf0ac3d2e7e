from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class RatePeriod:
    rate: Decimal  # Annual, e.g. Decimal("0.05") for 5%
    period: int | None = None  # Months; None runs to the end of the term


@dataclass(frozen=True)
class LoanPlan:
    """A validated plan: every period has a resolved duration summing to term."""
    principal: Decimal
    term: int  # Months
    periods: tuple[RatePeriod, ...]

    @property
    def rate_change_months(self) -> list[int]:
        """Months (1-based) on which a new rate period starts, after the first."""
        months = []
        elapsed = 0
        for p in self.periods[:-1]:
            elapsed += p.period
            months.append(elapsed + 1)
        return months
