"""Fixed-rate amortization.

Pure computation: Decimal in, PaymentRecord list out. No I/O.
"""

import copy
import logging
from decimal import Decimal, ROUND_HALF_UP

from amortization.config import settings
from amortization.errors import ScheduleConsistencyError
from amortization.models.schedule import PaymentRecord

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")
MONTHS_PER_YEAR = 12


def round2(amount: Decimal) -> Decimal:
    """Round to the nearest cent, halves away from zero."""
    return amount.quantize(TWO_PLACES, ROUND_HALF_UP)


def to_decimal(value, name: str) -> Decimal:
    """Convert an int, float or Decimal argument; anything else is a caller bug."""
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise TypeError(f"{name} must be a number, got {type(value).__name__}")
    if isinstance(value, Decimal):
        return value
    # str() keeps 0.06 as 0.06 instead of its binary expansion
    return Decimal(str(value))


def check_term(term, name: str = "term") -> int:
    if isinstance(term, bool) or not isinstance(term, int):
        raise TypeError(f"{name} must be an integer number of months, got {type(term).__name__}")
    if term < 1:
        raise ValueError(f"{name} must be at least one month, got {term}")
    return term


def monthly_payment(principal: Decimal, annual_rate: Decimal, term: int) -> Decimal:
    """Level monthly payment that amortizes principal over term months.

    P = r * principal / (1 - (1 + r)^-n), with r the monthly rate. A zero
    rate amortizes linearly: principal / n.
    """
    if annual_rate == 0:
        logger.debug("Zero rate, using straight-line payment over %s months", term)
        return round2(principal / term)

    r = annual_rate / MONTHS_PER_YEAR
    discount = 1 - (1 + r) ** -term
    return round2(r * principal / discount)


class FixedRateLoan:
    """A principal amortized at one constant rate over a term in months.

    Used by Mortgage once per rate period, always sized to the remaining
    term so the level payment reflects the full remaining amortization.
    """

    def __init__(self, principal, term, rate, tolerance: Decimal | None = None):
        principal = to_decimal(principal, "principal")
        if principal <= 0:
            raise ValueError(f"principal must be positive, got {principal}")
        self._principal = principal
        self._term = check_term(term)
        self._rate = to_decimal(rate, "rate")
        self._mrate = self._rate / MONTHS_PER_YEAR
        self._payment = monthly_payment(self._principal, self._rate, self._term)
        self._schedule = self._build_schedule()

        tol = settings.residual_tolerance if tolerance is None else tolerance
        residual = abs(self._schedule[-1].pafter)
        if residual / self._principal >= tol:
            raise ScheduleConsistencyError(
                f"{residual} left unpaid after {self._term} months on "
                f"{self._principal} at {self._rate}; exceeds tolerance {tol}"
            )

    def _build_schedule(self) -> list[PaymentRecord]:
        records: list[PaymentRecord] = []
        pleft = self._principal

        for month in range(1, self._term + 1):
            interest = round2(self._mrate * pleft)
            principal_paid = self._payment - interest
            records.append(PaymentRecord(
                total=self._payment,
                interest=interest,
                principal=principal_paid,
                mrate=self._mrate,
                pbefore=pleft,
                pafter=pleft - principal_paid,
                month=month,
            ))
            pleft -= principal_paid

        return records

    @property
    def principal(self) -> Decimal:
        return self._principal

    @property
    def term(self) -> int:
        return self._term

    @property
    def rate(self) -> Decimal:
        return self._rate

    @property
    def mrate(self) -> Decimal:
        return self._mrate

    def payment(self) -> Decimal:
        """Monthly payment amount."""
        return self._payment

    def schedule(self) -> list[PaymentRecord]:
        return copy.deepcopy(self._schedule)

    def records(self, months: int) -> list[PaymentRecord]:
        """Copies of the first `months` records."""
        if not 0 <= months <= self._term:
            raise IndexError(f"months must be in [0, {self._term}], got {months}")
        return copy.deepcopy(self._schedule[:months])

    def principal_left_after_month(self, i: int) -> Decimal:
        """Unpaid principal after month i (0 returns the original principal)."""
        if isinstance(i, bool) or not isinstance(i, int):
            raise TypeError(f"month must be an integer, got {type(i).__name__}")
        if not 0 <= i <= self._term:
            raise IndexError(f"month must be in [0, {self._term}], got {i}")
        if i == 0:
            return self._principal
        return self._schedule[i - 1].pafter

    def __repr__(self) -> str:
        return (
            f"FixedRateLoan(principal={self._principal}, term={self._term}, "
            f"rate={self._rate}, payment={self._payment})"
        )
