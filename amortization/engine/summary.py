"""Aggregates over a finished payment schedule.

Pure functions over PaymentRecord lists. No I/O.
"""

from decimal import Decimal

from amortization.config import settings
from amortization.models.schedule import PaymentRecord, YearSummary


def total_paid(records: list[PaymentRecord]) -> Decimal:
    return sum((r.total for r in records), Decimal("0"))


def total_interest(records: list[PaymentRecord]) -> Decimal:
    return sum((r.interest for r in records), Decimal("0"))


def principal_conserved(
    records: list[PaymentRecord],
    principal: Decimal,
    tolerance: Decimal | None = None,
) -> bool:
    """True if the principal portions repay `principal` within tolerance."""
    tol = settings.residual_tolerance if tolerance is None else tolerance
    repaid = sum((r.principal for r in records), Decimal("0"))
    return abs(principal - repaid) < tol * principal


def yearly_summary(records: list[PaymentRecord]) -> list[YearSummary]:
    """Aggregate a schedule by 12-month year.

    A schedule whose length is not a multiple of 12 ends with a partial year.
    """
    yearly: list[YearSummary] = []
    year_principal = Decimal("0")
    year_interest = Decimal("0")
    year_total = Decimal("0")
    months = 0

    for n, r in enumerate(records, start=1):
        year_principal += r.principal
        year_interest += r.interest
        year_total += r.total
        months += 1

        if n % 12 == 0 or n == len(records):
            yearly.append(YearSummary(
                year=(n - 1) // 12 + 1,
                principal=year_principal,
                interest=year_interest,
                total=year_total,
                ending_balance=r.pafter,
                months=months,
            ))
            year_principal = Decimal("0")
            year_interest = Decimal("0")
            year_total = Decimal("0")
            months = 0

    return yearly
