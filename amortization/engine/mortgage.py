"""Multi-period (adjustable-rate) mortgages.

A mortgage is a sequence of rate periods laid end to end over the loan term.
Each period is amortized as a fixed-rate loan over whatever term remains, and
only that period's months are kept, so principal flows from one period into
the next.
"""

import copy
import logging
from collections.abc import Mapping, Sequence
from decimal import Decimal

from amortization.config import settings
from amortization.engine.fixed_rate import FixedRateLoan, check_term, to_decimal
from amortization.errors import RatePlanError, ScheduleConsistencyError
from amortization.models.plan import LoanPlan, RatePeriod
from amortization.models.schedule import PaymentRecord

logger = logging.getLogger(__name__)


def _coerce_period(raw, index: int) -> RatePeriod:
    if isinstance(raw, RatePeriod):
        rate, period = raw.rate, raw.period
    elif isinstance(raw, Mapping):
        if "rate" not in raw:
            raise TypeError(f"rate period {index} has no rate")
        rate, period = raw["rate"], raw.get("period")
    else:
        raise TypeError(f"rate period {index} must be a RatePeriod or mapping, got {type(raw).__name__}")

    rate = to_decimal(rate, f"rate period {index} rate")
    if period is not None and (isinstance(period, bool) or not isinstance(period, int)):
        raise TypeError(f"rate period {index} length must be an integer or None, got {type(period).__name__}")
    return RatePeriod(rate=rate, period=period)


def normalize_plan(principal, term, periods) -> LoanPlan:
    """Validate a rate plan and resolve an open-ended last period.

    Wrong argument types raise TypeError/ValueError. A plan whose periods do
    not fit the term raises RatePlanError.
    """
    principal = to_decimal(principal, "principal")
    if principal <= 0:
        raise ValueError(f"principal must be positive, got {principal}")
    term = check_term(term)
    if isinstance(periods, (str, bytes)) or not isinstance(periods, Sequence):
        raise TypeError(f"periods must be a sequence, got {type(periods).__name__}")
    if not periods:
        raise ValueError("periods must contain at least one rate period")

    raw = [_coerce_period(p, i) for i, p in enumerate(periods, start=1)]

    resolved: list[RatePeriod] = []
    term_so_far = 0
    for i, p in enumerate(raw, start=1):
        if p.period is None:
            if i != len(raw):
                raise RatePlanError("only the last rate period can have unspecified length")
            remaining = term - term_so_far
            if remaining < 1:
                raise RatePlanError("rate periods leave no months for the last rate period")
            resolved.append(RatePeriod(rate=p.rate, period=remaining))
            term_so_far += remaining
        else:
            if p.period < 1:
                raise RatePlanError(f"rate period {i} must last at least one month")
            term_so_far += p.period
            if term_so_far > term:
                raise RatePlanError("rate periods exceed term")
            resolved.append(p)

    if term_so_far != term:
        raise RatePlanError("rate periods do not add up to loan term")

    return LoanPlan(principal=principal, term=term, periods=tuple(resolved))


def create_mortgage(principal, term, periods) -> "Mortgage | RatePlanError":
    """Build a Mortgage, or return the RatePlanError describing a bad plan.

    periods is an ordered sequence of RatePeriod (or {"rate", "period"}
    mappings). Argument type errors are raised, not returned.
    """
    try:
        plan = normalize_plan(principal, term, periods)
    except RatePlanError as e:
        logger.warning("Rejected rate plan for %s over %s months: %s", principal, term, e)
        return e
    return Mortgage(plan)


class Mortgage:
    """Amortization schedule for a validated LoanPlan. Immutable once built."""

    def __init__(self, plan: LoanPlan, tolerance: Decimal | None = None):
        if not isinstance(plan, LoanPlan):
            raise TypeError(f"plan must be a LoanPlan, got {type(plan).__name__}")
        self._plan = plan
        self._tolerance = settings.residual_tolerance if tolerance is None else tolerance
        self._partials: list[FixedRateLoan] = []
        self._schedule: list[PaymentRecord] = []
        self._init_schedule()
        self._total_interest = sum((r.interest for r in self._schedule), Decimal("0"))

    def _init_schedule(self) -> None:
        principal_left = self._plan.principal
        term_left = self._plan.term
        schedule: list[PaymentRecord] = []
        partials: list[FixedRateLoan] = []

        for p in self._plan.periods:
            loan = FixedRateLoan(principal_left, term_left, p.rate, tolerance=self._tolerance)
            logger.debug(
                "Rate period %s at %s: %s over %s months remaining, payment %s",
                len(partials) + 1, p.rate, principal_left, term_left, loan.payment(),
            )
            principal_left = loan.principal_left_after_month(p.period)
            term_left -= p.period
            partials.append(loan)
            schedule.extend(loan.records(p.period))

        if term_left != 0:
            raise ScheduleConsistencyError(f"rate periods left {term_left} months unscheduled")
        if abs(principal_left) >= self._tolerance * self._plan.principal:
            raise ScheduleConsistencyError(
                f"{principal_left} of {self._plan.principal} left unpaid at end of term"
            )

        for month, record in enumerate(schedule, start=1):
            record.month = month

        self._schedule = schedule
        self._partials = partials

    def principal(self) -> Decimal:
        return self._plan.principal

    def term(self) -> int:
        return self._plan.term

    def total_interest(self) -> Decimal:
        return self._total_interest

    def schedule(self) -> list[PaymentRecord]:
        """Independent copy of the full payment schedule."""
        return copy.deepcopy(self._schedule)

    def rate_periods(self) -> tuple[RatePeriod, ...]:
        """Rate periods with every length resolved."""
        return self._plan.periods

    def payments(self) -> list[Decimal]:
        """Level payment in effect during each rate period, in order."""
        return [loan.payment() for loan in self._partials]

    def principal_left_after_month(self, i: int) -> Decimal:
        if isinstance(i, bool) or not isinstance(i, int):
            raise TypeError(f"month must be an integer, got {type(i).__name__}")
        if not 0 <= i <= self._plan.term:
            raise IndexError(f"month must be in [0, {self._plan.term}], got {i}")
        if i == 0:
            return self._plan.principal
        return self._schedule[i - 1].pafter

    def partials(self) -> list[FixedRateLoan]:
        """Copies of the per-period fixed-rate loans, for inspection."""
        return copy.deepcopy(self._partials)

    def __repr__(self) -> str:
        return (
            f"Mortgage(principal={self._plan.principal}, term={self._plan.term}, "
            f"periods={len(self._plan.periods)})"
        )
