"""Error types.

A RatePlanError describes a rate plan the caller can fix and is handed back
as a value by create_mortgage. A ScheduleConsistencyError means a computed
schedule broke its own bookkeeping; it is always raised.

Bad argument types and out-of-range indices use the built-in TypeError,
ValueError and IndexError.
"""


class AmortizationError(Exception):
    pass


class RatePlanError(AmortizationError, ValueError):
    """Rate periods that cannot be laid out over the loan term."""


class ScheduleConsistencyError(AmortizationError, AssertionError):
    """A finished schedule failed its residual-principal or term check."""
