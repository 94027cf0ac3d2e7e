from dataclasses import dataclass
from decimal import Decimal


@dataclass
class PaymentRecord:
    """One monthly payment of an amortization schedule."""
    total: Decimal  # Level payment for the month
    interest: Decimal
    principal: Decimal
    mrate: Decimal  # Monthly rate (annual / 12)
    pbefore: Decimal  # Unpaid principal before the payment
    pafter: Decimal  # Unpaid principal after the payment
    month: int = 0  # 1-based position in the overall schedule


@dataclass(frozen=True)
class YearSummary:
    year: int
    principal: Decimal
    interest: Decimal
    total: Decimal
    ending_balance: Decimal
    months: int = 12
