"""Canonical loans used across engine tests.

Fixed: $200K, 30yr, 6%.
ARM: $300K, 30yr, 4% for 5 years then 6% for the rest of the term.
"""

import pytest
from decimal import Decimal

from amortization.engine.fixed_rate import FixedRateLoan
from amortization.engine.mortgage import create_mortgage, Mortgage
from amortization.models.plan import RatePeriod


@pytest.fixture
def fixed_loan() -> FixedRateLoan:
    return FixedRateLoan(Decimal("200000"), 360, Decimal("0.06"))


@pytest.fixture
def fixed_mortgage() -> Mortgage:
    return create_mortgage(Decimal("200000"), 360, [RatePeriod(rate=Decimal("0.06"))])


@pytest.fixture
def arm_periods() -> list[RatePeriod]:
    return [
        RatePeriod(rate=Decimal("0.04"), period=60),
        RatePeriod(rate=Decimal("0.06"), period=None),
    ]


@pytest.fixture
def arm_mortgage(arm_periods) -> Mortgage:
    return create_mortgage(Decimal("300000"), 360, arm_periods)
