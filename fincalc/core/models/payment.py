"""
Periodic payment formulas.

All functions take a *periodic* rate as a decimal (annual % / 100 / 12 for
monthly loans) and return a positive payment amount.

    payment = P * r * (1 + r)^n / ((1 + r)^n - 1)      r > 0
    payment = P / n                                    r == 0
"""

from typing import NamedTuple

import numpy_financial as npf

from fincalc.core.constants import RATE_SENSITIVITY_DELTA_PCT
from fincalc.utils.error_utils import error_handler, require_positive, InvalidInputError
from fincalc.utils.rate_utils import annual_pct_to_monthly_decimal, shift_rate_pct


class RateSensitivity(NamedTuple):
    """Monthly payments if the annual rate moved up or down."""

    base_payment: float
    higher_rate_pct: float
    higher_rate_payment: float
    lower_rate_pct: float
    lower_rate_payment: float


def _check_term(periods: int):
    if periods is None or periods <= 0:
        raise InvalidInputError(f"Term must be at least one period (got {periods})", field="term")


@error_handler
def calculate_periodic_payment(principal: float, periodic_rate: float, periods: int) -> float:
    """
    Return the fixed payment that repays ``principal`` in exactly ``periods``.

    Args:
        principal: Amount borrowed
        periodic_rate: Interest rate per period as decimal (0 allowed)
        periods: Number of payments, must be positive

    Returns:
        Payment per period

    Raises:
        InvalidInputError: If periods <= 0 or the rate is negative

    Examples:
        >>> calculate_periodic_payment(1200, 0.0, 12)
        100.0
    """
    _check_term(periods)
    require_positive(periodic_rate, "periodic_rate", allow_zero=True)
    if periodic_rate == 0:
        return principal / periods
    return float(npf.pmt(periodic_rate, periods, -principal))


@error_handler
def calculate_balloon_payment(principal: float, periodic_rate: float, periods: int, balloon: float) -> float:
    """
    Return the payment that amortises ``principal`` down to ``balloon`` after
    ``periods`` payments (the balloon itself is paid separately at the end).
    """
    _check_term(periods)
    require_positive(periodic_rate, "periodic_rate", allow_zero=True)
    if periodic_rate == 0:
        return (principal - balloon) / periods
    return float(npf.pmt(periodic_rate, periods, -principal, fv=balloon))


@error_handler
def calculate_monthly_payment(principal: float, interest_rate_annual_pct: float, duration_months: int) -> float:
    """Monthly payment for an annual percentage rate."""
    return calculate_periodic_payment(
        principal, annual_pct_to_monthly_decimal(interest_rate_annual_pct), duration_months
    )


@error_handler
def evaluate_rate_sensitivity(
    principal: float,
    interest_rate_annual_pct: float,
    duration_months: int,
    delta_pct: float = RATE_SENSITIVITY_DELTA_PCT,
) -> RateSensitivity:
    """
    Recompute the monthly payment with the annual rate ``delta_pct`` points
    higher and lower. The lower rate is floored at 0%.
    """
    higher = shift_rate_pct(interest_rate_annual_pct, delta_pct)
    lower = shift_rate_pct(interest_rate_annual_pct, -delta_pct)
    return RateSensitivity(
        base_payment=calculate_monthly_payment(principal, interest_rate_annual_pct, duration_months),
        higher_rate_pct=higher,
        higher_rate_payment=calculate_monthly_payment(principal, higher, duration_months),
        lower_rate_pct=lower,
        lower_rate_payment=calculate_monthly_payment(principal, lower, duration_months),
    )
