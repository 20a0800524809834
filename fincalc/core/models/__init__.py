"""
FinCalc Core Models Package.

Modules:
    payment: Periodic payment formulas and rate sensitivity
    mortgage: Mortgage calculator and amortization simulator
    car_finance: Hire purchase and PCP car finance
    pension: Multi-asset pension projection
"""

from fincalc.core.models.payment import (
    RateSensitivity,
    calculate_periodic_payment,
    calculate_balloon_payment,
    calculate_monthly_payment,
    evaluate_rate_sensitivity,
)

from fincalc.core.models.mortgage import (
    AmortizationResult,
    MortgageResult,
    MortgageCalculator,
    simulate_amortization,
    split_term,
)

from fincalc.core.models.car_finance import (
    CarFinanceResult,
    CarFinanceCalculator,
)

from fincalc.core.models.pension import (
    PensionProjectionResult,
    PensionProjection,
    validate_allocations,
    blended_return_pct,
)

__all__ = [
    # Payment formulas
    "RateSensitivity",
    "calculate_periodic_payment",
    "calculate_balloon_payment",
    "calculate_monthly_payment",
    "evaluate_rate_sensitivity",
    # Mortgage
    "AmortizationResult",
    "MortgageResult",
    "MortgageCalculator",
    "simulate_amortization",
    "split_term",
    # Car finance
    "CarFinanceResult",
    "CarFinanceCalculator",
    # Pension
    "PensionProjectionResult",
    "PensionProjection",
    "validate_allocations",
    "blended_return_pct",
]
