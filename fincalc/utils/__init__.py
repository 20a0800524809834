"""
Utility modules for FinCalc.

This package contains reusable helpers for rate conversions, payment-date
handling and error handling shared by every calculator.
"""

from fincalc.utils.date_utils import (
    parse_date,
    monthly_dates,
)

from fincalc.utils.rate_utils import (
    annual_pct_to_decimal,
    annual_pct_to_monthly_decimal,
    convert_duration_years_to_months,
    shift_rate_pct,
    validate_rate_range,
    normalize_rate_input,
    MONTHS_PER_YEAR,
    PERCENTAGE_TO_DECIMAL,
)

from fincalc.utils.error_utils import (
    FinancialCalculatorError,
    InvalidInputError,
    error_handler,
    require_positive,
    logger,
)

__all__ = [
    # Date utilities
    "parse_date",
    "monthly_dates",
    # Rate utilities
    "annual_pct_to_decimal",
    "annual_pct_to_monthly_decimal",
    "convert_duration_years_to_months",
    "shift_rate_pct",
    "validate_rate_range",
    "normalize_rate_input",
    "MONTHS_PER_YEAR",
    "PERCENTAGE_TO_DECIMAL",
    # Error handling
    "FinancialCalculatorError",
    "InvalidInputError",
    "error_handler",
    "require_positive",
    "logger",
]
