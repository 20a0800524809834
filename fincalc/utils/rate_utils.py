"""
Rate conversion utilities for the calculators.

Conventions:
- All user inputs are annual rates as percentages (e.g., 4.5 = 4.5%)
- All calculations use decimal rates (e.g., 0.045 = 4.5%)
- Monthly (periodic) rates are nominal: annual_decimal / 12
- Variable naming: *_rate_annual_pct, *_rate_monthly_decimal, etc.
"""

from typing import Union

from fincalc.utils.error_utils import error_handler, InvalidInputError

MONTHS_PER_YEAR = 12
PERCENTAGE_TO_DECIMAL = 100.0


@error_handler
def annual_pct_to_decimal(rate_pct: Union[float, str]) -> float:
    """
    Convert annual percentage rate to decimal format.

    Examples:
        >>> annual_pct_to_decimal(4.5)
        0.045
    """
    return float(rate_pct) / PERCENTAGE_TO_DECIMAL


@error_handler
def annual_pct_to_monthly_decimal(rate_pct: Union[float, str]) -> float:
    """
    Convert annual percentage rate directly to the monthly decimal rate
    used by the amortization formulas.

    Examples:
        >>> round(annual_pct_to_monthly_decimal(6.0), 6)
        0.005
    """
    return annual_pct_to_decimal(rate_pct) / MONTHS_PER_YEAR


@error_handler
def convert_duration_years_to_months(years: Union[float, int]) -> int:
    """
    Convert a term in years to a number of monthly periods.

    Examples:
        >>> convert_duration_years_to_months(25)
        300
        >>> convert_duration_years_to_months(2.5)
        30
    """
    return round(float(years) * MONTHS_PER_YEAR)


@error_handler
def shift_rate_pct(rate_pct: float, delta_pct: float, floor_pct: float = 0.0) -> float:
    """
    Move an annual percentage rate by ``delta_pct`` percentage points,
    never going below ``floor_pct``.

    Examples:
        >>> shift_rate_pct(4.5, 1.0)
        5.5
        >>> shift_rate_pct(0.5, -1.0)
        0.0
    """
    return max(floor_pct, float(rate_pct) + float(delta_pct))


@error_handler
def validate_rate_range(rate_pct: float, min_pct: float = -50.0, max_pct: float = 100.0) -> bool:
    """
    Validate that a percentage rate is within reasonable bounds.

    Examples:
        >>> validate_rate_range(4.5)
        True
        >>> validate_rate_range(150.0)
        False
    """
    return min_pct <= rate_pct <= max_pct


@error_handler
def normalize_rate_input(
    rate_input: Union[str, float, int],
    min_pct: float = -50.0,
    max_pct: float = 100.0,
    field: str = "rate",
) -> float:
    """
    Normalize rate input from various formats to a standard float percentage.

    Handles string inputs, removes percentage signs, and validates ranges.

    Raises:
        InvalidInputError: If rate cannot be converted or is out of range

    Examples:
        >>> normalize_rate_input("5.5%")
        5.5
        >>> normalize_rate_input(7.25)
        7.25
    """
    if isinstance(rate_input, str):
        cleaned = rate_input.strip().rstrip("%")
        try:
            rate_float = float(cleaned)
        except ValueError:
            raise InvalidInputError(f"Cannot convert {field} input '{rate_input}' to number", field=field)
    else:
        rate_float = float(rate_input)

    if not validate_rate_range(rate_float, min_pct, max_pct):
        raise InvalidInputError(
            f"{field} {rate_float}% is outside valid range ({min_pct}% to {max_pct}%)",
            field=field,
        )

    return rate_float
