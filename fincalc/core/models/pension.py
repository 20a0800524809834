"""
Pension projection model for FinCalc.

Projects a pension pot year by year from the current age to retirement with
own and employer contributions, growing at a return blended across asset
classes by allocation, and reports the inflation-adjusted ("real") value.
"""

import math
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Any, Optional, Union

import numpy as np
import pandas as pd

from fincalc.core.constants import EAssetClass, VALUE, REAL_VALUE, ALLOCATION_TOTAL_PCT
from fincalc.utils.error_utils import error_handler, require_positive, InvalidInputError
from fincalc.utils.rate_utils import annual_pct_to_decimal, normalize_rate_input, MONTHS_PER_YEAR

CONTRIBUTION = "contribution"
EMPLOYER_CONTRIBUTION = "employer_contribution"
GROWTH = "growth"

# Projection columns an asset class may not be named after
PROJECTION_COLUMNS = frozenset(
    ["year", "age", "calendar_year", VALUE, REAL_VALUE, CONTRIBUTION, EMPLOYER_CONTRIBUTION, GROWTH]
)


def _asset_key(asset_class: Union[str, EAssetClass]) -> str:
    return asset_class.value if isinstance(asset_class, EAssetClass) else str(asset_class)


@error_handler
def validate_allocations(allocations_pct: Dict[str, float]) -> float:
    """
    Check that allocation percentages are non-negative and total exactly 100.

    Returns:
        The allocation total

    Raises:
        InvalidInputError: If the allocations are empty or negative, use a
            projection column name as an asset class, or do not total 100
    """
    if not allocations_pct:
        raise InvalidInputError("At least one asset allocation is required", field="allocations")
    for asset_class, pct in allocations_pct.items():
        if _asset_key(asset_class) in PROJECTION_COLUMNS:
            raise InvalidInputError(
                f"'{_asset_key(asset_class)}' is not a valid asset class name", field="allocations"
            )
        if pct < 0:
            raise InvalidInputError(f"Allocation to {asset_class} cannot be negative", field="allocations")

    total = sum(allocations_pct.values())
    if not math.isclose(total, ALLOCATION_TOTAL_PCT, rel_tol=0.0, abs_tol=1e-9):
        raise InvalidInputError(
            f"Asset allocation must total 100% (currently {total:g}%)",
            field="allocations",
            details={"total_pct": total},
        )
    return total


@error_handler
def blended_return_pct(allocations_pct: Dict[str, float], returns_pct: Dict[str, float]) -> float:
    """
    Weighted average annual return across asset classes.

    Examples:
        >>> round(blended_return_pct({"stocks": 70, "bonds": 20, "cash": 10},
        ...                          {"stocks": 7.0, "bonds": 3.0, "cash": 1.5}), 2)
        5.65
    """
    missing = set(allocations_pct) - set(returns_pct)
    if missing:
        raise InvalidInputError(
            f"No expected return given for: {', '.join(sorted(missing))}", field="returns"
        )
    return sum(pct / 100.0 * returns_pct[asset_class] for asset_class, pct in allocations_pct.items())


@dataclass
class PensionProjectionResult:
    """Totals and year-by-year breakdown of a pension projection."""

    final_value_nominal: float
    final_value_real: float
    total_contributions: float
    total_employer_contributions: float
    total_growth: float
    blended_return_pct: float
    yearly_breakdown: pd.DataFrame = field(repr=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "final_value_nominal": self.final_value_nominal,
            "final_value_real": self.final_value_real,
            "total_contributions": self.total_contributions,
            "total_employer_contributions": self.total_employer_contributions,
            "total_growth": self.total_growth,
            "blended_return_pct": self.blended_return_pct,
            "yearly_breakdown": self.yearly_breakdown.to_dict(orient="records"),
        }


class PensionProjection:
    """
    Pension pot projected annually until retirement.

    Attributes:
        current_age: Age at the start of the projection (year 0)
        retirement_age: Age at the end of the projection
        current_value: Pot value today
        monthly_contribution: Own contribution per month
        employer_contribution: Employer contribution per month
        allocations_pct: Asset class -> share of the pot in percent
        returns_pct: Asset class -> expected annual return in percent
        inflation_rate_annual_pct: Inflation used to compute real values
        start_year: Calendar year of year 0 (defaults to the current year)
    """

    @error_handler
    def __init__(
        self,
        current_age: int,
        retirement_age: int,
        current_value: float,
        monthly_contribution: float,
        employer_contribution: float,
        allocations_pct: Dict[Union[str, EAssetClass], float],
        returns_pct: Dict[Union[str, EAssetClass], float],
        inflation_rate_annual_pct: float,
        start_year: Optional[int] = None,
    ):
        self.current_age = int(require_positive(current_age, "current_age", allow_zero=True))
        self.retirement_age = int(require_positive(retirement_age, "retirement_age"))
        if self.retirement_age <= self.current_age:
            raise InvalidInputError("Retirement age must be greater than current age", field="retirement_age")

        self.current_value = float(require_positive(current_value, "current_value", allow_zero=True))
        self.monthly_contribution = float(
            require_positive(monthly_contribution, "monthly_contribution", allow_zero=True)
        )
        self.employer_contribution = float(
            require_positive(employer_contribution, "employer_contribution", allow_zero=True)
        )

        self.allocations_pct = {_asset_key(k): float(v) for k, v in allocations_pct.items()}
        self.returns_pct = {
            _asset_key(k): normalize_rate_input(v, field=f"{_asset_key(k)} return")
            for k, v in returns_pct.items()
        }
        self.inflation_rate_annual_pct = normalize_rate_input(inflation_rate_annual_pct, field="inflation_rate")
        self.start_year = start_year if start_year is not None else date.today().year

        validate_allocations(self.allocations_pct)
        self.blended_return_pct = blended_return_pct(self.allocations_pct, self.returns_pct)

    @property
    def years_to_retirement(self) -> int:
        return self.retirement_age - self.current_age

    @error_handler
    def get_projection(self) -> pd.DataFrame:
        """
        Year-by-year projection. Year 0 is the starting state.

        Returns:
            DataFrame with columns: year, age, calendar_year, value, real_value,
            contribution, employer_contribution, growth, and one column per
            asset class
        """
        growth_rate = annual_pct_to_decimal(self.blended_return_pct)
        inflation = annual_pct_to_decimal(self.inflation_rate_annual_pct)
        annual_contribution = self.monthly_contribution * MONTHS_PER_YEAR
        annual_employer_contribution = self.employer_contribution * MONTHS_PER_YEAR

        value = self.current_value
        rows = []
        for year in range(self.years_to_retirement + 1):
            growth = 0.0
            contribution = 0.0
            employer_contribution = 0.0
            if year > 0:
                growth = value * growth_rate
                contribution = annual_contribution
                employer_contribution = annual_employer_contribution
                value += growth + contribution + employer_contribution

            rows.append(
                {
                    "year": year,
                    "age": self.current_age + year,
                    "calendar_year": self.start_year + year,
                    VALUE: value,
                    REAL_VALUE: value / (1 + inflation) ** year,
                    CONTRIBUTION: contribution,
                    EMPLOYER_CONTRIBUTION: employer_contribution,
                    GROWTH: growth,
                }
            )

        df = pd.DataFrame(rows)
        for asset_class, pct in self.allocations_pct.items():
            df[asset_class] = df[VALUE] * (pct / 100.0)
        return df

    @error_handler
    def calculate(self) -> PensionProjectionResult:
        """Run the projection and total it up."""
        df = self.get_projection()
        final = df.iloc[-1]
        return PensionProjectionResult(
            final_value_nominal=float(final[VALUE]),
            final_value_real=float(final[REAL_VALUE]),
            total_contributions=self.current_value + float(np.sum(df[CONTRIBUTION])),
            total_employer_contributions=float(np.sum(df[EMPLOYER_CONTRIBUTION])),
            total_growth=float(np.sum(df[GROWTH])),
            blended_return_pct=self.blended_return_pct,
            yearly_breakdown=df,
        )
