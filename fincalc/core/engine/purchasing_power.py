"""
Purchasing power calculator for FinCalc.

Answers "what would this amount from year X be worth in year Y" by
compounding it through the annual inflation rate of every year in between.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, Optional, Tuple

import pandas as pd

from fincalc.core.engine.inflation_index import InflationSeries
from fincalc.utils.error_utils import error_handler, require_positive, InvalidInputError


@dataclass
class PurchasingPowerResult:
    """
    Outcome of an inflation adjustment.

    ``yearly_breakdown`` has one row per year from start to end inclusive:
    the amount as of that year and the rate that grows it into the next.
    """

    original_amount: float
    adjusted_amount: float
    start_year: int
    end_year: int
    percentage_change: float
    inflation_factor: float
    average_inflation_pct: float
    yearly_breakdown: pd.DataFrame = field(repr=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "original_amount": self.original_amount,
            "adjusted_amount": self.adjusted_amount,
            "start_year": self.start_year,
            "end_year": self.end_year,
            "percentage_change": self.percentage_change,
            "inflation_factor": self.inflation_factor,
            "average_inflation_pct": self.average_inflation_pct,
            "yearly_breakdown": self.yearly_breakdown.to_dict(orient="records"),
        }


class PurchasingPowerCalculator:
    """
    Inflation-adjusts money across a range of calendar years.

    Attributes:
        series: InflationSeries supplying the annual rates and supported range
    """

    def __init__(self, series: Optional[InflationSeries] = None):
        self.series = series if series is not None else InflationSeries.default()

    def clamp_year_range(self, start_year: int, end_year: int) -> Tuple[int, int]:
        """
        Pull a user-entered window into the supported range.

        The start is clamped to [first_year, end_year] and the end to
        [start, last_year], so the result is always a valid window.
        """
        first, last = self.series.year_range
        start = max(first, min(start_year, end_year, last))
        end = min(last, max(end_year, start))
        return start, end

    def _validate_years(self, start_year: int, end_year: int):
        first, last = self.series.year_range
        for name, year in (("start_year", start_year), ("end_year", end_year)):
            if not self.series.supports(year):
                raise InvalidInputError(
                    f"{name} {year} is outside the supported range {first}-{last}", field=name
                )
        if end_year < start_year:
            raise InvalidInputError(
                f"End year ({end_year}) cannot be before start year ({start_year})", field="end_year"
            )

    @error_handler
    def get_projection(self, amount: float, start_year: int, end_year: int) -> pd.DataFrame:
        """
        Year-by-year value of ``amount``.

        Returns:
            DataFrame with columns: year, amount, inflation_rate
        """
        require_positive(amount, "amount")
        self._validate_years(start_year, end_year)

        rows = []
        current_amount = float(amount)
        for year in range(start_year, end_year + 1):
            rate = self.series.rate_for(year)
            rows.append({"year": year, "amount": current_amount, "inflation_rate": rate})
            if year < end_year:
                current_amount *= 1 + rate / 100.0

        return pd.DataFrame(rows, columns=["year", "amount", "inflation_rate"])

    @error_handler
    def calculate(self, amount: float, start_year: int, end_year: int) -> PurchasingPowerResult:
        """
        Inflation-adjust ``amount`` from ``start_year`` money to ``end_year`` money.

        Raises:
            InvalidInputError: If amount <= 0, either year is unsupported, or
                end_year < start_year
        """
        df = self.get_projection(amount, start_year, end_year)
        adjusted_amount = float(df["amount"].iloc[-1])
        amount = float(amount)

        year_span = end_year - start_year
        if year_span > 0:
            average_inflation = (adjusted_amount / amount) ** (1.0 / year_span) - 1
        else:
            average_inflation = 0.0

        return PurchasingPowerResult(
            original_amount=amount,
            adjusted_amount=adjusted_amount,
            start_year=start_year,
            end_year=end_year,
            percentage_change=(adjusted_amount - amount) / amount * 100.0,
            inflation_factor=adjusted_amount / amount,
            average_inflation_pct=average_inflation * 100.0,
            yearly_breakdown=df,
        )
