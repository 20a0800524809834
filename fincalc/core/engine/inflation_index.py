"""
Inflation series for FinCalc.

Holds an annual inflation table (calendar year -> percent) used to compound
or deflate money across years. The table is injected rather than read from
a global so that it can be replaced or extended without touching the
calculations; ``InflationSeries.default()`` returns the bundled UK RPI
series.

Classes:
    InflationSeries: Year -> annual rate lookup with a fallback rate
"""

from typing import Dict, Optional, Tuple

import pandas as pd

from fincalc.core.constants import UK_RPI_INFLATION_PCT, DEFAULT_FALLBACK_INFLATION_PCT
from fincalc.utils.error_utils import error_handler, InvalidInputError


class InflationSeries:
    """
    Annual inflation rates by calendar year.

    Attributes:
        rates: Dictionary mapping year to annual inflation percentage
        fallback_rate_pct: Rate used for any supported year missing from ``rates``
        first_year: Earliest supported year (defaults to the earliest table year)
        last_year: Latest supported year (defaults to the latest table year)
    """

    def __init__(
        self,
        rates: Dict[int, float],
        fallback_rate_pct: float = DEFAULT_FALLBACK_INFLATION_PCT,
        first_year: Optional[int] = None,
        last_year: Optional[int] = None,
    ):
        if not rates and (first_year is None or last_year is None):
            raise InvalidInputError("An inflation series needs rates or an explicit year range", field="rates")

        self.rates = {int(year): float(rate) for year, rate in rates.items()}
        self.fallback_rate_pct = float(fallback_rate_pct)
        self.first_year = int(first_year) if first_year is not None else min(self.rates)
        self.last_year = int(last_year) if last_year is not None else max(self.rates)

        if self.last_year < self.first_year:
            raise InvalidInputError(
                f"Series ends ({self.last_year}) before it starts ({self.first_year})", field="last_year"
            )

    @classmethod
    def default(cls, last_year: Optional[int] = None) -> "InflationSeries":
        """
        The bundled UK RPI series, 1980 onwards.

        Args:
            last_year: Extend the supported range past the table; later
                years use the fallback rate
        """
        return cls(UK_RPI_INFLATION_PCT, last_year=last_year)

    @classmethod
    @error_handler
    def from_dataframe(
        cls,
        df: pd.DataFrame,
        year_column: str = "year",
        rate_column: str = "rate",
        **kwargs,
    ) -> "InflationSeries":
        """
        Build a series from a DataFrame with one row per year.

        Rows with a missing rate are dropped and fall back to the default rate.
        """
        for column in (year_column, rate_column):
            if column not in df.columns:
                raise InvalidInputError(f"Inflation data has no '{column}' column", field=column)
        clean = df[[year_column, rate_column]].dropna()
        rates = dict(zip(clean[year_column].astype(int), clean[rate_column].astype(float)))
        return cls(rates, **kwargs)

    @classmethod
    @error_handler
    def from_csv(cls, path: str, **kwargs) -> "InflationSeries":
        """Load a series from a CSV file with ``year`` and ``rate`` columns."""
        return cls.from_dataframe(pd.read_csv(path), **kwargs)

    @property
    def year_range(self) -> Tuple[int, int]:
        return self.first_year, self.last_year

    def supports(self, year: int) -> bool:
        return self.first_year <= year <= self.last_year

    def rate_for(self, year: int) -> float:
        """Annual inflation percentage for ``year``, or the fallback rate."""
        return self.rates.get(int(year), self.fallback_rate_pct)

    def to_dataframe(self) -> pd.DataFrame:
        """Every supported year with the rate that applies to it."""
        years = list(range(self.first_year, self.last_year + 1))
        return pd.DataFrame({"year": years, "rate": [self.rate_for(y) for y in years]})

    def __repr__(self):
        return (
            f"InflationSeries({self.first_year}-{self.last_year}, "
            f"{len(self.rates)} rates, fallback={self.fallback_rate_pct}%)"
        )
