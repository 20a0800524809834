"""
Purchasing power API endpoints.

The inflation series is provided through a FastAPI dependency so that a
different table can be swapped in with ``app.dependency_overrides``.
"""

from fastapi import APIRouter, Depends

from fincalc.api.schemas import (
    PurchasingPowerRequest,
    PurchasingPowerResponse,
    PurchasingPowerYear,
    InflationRangeResponse,
)
from fincalc.core.engine.inflation_index import InflationSeries
from fincalc.core.engine.purchasing_power import PurchasingPowerCalculator


router = APIRouter()


def get_inflation_series() -> InflationSeries:
    """Inflation series used by the purchasing power endpoints."""
    return InflationSeries.default()


@router.get("/range", response_model=InflationRangeResponse)
def inflation_range(series: InflationSeries = Depends(get_inflation_series)):
    """Years the inflation series supports."""
    return InflationRangeResponse(
        first_year=series.first_year,
        last_year=series.last_year,
        fallback_rate_pct=series.fallback_rate_pct,
    )


@router.post("/calculate", response_model=PurchasingPowerResponse)
def calculate_purchasing_power(
    request: PurchasingPowerRequest,
    series: InflationSeries = Depends(get_inflation_series),
):
    """What ``amount`` in ``start_year`` money is worth in ``end_year`` money."""
    calculator = PurchasingPowerCalculator(series)

    start_year, end_year = request.start_year, request.end_year
    if request.clamp_years:
        start_year, end_year = calculator.clamp_year_range(start_year, end_year)

    result = calculator.calculate(request.amount, start_year, end_year)
    data = result.to_dict()
    data["yearly_breakdown"] = [PurchasingPowerYear(**row) for row in data["yearly_breakdown"]]
    return PurchasingPowerResponse(**data)
