"""
Pension projection API endpoints.
"""

from fastapi import APIRouter

from fincalc.api.schemas import PensionRequest, PensionResponse, PensionYear
from fincalc.core.models.pension import PensionProjection


router = APIRouter()


@router.post("/project", response_model=PensionResponse)
def project_pension(request: PensionRequest):
    """
    Project the pension pot year by year until retirement.

    Rejected with 422 when the allocations do not total 100% or the
    retirement age is not after the current age.
    """
    projection = PensionProjection(
        current_age=request.current_age,
        retirement_age=request.retirement_age,
        current_value=request.current_value,
        monthly_contribution=request.monthly_contribution,
        employer_contribution=request.employer_contribution,
        allocations_pct=request.allocations_pct,
        returns_pct=request.returns_pct,
        inflation_rate_annual_pct=request.inflation_rate_annual_pct,
        start_year=request.start_year,
    )
    result = projection.calculate()

    asset_classes = list(projection.allocations_pct)
    yearly = []
    for row in result.yearly_breakdown.to_dict(orient="records"):
        asset_values = {asset_class: row.pop(asset_class) for asset_class in asset_classes}
        yearly.append(PensionYear(**row, asset_values=asset_values))

    return PensionResponse(
        final_value_nominal=result.final_value_nominal,
        final_value_real=result.final_value_real,
        total_contributions=result.total_contributions,
        total_employer_contributions=result.total_employer_contributions,
        total_growth=result.total_growth,
        blended_return_pct=result.blended_return_pct,
        yearly_breakdown=yearly,
    )
