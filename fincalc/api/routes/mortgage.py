"""
Mortgage calculator API endpoints.

Provides the mortgage summary (payment, interest, overpayment savings and
rate sensitivity) and the amortization schedule aggregated by year.
"""

from fastapi import APIRouter

from fincalc.api.schemas import (
    MortgageRequest,
    MortgageResponse,
    AmortizationRow,
    YearlyBreakdownResponse,
    YearlyAmortizationRow,
)
from fincalc.core.constants import DATE
from fincalc.core.models.mortgage import MortgageCalculator, split_term


router = APIRouter()


def _build_calculator(request: MortgageRequest) -> MortgageCalculator:
    return MortgageCalculator(
        home_price=request.home_price,
        deposit=request.deposit,
        term_years=request.term_years,
        interest_rate_annual_pct=request.interest_rate_annual_pct,
        monthly_overpayment=request.monthly_overpayment,
        start_date=request.start_date,
    )


@router.post("/calculate", response_model=MortgageResponse)
def calculate_mortgage(request: MortgageRequest, include_schedule: bool = False):
    """Monthly payment, total interest, overpayment savings and rate sensitivity."""
    calculator = _build_calculator(request)
    result = calculator.calculate()

    response = MortgageResponse(
        **result.to_dict(),
        new_term_years_months=list(split_term(result.new_term_months)),
    )

    if include_schedule:
        schedule = calculator.get_projection()
        if DATE in schedule.columns:
            schedule[DATE] = schedule[DATE].dt.date
        response.schedule = [AmortizationRow(**row) for row in schedule.to_dict(orient="records")]

    return response


@router.post("/yearly-breakdown", response_model=YearlyBreakdownResponse)
def mortgage_yearly_breakdown(request: MortgageRequest):
    """Principal and interest paid per loan year, with the end-of-year balance."""
    calculator = _build_calculator(request)
    breakdown = calculator.get_yearly_breakdown()

    return YearlyBreakdownResponse(
        loan_amount=calculator.loan_amount,
        total_interest_without_overpayment=calculator.get_total_interest(),
        years=[YearlyAmortizationRow(**row) for row in breakdown.to_dict(orient="records")],
    )
