"""
Car finance API endpoints.
"""

from fastapi import APIRouter

from fincalc.api.schemas import CarFinanceRequest, CarFinanceResponse
from fincalc.core.models.car_finance import CarFinanceCalculator


router = APIRouter()


@router.post("/calculate", response_model=CarFinanceResponse)
def calculate_car_finance(request: CarFinanceRequest):
    """Monthly payment and total cost of a hire purchase or PCP agreement."""
    calculator = CarFinanceCalculator(
        car_price=request.car_price,
        deposit=request.deposit,
        term_months=request.term_months,
        interest_rate_annual_pct=request.interest_rate_annual_pct,
        finance_type=request.finance_type,
        balloon_payment=request.balloon_payment,
    )
    return CarFinanceResponse(**calculator.calculate().to_dict())
