"""
Pydantic schemas for API request/response validation.

These schemas provide:
- Input validation for calculator requests
- Response serialization
- OpenAPI documentation generation
"""

from datetime import date as date_type
from typing import Optional, Dict, List

from pydantic import BaseModel, Field, ConfigDict

from fincalc.core.constants import EFinanceType, EAssetClass


# ======================
# Base Schemas
# ======================


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        validate_assignment=True,
        use_enum_values=True,
    )


# ======================
# Mortgage Schemas
# ======================


class MortgageRequest(BaseSchema):
    """Inputs for the mortgage calculator."""

    home_price: float = Field(250000, gt=0)
    deposit: float = Field(25000, ge=0)
    term_years: int = Field(25, gt=0, le=50)
    interest_rate_annual_pct: float = Field(4.5, ge=0, le=100)
    monthly_overpayment: float = Field(0, ge=0)
    start_date: Optional[date_type] = Field(None, description="First payment date; dates the schedule")


class AmortizationRow(BaseSchema):
    """One month of the amortization schedule."""

    period: int
    date: Optional[date_type] = None
    payment: float
    interest: float
    principal: float
    overpayment: float
    balance: float


class MortgageResponse(BaseSchema):
    """Mortgage calculator results."""

    loan_amount: float
    monthly_payment: float
    total_payment: float
    total_interest: float
    total_interest_with_overpayment: float
    interest_saved: float
    new_term_months: int
    months_reduced: int
    new_term_years_months: List[int] = Field(..., description="[years, months] of the new term")
    higher_rate_pct: float
    higher_rate_payment: float
    lower_rate_pct: float
    lower_rate_payment: float
    schedule: Optional[List[AmortizationRow]] = None


class YearlyAmortizationRow(BaseSchema):
    """Payments aggregated over one loan year."""

    year: int
    principal_paid: float
    interest_paid: float
    cumulative_principal: float
    cumulative_interest: float
    balance: float


class YearlyBreakdownResponse(BaseSchema):
    """Mortgage amortization aggregated by year."""

    loan_amount: float
    total_interest_without_overpayment: float
    years: List[YearlyAmortizationRow]


# ======================
# Car Finance Schemas
# ======================


class CarFinanceRequest(BaseSchema):
    """Inputs for the car finance calculator."""

    car_price: float = Field(20000, gt=0)
    deposit: float = Field(2000, ge=0)
    term_months: int = Field(48, gt=0, le=120)
    interest_rate_annual_pct: float = Field(6.9, ge=0, le=100)
    finance_type: EFinanceType = EFinanceType.HIRE_PURCHASE
    balloon_payment: float = Field(0, ge=0, description="PCP only; ignored for hire purchase")


class CarFinanceResponse(BaseSchema):
    """Car finance calculator results."""

    finance_type: EFinanceType
    loan_amount: float
    monthly_payment: float
    total_monthly_payments: float
    balloon_payment: float
    total_interest: float
    total_cost: float


# ======================
# Pension Schemas
# ======================


def _default_allocations() -> Dict[EAssetClass, float]:
    return {EAssetClass.STOCKS: 70.0, EAssetClass.BONDS: 20.0, EAssetClass.CASH: 10.0}


def _default_returns() -> Dict[EAssetClass, float]:
    return {EAssetClass.STOCKS: 7.0, EAssetClass.BONDS: 3.0, EAssetClass.CASH: 1.5}


class PensionRequest(BaseSchema):
    """Inputs for the pension projection."""

    current_age: int = Field(30, ge=0, le=120)
    retirement_age: int = Field(68, gt=0, le=120)
    current_value: float = Field(50000, ge=0)
    monthly_contribution: float = Field(500, ge=0)
    employer_contribution: float = Field(300, ge=0)
    allocations_pct: Dict[EAssetClass, float] = Field(
        default_factory=_default_allocations, description="Asset class -> % of pot; must total 100"
    )
    returns_pct: Dict[EAssetClass, float] = Field(
        default_factory=_default_returns, description="Asset class -> expected annual return %"
    )
    inflation_rate_annual_pct: float = Field(2.0, ge=-50, le=100)
    start_year: Optional[int] = Field(None, description="Calendar year of year 0; defaults to this year")


class PensionYear(BaseSchema):
    """One year of the pension projection."""

    year: int
    age: int
    calendar_year: int
    value: float
    real_value: float
    contribution: float
    employer_contribution: float
    growth: float
    asset_values: Dict[str, float]


class PensionResponse(BaseSchema):
    """Pension projection results."""

    final_value_nominal: float
    final_value_real: float
    total_contributions: float
    total_employer_contributions: float
    total_growth: float
    blended_return_pct: float
    yearly_breakdown: List[PensionYear]


# ======================
# Purchasing Power Schemas
# ======================


class PurchasingPowerRequest(BaseSchema):
    """Inputs for the purchasing power calculator."""

    amount: float = Field(1000, gt=0)
    start_year: int = 2000
    end_year: int = 2024
    clamp_years: bool = Field(False, description="Clamp the years into the supported range instead of rejecting")


class PurchasingPowerYear(BaseSchema):
    """Value of the amount in one calendar year."""

    year: int
    amount: float
    inflation_rate: float


class PurchasingPowerResponse(BaseSchema):
    """Purchasing power results."""

    original_amount: float
    adjusted_amount: float
    start_year: int
    end_year: int
    percentage_change: float
    inflation_factor: float
    average_inflation_pct: float
    yearly_breakdown: List[PurchasingPowerYear]


class InflationRangeResponse(BaseSchema):
    """Years the inflation series supports."""

    first_year: int
    last_year: int
    fallback_rate_pct: float


# ======================
# Error Response Schema
# ======================


class ErrorResponse(BaseSchema):
    """Standard error response schema."""

    error: str = Field(..., description="Error message")
    detail: Optional[str] = Field(None, description="Detailed error information")
    type: Optional[str] = Field(None, description="Error type/class")
    field: Optional[str] = Field(None, description="Input field that was rejected")
