"""
Car finance models for FinCalc.

Two agreement types are supported:

- Hire purchase (HP): the financed amount is repaid in full over the term.
- Personal contract purchase (PCP): monthly payments amortise the financed
  amount down to a balloon (optional final payment) due after the last
  monthly payment.
"""

from dataclasses import dataclass, asdict
from typing import Dict, Any, Union

from fincalc.core.constants import EFinanceType, MAX_BALLOON_PCT_OF_PRICE
from fincalc.core.models.payment import calculate_periodic_payment, calculate_balloon_payment
from fincalc.utils.error_utils import error_handler, require_positive, InvalidInputError
from fincalc.utils.rate_utils import annual_pct_to_monthly_decimal, normalize_rate_input


@dataclass
class CarFinanceResult:
    """Summary figures for a car finance agreement."""

    finance_type: str
    loan_amount: float
    monthly_payment: float
    total_monthly_payments: float
    balloon_payment: float
    total_interest: float
    total_cost: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class CarFinanceCalculator:
    """
    Car finance agreement (HP or PCP).

    Attributes:
        car_price: Price of the car
        deposit: Up-front payment, deducted from the price
        term_months: Number of monthly payments
        interest_rate_annual_pct: Annual interest rate as percentage
        finance_type: EFinanceType.HIRE_PURCHASE or EFinanceType.PCP
        balloon_payment: Final payment for PCP agreements (ignored for HP)
    """

    @error_handler
    def __init__(
        self,
        car_price: float,
        deposit: float,
        term_months: int,
        interest_rate_annual_pct: float,
        finance_type: Union[str, EFinanceType] = EFinanceType.HIRE_PURCHASE,
        balloon_payment: float = 0.0,
    ):
        self.car_price = float(require_positive(car_price, "car_price"))
        self.deposit = float(require_positive(deposit, "deposit", allow_zero=True))
        if self.deposit >= self.car_price:
            raise InvalidInputError("Deposit must be smaller than the car price", field="deposit")

        self.term_months = int(require_positive(term_months, "term_months"))
        self.interest_rate_annual_pct = normalize_rate_input(
            interest_rate_annual_pct, min_pct=0.0, field="interest_rate_annual_pct"
        )

        try:
            self.finance_type = EFinanceType(finance_type)
        except ValueError:
            raise InvalidInputError(f"Unknown finance type '{finance_type}'", field="finance_type")

        if self.finance_type == EFinanceType.HIRE_PURCHASE:
            self.balloon_payment = 0.0
        else:
            self.balloon_payment = float(require_positive(balloon_payment, "balloon_payment", allow_zero=True))
            max_balloon = self.car_price * MAX_BALLOON_PCT_OF_PRICE / 100.0
            if self.balloon_payment > max_balloon:
                raise InvalidInputError(
                    f"Balloon payment cannot exceed {MAX_BALLOON_PCT_OF_PRICE:.0f}% of the car price",
                    field="balloon_payment",
                )
            if self.balloon_payment >= self.loan_amount:
                raise InvalidInputError("Balloon payment must be smaller than the amount financed",
                                        field="balloon_payment")

    @property
    def loan_amount(self) -> float:
        return self.car_price - self.deposit

    @error_handler
    def get_monthly_payment(self) -> float:
        """Calculate the fixed monthly payment amount."""
        monthly_rate_decimal = annual_pct_to_monthly_decimal(self.interest_rate_annual_pct)
        if self.finance_type == EFinanceType.PCP:
            return calculate_balloon_payment(
                self.loan_amount, monthly_rate_decimal, self.term_months, self.balloon_payment
            )
        return calculate_periodic_payment(self.loan_amount, monthly_rate_decimal, self.term_months)

    @error_handler
    def calculate(self) -> CarFinanceResult:
        """Compute monthly payment, interest and total cost of the agreement."""
        monthly_payment = self.get_monthly_payment()
        total_monthly_payments = monthly_payment * self.term_months
        total_interest = total_monthly_payments - (self.loan_amount - self.balloon_payment)

        return CarFinanceResult(
            finance_type=self.finance_type.value,
            loan_amount=self.loan_amount,
            monthly_payment=monthly_payment,
            total_monthly_payments=total_monthly_payments,
            balloon_payment=self.balloon_payment,
            total_interest=total_interest,
            total_cost=self.deposit + total_monthly_payments + self.balloon_payment,
        )
