"""
Mortgage models for FinCalc.

Classes:
    AmortizationResult: Outcome of a month-by-month repayment simulation
    MortgageResult: Summary figures for the mortgage calculator
    MortgageCalculator: Fixed-rate repayment mortgage with optional overpayment

Functions:
    simulate_amortization: Month-by-month balance reduction with overpayment
    split_term: Months -> (years, months)
"""

from dataclasses import dataclass, asdict, field
from datetime import datetime
from typing import Dict, Any, Optional, Tuple, Union

import numpy as np
import pandas as pd

from fincalc.core.constants import (
    PERIOD,
    DATE,
    PAYMENT,
    INTEREST,
    PRINCIPAL,
    OVERPAYMENT,
    BALANCE,
    BALANCE_TOLERANCE,
    RATE_SENSITIVITY_DELTA_PCT,
)
from fincalc.core.models.payment import calculate_periodic_payment, evaluate_rate_sensitivity
from fincalc.utils.date_utils import monthly_dates
from fincalc.utils.error_utils import error_handler, require_positive, InvalidInputError
from fincalc.utils.rate_utils import (
    annual_pct_to_monthly_decimal,
    convert_duration_years_to_months,
    normalize_rate_input,
    MONTHS_PER_YEAR,
)

SCHEDULE_COLUMNS = [PERIOD, PAYMENT, INTEREST, PRINCIPAL, OVERPAYMENT, BALANCE]


@dataclass
class AmortizationResult:
    """
    Outcome of simulate_amortization.

    Attributes:
        total_interest: Interest actually charged over the simulated periods
        periods: Number of periods until payoff (or the cap)
        uncharged_overshoot: Part of the final payment beyond what was owed;
            it is neither principal nor interest
        schedule: One row per period, columns SCHEDULE_COLUMNS (+ date)
    """

    total_interest: float
    periods: int
    uncharged_overshoot: float
    schedule: pd.DataFrame = field(repr=False)

    @property
    def final_balance(self) -> float:
        if self.schedule.empty:
            return 0.0
        return float(self.schedule[BALANCE].iloc[-1])


@error_handler
def simulate_amortization(
    principal: float,
    periodic_rate: float,
    scheduled_payment: float,
    max_periods: int,
    overpayment: float = 0.0,
    start_date=None,
) -> AmortizationResult:
    """
    Reduce ``principal`` period by period until it is repaid or ``max_periods``
    have elapsed.

    Each period charges ``balance * periodic_rate`` interest; the rest of the
    scheduled payment plus the overpayment goes to principal. When that
    exceeds the remaining balance only the balance is paid: the excess is not
    charged and is not added to interest.

    Args:
        principal: Opening balance
        periodic_rate: Interest rate per period as decimal
        scheduled_payment: Regular payment per period
        max_periods: Hard cap on periods (normally the original term)
        overpayment: Extra principal paid every period
        start_date: Optional first payment date; adds a date column

    Returns:
        AmortizationResult
    """
    if max_periods is None or max_periods <= 0:
        raise InvalidInputError(f"Term must be at least one period (got {max_periods})", field="term")
    require_positive(principal, "principal", allow_zero=True)
    require_positive(overpayment, "overpayment", allow_zero=True)

    balance = float(principal)
    total_interest = 0.0
    uncharged_overshoot = 0.0
    period = 0
    rows = []

    while balance > 0 and period < max_periods:
        period += 1
        interest = balance * periodic_rate
        principal_paid = scheduled_payment - interest + overpayment
        applied_overpayment = overpayment

        if principal_paid >= balance - BALANCE_TOLERANCE:
            # Final payment: clear what is owed and nothing more
            uncharged_overshoot = max(0.0, principal_paid - balance)
            principal_paid = balance
            applied_overpayment = min(overpayment, max(0.0, interest + principal_paid - scheduled_payment))
            balance = 0.0
        else:
            balance -= principal_paid

        total_interest += interest
        rows.append([period, interest + principal_paid, interest, principal_paid, applied_overpayment, balance])

    schedule = pd.DataFrame(rows, columns=SCHEDULE_COLUMNS)
    if start_date is not None:
        schedule.insert(1, DATE, monthly_dates(start_date, len(schedule)))

    return AmortizationResult(
        total_interest=total_interest,
        periods=period,
        uncharged_overshoot=uncharged_overshoot,
        schedule=schedule,
    )


def split_term(months: int) -> Tuple[int, int]:
    """
    Split a number of months into whole years and remaining months.

    Examples:
        >>> split_term(283)
        (23, 7)
    """
    return divmod(int(months), MONTHS_PER_YEAR)


@dataclass
class MortgageResult:
    """Summary figures produced by MortgageCalculator.calculate()."""

    loan_amount: float
    monthly_payment: float
    total_payment: float
    total_interest: float
    total_interest_with_overpayment: float
    interest_saved: float
    new_term_months: int
    months_reduced: int
    higher_rate_pct: float
    higher_rate_payment: float
    lower_rate_pct: float
    lower_rate_payment: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class MortgageCalculator:
    """
    Fixed-rate repayment mortgage.

    Attributes:
        home_price: Purchase price
        deposit: Down payment, deducted from the price
        term_years: Mortgage term in years
        interest_rate_annual_pct: Annual interest rate as percentage
        monthly_overpayment: Extra principal paid every month
        start_date: Optional first payment date for dated schedules
    """

    @error_handler
    def __init__(
        self,
        home_price: float,
        deposit: float,
        term_years: Union[int, float],
        interest_rate_annual_pct: float,
        monthly_overpayment: float = 0.0,
        start_date: Optional[Union[str, datetime, pd.Timestamp]] = None,
    ):
        self.home_price = float(require_positive(home_price, "home_price"))
        self.deposit = float(require_positive(deposit, "deposit", allow_zero=True))
        if self.deposit >= self.home_price:
            raise InvalidInputError("Deposit must be smaller than the home price", field="deposit")

        self.term_years = require_positive(term_years, "term_years")
        self.duration_months = convert_duration_years_to_months(term_years)
        if self.duration_months <= 0:
            raise InvalidInputError("Term must be at least one month", field="term_years")

        self.interest_rate_annual_pct = normalize_rate_input(
            interest_rate_annual_pct, min_pct=0.0, field="interest_rate_annual_pct"
        )
        self.monthly_overpayment = float(require_positive(monthly_overpayment, "monthly_overpayment", allow_zero=True))
        self.start_date = start_date

    @property
    def loan_amount(self) -> float:
        return self.home_price - self.deposit

    @property
    def monthly_rate_decimal(self) -> float:
        return annual_pct_to_monthly_decimal(self.interest_rate_annual_pct)

    @error_handler
    def get_monthly_payment(self) -> float:
        """Calculate the fixed monthly payment amount."""
        return calculate_periodic_payment(self.loan_amount, self.monthly_rate_decimal, self.duration_months)

    @error_handler
    def get_total_interest(self) -> float:
        """Interest over the full term without overpayment (closed form)."""
        return self.get_monthly_payment() * self.duration_months - self.loan_amount

    @error_handler
    def simulate(self, overpayment: Optional[float] = None) -> AmortizationResult:
        """Run the amortization simulation, by default with this mortgage's overpayment."""
        if overpayment is None:
            overpayment = self.monthly_overpayment
        return simulate_amortization(
            principal=self.loan_amount,
            periodic_rate=self.monthly_rate_decimal,
            scheduled_payment=self.get_monthly_payment(),
            max_periods=self.duration_months,
            overpayment=overpayment,
            start_date=self.start_date,
        )

    @error_handler
    def get_projection(self) -> pd.DataFrame:
        """
        Month-by-month amortization schedule including overpayment.

        Returns:
            DataFrame with columns: period, [date], payment, interest, principal,
            overpayment, balance
        """
        return self.simulate().schedule

    @error_handler
    def get_yearly_breakdown(self) -> pd.DataFrame:
        """
        Aggregate the schedule by loan year.

        Every year of the original term has a row; years after an early
        payoff show zero payments and a zero balance.

        Returns:
            DataFrame with columns: year, principal_paid, interest_paid,
            cumulative_principal, cumulative_interest, balance
        """
        schedule = self.get_projection()
        years = np.arange(1, -(-self.duration_months // MONTHS_PER_YEAR) + 1)

        schedule = schedule.assign(year=(schedule[PERIOD] - 1) // MONTHS_PER_YEAR + 1)
        grouped = schedule.groupby("year").agg(
            principal_paid=(PRINCIPAL, "sum"),
            interest_paid=(INTEREST, "sum"),
            balance=(BALANCE, "last"),
        )
        df = grouped.reindex(years)
        df[["principal_paid", "interest_paid"]] = df[["principal_paid", "interest_paid"]].fillna(0.0)
        df["balance"] = df["balance"].fillna(0.0)
        df["cumulative_principal"] = df["principal_paid"].cumsum()
        df["cumulative_interest"] = df["interest_paid"].cumsum()

        df.index.name = "year"
        df = df.reset_index()
        return df[["year", "principal_paid", "interest_paid", "cumulative_principal", "cumulative_interest", "balance"]]

    @error_handler
    def calculate(self, rate_delta_pct: float = RATE_SENSITIVITY_DELTA_PCT) -> MortgageResult:
        """Compute the mortgage summary shown by the calculator."""
        monthly_payment = self.get_monthly_payment()
        total_interest = self.get_total_interest()

        total_interest_with_overpayment = total_interest
        new_term_months = self.duration_months
        if self.monthly_overpayment > 0:
            simulation = self.simulate()
            total_interest_with_overpayment = simulation.total_interest
            new_term_months = simulation.periods

        sensitivity = evaluate_rate_sensitivity(
            self.loan_amount, self.interest_rate_annual_pct, self.duration_months, rate_delta_pct
        )

        return MortgageResult(
            loan_amount=self.loan_amount,
            monthly_payment=monthly_payment,
            total_payment=monthly_payment * self.duration_months,
            total_interest=total_interest,
            total_interest_with_overpayment=total_interest_with_overpayment,
            interest_saved=total_interest - total_interest_with_overpayment,
            new_term_months=new_term_months,
            months_reduced=self.duration_months - new_term_months,
            higher_rate_pct=sensitivity.higher_rate_pct,
            higher_rate_payment=sensitivity.higher_rate_payment,
            lower_rate_pct=sensitivity.lower_rate_pct,
            lower_rate_payment=sensitivity.lower_rate_payment,
        )

    @error_handler
    def to_dict(self) -> Dict[str, Any]:
        """Serialize the mortgage inputs to a dictionary."""
        return {
            "home_price": self.home_price,
            "deposit": self.deposit,
            "term_years": self.term_years,
            "interest_rate_annual_pct": self.interest_rate_annual_pct,
            "monthly_overpayment": self.monthly_overpayment,
            "start_date": str(self.start_date) if self.start_date is not None else None,
        }

    @classmethod
    @error_handler
    def from_dict(cls, data: Dict[str, Any]) -> "MortgageCalculator":
        """Build a calculator from a dictionary of inputs."""
        return cls(
            home_price=data["home_price"],
            deposit=data.get("deposit", 0.0),
            term_years=data["term_years"],
            interest_rate_annual_pct=data["interest_rate_annual_pct"],
            monthly_overpayment=data.get("monthly_overpayment", 0.0),
            start_date=data.get("start_date"),
        )
