"""
Tests for hire purchase and PCP car finance.
"""

import numpy_financial as npf
import pytest

from fincalc.core.constants import EFinanceType
from fincalc.core.models.car_finance import CarFinanceCalculator
from fincalc.utils.error_utils import InvalidInputError


def test_hire_purchase_zero_rate():
    result = CarFinanceCalculator(20000, 2000, 48, 0.0, finance_type="hp").calculate()

    assert result.finance_type == "hp"
    assert result.loan_amount == 18000
    assert result.monthly_payment == pytest.approx(375.0)
    assert result.balloon_payment == 0.0
    assert result.total_interest == pytest.approx(0.0)
    assert result.total_cost == pytest.approx(20000.0)


def test_pcp_zero_rate():
    result = CarFinanceCalculator(20000, 2000, 48, 0.0, finance_type=EFinanceType.PCP, balloon_payment=6000).calculate()

    assert result.finance_type == "pcp"
    assert result.monthly_payment == pytest.approx(250.0)
    assert result.total_monthly_payments == pytest.approx(12000.0)
    assert result.total_interest == pytest.approx(0.0)
    assert result.total_cost == pytest.approx(20000.0)


def test_hire_purchase_ignores_balloon():
    calculator = CarFinanceCalculator(20000, 2000, 48, 6.9, finance_type="hp", balloon_payment=6000)
    assert calculator.balloon_payment == 0.0


def test_pcp_balloon_is_remaining_balance():
    """After the monthly payments the outstanding balance equals the balloon."""
    calculator = CarFinanceCalculator(20000, 2000, 48, 6.9, finance_type="pcp", balloon_payment=6000)
    payment = calculator.get_monthly_payment()
    rate = 0.069 / 12

    remaining = npf.fv(rate, 48, payment, -18000)
    assert remaining == pytest.approx(6000, abs=0.01)


def test_pcp_cheaper_monthly_than_hire_purchase():
    hp = CarFinanceCalculator(20000, 2000, 48, 6.9, finance_type="hp").calculate()
    pcp = CarFinanceCalculator(20000, 2000, 48, 6.9, finance_type="pcp", balloon_payment=6000).calculate()

    assert pcp.monthly_payment < hp.monthly_payment
    assert hp.total_interest > 0
    assert pcp.total_interest > 0
    assert pcp.total_cost == pytest.approx(2000 + pcp.total_monthly_payments + 6000)


def test_interest_is_total_paid_minus_amount_financed():
    result = CarFinanceCalculator(20000, 2000, 48, 6.9).calculate()
    assert result.total_interest == pytest.approx(result.monthly_payment * 48 - 18000)
    assert result.total_cost == pytest.approx(2000 + result.monthly_payment * 48)


@pytest.mark.parametrize(
    "kwargs,field",
    [
        (dict(balloon_payment=12001), "balloon_payment"),
        (dict(balloon_payment=-1), "balloon_payment"),
        (dict(finance_type="lease"), "finance_type"),
        (dict(deposit=20000), "deposit"),
        (dict(term_months=0), "term_months"),
        (dict(interest_rate_annual_pct=-2), "interest_rate_annual_pct"),
    ],
)
def test_invalid_inputs_refused(kwargs, field):
    params = dict(car_price=20000, deposit=2000, term_months=48, interest_rate_annual_pct=6.9, finance_type="pcp")
    params.update(kwargs)

    with pytest.raises(InvalidInputError) as exc_info:
        CarFinanceCalculator(**params)
    assert exc_info.value.field == field


def test_balloon_not_below_amount_financed():
    """A balloon as large as the amount financed leaves nothing to pay monthly."""
    with pytest.raises(InvalidInputError):
        CarFinanceCalculator(10000, 5000, 36, 5.0, finance_type="pcp", balloon_payment=5000)


def test_to_dict():
    data = CarFinanceCalculator(20000, 2000, 48, 6.9).calculate().to_dict()
    assert set(data) == {
        "finance_type",
        "loan_amount",
        "monthly_payment",
        "total_monthly_payments",
        "balloon_payment",
        "total_interest",
        "total_cost",
    }
