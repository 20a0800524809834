"""
API tests for the calculator endpoints.

Run: python -m pytest fincalc/tests/test_api.py -v
"""

import pytest
from fastapi.testclient import TestClient

from fincalc.api.main import app
from fincalc.api.routes.purchasing_power import get_inflation_series
from fincalc.core.engine.inflation_index import InflationSeries


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Structure
# ---------------------------------------------------------------------------


def test_app_metadata():
    """Test FastAPI app metadata is correctly configured."""
    assert app.title == "FinCalc API"
    assert app.version == "1.0.0"
    assert app.docs_url == "/api/docs"
    assert app.redoc_url == "/api/redoc"


def test_routes_registered():
    routes = [getattr(route, "path", None) for route in app.routes]

    assert "/health" in routes
    assert "/api/mortgage/calculate" in routes
    assert "/api/mortgage/yearly-breakdown" in routes
    assert "/api/car-finance/calculate" in routes
    assert "/api/pension/project" in routes
    assert "/api/purchasing-power/calculate" in routes
    assert "/api/purchasing-power/range" in routes


def test_error_responses_documented():
    """Calculator routes document the error body returned for refused input."""
    openapi = app.openapi()
    assert "ErrorResponse" in openapi["components"]["schemas"]

    responses = openapi["paths"]["/api/pension/project"]["post"]["responses"]
    assert responses["422"]["content"]["application/json"]["schema"]["$ref"] == "#/components/schemas/ErrorResponse"


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["service"] == "fincalc-api"


def test_root(client):
    data = client.get("/").json()
    assert data["calculators"] == ["mortgage", "car-finance", "pension", "purchasing-power"]


# ---------------------------------------------------------------------------
# Mortgage
# ---------------------------------------------------------------------------


class TestMortgageEndpoints:
    def test_defaults(self, client):
        response = client.post("/api/mortgage/calculate", json={})
        assert response.status_code == 200

        data = response.json()
        assert data["loan_amount"] == 225000
        assert data["monthly_payment"] == pytest.approx(1250.57, abs=0.10)
        assert data["new_term_months"] == 300
        assert data["new_term_years_months"] == [25, 0]
        assert data["higher_rate_pct"] == 5.5
        assert data["lower_rate_pct"] == 3.5
        assert data["schedule"] is None

    def test_overpayment_shortens_term(self, client):
        data = client.post("/api/mortgage/calculate", json={"monthly_overpayment": 200}).json()

        assert data["new_term_months"] < 300
        assert data["months_reduced"] == 300 - data["new_term_months"]
        years, months = data["new_term_years_months"]
        assert years * 12 + months == data["new_term_months"]
        assert data["interest_saved"] > 0

    def test_include_schedule(self, client):
        response = client.post(
            "/api/mortgage/calculate",
            params={"include_schedule": True},
            json={"start_date": "2025-01-15"},
        )
        assert response.status_code == 200

        schedule = response.json()["schedule"]
        assert len(schedule) == 300
        assert schedule[0]["period"] == 1
        assert schedule[0]["date"] == "2025-01-01"
        assert schedule[-1]["date"] == "2049-12-01"
        assert schedule[-1]["balance"] == 0.0

    def test_yearly_breakdown(self, client):
        response = client.post("/api/mortgage/yearly-breakdown", json={"term_years": 10})
        assert response.status_code == 200

        data = response.json()
        assert len(data["years"]) == 10
        assert sum(row["principal_paid"] for row in data["years"]) == pytest.approx(data["loan_amount"])

    def test_deposit_not_below_price_rejected(self, client):
        response = client.post("/api/mortgage/calculate", json={"home_price": 100000, "deposit": 100000})

        assert response.status_code == 422
        data = response.json()
        assert data["error"] == "Invalid input"
        assert data["type"] == "InvalidInputError"
        assert data["field"] == "deposit"

    def test_schema_validation(self, client):
        response = client.post("/api/mortgage/calculate", json={"term_years": 0})
        assert response.status_code == 422


# ---------------------------------------------------------------------------
# Car finance
# ---------------------------------------------------------------------------


class TestCarFinanceEndpoints:
    def test_defaults(self, client):
        response = client.post("/api/car-finance/calculate", json={})
        assert response.status_code == 200

        data = response.json()
        assert data["finance_type"] == "hp"
        assert data["loan_amount"] == 18000
        assert data["balloon_payment"] == 0

    def test_zero_rate_pcp(self, client):
        response = client.post(
            "/api/car-finance/calculate",
            json={"interest_rate_annual_pct": 0, "finance_type": "pcp", "balloon_payment": 6000},
        )
        data = response.json()
        assert data["monthly_payment"] == pytest.approx(250.0)
        assert data["total_cost"] == pytest.approx(20000.0)

    def test_balloon_over_limit_rejected(self, client):
        response = client.post(
            "/api/car-finance/calculate",
            json={"finance_type": "pcp", "balloon_payment": 15000},
        )
        assert response.status_code == 422
        assert response.json()["field"] == "balloon_payment"


# ---------------------------------------------------------------------------
# Pension
# ---------------------------------------------------------------------------


class TestPensionEndpoints:
    def test_defaults(self, client):
        response = client.post("/api/pension/project", json={"start_year": 2025})
        assert response.status_code == 200

        data = response.json()
        assert data["blended_return_pct"] == pytest.approx(5.65)
        assert len(data["yearly_breakdown"]) == 68 - 30 + 1

        first = data["yearly_breakdown"][0]
        assert first["calendar_year"] == 2025
        assert first["value"] == 50000
        assert set(first["asset_values"]) == {"stocks", "bonds", "cash"}

        last = data["yearly_breakdown"][-1]
        assert sum(last["asset_values"].values()) == pytest.approx(last["value"])
        assert data["final_value_real"] < data["final_value_nominal"]

    def test_allocation_must_total_100(self, client):
        response = client.post(
            "/api/pension/project",
            json={"allocations_pct": {"stocks": 70, "bonds": 20, "cash": 5}},
        )
        assert response.status_code == 422
        assert response.json()["field"] == "allocations"

    @pytest.mark.parametrize("name", ["year", "growth", "property"])
    def test_unknown_asset_class_rejected(self, client, name):
        response = client.post(
            "/api/pension/project",
            json={"allocations_pct": {name: 50, "stocks": 50}, "returns_pct": {name: 5, "stocks": 7}},
        )
        assert response.status_code == 422

    def test_retirement_age_rejected(self, client):
        response = client.post("/api/pension/project", json={"current_age": 65, "retirement_age": 60})
        assert response.status_code == 422
        assert response.json()["field"] == "retirement_age"


# ---------------------------------------------------------------------------
# Purchasing power
# ---------------------------------------------------------------------------


class TestPurchasingPowerEndpoints:
    def test_defaults(self, client):
        response = client.post("/api/purchasing-power/calculate", json={})
        assert response.status_code == 200

        data = response.json()
        assert data["start_year"] == 2000
        assert data["end_year"] == 2024
        assert data["adjusted_amount"] > data["original_amount"]
        assert len(data["yearly_breakdown"]) == 25

    def test_range(self, client):
        data = client.get("/api/purchasing-power/range").json()
        assert data["first_year"] == 1980
        assert data["last_year"] == 2024

    def test_unsupported_year_rejected(self, client):
        response = client.post("/api/purchasing-power/calculate", json={"start_year": 1970})
        assert response.status_code == 422
        assert response.json()["field"] == "start_year"

    def test_clamp_years(self, client):
        response = client.post(
            "/api/purchasing-power/calculate",
            json={"start_year": 1970, "end_year": 2050, "clamp_years": True},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["start_year"] == 1980
        assert data["end_year"] == 2024

    def test_injected_series(self, client):
        app.dependency_overrides[get_inflation_series] = lambda: InflationSeries(
            {2000: 10.0}, fallback_rate_pct=2.0, first_year=2000, last_year=2002
        )

        range_data = client.get("/api/purchasing-power/range").json()
        assert range_data["last_year"] == 2002

        data = client.post(
            "/api/purchasing-power/calculate",
            json={"amount": 1000, "start_year": 2000, "end_year": 2002},
        ).json()
        assert data["adjusted_amount"] == pytest.approx(1122.0)
        assert [row["inflation_rate"] for row in data["yearly_breakdown"]] == [10.0, 2.0, 2.0]
