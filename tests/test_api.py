"""
Tests for the analytics API endpoints.
"""

import pytest
from fastapi.testclient import TestClient

from app.main import app

# Database setup is handled by conftest.py


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


class TestAnalyticsAPI:
    """Test the annual report endpoint."""

    def test_property_report(self, client, owner, leased_property):
        """Report for a single property in a past year."""
        response = client.get(
            f"/api/analytics/users/{owner.id}/reports/2024",
            params={"property_id": leased_property.id, "as_of": "2025-02-01"},
        )
        assert response.status_code == 200
        data = response.json()

        assert data["year"] == 2024
        assert data["total_income"] == 13200.0
        assert data["total_expenses"] == 500.0
        assert data["net_benefit"] == 12700.0
        assert data["yield_gross"] == 6.0
        assert data["yield_net"] == 6.35
        assert data["yield_net_net"] == pytest.approx(4.445, abs=0.006)
        assert data["property_value"] == 200000
        assert data["total_deductible"] == 500.0
        assert data["total_recoverable"] == 0.0
        assert len(data["cashflow"]) == 12
        assert data["cashflow"][2] == {"month": 3, "income": 1100.0, "expenses": 500.0}
        assert data["expense_distribution"][0]["category"] == "TAX_PROPERTY"
        assert data["expense_distribution"][0]["label"] == "Taxe Foncière"

    def test_evolution_fields(self, client, owner, leased_property):
        """2023 had expenses but no income."""
        response = client.get(
            f"/api/analytics/users/{owner.id}/reports/2024",
            params={"as_of": "2025-02-01"},
        )
        data = response.json()

        assert data["total_income_prev"] == 0.0
        assert data["total_expenses_prev"] == 400.0
        assert data["net_benefit_prev"] == -400.0
        assert data["total_income_evolution"] is None
        assert data["total_expenses_evolution"] == 25.0
        # 12 700 vs -400, divided by |-400|
        assert data["net_benefit_evolution"] == 3275.0

    def test_vacancy_loss(self, client, owner, leased_property):
        """Listed at 1 100/month and let at 1 100 incl. charges: no loss."""
        response = client.get(
            f"/api/analytics/users/{owner.id}/reports/2024",
            params={"as_of": "2025-02-01"},
        )
        assert response.json()["vacancy_loss"] == 0.0

    def test_foreign_property_forbidden(self, client, other_owner, leased_property):
        response = client.get(
            f"/api/analytics/users/{other_owner.id}/reports/2024",
            params={"property_id": leased_property.id},
        )
        assert response.status_code == 403

    def test_unknown_user_gets_zero_report(self, client):
        response = client.get("/api/analytics/users/nobody/reports/2024")
        assert response.status_code == 200
        data = response.json()
        assert data["total_income"] == 0
        assert data["vacancy_loss"] == 0
        assert data["net_benefit_evolution"] is None

    def test_invalid_year(self, client, owner):
        response = client.get(f"/api/analytics/users/{owner.id}/reports/1800")
        assert response.status_code == 422


class TestHealthCheck:
    """Test health check endpoint."""

    def test_health_check(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
