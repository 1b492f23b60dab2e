"""
Tests for the report endpoints
"""

import pytest
from fastapi.testclient import TestClient

from main import app
from tripstats.api.reports import get_trip_source
from conftest import FakeTripSource


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


def use_source(source: FakeTripSource) -> None:
    app.dependency_overrides[get_trip_source] = lambda: source


class TestAnalysisEndpoint:
    """GET /api/reports/analysis"""

    def test_returns_summary(self, client, ranking_source):
        use_source(ranking_source)

        response = client.get("/api/reports/analysis")

        assert response.status_code == 200
        data = response.json()
        assert data["noOfCashTrips"] == 4
        assert data["noOfNonCashTrips"] == 4
        assert data["billedTotal"] == 150
        assert data["mostTripsByDriver"]["name"] == "Bo"
        assert data["highestEarningDriver"]["totalAmountEarned"] == 100

    def test_unavailable_data(self, client):
        use_source(FakeTripSource([], trips_error=ConnectionError("down")))

        response = client.get("/api/reports/analysis")

        assert response.status_code == 503


class TestDriverReportEndpoint:
    """GET /api/reports/drivers"""

    def test_returns_report(self, client, ranking_source):
        use_source(ranking_source)

        response = client.get("/api/reports/drivers")

        assert response.status_code == 200
        data = response.json()
        assert len(data["drivers"]) == 2
        assert data["mostTripsByDriver"]["driverID"] == "D2"
        assert data["highestEarningDriver"]["driverID"] == "D1"

    def test_failure_is_bad_gateway(self, client):
        use_source(FakeTripSource([], trips_error=ConnectionError("down")))

        response = client.get("/api/reports/drivers")

        assert response.status_code == 502


class TestHealth:
    """Health endpoints"""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
