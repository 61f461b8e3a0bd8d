import importlib
import logging
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

import amortization.api.app as app_module
from amortization.api.app import app
from amortization.config import settings


@pytest.fixture
def client():
    return TestClient(app)


class TestHealth:
    def test_ok(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}


class TestLogging:
    def test_configured_at_startup_not_import(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        fresh = importlib.reload(app_module)
        assert calls == []

        with TestClient(fresh.app):
            pass
        assert calls == [{"level": settings.log_level}]


class TestCreateAmortization:
    def test_documented_example(self, client):
        resp = client.post(
            "/api/v1/amortization",
            json={"principal": "280350", "annual_rate": "3.5", "periods": 60},
        )
        assert resp.status_code == 200
        data = resp.json()
        assert abs(Decimal(data["periodic_payment"]) - Decimal("5100.06")) < Decimal("0.05")
        assert data["frequency"] == "monthly"
        assert len(data["schedule"]) == 60
        assert Decimal(data["schedule"][-1]["balance"]) == 0
        assert len(data["yearly_summary"]) == 5

    def test_schedule_row_fields(self, client):
        resp = client.post(
            "/api/v1/amortization",
            json={"principal": 10000, "annual_rate": 5, "periods": 12, "start_date": "2024-01-01"},
        )
        data = resp.json()
        first = data["schedule"][0]
        assert first["period"] == 1
        assert first["due_date"] == "2024-02-01"
        assert Decimal(first["beginning_balance"]) == Decimal("10000.00")
        assert Decimal(first["interest"]) == Decimal("41.67")
        assert data["end_date"] == "2025-01-01"

    def test_without_schedule(self, client):
        resp = client.post(
            "/api/v1/amortization",
            json={"principal": 10000, "annual_rate": 5, "periods": 12, "include_schedule": False},
        )
        data = resp.json()
        assert data["schedule"] == []
        assert data["yearly_summary"] == []
        assert Decimal(data["periodic_payment"]) == Decimal("856.07")

    def test_frequency(self, client):
        resp = client.post(
            "/api/v1/amortization",
            json={"principal": 10000, "annual_rate": 8, "periods": 8, "frequency": "quarterly"},
        )
        data = resp.json()
        assert data["frequency"] == "quarterly"
        assert Decimal(data["periodic_rate"]) == Decimal("0.02")

    @pytest.mark.parametrize(
        "payload, parameter",
        [
            ({"principal": 0, "annual_rate": 3.5, "periods": 60}, "principal"),
            ({"principal": -100, "annual_rate": 3.5, "periods": 60}, "principal"),
            ({"principal": 1000, "annual_rate": 3.5, "periods": 0}, "periods"),
            ({"principal": 1000, "annual_rate": -1, "periods": 60}, "annual_rate"),
            ({"principal": 1000, "annual_rate": 3.5, "periods": 60, "frequency": "daily"}, "frequency"),
        ],
    )
    def test_invalid_parameter_is_400(self, client, payload, parameter):
        resp = client.post("/api/v1/amortization", json=payload)
        assert resp.status_code == 400
        assert resp.json()["detail"].startswith(f"{parameter} must be")

    def test_malformed_body_is_422(self, client):
        resp = client.post("/api/v1/amortization", json={"principal": "lots", "annual_rate": 3, "periods": 12})
        assert resp.status_code == 422
