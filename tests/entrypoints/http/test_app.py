"""
Tests for FastAPI application setup.

- build_app() creates a fresh, configured FastAPI instance
- Routers are mounted with the expected prefixes
- OpenAPI schema is generated
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.testclient import TestClient

from auto_loan.entrypoints.http.app import build_app


def test_build_app_returns_fastapi_instance() -> None:
    assert isinstance(build_app(), FastAPI)


def test_build_app_creates_new_instance_each_call() -> None:
    assert build_app() is not build_app()


def test_app_metadata() -> None:
    app = build_app()

    assert app.title == "Auto Loan API"
    assert app.version == "0.1.0"
    assert "amortization schedule" in app.description


def test_routes_are_registered_with_prefixes() -> None:
    paths = {route.path for route in build_app().routes}  # type: ignore[attr-defined]

    assert "/health" in paths
    assert "/v1/loans/summary" in paths
    assert "/v1/loans/payment" in paths
    assert "/v1/vehicles/makes" in paths
    assert "/v1/vehicles/models" in paths


def test_openapi_schema_lists_loan_routes() -> None:
    client = TestClient(build_app())

    response = client.get("/openapi.json")

    assert response.status_code == 200
    schema = response.json()
    assert schema["info"]["title"] == "Auto Loan API"
    assert "/v1/loans/summary" in schema["paths"]


def test_health_through_full_app() -> None:
    client = TestClient(build_app())

    assert client.get("/health").json() == {"status": "ok"}


def test_payment_through_full_app() -> None:
    client = TestClient(build_app())

    response = client.post(
        "/v1/loans/payment",
        json={"principal": "10000", "annual_interest_rate_percent": "0", "term_months": 10},
    )

    assert response.status_code == 200
    assert response.json()["monthly_payment"] == "1000.00"
