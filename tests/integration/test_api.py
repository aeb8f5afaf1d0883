"""Integration tests for API endpoints"""

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def weekly_request():
    """Weekly agreement with one rent increase"""
    return {
        "rent_amount": 1000,
        "rent_frequency": "weekly",
        "rent_start_date": "2025-07-01",
        "rent_end_date": "2025-07-22",
        "rent_changes": [{"rent_amount": 1200, "effective_date": "2025-07-15"}],
    }


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "rent-scheduler"}


def test_schedule_endpoint(client: TestClient, weekly_request):
    """Test POST /v1/schedule with a rent change"""
    response = client.post("/v1/schedule", json=weekly_request)

    assert response.status_code == 200
    data = response.json()
    assert data["frequency"] == "weekly"
    assert data["payment_method"] == "instant"
    assert data["currency"] == "PHP"
    assert data["payment_count"] == 4
    assert data["total_amount"] == 4400
    assert [p["due_date"] for p in data["payments"]] == ["2025-07-01", "2025-07-08", "2025-07-15", "2025-07-22"]
    assert [p["amount"] for p in data["payments"]] == [1000, 1000, 1200, 1200]


def test_schedule_endpoint_bank_transfer(client: TestClient, weekly_request):
    """Test payment dates shift back three days for bank transfers"""
    weekly_request["payment_method"] = "Bank_Transfer"

    response = client.post("/v1/schedule", json=weekly_request)

    assert response.status_code == 200
    data = response.json()
    assert data["payment_method"] == "bank_transfer"
    assert data["payments"][0]["payment_date"] == "2025-06-28"
    assert data["payments"][0]["due_date"] == "2025-07-01"
    assert all(p["method"] == "bank_transfer" for p in data["payments"])


def test_schedule_endpoint_invalid_amount(client: TestClient, weekly_request):
    """Test domain validation errors map to 400"""
    weekly_request["rent_amount"] = -100

    response = client.post("/v1/schedule", json=weekly_request)

    assert response.status_code == 400
    assert response.json()["detail"] == "Amount must be a positive number"


def test_schedule_endpoint_string_amount_rejected(client: TestClient, weekly_request):
    """Test the API does not coerce numeric strings"""
    weekly_request["rent_amount"] = "1000"

    response = client.post("/v1/schedule", json=weekly_request)

    assert response.status_code == 400
    assert response.json()["detail"] == "Amount must be a positive number"


def test_schedule_endpoint_invalid_frequency(client: TestClient, weekly_request):
    weekly_request["rent_frequency"] = "daily"

    response = client.post("/v1/schedule", json=weekly_request)

    assert response.status_code == 400
    assert "weekly, fortnightly, monthly" in response.json()["detail"]


def test_schedule_endpoint_reversed_dates(client: TestClient, weekly_request):
    weekly_request["rent_start_date"] = "2025-10-01"
    weekly_request["rent_end_date"] = "2025-07-01"

    response = client.post("/v1/schedule", json=weekly_request)

    assert response.status_code == 400
    assert response.json()["detail"] == "Start date (2025-10-01) cannot be after end date (2025-07-01)"


def test_schedule_endpoint_missing_field(client: TestClient, weekly_request):
    """Test request schema rejects absent required fields"""
    del weekly_request["rent_frequency"]

    response = client.post("/v1/schedule", json=weekly_request)

    assert response.status_code == 422


def test_request_id_header(client: TestClient, weekly_request):
    """Test X-Request-ID is generated, or echoed when supplied"""
    response = client.post("/v1/schedule", json=weekly_request)
    assert response.headers["X-Request-ID"]

    response = client.get("/health", headers={"X-Request-ID": "req-123"})
    assert response.headers["X-Request-ID"] == "req-123"


def test_metrics_endpoint(client: TestClient, weekly_request):
    """Test Prometheus metrics endpoint"""
    client.post("/v1/schedule", json=weekly_request)
    client.post("/v1/schedule", json={**weekly_request, "rent_amount": 0})

    response = client.get("/metrics")
    assert response.status_code == 200
    assert "rent_schedule_total" in response.text
    assert "rent_schedule_rejections_total" in response.text
    assert "http_request_duration_seconds" in response.text


def test_schedule_endpoint_end_of_calendar(client: TestClient, weekly_request):
    """Test a schedule ending at the largest supported date succeeds"""
    weekly_request.update(rent_start_date="9999-12-30", rent_end_date="9999-12-31", rent_changes=[])

    response = client.post("/v1/schedule", json=weekly_request)

    assert response.status_code == 200
    assert [p["due_date"] for p in response.json()["payments"]] == ["9999-12-30"]


def test_schedule_endpoint_lead_time_before_earliest_date(client: TestClient, weekly_request):
    weekly_request.update(rent_start_date="0001-01-01", payment_method="bank_transfer", rent_changes=[])
    weekly_request["rent_end_date"] = "0001-02-01"

    response = client.post("/v1/schedule", json=weekly_request)

    assert response.status_code == 400
    assert "payment lead time" in response.json()["detail"]


def test_schedule_endpoint_keeps_large_amounts_exact(client: TestClient, weekly_request):
    """Test integer amounts are not converted to floats in the response"""
    amount = 10**17 + 1
    weekly_request.update(rent_amount=amount, rent_changes=[])

    response = client.post("/v1/schedule", json=weekly_request)

    assert response.status_code == 200
    data = response.json()
    assert [p["amount"] for p in data["payments"]] == [amount] * 4
    assert data["total_amount"] == amount * 4
