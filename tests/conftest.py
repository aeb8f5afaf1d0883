"""Pytest fixtures for testing"""

import pytest
from typing import Any, Dict
from fastapi.testclient import TestClient
from rent_scheduler.api.main import create_app


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def valid_rent() -> Dict[str, Any]:
    """Monthly rent agreement over one quarter"""
    return {
        "rent_amount": 1000,
        "rent_frequency": "monthly",
        "rent_start_date": "2025-07-01",
        "rent_end_date": "2025-10-01",
    }
