# ABOUTME: Pytest fixtures and configuration
# ABOUTME: Provides the API test client and sample datasets

import pytest
from fastapi.testclient import TestClient

from fieldtypes.main import app
from fieldtypes.config import Settings, get_settings


@pytest.fixture
def client():
    """Provides a FastAPI test client."""
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def small_row_limit():
    """Caps accepted datasets at 3 rows for the duration of a test."""
    app.dependency_overrides[get_settings] = lambda: Settings(max_rows=3)
    yield
    app.dependency_overrides.pop(get_settings, None)


@pytest.fixture
def orders_rows():
    """A small orders dataset covering every semantic type."""
    return [
        {"order_id": 1001, "order_date": "2023-01-15", "amount": 125.50, "priority": "High", "region": "North", "rating": 4},
        {"order_id": 1002, "order_date": "2023-01-16", "amount": 89.99, "priority": "Low", "region": "South", "rating": 5},
        {"order_id": 1003, "order_date": "2023-01-17", "amount": 240.00, "priority": "Medium", "region": "North", "rating": 3},
        {"order_id": 1004, "order_date": "2023-01-18", "amount": 15.25, "priority": "High", "region": "East", "rating": 4},
        {"order_id": 1005, "order_date": "2023-01-19", "amount": 310.75, "priority": "Critical", "region": None, "rating": 1},
    ]
