"""
Shared test fixtures: API test client, material registry, request builder.
"""

import pytest
from fastapi.testclient import TestClient

from estimator.main import app
from estimator.materials import DEFAULT_REGISTRY
from estimator.schemas import CalculationRequest


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def registry():
    return DEFAULT_REGISTRY


@pytest.fixture
def make_request():
    """Build a CalculationRequest the way the form sends it (sizes as text)."""
    def _make(part_type, width="48", height="24", **options):
        return CalculationRequest(part_type=part_type, width=width, height=height, options=options)
    return _make
