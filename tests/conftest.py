"""
Pytest configuration and shared fixtures.

- test_client: FastAPI TestClient for endpoint tests
- make_input: builder for CalculationInput with sensible defaults
"""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# ruff: noqa: E402
from main import app
from schemas import BasicSalary, CalculationInput, WorkType


@pytest.fixture(scope="function")
def test_client():
    # lifespan(로깅 설정)은 실행하지 않음
    yield TestClient(app)


@pytest.fixture
def make_input():
    """Build a CalculationInput; defaults to a valid basic-salary request."""

    def _make(rate=None, dailyWorkHours=8, overtimeHours=5, workType=WorkType.REGULAR):
        return CalculationInput(
            rate=rate if rate is not None else BasicSalary(basicSalary=4000),
            dailyWorkHours=dailyWorkHours,
            overtimeHours=overtimeHours,
            workType=workType,
        )

    return _make
