"""
Pytest configuration and fixtures
"""
import pytest
import sys
import os

# Add the parent directory to the path so we can import from services
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi.testclient import TestClient


@pytest.fixture(scope="session")
def client():
    """Test client for the calculator API (no external dependencies)."""
    from main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def bmi_path():
    return "/api/healthcalculator/bmi"


@pytest.fixture
def bai_path():
    return "/api/healthcalculator/bai"


@pytest.fixture
def whr_path():
    return "/api/healthcalculator/waisttohip"
