# tests/conftest.py
import os
import pytest
from fastapi.testclient import TestClient

# 1) Point the LLM client at a host that is never contacted; tests patch the calls
os.environ["OLLAMA_HOST"] = "http://ollama.invalid:11434"

from app.main import app    # safe: no network work at import
from app.core.dependencies import get_session
from app.services.session_service import SalesSession

@pytest.fixture
def session():
    return SalesSession()

@pytest.fixture
def client(session):
    app.dependency_overrides[get_session] = lambda: session
    yield TestClient(app)
    app.dependency_overrides.clear()

@pytest.fixture
def valid_analysis_json():
    return (
        '{"forecast": "Sales should keep growing by roughly 200,000 MMK a month.",'
        ' "advice": ["Stock up before Thingyan", "Offer mobile payments", "Bundle slow movers"],'
        ' "trend": "up", "confidence": "High"}'
    )
