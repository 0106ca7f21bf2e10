import os

# Settings are read at import time
os.environ.setdefault("SUPABASE_URL", "http://localhost:54321")
os.environ.setdefault("SUPABASE_KEY", "test-anon-key")
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["ENVIRONMENT"] = "test"

import pytest
from fastapi.testclient import TestClient

from app.database.supabase_client import get_supabase
from app.main import app
from tests.fakes import FakeSupabase


@pytest.fixture
def supabase():
    return FakeSupabase()


@pytest.fixture
def client(supabase):
    app.dependency_overrides[get_supabase] = lambda: supabase
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.fixture
def login(supabase):
    """Register a Supabase identity and return its Authorization header"""
    def _login(name: str, email: str = None, full_name: str = None) -> dict:
        token = f"{name}-token"
        supabase.auth.register(
            token,
            user_id=f"auth-{name}",
            email=email or f"{name}@example.com",
            full_name=full_name,
        )
        return {"Authorization": f"Bearer {token}"}
    return _login


@pytest.fixture
def alice(login):
    return login("alice", full_name="Alice")


@pytest.fixture
def bob(login):
    return login("bob", full_name="Bob")


@pytest.fixture
def carol(login):
    return login("carol")
