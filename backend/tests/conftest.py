"""Pytest configuration for test suite."""

import sys
from pathlib import Path

import pytest

# Add backend/src to Python path for imports
# This file is in backend/tests/, so we need to go up one level to backend/
BACKEND_DIR = Path(__file__).parent.parent
SRC_DIR = BACKEND_DIR / "src"

if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from lingoletics.shared.auth.models import User  # noqa: E402
from lingoletics.shared.rbac.models import UserRole  # noqa: E402


@pytest.fixture
def make_user():
    """Factory for authenticated users holding a given role."""

    def _make_user(role: UserRole, user_id: int = 1) -> User:
        return User(
            email=f"{role.value}@example.edu",
            user_id=user_id,
            name=role.value.replace("_", " ").title(),
            role=role,
        )

    return _make_user


@pytest.fixture
def client_as(make_user):
    """Factory for TestClients whose current user holds the given role."""
    from fastapi.testclient import TestClient

    from lingoletics.app_api.main import app
    from lingoletics.shared.auth.dependencies import get_current_user

    def _client_as(role: UserRole) -> TestClient:
        user = make_user(role)
        app.dependency_overrides[get_current_user] = lambda: user
        return TestClient(app)

    yield _client_as
    app.dependency_overrides.clear()
