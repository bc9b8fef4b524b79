import os
from datetime import datetime, timedelta, timezone

# The settings object is built at import time and needs the identity secret.
os.environ.setdefault("IDENTITY_TOKEN_SECRET", "test-identity-secret")

import pytest
from fastapi.testclient import TestClient
from jose import jwt

from backend.main import (MOCK_RECORDS, RecordStore, app, get_record_store,
                          settings)


def make_id_token(sub="officer-001", email="field.officer@gwdkollam.in", expires_in=timedelta(hours=1), **claims) -> str:
    """Mint an ID token the way the identity provider would."""
    payload = {"sub": sub, "email": email, "exp": datetime.now(timezone.utc) + expires_in, **claims}
    if sub is None:
        del payload["sub"]
    return jwt.encode(payload, settings.IDENTITY_TOKEN_SECRET, algorithm=settings.IDENTITY_TOKEN_ALGORITHM)


@pytest.fixture
def store() -> RecordStore:
    """A freshly seeded record book, swapped in for the application's one."""
    fresh = RecordStore(MOCK_RECORDS)
    app.dependency_overrides[get_record_store] = lambda: fresh
    yield fresh
    app.dependency_overrides.pop(get_record_store, None)


@pytest.fixture
def client(store):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {make_id_token()}"}


@pytest.fixture
def id_token():
    return make_id_token
