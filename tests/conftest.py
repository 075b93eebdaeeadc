"""Shared fixtures: a throwaway SQLite database and upload directory."""

import os
import shutil
import tempfile
from pathlib import Path

# Settings are read at import time, so point them at temp locations first.
_TMP = Path(tempfile.mkdtemp(prefix="skillscan-tests-"))
os.environ["DATABASE_URL"] = f"sqlite:///{_TMP / 'test.db'}"
os.environ["UPLOAD_DIR"] = str(_TMP / "uploads")
os.environ["SEED_JOB_ROLES"] = "false"

import pytest
from fastapi.testclient import TestClient
from hypothesis import HealthCheck, settings as hypothesis_settings

from skillscan.core.config import settings
from skillscan.db.session import SessionLocal
from skillscan.main import app
from skillscan.models.applicant import Applicant
from skillscan.models.job_role import JobRole

# every test runs with the autouse table cleanup; database examples are slow
hypothesis_settings.register_profile(
    "skillscan",
    deadline=None,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
hypothesis_settings.load_profile("skillscan")


def clear_tables() -> None:
    with SessionLocal() as s:
        s.query(Applicant).delete()
        s.query(JobRole).delete()
        s.commit()


@pytest.fixture(autouse=True)
def clean_state():
    clear_tables()
    yield
    clear_tables()
    shutil.rmtree(settings.UPLOAD_DIR, ignore_errors=True)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def api(client):
    """Build a path under the versioned API prefix."""
    return lambda path: f"{settings.API_PREFIX}{path}"
