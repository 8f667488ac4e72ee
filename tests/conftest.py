"""tests/conftest.py

Shared fixtures: isolated settings, an in-memory profile store, an API client.
"""

from __future__ import annotations

import json
import os

# Must run before volunteer_search.config is imported anywhere.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["OPENAI_API_KEY"] = ""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from volunteer_search import db, orchestrator
from volunteer_search.main import app
from volunteer_search.models import VolunteerProfile


@pytest.fixture
def no_llm(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run the orchestrator as if no OpenAI key were configured."""
    monkeypatch.setattr(orchestrator.settings, "openai_api_key", None)


@pytest.fixture
def with_llm(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run the orchestrator as if an OpenAI key were configured."""
    monkeypatch.setattr(orchestrator.settings, "openai_api_key", "sk-test")


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


def _profile(**kwargs) -> VolunteerProfile:
    skills = kwargs.pop("skills", [])
    return VolunteerProfile(skills_json=json.dumps(skills), **kwargs)


@pytest.fixture
def profile_store(monkeypatch: pytest.MonkeyPatch):
    """Swap the module engine for a seeded in-memory SQLite database."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as s:
        s.add_all(
            [
                _profile(
                    id="vol-asha",
                    name="Asha Rao",
                    headline="Grant writer for small NGOs",
                    location="Pune, India",
                    city="Pune",
                    country="India",
                    skills=["grant-writing", "grant-research"],
                    volunteer_type="free",
                    rating=4.8,
                ),
                _profile(
                    id="vol-daniel",
                    name="Daniel Kim",
                    headline="UX designer",
                    location="Berlin",
                    city="Berlin",
                    country="Germany",
                    skills=[
                        "ux-ui",
                        "html-css",
                        "website-redesign",
                        "wordpress-development",
                        "cms-maintenance",
                        "landing-page-optimization",
                    ],
                    volunteer_type="paid",
                    rating=4.2,
                ),
                _profile(
                    id="vol-meera",
                    name="Meera Iyer",
                    headline="Documentary photographer",
                    city="Mumbai",
                    country="India",
                    skills=["photography"],
                    volunteer_type="both",
                    rating=3.9,
                ),
                _profile(
                    id="vol-retired",
                    name="Asha Menon",
                    headline="Former grant writer",
                    location="Pune, India",
                    skills=["grant-writing"],
                    is_active=False,
                ),
            ]
        )
        s.commit()
    monkeypatch.setattr(db, "engine", engine)
    yield engine
    engine.dispose()
