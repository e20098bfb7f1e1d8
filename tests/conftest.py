import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from ninelayer.config import settings
from ninelayer.db.base import init_db


@pytest.fixture
def engine():
    eng = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    init_db(eng)
    return eng


@pytest.fixture
def session(engine):
    with Session(engine) as s:
        yield s


@pytest.fixture(autouse=True)
def _plain_settings(monkeypatch):
    monkeypatch.setattr(settings, "api_key", None)
    monkeypatch.setattr(settings, "reference_layer", "L6")
    monkeypatch.setattr(settings, "key_code_count", 3)
    monkeypatch.setattr(settings, "sample_size", 50)
