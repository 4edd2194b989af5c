# tests/conftest.py
import pytest

from twodo.infrastructure.database import make_engine
from twodo.infrastructure.repositories.user_repository import SQLAlchemyUserRepository

from doubles import FakeHasher, RecordingOutput


@pytest.fixture()
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'test.db'}"


@pytest.fixture()
def engine(database_url):
    engine = make_engine(database_url)
    yield engine
    engine.dispose()


@pytest.fixture()
def user_store(engine):
    with SQLAlchemyUserRepository(engine) as store:
        yield store


@pytest.fixture()
def hasher():
    return FakeHasher()


@pytest.fixture()
def output():
    return RecordingOutput()
