import pytest
from typer.testing import CliRunner

from userdir.directory import InMemoryUserStore, JsonFileUserStore, User, UserService


@pytest.fixture(autouse=True)
def isolate_env(monkeypatch):
    # Ensure env vars do not leak into tests
    monkeypatch.delenv("USER_DATA_FILE", raising=False)
    monkeypatch.delenv("USERDIR_LOG_LEVEL", raising=False)


@pytest.fixture
def data_file(tmp_path, monkeypatch):
    """A fresh data file path exported through USER_DATA_FILE."""
    path = tmp_path / "userdata.json"
    monkeypatch.setenv("USER_DATA_FILE", str(path))
    return path


@pytest.fixture
def file_store(data_file):
    return JsonFileUserStore(data_file)


@pytest.fixture
def memory_store():
    return InMemoryUserStore()


@pytest.fixture
def service(memory_store):
    return UserService(memory_store)


@pytest.fixture
def alice():
    return User(email="a@b.com", username="alice", phone="1234567890", age=30)


@pytest.fixture
def runner():
    return CliRunner()
