import pytest

from todoapp.db.store import TodoStore


@pytest.fixture
def store(tmp_path):
    s = TodoStore.open(tmp_path / "data")
    yield s
    s.close()
