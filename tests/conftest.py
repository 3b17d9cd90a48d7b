import pytest

from structscan import state


@pytest.fixture(autouse=True)
def clean_state():
    state.reset()
    yield
    state.reset()


@pytest.fixture
def go_module(tmp_path):
    """A module root with a go.mod declaring example.com/app."""
    (tmp_path / "go.mod").write_text("module example.com/app\n\ngo 1.21\n", encoding="utf-8")
    return tmp_path


@pytest.fixture(autouse=True)
def go_env(monkeypatch, tmp_path):
    monkeypatch.delenv("GO111MODULE", raising=False)
    monkeypatch.setenv("GOPATH", str(tmp_path / "gopath"))
