import termios

import pytest

from sttyl.core.state import AttributeSnapshot, Geometry
from sttyl.registry import DEFAULT_REGISTRY


class FakeTerminal:
    """Terminal double that records commits instead of touching a tty."""

    def __init__(self, snapshot: AttributeSnapshot, geometry: Geometry | None = None) -> None:
        self.snapshot = snapshot
        self.geometry = geometry or Geometry(rows=24, cols=80)
        self.commits: list[AttributeSnapshot] = []

    def load(self) -> AttributeSnapshot:
        return self.snapshot.copy()

    def commit(self, snapshot: AttributeSnapshot) -> None:
        self.commits.append(snapshot.copy())

    def window_size(self) -> Geometry:
        return self.geometry


def make_snapshot() -> AttributeSnapshot:
    cc = [0] * termios.NCCS
    cc[termios.VEOF] = 4
    cc[termios.VERASE] = 127
    cc[termios.VINTR] = 3
    cc[termios.VKILL] = 21
    cc[termios.VQUIT] = 28
    cc[termios.VSUSP] = 26
    snapshot = AttributeSnapshot(ospeed=termios.B38400, ispeed=termios.B38400, cc=cc)
    for name in ("icrnl", "ixon", "opost", "onlcr", "cread", "hupcl", "isig", "icanon", "echo", "echoe"):
        snapshot.set_flag(DEFAULT_REGISTRY.lookup_flag(name))
    return snapshot


@pytest.fixture
def snapshot() -> AttributeSnapshot:
    return make_snapshot()


@pytest.fixture
def fake_terminal(monkeypatch) -> FakeTerminal:
    terminal = FakeTerminal(make_snapshot())
    monkeypatch.setattr("sttyl.core.app.TerminalDevice", lambda fd, geometry_fd: terminal)
    return terminal


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    for key in ("STTYL_FD", "STTYL_GEOMETRY_FD", "STTYL_UNDEF_MARKER", "STTYL_LOG_LEVEL", "STTYL_LOG_FILE"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("STTYL_HOME", str(tmp_path / "sttyl-home"))
    monkeypatch.chdir(tmp_path)
