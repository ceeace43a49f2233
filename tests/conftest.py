import pytest

from scalex.core.colors import Colors
from scalex.core.logger import Logger


@pytest.fixture(autouse=True)
def _isolate(monkeypatch, tmp_path):
    """Keep the user's config, environment and global logger state out of tests"""
    monkeypatch.setenv("SCALEX_CONFIG", str(tmp_path / "missing-config.yaml"))
    for name in ("SCALEX_KUBECTL", "SCALEX_VERBOSE", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)

    monkeypatch.setattr(Logger, "verbose", False)
    for attr in ("RED", "CYAN", "RESET"):
        monkeypatch.setattr(Colors, attr, getattr(Colors, attr))
