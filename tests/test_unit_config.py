import logging
import sys

from pingserver.config import Settings
from pingserver.logging import setup_logging


def test_defaults(monkeypatch):
    for name in ("PINGSERVER_HOST", "PINGSERVER_PORT", "PINGSERVER_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    s = Settings()
    assert s.HOST == "0.0.0.0"
    assert s.PORT == 8090
    assert s.LOG_LEVEL == "INFO"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("PINGSERVER_PORT", "9100")
    monkeypatch.setenv("PINGSERVER_LOG_LEVEL", "debug")
    s = Settings()
    assert s.PORT == 9100
    assert s.LOG_LEVEL == "DEBUG"


def test_setup_logging_writes_to_stdout(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    setup_logging("DEBUG")
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert root.handlers[0].stream is sys.stdout
