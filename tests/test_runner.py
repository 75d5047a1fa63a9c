"""Root main.py: host and reload follow ENVIRONMENT from settings."""
import importlib

import main as runner
from app.core.config import settings


def test_production_binds_all_interfaces_without_reload(monkeypatch):
    monkeypatch.setattr(settings, "environment", "Production")
    monkeypatch.delenv("HOST", raising=False)
    mod = importlib.reload(runner)
    assert mod.ENV == "production"
    assert mod.HOST == "0.0.0.0"
    assert mod.RELOAD is False


def test_development_reloads_on_localhost(monkeypatch):
    monkeypatch.setattr(settings, "environment", "development")
    monkeypatch.delenv("HOST", raising=False)
    mod = importlib.reload(runner)
    assert mod.HOST == "127.0.0.1"
    assert mod.RELOAD is True
