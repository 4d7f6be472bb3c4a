"""Root test configuration: isolate each test from local config, env vars and logger state"""

import os

import pytest

from mdrender.log import LOG


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run from a clean tmp directory with no MDRENDER_* overrides in the environment."""
    for name in list(os.environ):
        if name.startswith("MDRENDER_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def reset_logger(monkeypatch):
    """Drop handlers added by CLI runs (they hold captured streams) and restore the level."""
    monkeypatch.setattr(LOG, "handlers", [])
    monkeypatch.setattr(LOG, "propagate", True)
    level = LOG.level
    yield
    LOG.setLevel(level)
