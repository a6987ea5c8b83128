"""Top-level fixtures shared by every test package."""

import os

import pytest


@pytest.fixture
def catalogue_root(tmp_path):
    """Empty directory standing in for the plugins root."""
    root = tmp_path / "plugins"
    root.mkdir()
    return root


@pytest.fixture(autouse=True)
def isolate_localization_env(monkeypatch):
    """Keep LOCALIZATION_* variables from the host out of settings tests."""
    for name in list(os.environ):
        if name.startswith("LOCALIZATION_"):
            monkeypatch.delenv(name, raising=False)
