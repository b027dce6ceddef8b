"""Root test configuration: session-level cleanup of runtime artifacts"""

import os
import shutil
from pathlib import Path

import pytest


_PROJECT_ROOT = Path(__file__).parent.parent

_CLEANUP_FILES = ["config.yaml"]
_CLEANUP_DIRS = ["dist"]


@pytest.fixture(scope="session", autouse=True)
def cleanup_artifacts():
    """Remove config files and export directories created during the test session."""
    existing = {name for name in _CLEANUP_FILES + _CLEANUP_DIRS if (_PROJECT_ROOT / name).exists()}
    yield
    for name in _CLEANUP_FILES:
        p = _PROJECT_ROOT / name
        if name not in existing and p.exists():
            p.unlink()
    for name in _CLEANUP_DIRS:
        p = _PROJECT_ROOT / name
        if name not in existing and p.exists():
            shutil.rmtree(p)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep MDBLOCKS_* variables from the outer environment out of tests."""
    for key in list(os.environ):
        if key.startswith("MDBLOCKS_"):
            monkeypatch.delenv(key)
