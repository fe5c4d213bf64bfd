"""Pytest fixtures for infrastructure tests."""

import sys
from pathlib import Path

import pulumi
import pytest

PROJECT_ROOT = Path(__file__).parent.parent.parent

# Component modules are imported at collection time, before session fixtures run
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def iac_project_root():
    """Return the IAC package root directory."""
    return PROJECT_ROOT / "cicd_iac"


@pytest.fixture
def python_files_in_iac(iac_project_root):
    """Return all Python files in the IAC package."""
    return [f for f in iac_project_root.rglob("*.py") if "__pycache__" not in str(f)]


class FakeConfig:
    """Stand-in for pulumi.Config backed by a plain dict."""

    def __init__(self, values: dict):
        self.values = values

    def get(self, key):
        value = self.values.get(key)
        return None if value is None else str(value)

    def require(self, key):
        if key not in self.values:
            raise pulumi.ConfigMissingError(key, False)
        return str(self.values[key])

    def get_bool(self, key):
        value = self.values.get(key)
        return None if value is None else bool(value)

    def get_object(self, key):
        return self.values.get(key)


@pytest.fixture
def stack_config(monkeypatch):
    """Patch pulumi.Config used by the config loader with a dict-backed fake."""
    values: dict = {"environment": "dev"}

    import cicd_iac.configs.environment as environment_module

    monkeypatch.setattr(environment_module.pulumi, "Config", lambda *args, **kwargs: FakeConfig(values))
    return values
