"""
Root-level test configuration for pytest.

Every Policy created without an explicit config reads STYLEPOLICY_* from the
environment, so this conftest clears those variables around every test to
keep results independent of the developer's shell.

Note: pytest requires the filename 'conftest.py' for automatic fixture discovery.
"""
import pytest

STYLEPOLICY_ENV_VARS = (
    "STYLEPOLICY_LOG_DROPPED",
    "STYLEPOLICY_MAX_STYLE_LENGTH",
)


@pytest.fixture(autouse=True)
def clean_stylepolicy_env(monkeypatch):
    """Remove STYLEPOLICY_* variables for the duration of each test."""
    for name in STYLEPOLICY_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield
