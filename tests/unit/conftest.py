"""
Unit test fixtures for the style policy engine.

- policy: a blank Policy with default configuration
- example_policy: the policy used in the package documentation
  (text-decoration enum on span, hex color globally, default
  background-origin globally)
- true_handler: a handler that accepts any value

Note: pytest requires the filename 'conftest.py' for automatic fixture discovery.
"""
import pytest

from stylepolicy import Policy, SanitizerConfig


def accept_all(value: str) -> bool:
    return True


@pytest.fixture
def true_handler():
    return accept_all


@pytest.fixture
def policy():
    return Policy(config=SanitizerConfig())


@pytest.fixture
def example_policy():
    p = Policy(config=SanitizerConfig())
    p.allow_styles("text-decoration").matching_enum("underline", "line-through", "none").on_elements("span")
    p.allow_styles("color").matching(r"(?i)^#([0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$").globally()
    p.allow_styles("background-origin").globally()
    return p
