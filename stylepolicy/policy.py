"""Public entry point: an allowlist of CSS properties per HTML element."""
from __future__ import annotations

from typing import Optional

from .builder import StyleRuleBuilder
from .config import SanitizerConfig, config_from_env
from .services.sanitizer import StyleSanitizer
from .storage.policy_store import PolicyStore


class Policy:
    """An allowlist of CSS declarations per HTML element.

    A new policy allows nothing. Rules are added with `allow_styles()`;
    style attributes are filtered with `sanitize()`::

        policy = Policy()
        policy.allow_styles("text-decoration").matching_enum("underline", "line-through", "none").on_elements("span")
        policy.allow_styles("color").matching(r"(?i)^#([0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$").globally()
        policy.freeze()

        policy.sanitize("span", "text-decoration: underline; color: #f00ba")  # "text-decoration: underline"

    Build a policy once, call `freeze()`, then share it: a frozen policy is
    read only and safe to use from many threads at once. To change the
    rules at runtime, build a new policy and swap it in.
    """

    def __init__(self, config: Optional[SanitizerConfig] = None):
        self.config = config if config is not None else config_from_env()
        self.store = PolicyStore()
        self._sanitizer = StyleSanitizer(self.store, self.config)

    def allow_styles(self, *property_names: str) -> StyleRuleBuilder:
        """Start a rule for `property_names`.

        Nothing is added to the policy until the returned builder is
        committed with `on_elements()`, `on_elements_matching()` or
        `globally()`.
        """
        return StyleRuleBuilder(self, *property_names)

    def has_policies(self, element: str) -> bool:
        """Return True if any rule (including a global one) applies to `element`."""
        return self.store.has_policies(element)

    def sanitize(self, element: str, style: str) -> str:
        """Return the declarations of `style` that the policy allows on `element`.

        Accepted declarations keep their original text and are joined with
        ``"; "``. Never raises for bad input; anything doubtful is dropped.
        """
        return self._sanitizer.sanitize(element, style)

    def freeze(self) -> "Policy":
        """Make the policy read only and return it."""
        self.store.freeze()
        return self

    @property
    def frozen(self) -> bool:
        return self.store.frozen


def new_policy(config: Optional[SanitizerConfig] = None) -> Policy:
    """Return a blank policy that allows nothing."""
    return Policy(config=config)
