"""Fluent construction of style rules.

A builder is started with `Policy.allow_styles()`, optionally given one
matching strategy, and committed to a scope::

    policy.allow_styles("text-decoration").matching_enum("underline", "none").on_elements("span")
    policy.allow_styles("color").matching(r"^#[0-9a-f]{6}$").globally()
    policy.allow_styles("margin").on_elements_matching(r"^my-")

Without a strategy each property gets its default handler, looked up when
the rule is committed.
"""
from __future__ import annotations

import re
from typing import TYPE_CHECKING, Optional, Tuple, Union

from .default_handlers import get_default_handler
from .errors import StrategyConflictError, StylePolicyError
from .models.rule import EnumRule, HandlerRule, PatternRule, Rule, StyleHandler

if TYPE_CHECKING:
    from .policy import Policy

PatternLike = Union[str, re.Pattern]


def compile_pattern(pattern: PatternLike) -> re.Pattern:
    if isinstance(pattern, re.Pattern):
        return pattern
    return re.compile(pattern)


class StyleRuleBuilder:
    """Stages a rule for one or more properties until it is committed."""

    def __init__(self, policy: "Policy", *property_names: str):
        if not property_names:
            raise StylePolicyError("allow_styles() needs at least one property name")
        self.policy = policy
        self.property_names: Tuple[str, ...] = tuple(name.lower() for name in property_names)
        self._rule: Optional[Rule] = None

    def _set_rule(self, rule: Rule) -> "StyleRuleBuilder":
        if self._rule is not None:
            raise StrategyConflictError(
                f"A matching strategy is already set for {', '.join(self.property_names)}"
            )
        self._rule = rule
        return self

    def matching(self, pattern: PatternLike) -> "StyleRuleBuilder":
        """Accept values in which `pattern` finds a match."""
        return self._set_rule(PatternRule(compile_pattern(pattern)))

    def matching_enum(self, *values: str) -> "StyleRuleBuilder":
        """Accept values equal, ignoring case, to one of `values`."""
        if not values:
            raise StylePolicyError("matching_enum() needs at least one value")
        return self._set_rule(EnumRule(tuple(values)))

    def matching_handler(self, handler: StyleHandler) -> "StyleRuleBuilder":
        """Accept values for which `handler` returns True."""
        if not callable(handler):
            raise StylePolicyError("matching_handler() needs a callable")
        return self._set_rule(HandlerRule(handler))

    def _rule_for(self, property_name: str) -> Rule:
        if self._rule is not None:
            return self._rule
        return HandlerRule(get_default_handler(property_name))

    def on_elements(self, *elements: str) -> "Policy":
        """Bind the rule to elements with exactly these names."""
        store = self.policy.store
        for element in elements:
            for name in self.property_names:
                store.add_element_rule(element, name, self._rule_for(name))
        return self.policy

    def on_elements_matching(self, pattern: PatternLike) -> "Policy":
        """Bind the rule to every element whose name `pattern` matches."""
        compiled = compile_pattern(pattern)
        store = self.policy.store
        for name in self.property_names:
            store.add_pattern_rule(compiled, name, self._rule_for(name))
        return self.policy

    def globally(self) -> "Policy":
        """Bind the rule to every element."""
        store = self.policy.store
        for name in self.property_names:
            store.add_global_rule(name, self._rule_for(name))
        return self.policy
