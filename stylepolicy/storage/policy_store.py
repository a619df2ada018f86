"""Rule indices for a style policy and the scope resolution over them.

Rules live in three scopes:

- element rules, keyed by lowercase element name;
- pattern rules, keyed by a compiled regular expression over element names;
- global rules, which apply to every element.

An element's rule set is its exact element entry when one exists and is
non-empty; otherwise it is the union of every matching pattern's entry.
Global rules are never part of that set; the sanitizer consults them in
addition to it.

Pattern keys are ``re.Pattern`` objects, which compare equal when their text
and flags are equal, so registering the same pattern text twice adds to one
scope. Matching patterns are merged in registration order. Two overlapping
patterns that register the same property with different strategies are
OR-composed (the first accepting rule wins); policy authors should avoid
registering overlapping patterns for the same property.

A store is mutated only while a policy is being built. After `freeze()` it
is read only and may be shared between threads without locking; mutating an
unfrozen store while another thread sanitizes with it is not supported.
"""
from __future__ import annotations

import logging
import re
from typing import Dict, List

from ..errors import PolicyFrozenError
from ..models.rule import Rule

logger = logging.getLogger(__name__)

RuleSet = Dict[str, List[Rule]]


class PolicyStore:
    """Append-only storage of style rules by scope."""

    def __init__(self):
        self.element_rules: Dict[str, RuleSet] = {}
        self.pattern_rules: Dict[re.Pattern, RuleSet] = {}
        self.global_rules: RuleSet = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        if not self._frozen:
            logger.info(
                f"[POLICY STORE] Freezing policy: {len(self.element_rules)} elements, "
                f"{len(self.pattern_rules)} patterns, {len(self.global_rules)} global properties"
            )
        self._frozen = True

    def _check_mutable(self) -> None:
        if self._frozen:
            raise PolicyFrozenError("Cannot add rules to a frozen policy; build a new policy instead")

    # Build phase

    def add_element_rule(self, element: str, property_name: str, rule: Rule) -> None:
        self._check_mutable()
        rules = self.element_rules.setdefault(element.lower(), {})
        rules.setdefault(property_name, []).append(rule)

    def add_pattern_rule(self, pattern: re.Pattern, property_name: str, rule: Rule) -> None:
        self._check_mutable()
        rules = self.pattern_rules.setdefault(pattern, {})
        rules.setdefault(property_name, []).append(rule)

    def add_global_rule(self, property_name: str, rule: Rule) -> None:
        self._check_mutable()
        self.global_rules.setdefault(property_name, []).append(rule)

    # Read phase

    def has_policies(self, element: str) -> bool:
        """Return True if any rule could apply to `element`.

        Any global rule counts for every element. An element with no policy
        anywhere always sanitizes to an empty string.
        """
        if self.global_rules:
            return True

        element = element.lower()
        if self.element_rules.get(element):
            return True

        return any(
            rules and pattern.search(element)
            for pattern, rules in self.pattern_rules.items()
        )

    def resolve(self, element: str) -> RuleSet:
        """Return the element- or pattern-scoped rules for `element`.

        The returned mapping is a fresh copy; callers may not mutate the
        store through it.
        """
        element = element.lower()
        exact = self.element_rules.get(element)
        if exact:
            return {name: list(rules) for name, rules in exact.items()}

        resolved: RuleSet = {}
        for pattern, rules in self.pattern_rules.items():
            if not pattern.search(element):
                continue
            for name, pattern_rules in rules.items():
                resolved.setdefault(name, []).extend(pattern_rules)
        return resolved
