"""Evaluation of a style attribute against a policy store."""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from ..config import SanitizerConfig
from ..errors import DeclarationParseError, EscapeDecodeError
from ..models.declaration import Declaration
from ..models.rule import Rule
from ..storage.policy_store import PolicyStore, RuleSet
from ..utils.css_parser import parse_declarations
from ..utils.escapes import normalize_value

logger = logging.getLogger(__name__)

# Each prefix is tried once, in this order.
VENDOR_PREFIXES = (
    "-webkit-", "-moz-", "-ms-", "-o-", "mso-", "-xv-", "-atsc-", "-wap-",
    "-khtml-", "prince-", "-ah-", "-hp-", "-ro-", "-rim-", "-tc-",
)


def strip_vendor_prefix(property_name: str) -> str:
    """Return `property_name` without its vendor prefixes."""
    for prefix in VENDOR_PREFIXES:
        if property_name.startswith(prefix):
            property_name = property_name[len(prefix):]
    return property_name


def _first_accepting(rules: Optional[Sequence[Rule]], value: str) -> bool:
    if not rules:
        return False
    return any(rule.accepts(value) for rule in rules)


class StyleSanitizer:
    """Filter inline styles down to the declarations a policy allows.

    Sanitizing is fail closed. A style that cannot be parsed yields "".
    A declaration is dropped unless some rule accepts its decoded value.
    Elements without any applicable policy get "" without parsing.
    """

    def __init__(self, store: PolicyStore, config: SanitizerConfig):
        self.store = store
        self.config = config

    def sanitize(self, element: str, style: str) -> str:
        if not self.store.has_policies(element):
            return ""

        if self.config.max_style_length and len(style) > self.config.max_style_length:
            logger.warning(
                f"[STYLE SANITIZER] Style on <{element}> exceeds {self.config.max_style_length} chars "
                f"({len(style)}); dropping it"
            )
            return ""

        scoped = self.store.resolve(element)

        # Parsers may drop a final declaration without a terminator. The
        # appended ";" is never part of the emitted text.
        style = style.rstrip()
        original_length = len(style)
        if style and not style.endswith(";"):
            style += ";"

        try:
            declarations = parse_declarations(style, end=original_length)
        except DeclarationParseError as e:
            logger.warning(f"[STYLE SANITIZER] Could not parse style on <{element}>: {e}")
            return ""

        clean: List[str] = []
        for declaration in declarations:
            if self._is_allowed(declaration, scoped):
                clean.append(declaration.to_css())
            elif self.config.log_dropped:
                logger.debug(f"[STYLE SANITIZER] Dropped from <{element}>: {declaration.to_css()!r}")

        return "; ".join(clean)

    def _is_allowed(self, declaration: Declaration, scoped: RuleSet) -> bool:
        property_name = strip_vendor_prefix(declaration.property.lower())
        try:
            value = normalize_value(declaration.value.lower())
        except EscapeDecodeError as e:
            if self.config.log_dropped:
                logger.debug(f"[STYLE SANITIZER] Undecodable value for {declaration.property!r}: {e}")
            return False

        if _first_accepting(scoped.get(property_name), value):
            return True
        return _first_accepting(self.store.global_rules.get(property_name), value)
