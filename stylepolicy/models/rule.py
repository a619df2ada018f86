from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Tuple, Union

logger = logging.getLogger(__name__)

StyleHandler = Callable[[str], bool]


@dataclass(frozen=True)
class HandlerRule:
    """Accept a value when a predicate says so.

    A predicate that raises rejects the value.
    """
    handler: StyleHandler

    def accepts(self, value: str) -> bool:
        try:
            return bool(self.handler(value))
        except Exception as e:
            name = getattr(self.handler, "__name__", repr(self.handler))
            logger.warning(f"[STYLE RULE] Handler {name} failed, rejecting value: {e}", exc_info=True)
            return False


@dataclass(frozen=True)
class EnumRule:
    """Accept a value equal (ignoring case) to one of a fixed set of values.

    Values are stored lowercased so the comparison against an already
    normalized value is a plain membership test.
    """
    values: Tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.values:
            raise ValueError("EnumRule.values must not be empty")
        object.__setattr__(self, "values", tuple(v.lower() for v in self.values))

    def accepts(self, value: str) -> bool:
        return value.lower() in self.values


@dataclass(frozen=True)
class PatternRule:
    """Accept a value in which the pattern finds a match.

    The search is unanchored; policies that want a whole-value match anchor
    their pattern with ``^`` and ``$``.
    """
    pattern: re.Pattern

    def accepts(self, value: str) -> bool:
        return self.pattern.search(value) is not None


Rule = Union[HandlerRule, EnumRule, PatternRule]
