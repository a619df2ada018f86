"""Exception types raised by the style policy engine.

Builder misuse (conflicting strategies, committing to a frozen policy) is
raised to the caller. Parse and escape failures are internal: the sanitizer
catches them and drops the affected input instead of letting them escape.
"""
from __future__ import annotations

from typing import Optional


class StylePolicyError(Exception):
    """Base class for all style policy errors."""


class StrategyConflictError(StylePolicyError):
    """A rule builder was given more than one matching strategy."""


class PolicyFrozenError(StylePolicyError):
    """A rule was committed to a policy after it was frozen."""


class DeclarationParseError(StylePolicyError, ValueError):
    """The style text could not be split into declarations."""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        super().__init__(message)
        self.line = line
        self.column = column

    def __str__(self) -> str:
        message = super().__str__()
        if self.line is None:
            return message
        return f"{message} (line {self.line}, column {self.column})"


class EscapeDecodeError(StylePolicyError, ValueError):
    """A CSS escape sequence does not decode to a single BMP character."""
