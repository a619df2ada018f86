"""Value types shared by the policy store and the sanitizer."""

from .declaration import Declaration
from .rule import EnumRule, HandlerRule, PatternRule, Rule, StyleHandler

__all__ = [
    'Declaration',
    'EnumRule',
    'HandlerRule',
    'PatternRule',
    'Rule',
    'StyleHandler',
]
