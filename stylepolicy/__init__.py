"""CSS property allowlists for inline ``style`` attributes.

Usage::

    from stylepolicy import Policy

    policy = Policy()
    policy.allow_styles("color", "text-align").on_elements("p")
    policy.freeze()
    policy.sanitize("p", "color: red; position: fixed")  # "color: red"
"""

from .builder import StyleRuleBuilder
from .config import SanitizerConfig, config_from_env
from .default_handlers import DEFAULT_HANDLERS, get_default_handler
from .errors import (
    DeclarationParseError,
    EscapeDecodeError,
    PolicyFrozenError,
    StrategyConflictError,
    StylePolicyError,
)
from .policy import Policy, new_policy

__all__ = [
    'DEFAULT_HANDLERS',
    'DeclarationParseError',
    'EscapeDecodeError',
    'Policy',
    'PolicyFrozenError',
    'SanitizerConfig',
    'StrategyConflictError',
    'StylePolicyError',
    'StyleRuleBuilder',
    'config_from_env',
    'get_default_handler',
    'new_policy',
]
