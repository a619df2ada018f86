"""Storage of style rules by scope."""
from .policy_store import PolicyStore, RuleSet

__all__ = [
    "PolicyStore",
    "RuleSet",
]
