"""
Headline rules, in the priority order they are evaluated.
"""

from .base_rule import BaseHeadlineRule, CaseDecision, WordContext, alphabetic_core
from .position_rule import PositionRule
from .exception_list_rules import ForcedCapitalizeRule, ForcedLowercaseRule
from .length_rules import LongWordRule, MediumWordRule, DefaultRule

# First matching rule wins
DEFAULT_RULE_CHAIN = (
    PositionRule,
    ForcedCapitalizeRule,
    ForcedLowercaseRule,
    LongWordRule,
    MediumWordRule,
    DefaultRule,
)

__all__ = [
    'BaseHeadlineRule',
    'CaseDecision',
    'WordContext',
    'alphabetic_core',
    'PositionRule',
    'ForcedCapitalizeRule',
    'ForcedLowercaseRule',
    'LongWordRule',
    'MediumWordRule',
    'DefaultRule',
    'DEFAULT_RULE_CHAIN',
]
