"""
Headline Case - New York Times style headline capitalization.

Usage:
    from headline_case import to_headline_case
    to_headline_case("to be or not to be")   # 'To Be or Not to Be'
"""

from .headline_config import (
    ALWAYS_CAPITALIZE,
    ALWAYS_LOWERCASE,
    CAPITALIZE_POS,
    DEFAULT_HEADLINE_CONFIG,
    MIN_CAPITALIZE_LENGTH,
    NYT_HEADLINE_CONFIG,
    HeadlineConfig,
    HeadlineConfigError,
)
from .headline_formatter import HeadlineFormatter, to_headline_case, transform
from .rule_evaluator import HeadlineRuleEvaluator, RuleVerdict
from .rules import CaseDecision

__all__ = [
    'ALWAYS_CAPITALIZE',
    'ALWAYS_LOWERCASE',
    'CAPITALIZE_POS',
    'DEFAULT_HEADLINE_CONFIG',
    'MIN_CAPITALIZE_LENGTH',
    'NYT_HEADLINE_CONFIG',
    'CaseDecision',
    'HeadlineConfig',
    'HeadlineConfigError',
    'HeadlineFormatter',
    'HeadlineRuleEvaluator',
    'RuleVerdict',
    'to_headline_case',
    'transform',
]
