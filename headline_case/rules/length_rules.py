"""
Length Rules
Fallback decisions for words not covered by position or the exception lists.

Long words are assumed to be nouns, adjectives, adverbs, pronouns or verbs;
three-letter words are given the same benefit of the doubt; anything shorter
is lowercased.
"""
from typing import Optional

from .base_rule import BaseHeadlineRule, CaseDecision, WordContext

MEDIUM_WORD_LENGTH = 3


class LongWordRule(BaseHeadlineRule):
    """Capitalizes words at or above the configured minimum length."""

    def _get_rule_type(self) -> str:
        return 'long_word'

    def evaluate(self, word: WordContext) -> Optional[CaseDecision]:
        if len(word.core) >= self.config.min_capitalize_length:
            return CaseDecision.CAPITALIZE
        return None


class MediumWordRule(BaseHeadlineRule):
    """Capitalizes three-letter words (and anything longer the long rule let through)."""

    def _get_rule_type(self) -> str:
        return 'medium_word'

    def evaluate(self, word: WordContext) -> Optional[CaseDecision]:
        if len(word.core) >= MEDIUM_WORD_LENGTH:
            return CaseDecision.CAPITALIZE
        return None


class DefaultRule(BaseHeadlineRule):
    """Lowercases whatever is left: one- and two-letter words and bare punctuation."""

    def _get_rule_type(self) -> str:
        return 'default'

    def evaluate(self, word: WordContext) -> Optional[CaseDecision]:
        return CaseDecision.LOWERCASE
