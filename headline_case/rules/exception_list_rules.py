"""
Exception List Rules
Fixed word lists that override the length-based defaults.
"""
from typing import Optional

from .base_rule import BaseHeadlineRule, CaseDecision, WordContext


class ForcedCapitalizeRule(BaseHeadlineRule):
    """
    Capitalizes short words that carry meaning in a headline: verbs such as
    "Is" and "Be", pronouns such as "It" and "We", and adverbs like "Not".
    """

    def _get_rule_type(self) -> str:
        return 'forced_capitalize'

    def evaluate(self, word: WordContext) -> Optional[CaseDecision]:
        if self.config.is_always_capitalized(word.core):
            return CaseDecision.CAPITALIZE
        return None


class ForcedLowercaseRule(BaseHeadlineRule):
    """
    Lowercases articles, coordinating conjunctions and short prepositions.
    """

    def _get_rule_type(self) -> str:
        return 'forced_lowercase'

    def evaluate(self, word: WordContext) -> Optional[CaseDecision]:
        if self.config.is_always_lowercased(word.core):
            return CaseDecision.LOWERCASE
        return None
