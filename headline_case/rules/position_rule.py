"""
Position Rule
The first and last words of a headline are always capitalized.
"""
from typing import Optional

from .base_rule import BaseHeadlineRule, CaseDecision, WordContext


class PositionRule(BaseHeadlineRule):
    """Capitalizes the first and last real word, whatever the word is."""

    def _get_rule_type(self) -> str:
        return 'position'

    def evaluate(self, word: WordContext) -> Optional[CaseDecision]:
        if word.is_first_word or word.is_last_word:
            return CaseDecision.CAPITALIZE
        return None
