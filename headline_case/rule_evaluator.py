"""
Rule Evaluator

Runs a word through the headline rule chain and reports which rule decided
its case.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Type

from .headline_config import DEFAULT_HEADLINE_CONFIG, HeadlineConfig
from .position_tracker import WordPosition
from .rules import DEFAULT_RULE_CHAIN, BaseHeadlineRule, CaseDecision, WordContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuleVerdict:
    decision: CaseDecision
    rule_type: str
    core: str


class HeadlineRuleEvaluator:
    """
    Evaluates words against an ordered chain of headline rules.

    The chain is instantiated once against a single HeadlineConfig; the first
    rule returning a decision wins and no later rule is consulted.
    """

    def __init__(self, config: HeadlineConfig = DEFAULT_HEADLINE_CONFIG,
                 rule_classes: Optional[Iterable[Type[BaseHeadlineRule]]] = None):
        self.config = config
        if rule_classes is None:
            rule_classes = DEFAULT_RULE_CHAIN
        self.rules = tuple(rule_class(config) for rule_class in rule_classes)
        if not self.rules:
            raise ValueError("A headline rule chain needs at least one rule")

    def evaluate_word(self, word: WordContext) -> RuleVerdict:
        for rule in self.rules:
            decision = rule.evaluate(word)
            if decision is not None:
                logger.debug(f"{word.text!r}: {decision.value} by rule '{rule.rule_type}'")
                return RuleVerdict(decision, rule.rule_type, word.core)

        # Custom chains without a catch-all rule get the default decision
        logger.debug(f"{word.text!r}: no rule matched, lowercasing")
        return RuleVerdict(CaseDecision.LOWERCASE, 'unmatched', word.core)

    def evaluate(self, position: WordPosition) -> RuleVerdict:
        """Evaluate a tracked content token."""
        word = WordContext.from_text(
            position.token.text,
            is_first_word=position.is_first_word,
            is_last_word=position.is_last_word,
        )
        return self.evaluate_word(word)
