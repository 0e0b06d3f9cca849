"""
Unit tests for the headline rule chain.

Each case checks both the decision and the rule that produced it, so a
change in rule priority shows up even when the final case happens to match.
"""

import pytest

from headline_case.headline_config import HeadlineConfig
from headline_case.rule_evaluator import HeadlineRuleEvaluator
from headline_case.rules import (
    CaseDecision,
    ForcedLowercaseRule,
    PositionRule,
    WordContext,
    alphabetic_core,
)

CAP = CaseDecision.CAPITALIZE
LOW = CaseDecision.LOWERCASE


@pytest.fixture
def evaluator():
    return HeadlineRuleEvaluator()


class TestAlphabeticCore:

    @pytest.mark.parametrize('text, core', [
        ('Hello', 'hello'),
        ('"Hello!"', 'hello'),
        ('State-of-the-Art,', 'state-of-the-art'),
        ("don't", "don't"),
        ('v.', 'v'),
        ('vs.', 'vs'),
        ("'90s", 's'),
        ('$7', ''),
        ('--', ''),
        ('U.S.', 'u.s'),
    ])
    def test_core_extraction(self, text, core):
        assert alphabetic_core(text) == core


class TestRulePriority:

    @pytest.mark.parametrize('text, decision, rule_type', [
        ('quick', CAP, 'long_word'),
        ('fox', CAP, 'medium_word'),
        ('ox', LOW, 'default'),
        ('is', CAP, 'forced_capitalize'),
        ('IT,', CAP, 'forced_capitalize'),
        ('nor', CAP, 'forced_capitalize'),
        ('the', LOW, 'forced_lowercase'),
        ('(THE)', LOW, 'forced_lowercase'),
        ('via', LOW, 'forced_lowercase'),
        ('v.', LOW, 'default'),
        ('vs.', LOW, 'default'),
        ('$7', LOW, 'default'),
        ('state-of-the-art', CAP, 'long_word'),
    ])
    def test_middle_word(self, evaluator, text, decision, rule_type):
        verdict = evaluator.evaluate_word(WordContext.from_text(text))
        assert verdict.decision is decision
        assert verdict.rule_type == rule_type

    @pytest.mark.parametrize('is_first, is_last', [(True, False), (False, True), (True, True)])
    def test_position_overrides_lowercase_list(self, evaluator, is_first, is_last):
        verdict = evaluator.evaluate_word(WordContext.from_text('the', is_first, is_last))
        assert verdict.decision is CAP
        assert verdict.rule_type == 'position'

    def test_verdict_carries_core(self, evaluator):
        verdict = evaluator.evaluate_word(WordContext.from_text('(THE)'))
        assert verdict.core == 'the'


class TestCustomConfiguration:

    def test_higher_threshold_moves_words_to_medium_rule(self):
        evaluator = HeadlineRuleEvaluator(HeadlineConfig(min_capitalize_length=6))
        assert evaluator.evaluate_word(WordContext.from_text('quick')).rule_type == 'medium_word'
        assert evaluator.evaluate_word(WordContext.from_text('quickly')).rule_type == 'long_word'

    def test_custom_lists(self):
        config = HeadlineConfig(always_capitalize=('ox',), always_lowercase=('from',))
        evaluator = HeadlineRuleEvaluator(config)
        assert evaluator.evaluate_word(WordContext.from_text('ox')).decision is CAP
        assert evaluator.evaluate_word(WordContext.from_text('from')).decision is LOW
        # Default list entries no longer apply
        assert evaluator.evaluate_word(WordContext.from_text('is')).rule_type == 'default'

    def test_custom_chain_without_catch_all(self):
        evaluator = HeadlineRuleEvaluator(rule_classes=(PositionRule, ForcedLowercaseRule))
        verdict = evaluator.evaluate_word(WordContext.from_text('fox'))
        assert verdict.decision is LOW
        assert verdict.rule_type == 'unmatched'

    def test_empty_chain_rejected(self):
        with pytest.raises(ValueError):
            HeadlineRuleEvaluator(rule_classes=())

    def test_rules_share_the_evaluator_config(self):
        config = HeadlineConfig(min_capitalize_length=5)
        evaluator = HeadlineRuleEvaluator(config)
        assert all(rule.config is config for rule in evaluator.rules)
        assert [rule.rule_type for rule in evaluator.rules] == [
            'position', 'forced_capitalize', 'forced_lowercase',
            'long_word', 'medium_word', 'default',
        ]
