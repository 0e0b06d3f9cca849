"""
Headline Formatter

Converts text to New York Times style headline case:
segment -> track first/last word -> evaluate rules -> transform -> reassemble.
"""

import logging
from typing import Any, Iterable, List, Optional, Tuple, Type

from .case_transformer import apply_decision, reassemble
from .headline_config import DEFAULT_HEADLINE_CONFIG, HeadlineConfig
from .position_tracker import track_positions
from .rule_evaluator import HeadlineRuleEvaluator, RuleVerdict
from .rules import BaseHeadlineRule
from .segmenter import segment, strip_whitespace
from .services import get_vocabulary_service

logger = logging.getLogger(__name__)


class HeadlineFormatter:
    """
    Headline case converter bound to a single configuration.

    Instances hold no per-call state and can be shared between threads.
    """

    def __init__(self, config: HeadlineConfig = DEFAULT_HEADLINE_CONFIG,
                 rules: Optional[Iterable[Type[BaseHeadlineRule]]] = None):
        self.config = config
        self.evaluator = HeadlineRuleEvaluator(config, rules)

    @classmethod
    def from_config(cls, config_class: Any) -> 'HeadlineFormatter':
        """
        Build a formatter from an application config class.

        Reads HEADLINE_VOCABULARY_FILE and HEADLINE_MIN_CAPITALIZE_LENGTH
        through its get_headline_config() classmethod.

        Raises:
            HeadlineConfigError: If the configured vocabulary is inconsistent
        """
        settings = config_class.get_headline_config()
        service = get_vocabulary_service(settings.get('vocabulary_file'))
        config = service.build_config(settings.get('min_capitalize_length'))
        logger.info(f"Headline formatter configured from {service.vocabulary_file}")
        return cls(config)

    def format(self, text: Any) -> str:
        """
        Convert text to headline case.

        Returns an empty string for non-string input and for text that is
        empty once surrounding whitespace is removed.
        """
        if not text or not isinstance(text, str):
            return ''

        tokens = segment(strip_whitespace(text))
        if not tokens:
            return ''

        verdicts = {
            position.token.word_index: self.evaluator.evaluate(position)
            for position in track_positions(tokens)
        }

        pieces = []
        for token in tokens:
            verdict = verdicts.get(token.word_index) if token.is_content else None
            if verdict is None:
                pieces.append(token.text)
            else:
                pieces.append(apply_decision(token.text, verdict.decision, verdict.core))
        return reassemble(pieces)

    def explain(self, text: Any) -> List[Tuple[str, RuleVerdict]]:
        """Return each word of the text with the verdict that decided its case."""
        if not text or not isinstance(text, str):
            return []
        return [
            (position.token.text, self.evaluator.evaluate(position))
            for position in track_positions(segment(strip_whitespace(text)))
        ]


_default_formatter = HeadlineFormatter()


def to_headline_case(text: Any) -> str:
    """
    Convert a string to headline case using the built-in NYT configuration.

    Example:
        >>> to_headline_case("the quick brown fox jumps over a lazy dog")
        'The Quick Brown Fox Jumps Over a Lazy Dog'
    """
    return _default_formatter.format(text)


transform = to_headline_case
