"""
Base Headline Rule - abstract interface for every rule in the headline chain.

A rule looks at one word and either returns a CaseDecision (the chain stops
there) or None (the next rule gets the word).
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..headline_config import HeadlineConfig

# Leading and trailing runs of anything that is not a lowercase ASCII letter
_EDGE_NON_LETTERS = re.compile(r'\A[^a-z]+|[^a-z]+\Z')


def alphabetic_core(text: str) -> str:
    """
    Lowercase a word and strip its leading and trailing non-letters.

    Internal punctuation survives: "State-of-the-Art," -> "state-of-the-art",
    "v." -> "v", "'90s" -> "s".
    """
    return _EDGE_NON_LETTERS.sub('', text.lower())


class CaseDecision(Enum):
    CAPITALIZE = 'capitalize'
    LOWERCASE = 'lowercase'


@dataclass(frozen=True)
class WordContext:
    """Everything a rule may look at for a single word."""
    text: str
    core: str
    is_first_word: bool = False
    is_last_word: bool = False

    @classmethod
    def from_text(cls, text: str, is_first_word: bool = False,
                  is_last_word: bool = False) -> 'WordContext':
        return cls(text, alphabetic_core(text), is_first_word, is_last_word)


class BaseHeadlineRule(ABC):
    """
    Abstract base class for headline rules.
    Subclasses are bound to one HeadlineConfig for their whole lifetime.
    """

    def __init__(self, config: HeadlineConfig) -> None:
        self.config = config
        self.rule_type = self._get_rule_type()

    @abstractmethod
    def _get_rule_type(self) -> str:
        """Return the short identifier of this rule."""

    @abstractmethod
    def evaluate(self, word: WordContext) -> Optional[CaseDecision]:
        """Return a decision when the rule applies, otherwise None."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(rule_type={self.rule_type!r})"
