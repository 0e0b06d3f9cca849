"""
Headline Configuration

Immutable configuration for the headline case rules: the two exception word
lists, the minimum length for automatic capitalization, and the part-of-speech
categories the length rule stands in for.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import FrozenSet, Iterable, Tuple


class HeadlineConfigError(ValueError):
    """Raised when a headline configuration is inconsistent."""


# Words that should always be capitalized (regardless of length)
ALWAYS_CAPITALIZE: Tuple[str, ...] = (
    # Single letter pronouns
    'i',
    # Two-letter verbs
    'am', 'be', 'do', 'go', 'is',
    # Two-letter pronouns
    'he', 'it', 'me', 'my', 'us', 'we',
    # Two/three-letter adverbs and other words
    'no', 'nor', 'not', 'off', 'out', 'so', 'up', 'was', 'yet',
)

# Words that should always be lowercase (unless first/last word).
# 'v.' and 'vs.' never match: trailing punctuation is stripped before lookup.
ALWAYS_LOWERCASE: Tuple[str, ...] = (
    'a', 'an', 'and', 'as', 'at', 'but', 'by', 'en', 'for', 'if', 'in',
    'of', 'on', 'or', 'the', 'to', 'v.', 'vs.', 'via',
)

MIN_CAPITALIZE_LENGTH = 4

# Informational only: the categories the length rule approximates.
CAPITALIZE_POS: Tuple[str, ...] = ('noun', 'adjective', 'adverb', 'pronoun', 'verb')


def _normalize_words(words: Iterable[str], list_name: str) -> Tuple[str, ...]:
    if isinstance(words, str) or not isinstance(words, Iterable):
        raise HeadlineConfigError(f"{list_name} must be a list of words, got {words!r}")
    normalized = []
    for word in words:
        if not isinstance(word, str):
            raise HeadlineConfigError(f"{list_name} entry {word!r} is not a string")
        normalized.append(word.lower())
    # Collapse duplicates, keep first-seen order
    return tuple(dict.fromkeys(normalized))


@dataclass(frozen=True)
class HeadlineConfig:
    """
    Read-only rule configuration bound to a HeadlineRuleEvaluator.

    The two exception lists must be disjoint; a word cannot be forced both
    ways. Entries are compared against a word's alphabetic core.
    """
    always_capitalize: Tuple[str, ...] = ALWAYS_CAPITALIZE
    always_lowercase: Tuple[str, ...] = ALWAYS_LOWERCASE
    min_capitalize_length: int = MIN_CAPITALIZE_LENGTH
    capitalize_pos: Tuple[str, ...] = CAPITALIZE_POS
    _capitalize_set: FrozenSet[str] = field(init=False, repr=False, compare=False)
    _lowercase_set: FrozenSet[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        always_capitalize = _normalize_words(self.always_capitalize, 'always_capitalize')
        always_lowercase = _normalize_words(self.always_lowercase, 'always_lowercase')

        overlap = set(always_capitalize) & set(always_lowercase)
        if overlap:
            raise HeadlineConfigError(
                f"Words cannot be both always-capitalized and always-lowercased: {sorted(overlap)}"
            )

        length = self.min_capitalize_length
        if isinstance(length, bool) or not isinstance(length, int) or length < 1:
            raise HeadlineConfigError(
                f"min_capitalize_length must be a positive integer, got {length!r}"
            )

        # Frozen dataclass: assign normalized values through object.__setattr__
        object.__setattr__(self, 'always_capitalize', always_capitalize)
        object.__setattr__(self, 'always_lowercase', always_lowercase)
        object.__setattr__(self, 'capitalize_pos', _normalize_words(self.capitalize_pos, 'capitalize_pos'))
        object.__setattr__(self, '_capitalize_set', frozenset(always_capitalize))
        object.__setattr__(self, '_lowercase_set', frozenset(always_lowercase))

    def is_always_capitalized(self, core: str) -> bool:
        return core in self._capitalize_set

    def is_always_lowercased(self, core: str) -> bool:
        return core in self._lowercase_set


DEFAULT_HEADLINE_CONFIG = HeadlineConfig()

NYT_HEADLINE_CONFIG = MappingProxyType({
    'ALWAYS_CAPITALIZE': ALWAYS_CAPITALIZE,
    'ALWAYS_LOWERCASE': ALWAYS_LOWERCASE,
    'MIN_CAPITALIZE_LENGTH': MIN_CAPITALIZE_LENGTH,
    'CAPITALIZE_POS': CAPITALIZE_POS,
})
