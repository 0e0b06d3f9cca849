"""
Position Tracker - marks the first and last real word of a headline.
"""

from dataclasses import dataclass
from typing import List, Sequence

from .segmenter import Token, strip_whitespace


@dataclass(frozen=True)
class WordPosition:
    token: Token
    is_first_word: bool
    is_last_word: bool


def count_real_words(tokens: Sequence[Token]) -> int:
    """Count content tokens with non-empty text."""
    return sum(1 for token in tokens if token.is_content and strip_whitespace(token.text))


def track_positions(tokens: Sequence[Token]) -> List[WordPosition]:
    """
    Attach first/last flags to every content token.

    Whitespace tokens are skipped and never receive flags. A single-word
    input yields one position that is both first and last.
    """
    total_words = count_real_words(tokens)
    positions: List[WordPosition] = []

    current_word_index = -1
    for token in tokens:
        if not token.is_content or not strip_whitespace(token.text):
            continue
        current_word_index += 1
        positions.append(WordPosition(
            token=token,
            is_first_word=current_word_index == 0,
            is_last_word=current_word_index == total_words - 1,
        ))
    return positions
