"""
Segmenter - splits text into alternating whitespace and content tokens.

Splitting happens on whitespace runs only. Hyphens, apostrophes and other
punctuation stay inside their content token.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class TokenKind(Enum):
    WHITESPACE = 'whitespace'
    CONTENT = 'content'


@dataclass(frozen=True)
class Token:
    """A verbatim slice of the input."""
    text: str
    kind: TokenKind
    word_index: Optional[int] = None

    @property
    def is_content(self) -> bool:
        return self.kind is TokenKind.CONTENT


# ECMAScript whitespace and line terminators. Python's \s and str.isspace()
# also accept \x1c-\x1f and \x85, which stay inside content tokens here.
WHITESPACE_CHARS = (
    '\t\n\x0b\x0c\r \xa0\u1680'
    + ''.join(chr(code) for code in range(0x2000, 0x200b))
    + '\u2028\u2029\u202f\u205f\u3000\ufeff'
)

_WHITESPACE_CLASS = re.escape(WHITESPACE_CHARS)
_TOKEN_PATTERN = re.compile(f'(?P<space>[{_WHITESPACE_CLASS}]+)|[^{_WHITESPACE_CLASS}]+')


def strip_whitespace(text: str) -> str:
    """Strip leading and trailing WHITESPACE_CHARS only."""
    return text.strip(WHITESPACE_CHARS)


def segment(text: str) -> List[Token]:
    """
    Split text into tokens without dropping or normalizing any character.

    Args:
        text: Text to segment (normally already stripped by the caller)

    Returns:
        Tokens in input order; content tokens carry a 0-based word_index
    """
    tokens: List[Token] = []
    word_index = 0
    for match in _TOKEN_PATTERN.finditer(text):
        piece = match.group(0)
        if match.group('space') is not None:
            tokens.append(Token(piece, TokenKind.WHITESPACE))
        else:
            tokens.append(Token(piece, TokenKind.CONTENT, word_index))
            word_index += 1
    return tokens
