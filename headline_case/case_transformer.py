"""
Case Transformer - applies a rule verdict to a token and rebuilds the text.
"""

import re
from typing import Iterable

from .rules import CaseDecision

_FIRST_LETTER = re.compile(r'[a-zA-Z]')
_FIRST_LETTER_RUN = re.compile(r'[a-zA-Z]+')


def capitalize_word(text: str) -> str:
    """
    Uppercase the first ASCII letter of a token and nothing else.

    "state-of-the-art" -> "State-of-the-art", '"why' -> '"Why', "iPhone" -> "IPhone".
    """
    return _FIRST_LETTER.sub(lambda match: match.group(0).upper(), text, count=1)


def lowercase_word(text: str, core: str) -> str:
    """
    Replace the first run of ASCII letters with the word's alphabetic core.

    This is a substitution, not a case flip: "(THE)" -> "(the)", "V." -> "v.".
    Tokens without letters come back unchanged.
    """
    # A callable replacement keeps backslashes in the core literal
    return _FIRST_LETTER_RUN.sub(lambda match: core, text, count=1)


def apply_decision(text: str, decision: CaseDecision, core: str) -> str:
    if decision is CaseDecision.CAPITALIZE:
        return capitalize_word(text)
    return lowercase_word(text, core)


def reassemble(pieces: Iterable[str]) -> str:
    """Join token texts in order without adding or removing characters."""
    return ''.join(pieces)
