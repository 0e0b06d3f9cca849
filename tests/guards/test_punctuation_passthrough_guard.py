"""
Guard 3: Punctuation, digits and whitespace pass through untouched

Only ASCII letters are ever changed. Colons and dashes do not trigger
capitalization of the following word.
"""

import pytest

from headline_case import to_headline_case


@pytest.mark.parametrize('text, expected', [
    ('company raises $7 million', 'Company Raises $7 Million'),
    ('budget hits $34 billion', 'Budget Hits $34 Billion'),
    ('"why not?" she asked', '"Why Not?" She Asked'),
    ('(the) end', '(The) End'),
    ('the plan - a new approach', 'The Plan - a New Approach'),
    ('the answer: a new way', 'The Answer: a New Way'),
    ("don't stop now", "Don't Stop Now"),
])
def test_punctuation_preserved(text, expected):
    assert to_headline_case(text) == expected


def test_tabs_and_newlines_preserved():
    assert to_headline_case('over\tthe\nrainbow') == 'Over\tthe\nRainbow'


def test_punctuation_only_words():
    assert to_headline_case('news -- today') == 'News -- Today'
    assert to_headline_case('...') == '...'
    assert to_headline_case('2024') == '2024'


def test_non_ascii_letters_untouched():
    assert to_headline_case('über alles') == 'üBer Alles'


def test_information_separator_does_not_split_words():
    # '\x1c' is not whitespace, so "the\x1cend" is a single first-and-last word
    assert to_headline_case('the\x1cend of it') == 'The\x1cend of It'
    assert to_headline_case('\x1c') == '\x1c'


def test_non_breaking_space_splits_words():
    assert to_headline_case('hello\xa0world') == 'Hello\xa0World'
