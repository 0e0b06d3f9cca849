"""
Unit tests for the Position Tracker.
"""

from headline_case.position_tracker import count_real_words, track_positions
from headline_case.segmenter import segment


def test_count_ignores_whitespace_tokens():
    assert count_real_words(segment('one  two\tthree')) == 3


def test_count_of_empty_sequence():
    assert count_real_words([]) == 0


def test_first_and_last_flags():
    positions = track_positions(segment('a tale of cities'))
    flags = [(p.token.text, p.is_first_word, p.is_last_word) for p in positions]
    assert flags == [
        ('a', True, False),
        ('tale', False, False),
        ('of', False, False),
        ('cities', False, True),
    ]


def test_single_word_is_first_and_last():
    (position,) = track_positions(segment('hello'))
    assert position.is_first_word
    assert position.is_last_word


def test_whitespace_tokens_receive_no_position():
    tokens = segment('hello   world')
    positions = track_positions(tokens)
    assert len(positions) == 2
    assert all(p.token.is_content for p in positions)


def test_punctuation_only_token_counts_as_word():
    positions = track_positions(segment('news -- today'))
    assert [p.token.text for p in positions] == ['news', '--', 'today']
    assert positions[1].is_first_word is False
    assert positions[1].is_last_word is False
