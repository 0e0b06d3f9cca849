"""
Guard Test Suite

Behavior the headline formatter must keep even where a fuller reading of the
style guide would suggest otherwise. Each guard documents the current
behavior and the style-guide case it deliberately does not cover.

Guards implemented:
- Guard 1: Exception-list entries ending in punctuation ("v.", "vs.")
- Guard 2: Hyphenated compounds get a single capital
- Guard 3: Punctuation, digits and whitespace pass through untouched
"""
