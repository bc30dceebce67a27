"""Text utility functions shared by normalization and correction."""

import re
import unicodedata
from typing import List

_BRACKETS_PATTERN = re.compile(r"[<\[].*?[>\]]")
_PARENTHESES_PATTERN = re.compile(r"\([^)]+?\)")
_WHITESPACE_PATTERN = re.compile(r"\s+")


def split_words(text: str) -> List[str]:
    """
    Split text into word tokens on any whitespace.

    Args:
        text: Raw or normalized text

    Returns:
        List of non-empty tokens
    """
    return text.split() if text else []


def _is_punctuation(char: str) -> bool:
    return unicodedata.category(char).startswith("P")


def strip_punctuation(word: str) -> str:
    """Trim Unicode punctuation from both ends of a word ("Smith," -> "Smith")."""
    start, end = 0, len(word)
    while start < end and _is_punctuation(word[start]):
        start += 1
    while end > start and _is_punctuation(word[end - 1]):
        end -= 1
    return word[start:end]


def strip_annotations(text: str) -> str:
    """Remove ``[...]``, ``<...>`` and ``(...)`` spans such as "(laughs)"."""
    text = _BRACKETS_PATTERN.sub("", text)
    return _PARENTHESES_PATTERN.sub("", text)


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE_PATTERN.sub(" ", text).strip()
