"""Word-level timing reconstruction and interval alignment."""
from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from .models import WORD_BOUNDARY_MARKER, KeywordDetection, TokenTiming, WordTiming

SKIPPED_TOKENS = frozenset({"", "<blank>", "<pad>"})
MIDPOINT_BONUS = 0.1


def build_word_timings(token_timings: Iterable[TokenTiming]) -> List[WordTiming]:
    """
    Merge sub-word unit timings into word timings.

    A unit starting with the boundary marker opens a new word, as does the
    first unit overall; other units are appended to the current word.
    Empty and placeholder units are skipped.

    Args:
        token_timings: Sub-word units in time order

    Returns:
        Reconstructed words with the start of their first unit and the end
        of their last unit
    """
    words: List[WordTiming] = []
    current = ""
    word_start = 0.0
    word_end = 0.0

    for timing in token_timings:
        token = timing.token
        if token in SKIPPED_TOKENS:
            continue

        starts_word = token.startswith(WORD_BOUNDARY_MARKER) or not current
        if starts_word:
            if current:
                words.append(WordTiming(current, word_start, word_end))
            current = token[len(WORD_BOUNDARY_MARKER):] if timing.starts_word else token
            word_start = timing.start_time
        else:
            current += token
        word_end = timing.end_time

    if current:
        words.append(WordTiming(current, word_start, word_end))
    return words


def find_best_overlap(detection: KeywordDetection, words: Sequence[WordTiming]) -> Optional[int]:
    """Index of the word best aligned with the detection interval.

    A word is a candidate when it overlaps the interval or contains its
    midpoint. Candidates are ranked by overlap plus a small bonus for
    holding the midpoint; the earliest word wins ties. Returns None when
    no word qualifies.
    """
    best_index: Optional[int] = None
    best_score = 0.0
    midpoint = detection.midpoint

    for index, word in enumerate(words):
        overlap = word.overlap(detection.start_time, detection.end_time)
        contains_midpoint = word.contains(midpoint)
        if overlap <= 0 and not contains_midpoint:
            continue
        score = overlap + (MIDPOINT_BONUS if contains_midpoint else 0.0)
        if best_index is None or score > best_score:
            best_index = index
            best_score = score

    return best_index
