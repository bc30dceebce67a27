"""
Keyword Correction Package.

Splices keyword-detector results into a base recognizer transcript.

Main Components:
    KeywordCorrector: Two-pass (fuzzy, then timing) correction engine
    are_similar: Word similarity rule shared by the fuzzy pass
    build_word_timings: Sub-word to word timing reconstruction
"""

from .corrector import DEFAULT_MIN_SCORE, KeywordCorrector, apply_keyword_corrections, match_case
from .models import (
    AppliedCorrection,
    CorrectionResult,
    KeywordDetection,
    TokenTiming,
    Transcript,
    WordTiming,
    detections_from_dicts,
)
from .similarity import STOP_WORDS, are_similar, common_prefix_length, common_suffix_length, is_stop_word
from .timing import build_word_timings, find_best_overlap

__all__ = [
    "KeywordCorrector",
    "apply_keyword_corrections",
    "match_case",
    "DEFAULT_MIN_SCORE",
    "KeywordDetection",
    "TokenTiming",
    "WordTiming",
    "Transcript",
    "AppliedCorrection",
    "CorrectionResult",
    "detections_from_dicts",
    "are_similar",
    "is_stop_word",
    "STOP_WORDS",
    "common_prefix_length",
    "common_suffix_length",
    "build_word_timings",
    "find_best_overlap",
]
