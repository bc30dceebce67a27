"""
Transcript Normalization Package.

This package maps raw transcript text (ground-truth references as well as
recognizer hypotheses) to a canonical form so that word error rates
measure recognition mistakes rather than formatting differences.

Main Components:
    TextNormalizer: Ordered rewriting pipeline used for scoring
    basic_normalize: Cheap normalization without linguistic rewriting
    NumberParser: Folds spoken number runs ("nine hundred twenty five") into digits
    SpellingDictionary: Read-only British -> American spelling map

Pipeline Overview:
    - Disfluency and annotation cleanup ("th- the", "(laughs)", "um")
    - Spelling, abbreviation and contraction expansion
    - Number, year, ordinal and decimal folding
    - Symbol and punctuation removal, whitespace collapse

Design Philosophy:
    - Total functions: malformed input passes through, nothing raises
    - Order-sensitive rule tables kept as static ordered tuples
    - One shared, immutable spelling dictionary per process
"""

from __future__ import annotations

from .number_parser import NumberParser, fold_number_runs
from .spelling import SpellingDictionary
from .text_normalizer import TextNormalizer, basic_normalize, get_default_normalizer, normalize
from .text_utils import split_words, strip_annotations, strip_punctuation

__all__ = [
    # Normalization entry points
    "TextNormalizer",
    "normalize",
    "basic_normalize",
    "get_default_normalizer",

    # Components
    "NumberParser",
    "fold_number_runs",
    "SpellingDictionary",

    # Helpers
    "split_words",
    "strip_annotations",
    "strip_punctuation",
]

__version__ = "1.0.0"

EXAMPLE_INPUTS = [
    "Dr. Smith said we, we, we can't go",
    "Revenue grew to nine hundred twenty five million",
    "In twenty twenty one the margin was twenty one point five percent",
    "The colour of the programme (laughs) um changed",
]
