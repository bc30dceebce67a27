"""
Keyword correction for recognizer transcripts.

Fuses a fluent base transcript with the output of a high-recall keyword
detector. Detected vocabulary terms are spliced into the base text in
two passes:

    1. Fuzzy pass: a transcript word (or window of words) that is
       similar to the keyword is replaced by it.
    2. Timing pass: keywords the fuzzy pass did not place are aligned to
       the transcript word whose time interval overlaps the detection.

The engine is stateless between calls and never mutates its inputs.
"""
from __future__ import annotations

import re
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from loguru import logger

from normalizer.text_utils import strip_punctuation

from .models import AppliedCorrection, CorrectionResult, KeywordDetection, TokenTiming
from .similarity import STOP_WORDS, are_similar
from .timing import build_word_timings, find_best_overlap

DEFAULT_MIN_SCORE = -10.0
MAX_LENGTH_RATIO = 2.0


def match_case(replacement: str, original: str) -> str:
    """Capitalize the replacement's first letter if the original word is capitalized."""
    original_clean = strip_punctuation(original)
    if replacement and original_clean[:1].isupper():
        return replacement[0].upper() + replacement[1:]
    return replacement


def _clean(word: str) -> str:
    return strip_punctuation(word).lower()


def _word_spans(text: str) -> List[Tuple[int, int]]:
    """Character spans of the whitespace-separated words in ``text``."""
    return [match.span() for match in re.finditer(r"\S+", text)]


class KeywordCorrector:
    """
    Two-pass keyword correction engine.

    Attributes:
        min_score: Detections scoring at or below this value are ignored
    """

    def __init__(self, min_score: float = DEFAULT_MIN_SCORE) -> None:
        self.min_score = min_score

    def correct(
        self,
        base_text: str,
        detections: Iterable[KeywordDetection],
        token_timings: Optional[Sequence[TokenTiming]] = None,
        min_score: Optional[float] = None,
    ) -> str:
        """Return ``base_text`` with detected keywords spliced in."""
        return self.correct_with_details(base_text, detections, token_timings, min_score).text

    def correct_with_details(
        self,
        base_text: str,
        detections: Iterable[KeywordDetection],
        token_timings: Optional[Sequence[TokenTiming]] = None,
        min_score: Optional[float] = None,
    ) -> CorrectionResult:
        """
        Apply both correction passes and report every splice made.

        Args:
            base_text: Transcript from the base recognizer
            detections: Keyword detections in detector order
            token_timings: Sub-word timings of the base transcript, if any
            min_score: Overrides the corrector's threshold for this call

        Returns:
            CorrectionResult with the corrected text and applied corrections
        """
        threshold = self.min_score if min_score is None else min_score
        valid = [d for d in detections if d.score > threshold and d.term.strip()]
        if not valid:
            return CorrectionResult(text=base_text)

        text = base_text
        applied: List[AppliedCorrection] = []
        used: Set[str] = set()

        for detection in valid:
            text = self._fuzzy_pass(text, detection, used, applied)

        if token_timings:
            text = self._timing_pass(text, valid, token_timings, used, applied)

        return CorrectionResult(text=text, corrections=tuple(applied))

    def _fuzzy_pass(
        self,
        text: str,
        detection: KeywordDetection,
        used: Set[str],
        applied: List[AppliedCorrection],
    ) -> str:
        keyword = detection.term
        keyword_lower = keyword.lower()
        parts = keyword_lower.split()
        spans = _word_spans(text)
        words = [text[start:end] for start, end in spans]

        if len(parts) > 1:
            for i in range(len(words) - len(parts) + 1):
                window = words[i:i + len(parts)]
                if all(are_similar(_clean(w), part) for w, part in zip(window, parts)):
                    used.add(keyword)
                    return self._splice(text, spans[i][0], spans[i + len(parts) - 1][1], keyword, "fuzzy", applied)
            return text

        for (start, end), word in zip(spans, words):
            word_clean = _clean(word)
            if not word_clean:
                continue
            if word_clean != keyword_lower and are_similar(word_clean, keyword_lower):
                used.add(keyword)
                return self._splice(text, start, end, keyword, "fuzzy", applied)
        return text

    def _timing_pass(
        self,
        text: str,
        detections: Sequence[KeywordDetection],
        token_timings: Sequence[TokenTiming],
        used: Set[str],
        applied: List[AppliedCorrection],
    ) -> str:
        word_timings = build_word_timings(token_timings)
        if not word_timings:
            return text

        for detection in detections:
            keyword = detection.term
            if keyword in used:
                continue

            index = find_best_overlap(detection, word_timings)
            if index is None:
                continue

            original = word_timings[index].word
            original_clean = _clean(original)
            if original_clean == keyword.lower() or original_clean in STOP_WORDS:
                continue
            if len(original_clean) / len(keyword) > MAX_LENGTH_RATIO:
                logger.debug(f"Skipping '{original}' for '{keyword}': word too long for alignment")
                continue

            # First whole-word occurrence; gone if an earlier splice replaced it
            match = re.search(rf"(?<!\w){re.escape(original)}(?!\w)", text)
            if match is None:
                continue
            text = self._splice(text, match.start(), match.end(), keyword, "timing", applied)
        return text

    @staticmethod
    def _splice(
        text: str,
        start: int,
        end: int,
        keyword: str,
        method: str,
        applied: List[AppliedCorrection],
    ) -> str:
        original = text[start:end]
        replacement = match_case(keyword, original.split()[0])
        applied.append(AppliedCorrection(original, replacement, keyword, method))
        logger.debug(f"{method} correction: '{original}' -> '{replacement}'")
        return text[:start] + replacement + text[end:]


def apply_keyword_corrections(
    base_text: str,
    detections: Iterable[KeywordDetection],
    token_timings: Optional[Sequence[TokenTiming]] = None,
    min_score: float = DEFAULT_MIN_SCORE,
) -> str:
    """Functional shortcut for :meth:`KeywordCorrector.correct`."""
    return KeywordCorrector(min_score).correct(base_text, detections, token_timings)
