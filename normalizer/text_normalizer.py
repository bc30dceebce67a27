"""Transcript normalization for WER scoring."""
from __future__ import annotations

import re
import unicodedata
from functools import lru_cache
from typing import List, Optional, Pattern, Sequence, Tuple

from loguru import logger

from .number_parser import NumberParser
from .spelling import SpellingDictionary
from .tables import (
    ABBREVIATIONS,
    CONTRACTIONS,
    CURRENCY_WORDS,
    DIACRITIC_TRANSLATION,
    FILLER_WORDS,
    NUMBER_WORDS,
    ONES_WORDS,
    SYMBOL_WORDS,
    TEENS,
    TIME_MARKERS,
    TENS,
    Rule,
)
from .text_utils import collapse_whitespace, strip_annotations

CompiledRule = Tuple[Pattern[str], str]


def _word_rules(rules: Sequence[Rule]) -> List[CompiledRule]:
    """Compile (word, replacement) pairs into whole-word patterns."""
    return [(re.compile(rf"\b{re.escape(word)}\b"), replacement) for word, replacement in rules]


def _replace_literal(text: str, rules: Sequence[Rule]) -> str:
    for old, new in rules:
        text = text.replace(old, new)
    return text


class TextNormalizer:
    """Maps raw transcript text to a canonical form for comparison.

    The pipeline is an ordered sequence of rewriting stages. Later stages
    assume earlier ones already ran (abbreviations are expanded while their
    periods still mark word ends, compound numbers are folded before single
    number words, and so on), so the order in :meth:`normalize` must not be
    rearranged.

    Every stage is a pattern rewrite that either matches or leaves the text
    alone, which makes normalization total: it never raises on any string.
    """

    def __init__(
        self,
        spelling: Optional[SpellingDictionary] = None,
        number_parser: Optional[NumberParser] = None,
    ) -> None:
        """Initialize the normalizer.

        Args:
            spelling: British -> American dictionary; the bundled one by default
            number_parser: Parser used for number-word runs
        """
        self.spelling = spelling if spelling is not None else SpellingDictionary.default()
        self.number_parser = number_parser or NumberParser()
        if self.spelling.is_empty:
            logger.warning("Spelling dictionary is empty; British spellings will not be normalized")
        self._compile_patterns()

    def _compile_patterns(self) -> None:
        """Pre-compile regex patterns for efficiency."""
        self._inaudible_pattern = re.compile(r"\binaudible\b")
        self._stutter_pattern = re.compile(r"\b[a-z]{1,3}-\s")
        # "twenty twenty" is a year, not a repeat
        self._repetition_pattern = re.compile(r"\b(?!twenty\s*,?\s+twenty\b)(\w+)(\s*,?\s+\1)+\b")
        self._filler_pattern = re.compile(r"\b(?:" + "|".join(FILLER_WORDS) + r")\b")
        self._letter_digit_pattern = re.compile(r"([a-z])([0-9])")
        self._digit_letter_pattern = re.compile(r"([0-9])([a-z])")
        self._suffix_pattern = re.compile(r"([0-9])\s+(st|nd|rd|th|s)\b")
        # Keeps apostrophes, and periods/commas that sit between two digits
        self._punctuation_pattern = re.compile(r"[^\w\s'.,]|(?<!\d)[.,]|[.,](?!\d)")
        self._decimal_pattern = re.compile(r"(\d+)\s+point\s+(\d+)")
        self._leading_point_pattern = re.compile(r"\bpoint\s+(\d+)")
        self._thousands_pattern = re.compile(r"(\d),(\d)")
        self._period_pattern = re.compile(r"\.([^0-9]|$)")
        self._ad_pattern = re.compile(r"\ba d\b")
        self._time_pattern = re.compile(r"\b(\d{1,2})\s+(\d{2})\s+(am|pm)\b")
        self._currency_cleanup_pattern = re.compile(r"[.$¢€£]([^0-9])")
        self._percent_cleanup_pattern = re.compile(r"([^0-9])%")
        self._final_symbol_pattern = re.compile(r"[^\w\s.]|(?<!\d)\.|\.(?!\d)")

        self._spelling_rules = _word_rules(self.spelling.pairs())
        self._abbreviation_rules = _word_rules(ABBREVIATIONS)
        self._time_marker_rules = [
            (re.compile(rf"(?<=\d)(\s*){re.escape(marker)}\b"), rf"\g<1>{replacement}")
            for marker, replacement in TIME_MARKERS
        ]
        self._year_rules = self._build_year_rules()
        self._compound_rules = _word_rules(
            [(f"{tens_word} {ones_word}", str(tens_value + ones_value))
             for tens_word, tens_value in TENS
             for ones_value, ones_word in enumerate(ONES_WORDS, start=1)]
        )
        self._number_word_rules = _word_rules(NUMBER_WORDS)

    @staticmethod
    def _build_year_rules() -> List[CompiledRule]:
        # 2029 down to 2020 so "twenty twenty one" is not eaten by "twenty twenty"
        rules: List[Rule] = []
        for digit in range(9, -1, -1):
            suffix = f" {ONES_WORDS[digit - 1]}" if digit else ""
            rules.append((f"twenty twenty{suffix}", f"202{digit}"))
        for teen_word, teen_digits in TEENS:
            rules.append((f"twenty {teen_word}", f"20{teen_digits}"))
        return _word_rules(rules)

    @staticmethod
    def _apply_rules(text: str, rules: Sequence[CompiledRule]) -> str:
        for pattern, replacement in rules:
            text = pattern.sub(replacement, text)
        return text

    def _fold_decimals(self, text: str) -> str:
        """"21 point 5" -> "21.5", then a leading "point 5" -> "0.5"."""
        text = self._decimal_pattern.sub(r"\1.\2", text)
        return self._leading_point_pattern.sub(r"0.\1", text)

    def _space_letter_digit_boundaries(self, text: str) -> str:
        """"covid19" -> "covid 19" while keeping ordinals such as "21st" intact."""
        text = self._letter_digit_pattern.sub(r"\1 \2", text)
        text = self._digit_letter_pattern.sub(r"\1 \2", text)
        return self._suffix_pattern.sub(r"\1\2", text)

    def normalize(self, text: str) -> str:
        """
        Normalize transcript text for WER comparison.

        Args:
            text: Raw reference or hypothesis text

        Returns:
            Lowercase words separated by single spaces
        """
        if not text:
            return ""

        normalized = text.lower()

        # Annotation and disfluency cleanup
        normalized = self._inaudible_pattern.sub("", normalized)
        normalized = self._stutter_pattern.sub("", normalized)
        normalized = self._repetition_pattern.sub(r"\1", normalized)
        normalized = normalized.replace("g'day", "good day")

        # Word-level rewrites while punctuation still marks word ends
        normalized = self._apply_rules(normalized, self._spelling_rules)
        normalized = self._apply_rules(normalized, self._abbreviation_rules)
        normalized = self._apply_rules(normalized, self._time_marker_rules)

        normalized = strip_annotations(normalized)
        normalized = self._filler_pattern.sub("", normalized)
        normalized = normalized.replace(" '", "'")
        normalized = normalized.replace(" and a half", " point five")
        normalized = self._space_letter_digit_boundaries(normalized)
        normalized = normalized.translate(DIACRITIC_TRANSLATION)

        # Symbols and punctuation
        normalized = _replace_literal(normalized, SYMBOL_WORDS)
        normalized = self._punctuation_pattern.sub(" ", normalized)
        normalized = _replace_literal(normalized, CONTRACTIONS)

        # Numbers
        normalized = self._apply_rules(normalized, self._year_rules)
        normalized = self._apply_rules(normalized, self._compound_rules)
        normalized = self._fold_decimals(normalized)
        normalized = self.number_parser.fold_number_runs(normalized)
        normalized = self._apply_rules(normalized, self._number_word_rules)
        normalized = self._fold_decimals(normalized)
        normalized = self._thousands_pattern.sub(r"\1\2", normalized)

        # Leftover periods and symbols
        normalized = self._period_pattern.sub(r" \1", normalized)
        normalized = self._ad_pattern.sub("ad", normalized)
        normalized = self._time_pattern.sub(r"\1 \2 \3", normalized)
        normalized = _replace_literal(normalized, CURRENCY_WORDS)
        normalized = self._currency_cleanup_pattern.sub(r" \1", normalized)
        normalized = self._percent_cleanup_pattern.sub(r"\1 ", normalized)
        normalized = self._final_symbol_pattern.sub(" ", normalized)

        return collapse_whitespace(normalized)

    def __call__(self, text: str) -> str:
        return self.normalize(text)


def _fold_character(char: str) -> str:
    folded = char.translate(DIACRITIC_TRANSLATION)
    if folded != char:
        return folded
    category = unicodedata.category(char)
    if category == "Mn":
        return ""
    if category[0] in "SPZ":
        return " "
    return char


def _replace_symbol(char: str) -> str:
    return " " if unicodedata.category(char)[0] in "SPZ" else char


def basic_normalize(text: str, remove_diacritics: bool = False) -> str:
    """
    Light normalization without any linguistic rewriting.

    Lowercases, drops bracketed/parenthesized annotations, applies NFKD and
    replaces symbols, punctuation and separators with spaces. With
    ``remove_diacritics`` combining marks are dropped and the fixed
    diacritic table is applied; otherwise marks are kept and the text is
    recomposed.

    Args:
        text: Raw text
        remove_diacritics: Whether to fold accented letters to ASCII

    Returns:
        Normalized text with single spaces
    """
    if not text:
        return ""

    normalized = strip_annotations(text.lower())
    normalized = unicodedata.normalize("NFKD", normalized)

    if remove_diacritics:
        normalized = "".join(_fold_character(c) for c in normalized)
    else:
        normalized = "".join(_replace_symbol(c) for c in normalized)
        normalized = unicodedata.normalize("NFC", normalized)

    return collapse_whitespace(normalized)


@lru_cache(maxsize=1)
def get_default_normalizer() -> TextNormalizer:
    """Shared normalizer built on the bundled spelling dictionary."""
    return TextNormalizer()


def normalize(text: str) -> str:
    """Normalize text with the shared default normalizer."""
    return get_default_normalizer().normalize(text)
