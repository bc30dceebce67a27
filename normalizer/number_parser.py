"""Spoken number folding for transcript normalization."""
from __future__ import annotations

import re
from typing import Dict, List, Optional, Tuple

from .tables import MULTIPLIERS, UNIT_VALUES

# A short digit string left behind by the compound-number stage ("twenty five" -> "25").
_DIGIT_CONTINUATION = re.compile(r"\d{1,2}")


class NumberParser:
    """Merges runs of number words into digit strings.

    A run is a maximal sequence of whitespace-separated number words
    (units such as "five" or "ninety", and multipliers such as "hundred").
    Each run reduces to one or more digit strings; everything else in the
    text passes through untouched and keeps its position.

    Examples:
        - "nine hundred twenty five" -> "925"
        - "two thousand twenty one" -> "2021"
        - "five six" -> "5 6"
    """

    def __init__(
        self,
        unit_values: Optional[Dict[str, int]] = None,
        multipliers: Optional[Dict[str, int]] = None,
    ) -> None:
        self.unit_values = dict(unit_values if unit_values is not None else UNIT_VALUES)
        self.multipliers = dict(multipliers if multipliers is not None else MULTIPLIERS)

    def is_number_word(self, token: str) -> bool:
        """Return True for unit words and multipliers."""
        return token in self.unit_values or token in self.multipliers

    def fold_number_runs(self, text: str) -> str:
        """Replace every number-word run in ``text`` with its digit form.

        Args:
            text: Lowercased text, tokens separated by whitespace

        Returns:
            Text with number runs folded, tokens joined by single spaces
        """
        if not text:
            return ""

        result: List[str] = []
        run: List[str] = []

        for token in text.split():
            if self.is_number_word(token) or (run and _DIGIT_CONTINUATION.fullmatch(token)):
                run.append(token)
                continue
            if run:
                result.extend(self.parse_number_sequence(run))
                run = []
            result.append(token)

        if run:
            result.extend(self.parse_number_sequence(run))

        return " ".join(result)

    def parse_number_sequence(self, words: List[str]) -> List[str]:
        """Reduce one run of number words to its digit strings.

        Disjoint numbers inside a run ("five six") are emitted separately.
        """
        results: List[str] = []
        total: Optional[int] = None
        last_scale = 0

        for word in words:
            value, is_multiplier = self._value_of(word)

            if is_multiplier:
                total = (total or 1) * value
                last_scale = value
            elif total is None:
                total = value
                last_scale = 1
            elif self._can_merge(total, last_scale, value):
                total += value
                last_scale = 1
            else:
                results.append(str(total))
                total = value
                last_scale = 1

        if total is not None:
            results.append(str(total))

        return results

    def _value_of(self, word: str) -> Tuple[int, bool]:
        if word in self.multipliers:
            return self.multipliers[word], True
        if word in self.unit_values:
            return self.unit_values[word], False
        return int(word), False

    @staticmethod
    def _can_merge(total: int, last_scale: int, value: int) -> bool:
        # "...hundred five": a larger multiplier is still open
        if last_scale >= 100 and value < last_scale:
            return True
        # "twenty five": a round ten followed by a single digit
        tens = total % 100
        return last_scale == 1 and 20 <= tens <= 90 and tens % 10 == 0 and value < 10


_DEFAULT_PARSER = NumberParser()


def fold_number_runs(text: str) -> str:
    """Fold number-word runs using the default English tables."""
    return _DEFAULT_PARSER.fold_number_runs(text)
