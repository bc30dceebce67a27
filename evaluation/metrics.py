from __future__ import annotations
"""Metric computations for transcript evaluation.

All functions are pure and operate on already-normalized inputs.
"""
from dataclasses import asdict, dataclass
from typing import Any, Dict, Hashable, List, Sequence, Union
import math

from rapidfuzz.distance import Levenshtein

Units = Union[str, Sequence[Hashable]]


def edit_distance(a: Units, b: Units) -> int:
    """Levenshtein distance over characters (strings) or any sequence of hashable units.

    Substitutions, insertions and deletions all cost 1.
    """
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)
    return int(Levenshtein.distance(a, b))


def word_error_rate(reference: Sequence[str], hypothesis: Sequence[str]) -> float:
    """Compute WER between two word sequences.

    WER = (S + D + I) / N with N the reference length. An empty reference
    scores 0.0 against an empty hypothesis and 1.0 otherwise. The value is
    unbounded above when the hypothesis is much longer than the reference.
    """
    if not reference:
        return 0.0 if not hypothesis else 1.0
    return edit_distance(list(reference), list(hypothesis)) / len(reference)


@dataclass(frozen=True)
class WerBreakdown:
    substitutions: int
    deletions: int
    insertions: int
    hits: int
    reference_length: int
    wer: float

    @property
    def errors(self) -> int:
        return self.substitutions + self.deletions + self.insertions

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def wer_breakdown(reference: Sequence[str], hypothesis: Sequence[str]) -> WerBreakdown:
    """WER together with its substitution / deletion / insertion counts."""
    ref = list(reference)
    hyp = list(hypothesis)
    substitutions = deletions = insertions = 0
    if ref or hyp:
        for op in Levenshtein.editops(ref, hyp):
            if op.tag == "replace":
                substitutions += 1
            elif op.tag == "delete":
                deletions += 1
            elif op.tag == "insert":
                insertions += 1
    hits = len(ref) - substitutions - deletions
    return WerBreakdown(
        substitutions=substitutions,
        deletions=deletions,
        insertions=insertions,
        hits=hits,
        reference_length=len(ref),
        wer=word_error_rate(ref, hyp),
    )


def char_error_rate(reference: str, hypothesis: str) -> float:
    ref_clean = reference.replace(" ", "")
    hyp_clean = hypothesis.replace(" ", "")
    if not ref_clean:
        return 0.0 if not hyp_clean else 1.0
    return edit_distance(ref_clean, hyp_clean) / len(ref_clean)


@dataclass
class Percentiles:
    p50: float
    p95: float
    p99: float


def compute_percentiles(values: List[float]) -> Percentiles:
    if not values:
        return Percentiles(float("nan"), float("nan"), float("nan"))
    vs = sorted(values)
    def _pct(p: float) -> float:
        k = (len(vs) - 1) * p
        f = math.floor(k)
        c = math.ceil(k)
        if f == c:
            return vs[int(k)]
        d0 = vs[f] * (c - k)
        d1 = vs[c] * (k - f)
        return d0 + d1
    return Percentiles(p50=_pct(0.5), p95=_pct(0.95), p99=_pct(0.99))
