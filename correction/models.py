"""Value types exchanged with the keyword correction engine.

All records are frozen: detections and timings come from external
recognizers and are only read here, never modified.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

WORD_BOUNDARY_MARKER = "▁"


def _pick(data: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


@dataclass(frozen=True)
class KeywordDetection:
    """A vocabulary term spotted in the audio by the keyword detector.

    Attributes:
        term: Keyword text, possibly several words ("Jane Erikson")
        score: Detector confidence, higher is more confident (log-probability)
        start_time: Interval start in seconds
        end_time: Interval end in seconds
    """
    term: str
    score: float
    start_time: float = 0.0
    end_time: float = 0.0

    def __post_init__(self) -> None:
        if self.start_time > self.end_time:
            raise ValueError(
                f"Detection '{self.term}' starts after it ends ({self.start_time} > {self.end_time})"
            )

    @property
    def midpoint(self) -> float:
        return (self.start_time + self.end_time) / 2

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "KeywordDetection":
        return cls(
            term=str(_pick(data, "term", "word", default="")),
            score=float(_pick(data, "score", default=0.0)),
            start_time=float(_pick(data, "startTime", "start_time", default=0.0)),
            end_time=float(_pick(data, "endTime", "end_time", default=0.0)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "word": self.term,
            "score": round(self.score, 2),
            "startTime": round(self.start_time, 2),
            "endTime": round(self.end_time, 2),
        }


@dataclass(frozen=True)
class TokenTiming:
    """Timing of one sub-word unit; a leading ``▁`` marks a new word."""
    token: str
    start_time: float
    end_time: float

    @property
    def starts_word(self) -> bool:
        return self.token.startswith(WORD_BOUNDARY_MARKER)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TokenTiming":
        return cls(
            token=str(_pick(data, "token", default="")),
            start_time=float(_pick(data, "startTime", "start_time", default=0.0)),
            end_time=float(_pick(data, "endTime", "end_time", default=0.0)),
        )


@dataclass(frozen=True)
class WordTiming:
    word: str
    start_time: float
    end_time: float

    def overlap(self, start: float, end: float) -> float:
        return max(0.0, min(end, self.end_time) - max(start, self.start_time))

    def contains(self, instant: float) -> bool:
        return self.start_time <= instant <= self.end_time


@dataclass(frozen=True)
class Transcript:
    """Base recognizer output: text plus optional per-token timings."""
    text: str
    token_timings: Optional[Tuple[TokenTiming, ...]] = None

    @property
    def has_timings(self) -> bool:
        return bool(self.token_timings)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Transcript":
        raw_timings = data.get("tokenTimings") or data.get("token_timings")
        timings = None
        if raw_timings:
            timings = tuple(TokenTiming.from_dict(t) for t in raw_timings)
        return cls(text=str(data.get("text") or ""), token_timings=timings)


@dataclass(frozen=True)
class AppliedCorrection:
    original: str
    replacement: str
    keyword: str
    method: str  # "fuzzy" or "timing"


@dataclass(frozen=True)
class CorrectionResult:
    """Corrected text together with the splices that produced it."""
    text: str
    corrections: Tuple[AppliedCorrection, ...] = field(default_factory=tuple)

    @property
    def changed(self) -> bool:
        return bool(self.corrections)

    def keywords(self) -> List[str]:
        return [c.keyword for c in self.corrections]


def detections_from_dicts(items: Iterable[Mapping[str, Any]]) -> List[KeywordDetection]:
    return [KeywordDetection.from_dict(item) for item in items]
