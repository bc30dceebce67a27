"""Keyword benchmark orchestrating correction and scoring over a dataset.

For every item the base transcript is corrected with the keyword
detections, both reference and hypothesis are normalized, and the word
error rate is computed. Dictionary recall counts keywords the detector
found confidently, falling back to a whole-word search of the corrected
hypothesis for keywords it missed.

Design goals
------------
1. Safe failures: an unreadable item is logged and skipped, the run goes on.
2. Deterministic: items are processed in sorted id order.
3. Report layout matches the earlier benchmark JSON (camelCase keys).
"""
from __future__ import annotations

import json
import re
import time
from dataclasses import dataclass, field
from functools import partial
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Set, Tuple

import pandas as pd
from loguru import logger
from tqdm import tqdm

from config.config import BenchmarkConfig, NormalizationConfig
from core.error_handler import handle_exceptions, log_execution_time
from core.exceptions import ReportError
from correction.corrector import KeywordCorrector
from correction.models import KeywordDetection
from normalizer import basic_normalize, get_default_normalizer
from normalizer.text_utils import split_words

from .dataset import BenchmarkItem, discover_items, load_item
from .metrics import compute_percentiles, word_error_rate

Normalizer = Callable[[str], str]


def build_normalizer(config: NormalizationConfig) -> Normalizer:
    if config.mode == "basic":
        return partial(basic_normalize, remove_diacritics=config.remove_diacritics)
    return get_default_normalizer().normalize


def _round(value: float, digits: int = 2) -> float:
    return round(value, digits)


@dataclass
class BenchmarkReport:
    """Per-item rows plus the run summary."""
    rows: List[Dict[str, Any]] = field(default_factory=list)
    summary: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {"summary": self.summary, "results": self.rows}

    def to_dataframe(self) -> pd.DataFrame:
        """One row per item; detection details are reduced to a count."""
        if not self.rows:
            return pd.DataFrame()
        df = pd.DataFrame(self.rows)
        df["ctcDetections"] = df["ctcDetections"].apply(len)
        return df.set_index("fileId")


class KeywordBenchmark:
    """Runs keyword correction and WER scoring over a directory of items.

    Attributes:
        config: Dataset location, limits and score thresholds
        corrector: Correction engine applied to each base transcript
        normalize: Text normalizer applied before scoring
    """

    def __init__(
        self,
        config: BenchmarkConfig,
        normalization: Optional[NormalizationConfig] = None,
        corrector: Optional[KeywordCorrector] = None,
        show_progress: bool = True,
    ):
        self.config = config
        self.normalize = build_normalizer(normalization or NormalizationConfig())
        self.corrector = corrector or KeywordCorrector(min_score=config.min_score)
        self.show_progress = show_progress

    @log_execution_time(level="INFO")
    def run(self) -> BenchmarkReport:
        file_ids = discover_items(self.config.data_dir, self.config.max_files)
        if not file_ids:
            logger.warning(f"No test files found in {self.config.data_dir}")
            return BenchmarkReport(summary=summarize([]))

        logger.info(f"Processing {len(file_ids)} test files from {self.config.data_dir}")
        rows: List[Dict[str, Any]] = []
        for file_id in tqdm(file_ids, desc="keyword-benchmark", bar_format="{desc} {n_fmt}/{total_fmt}",
                            ncols=40, disable=not self.show_progress):
            result = load_item(self.config.data_dir, file_id)
            if result.is_failure():
                logger.warning(f"Skipping {file_id}: {result.error}")
                continue
            row = self.score_item(result.unwrap())
            if row is None:
                continue
            rows.append(row)
            logger.info(f"{file_id}: WER {row['wer']:.1f}%, Dict: {row['dictFound']}/{row['dictTotal']}")

        summary = summarize(rows)
        logger.info(
            f"Total tests: {summary['totalTests']}, average WER: {summary['avgWer']:.2f}%, "
            f"dict recall: {summary['dictPass']}/{summary['dictTotal']} ({summary['dictRate']:.1f}%)"
        )
        return BenchmarkReport(rows=rows, summary=summary)

    @handle_exceptions(message="Failed to score item")
    def score_item(self, item: BenchmarkItem) -> Optional[Dict[str, Any]]:
        """Score one item; returns None when it has no base transcript."""
        base_text = item.transcript.text
        if not base_text.strip():
            logger.warning(f"Skipping {item.file_id}: empty base transcript")
            return None

        start = time.perf_counter()
        hypothesis = self.corrector.correct(base_text, item.detections, item.transcript.token_timings)
        reference_words = split_words(self.normalize(item.reference))
        hypothesis_words = split_words(self.normalize(hypothesis))
        wer = word_error_rate(reference_words, hypothesis_words)
        processing_time = time.perf_counter() - start

        baseline_wer = word_error_rate(reference_words, split_words(self.normalize(base_text)))
        dict_found, details = count_dictionary_hits(
            item.dictionary, item.detections, hypothesis, self.config.dictionary_min_score
        )

        return {
            "fileId": item.file_id,
            "reference": item.reference,
            "hypothesis": hypothesis,
            "wer": _round(wer * 100),
            "werBaseline": _round(baseline_wer * 100),
            "dictFound": dict_found,
            "dictTotal": len(item.dictionary),
            "audioLength": _round(item.audio_length),
            "processingTime": _round(processing_time, 3),
            "ctcDetections": details,
        }


def count_dictionary_hits(
    dictionary: Tuple[str, ...],
    detections: Tuple[KeywordDetection, ...],
    hypothesis: str,
    min_score: float = -10.0,
) -> Tuple[int, List[Dict[str, Any]]]:
    """
    Count dictionary keywords recovered by the detector or the hypothesis.

    Every detection above ``min_score`` counts once. Dictionary words the
    detector did not find count when they occur as a whole word in the
    lowercased hypothesis.

    Returns:
        Tuple of (found count, detection details in report layout)
    """
    found = 0
    details: List[Dict[str, Any]] = []
    found_words: Set[str] = set()

    for detection in detections:
        details.append({**detection.to_dict(), "source": "ctc"})
        if detection.score > min_score:
            found += 1
            found_words.add(detection.term.lower())

    hypothesis_lower = hypothesis.lower()
    for word in dictionary:
        word_lower = word.lower()
        if word_lower in found_words:
            continue
        if re.search(rf"\b{re.escape(word_lower)}\b", hypothesis_lower):
            found += 1
            found_words.add(word_lower)
            details.append({"word": word, "score": 0.0, "startTime": 0.0, "endTime": 0.0, "source": "hypothesis"})

    return found, details


def summarize(rows: List[Dict[str, Any]]) -> Dict[str, Any]:
    total_tests = len(rows)
    dict_pass = sum(r["dictFound"] for r in rows)
    dict_total = sum(r["dictTotal"] for r in rows)
    total_audio = sum(r["audioLength"] for r in rows)
    total_processing = sum(r["processingTime"] for r in rows)
    wers = [r["wer"] for r in rows]
    percentiles = compute_percentiles(wers) if wers else None

    return {
        "totalTests": total_tests,
        "avgWer": _round(sum(wers) / total_tests) if total_tests else 0.0,
        "avgBaselineWer": _round(sum(r["werBaseline"] for r in rows) / total_tests) if total_tests else 0.0,
        "dictPass": dict_pass,
        "dictTotal": dict_total,
        "dictRate": _round(dict_pass / dict_total * 100) if dict_total else 0.0,
        "totalAudioDuration": _round(total_audio),
        "totalProcessingTime": _round(total_processing),
        "rtfx": _round(total_audio / total_processing) if total_processing > 0 else 0.0,
        "werP50": _round(percentiles.p50) if percentiles else 0.0,
        "werP95": _round(percentiles.p95) if percentiles else 0.0,
    }


def write_report(report: BenchmarkReport, path: Path | str) -> Path:
    """Write the report as pretty, key-sorted JSON.

    Raises:
        ReportError: If the file cannot be written
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(report.to_dict(), indent=2, sort_keys=True, ensure_ascii=False), encoding="utf-8")
    except OSError as e:
        raise ReportError(f"Failed to write report {path}: {e}") from e
    logger.info(f"Results written to: {path}")
    return path
