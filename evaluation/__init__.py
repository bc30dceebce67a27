"""Transcript evaluation package: metrics, dataset loading and benchmark pipeline.

Modules
-------
metrics:        Edit distance, WER (with breakdown), CER and percentiles.
dataset:        Discovery and loading of ``<id>.dictionary.txt`` items.
pipeline:       Keyword benchmark orchestration and report writing.
run_evaluation: Command-line entry point.

Only the metrics are re-exported here; import ``evaluation.pipeline``
directly for the benchmark runner.
"""
from .metrics import (
    Percentiles,
    WerBreakdown,
    char_error_rate,
    compute_percentiles,
    edit_distance,
    wer_breakdown,
    word_error_rate,
)

__all__ = [
    "edit_distance",
    "word_error_rate",
    "wer_breakdown",
    "WerBreakdown",
    "char_error_rate",
    "compute_percentiles",
    "Percentiles",
]
