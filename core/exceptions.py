"""Exception hierarchy for the evaluation toolkit.

The normalization and correction core never raises these: they are reserved
for the collaborators around it (configuration, dataset files, reports).
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional


class KeywordEvalException(Exception):
    """Base exception for all evaluation toolkit errors."""
    pass


class ConfigurationError(KeywordEvalException):
    """Raised when configuration is invalid or missing."""
    pass


class DatasetError(KeywordEvalException):
    """Raised when a dataset item cannot be read.

    Attributes:
        item_id: Identifier of the offending item, when known
        path: File that failed to load, when known
    """

    def __init__(self, message: str, item_id: Optional[str] = None, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.item_id = item_id
        self.path = path


class ReportError(KeywordEvalException):
    """Raised when a benchmark report cannot be written."""
    pass
