"""Core infrastructure: exceptions, result type and error-handling decorators."""
from __future__ import annotations

from .error_handler import as_result, handle_exceptions, log_execution_time
from .exceptions import ConfigurationError, DatasetError, KeywordEvalException, ReportError
from .result import Failure, Result, Success

__all__ = [
    "KeywordEvalException",
    "ConfigurationError",
    "DatasetError",
    "ReportError",
    "Result",
    "Success",
    "Failure",
    "handle_exceptions",
    "as_result",
    "log_execution_time",
]
