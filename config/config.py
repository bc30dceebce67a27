"""Configuration for benchmark runs.

Implements a hierarchical configuration system with the following precedence:
1. Default values (lowest priority)
2. JSON configuration file (``benchmark.json`` in the config directory)
3. Environment variables
4. Command-line arguments (highest priority)

Configuration is deep-merged across all sources, allowing partial overrides
at any level of the configuration hierarchy.
"""
from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

import argparse

from loguru import logger

from core.exceptions import ConfigurationError

NORMALIZER_MODES = ("full", "basic")
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")
CONFIG_FILENAME = "benchmark.json"


@dataclass(frozen=True)
class BenchmarkConfig:
    """Benchmark run configuration.

    Attributes:
        data_dir: Directory holding ``<id>.dictionary.txt`` items
        output_path: Where the JSON report is written
        max_files: Optional cap on the number of items evaluated
        min_score: Detections at or below this score are not used for correction
        dictionary_min_score: Detections above this score count as dictionary hits
    """
    data_dir: str = "data"
    output_path: str = "keyword_benchmark.json"
    max_files: Optional[int] = None
    min_score: float = -10.0
    dictionary_min_score: float = -10.0

    def __post_init__(self):
        if self.max_files is not None and self.max_files <= 0:
            raise ConfigurationError(f"max_files must be positive, got {self.max_files}")


@dataclass(frozen=True)
class NormalizationConfig:
    """Text normalization configuration.

    Attributes:
        mode: "full" for the complete canonicalizer, "basic" for light cleanup
        remove_diacritics: Fold accented letters in basic mode
    """
    mode: str = "full"
    remove_diacritics: bool = False

    def __post_init__(self):
        if self.mode not in NORMALIZER_MODES:
            raise ConfigurationError(f"Invalid normalizer mode: {self.mode}")


@dataclass(frozen=True)
class AppConfig:
    """Complete run configuration.

    Attributes:
        benchmark: Dataset, output and score thresholds
        normalization: How transcripts are normalized before scoring
        log_dir: Directory for per-run log files
        debug: Debug mode flag
        log_level: Logging verbosity level
    """
    benchmark: BenchmarkConfig
    normalization: NormalizationConfig
    log_dir: str = "logs/runs"
    debug: bool = False
    log_level: str = "INFO"

    def __post_init__(self):
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(f"Invalid log level: {self.log_level}")


class ConfigLoader:
    """Configuration loader with validation and hierarchy.

    Implements the loading strategy with proper precedence and deep merging
    of nested configuration dictionaries.
    """

    def __init__(self, config_dir: Path = Path("config")):
        self.config_dir = Path(config_dir)

    def load(self, argv: List[str]) -> Tuple[AppConfig, List[str]]:
        """Load configuration with proper hierarchy: defaults → file → env → CLI.

        Args:
            argv: Command-line arguments to parse

        Returns:
            Tuple of (AppConfig instance, unknown CLI arguments)

        Raises:
            ConfigurationError: If any source holds an invalid value
        """
        config_dict = self._get_defaults()
        self._deep_update(config_dict, self._load_json_config())
        self._deep_update(config_dict, self._load_env_overrides())

        cli_overrides, unknown_args = self._parse_cli_args(argv)
        self._deep_update(config_dict, cli_overrides)

        return self._build_config(config_dict), unknown_args

    def _get_defaults(self) -> Dict[str, Any]:
        return {
            "benchmark": {
                "data_dir": "data",
                "output_path": "keyword_benchmark.json",
                "max_files": None,
                "min_score": -10.0,
                "dictionary_min_score": -10.0,
            },
            "normalization": {
                "mode": "full",
                "remove_diacritics": False,
            },
            "log_dir": "logs/runs",
            "debug": False,
            "log_level": "INFO",
        }

    def _load_json_config(self) -> Dict[str, Any]:
        """Load ``benchmark.json``; a missing file contributes nothing."""
        file_path = self.config_dir / CONFIG_FILENAME
        if not file_path.exists():
            return {}
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            raise ConfigurationError(f"Failed to load {file_path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"{file_path} must contain a JSON object")
        logger.debug(f"Loaded configuration file {file_path}")
        return data

    def _load_env_overrides(self) -> Dict[str, Any]:
        """Load configuration overrides from environment variables.

        Supported environment variables:
        - KWS_DATA_DIR: Dataset directory
        - KWS_OUTPUT: Report output path
        - KWS_MAX_FILES: Maximum number of items
        - KWS_MIN_SCORE: Minimum detection score for corrections
        - KWS_NORMALIZER: Normalizer mode (full, basic)
        - DEBUG: Enable debug mode
        - LOG_LEVEL: Set logging level
        """
        overrides: Dict[str, Any] = {}
        benchmark: Dict[str, Any] = {}

        data_dir = os.getenv("KWS_DATA_DIR")
        if data_dir:
            benchmark["data_dir"] = data_dir
        output = os.getenv("KWS_OUTPUT")
        if output:
            benchmark["output_path"] = output
        max_files = self._env_number("KWS_MAX_FILES", int)
        if max_files is not None:
            benchmark["max_files"] = max_files
        min_score = self._env_number("KWS_MIN_SCORE", float)
        if min_score is not None:
            benchmark["min_score"] = min_score
        if benchmark:
            overrides["benchmark"] = benchmark

        normalizer = os.getenv("KWS_NORMALIZER")
        if normalizer:
            overrides["normalization"] = {"mode": normalizer.strip().lower()}

        if self._env_bool("DEBUG"):
            overrides["debug"] = True

        log_level = os.getenv("LOG_LEVEL")
        if log_level:
            overrides["log_level"] = log_level.upper()

        return overrides

    def _parse_cli_args(self, argv: List[str]) -> Tuple[Dict[str, Any], List[str]]:
        parser = build_arg_parser()
        known, unknown = parser.parse_known_args(argv)

        overrides: Dict[str, Any] = {}
        benchmark: Dict[str, Any] = {}
        if known.data_dir:
            benchmark["data_dir"] = known.data_dir
        if known.output:
            benchmark["output_path"] = known.output
        if known.max_files is not None:
            benchmark["max_files"] = known.max_files
        if known.min_score is not None:
            benchmark["min_score"] = known.min_score
        if benchmark:
            overrides["benchmark"] = benchmark

        normalization: Dict[str, Any] = {}
        if known.normalizer:
            normalization["mode"] = known.normalizer
        if known.remove_diacritics:
            normalization["remove_diacritics"] = True
        if normalization:
            overrides["normalization"] = normalization

        if known.log_dir:
            overrides["log_dir"] = known.log_dir
        if known.debug:
            overrides["debug"] = True
        if known.log_level:
            overrides["log_level"] = known.log_level

        return overrides, unknown

    def _build_config(self, config_dict: Dict[str, Any]) -> AppConfig:
        try:
            benchmark_config = BenchmarkConfig(**config_dict.get("benchmark", {}))
            normalization_config = NormalizationConfig(**config_dict.get("normalization", {}))
        except TypeError as e:
            raise ConfigurationError(f"Unknown configuration key: {e}") from e

        debug = bool(config_dict.get("debug", False))
        log_level = str(config_dict.get("log_level", "INFO")).upper()
        if debug and log_level == "INFO":
            log_level = "DEBUG"

        return AppConfig(
            benchmark=benchmark_config,
            normalization=normalization_config,
            log_dir=str(config_dict.get("log_dir", "logs/runs")),
            debug=debug,
            log_level=log_level,
        )

    @staticmethod
    def _env_bool(name: str, default: bool = False) -> bool:
        """True for "1", "true", "yes", "y", "on" (case-insensitive)."""
        val = os.getenv(name)
        if val is None:
            return default
        return val.strip().lower() in {"1", "true", "yes", "y", "on"}

    @staticmethod
    def _env_number(name: str, cast: Callable[[str], Any]) -> Optional[Any]:
        val = os.getenv(name)
        if val is None or not val.strip():
            return None
        try:
            return cast(val.strip())
        except ValueError as e:
            raise ConfigurationError(f"Invalid value for {name}: {val!r}") from e

    @staticmethod
    def _deep_update(target: Dict[str, Any], updates: Dict[str, Any]) -> None:
        """Recursively merge ``updates`` into ``target`` without clobbering nested dicts."""
        for key, new_val in updates.items():
            if isinstance(new_val, dict) and isinstance(target.get(key), dict):
                ConfigLoader._deep_update(target[key], new_val)  # type: ignore[index]
            else:
                target[key] = new_val


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Keyword-boosted transcript benchmark")
    parser.add_argument("--data-dir", help="Directory with <id>.dictionary.txt, <id>.text.txt, <id>.hypothesis.json")
    parser.add_argument("--output", help="Path of the JSON report")
    parser.add_argument("--max-files", type=int, help="Evaluate at most N items")
    parser.add_argument("--min-score", type=float, help="Minimum detection score used for corrections")
    parser.add_argument("--normalizer", choices=list(NORMALIZER_MODES), help="Normalization applied before scoring")
    parser.add_argument("--remove-diacritics", action="store_true", help="Fold accents in basic normalization")
    parser.add_argument("--log-dir", help="Directory for run log files")
    parser.add_argument("--debug", action="store_true", help="Enable debug mode")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Set logging level")
    return parser


def parse_app_args(argv: List[str], config_dir: Path = Path("config")) -> Tuple[AppConfig, List[str]]:
    """Convenience wrapper around :class:`ConfigLoader`."""
    return ConfigLoader(config_dir).load(argv)


__all__ = [
    "AppConfig",
    "BenchmarkConfig",
    "NormalizationConfig",
    "ConfigLoader",
    "build_arg_parser",
    "parse_app_args",
]
