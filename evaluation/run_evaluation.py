"""Command-line interface for the keyword benchmark.

Example:
    python -m evaluation.run_evaluation --data-dir data/earnings --output results.json

Settings resolve as defaults → config/benchmark.json → environment → CLI
(see ``config.config.ConfigLoader``).
"""
from __future__ import annotations

import sys
from dataclasses import asdict
from pathlib import Path
from typing import List

from dotenv import load_dotenv
from loguru import logger

from config.config import ConfigLoader, build_arg_parser
from core.exceptions import ConfigurationError, DatasetError, ReportError
from logger.run_logger import RunLogger

from .pipeline import KeywordBenchmark, write_report


def configure_console(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level, format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}")


def main(argv: List[str] | None = None, config_dir: Path = Path("config")) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    load_dotenv()

    try:
        config, unknown = ConfigLoader(config_dir).load(argv)
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2
    if unknown:
        build_arg_parser().error(f"unrecognized arguments: {' '.join(unknown)}")

    configure_console(config.log_level)
    logger.info("Resolved configuration:")
    logger.info(f" data_dir={config.benchmark.data_dir} output={config.benchmark.output_path}")
    logger.info(f" max_files={config.benchmark.max_files} min_score={config.benchmark.min_score}")
    logger.info(f" normalizer={config.normalization.mode}")

    run_log = RunLogger(config.log_dir, level=config.log_level)
    run_log.start(asdict(config))
    try:
        benchmark = KeywordBenchmark(config.benchmark, config.normalization)
        report = benchmark.run()
        write_report(report, config.benchmark.output_path)
    except (DatasetError, ReportError) as e:
        logger.error(f"Benchmark failed: {e}")
        return 1
    finally:
        run_log.end()

    if report.summary["totalTests"] == 0:
        logger.error(f"No test items evaluated in {config.benchmark.data_dir}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
