"""Per-run log file for benchmark executions.

Mirrors every loguru message emitted during a run into its own file under
the configured log directory, framed by start and end markers.
"""
from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from loguru import logger

RUN_FORMAT = "[{time:YYYY-MM-DD HH:mm:ss}] {level}: {message}"


class RunLogger:
    """File sink wrapper tracking one benchmark run.

    Usage:
        with RunLogger("logs/runs") as run_log:
            run_log.log_kv("Configuration", {...})
            ...
    """

    def __init__(self, log_dir: str | Path = "logs/runs", level: str = "INFO", prefix: str = "benchmark"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.level = level

        # minute_hour_day_month_year, plus seconds to keep quick reruns apart
        timestamp = datetime.now().strftime("%M_%H_%d_%m_%Y_%S")
        self.log_path = self.log_dir / f"{prefix}_run_{timestamp}.log"

        self._sink_id: Optional[int] = None
        self._started = False
        self._ended = False

    @property
    def attached(self) -> bool:
        return self._sink_id is not None

    def attach(self) -> None:
        """Attach the loguru file sink (idempotent)."""
        if self._sink_id is None:
            self._sink_id = logger.add(str(self.log_path), format=RUN_FORMAT, level=self.level)

    def detach(self) -> None:
        if self._sink_id is not None:
            logger.remove(self._sink_id)
            self._sink_id = None

    def start(self, config: Optional[dict] = None) -> None:
        if self._started:
            return
        self._started = True
        self.attach()
        logger.info("=== RUN START ===")
        if config is not None:
            self.log_kv("Configuration", config)

    def log_kv(self, key: str, value: Any) -> None:
        if isinstance(value, (dict, list)):
            value = json.dumps(value, indent=2, sort_keys=True, default=str)
        logger.info(f"{key}: {value}")

    def end(self, summary: Optional[dict] = None) -> None:
        """Write the end marker and release the file (idempotent)."""
        if self._ended:
            return
        self._ended = True
        if summary is not None:
            self.log_kv("Summary", summary)
        logger.info("=== RUN END ===")
        self.detach()

    def __enter__(self) -> "RunLogger":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc is not None:
            logger.error(f"Run aborted: {exc}")
        self.end()
