"""Dataset discovery and loading for keyword benchmark runs.

An item is identified by ``<id>.dictionary.txt`` (one keyword per line,
non-empty file). Next to it live the reference transcript
``<id>.text.txt`` and the recognizer output ``<id>.hypothesis.json``::

    {
      "text": "base transcript",
      "tokenTimings": [{"token": "▁the", "startTime": 0.0, "endTime": 0.2}],
      "detections": [{"term": "Erikson", "score": -3.1, "startTime": 1.0, "endTime": 1.6}],
      "audioLength": 12.5
    }
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from loguru import logger

from core.error_handler import as_result
from core.exceptions import DatasetError
from correction.models import KeywordDetection, Transcript, detections_from_dicts

DICTIONARY_SUFFIX = ".dictionary.txt"
REFERENCE_SUFFIX = ".text.txt"
HYPOTHESIS_SUFFIX = ".hypothesis.json"


@dataclass(frozen=True)
class BenchmarkItem:
    """One evaluation item loaded from disk."""
    file_id: str
    dictionary: Tuple[str, ...]
    reference: str
    transcript: Transcript
    detections: Tuple[KeywordDetection, ...] = field(default_factory=tuple)
    audio_length: float = 0.0


def discover_items(data_dir: Path | str, max_files: Optional[int] = None) -> List[str]:
    """List item ids with a non-empty dictionary file, sorted by path.

    Raises:
        DatasetError: If ``data_dir`` is not a directory
    """
    data_dir = Path(data_dir)
    if not data_dir.is_dir():
        raise DatasetError(f"Data directory not found: {data_dir}", path=data_dir)

    file_ids: List[str] = []
    for path in sorted(data_dir.iterdir()):
        name = path.name
        if not name.endswith(DICTIONARY_SUFFIX) or not path.is_file():
            continue
        if path.stat().st_size == 0:
            logger.debug(f"Skipping empty dictionary {path}")
            continue
        file_ids.append(name[: -len(DICTIONARY_SUFFIX)])

    if max_files is not None:
        file_ids = file_ids[:max_files]
    return file_ids


def read_dictionary(path: Path) -> Tuple[str, ...]:
    with open(path, "r", encoding="utf-8") as f:
        return tuple(line.strip() for line in f if line.strip())


def _read_reference(path: Path) -> str:
    if not path.exists():
        logger.warning(f"Missing reference transcript {path}; scoring against empty text")
        return ""
    return path.read_text(encoding="utf-8").strip()


def _read_hypothesis(path: Path, file_id: str) -> dict:
    if not path.exists():
        raise DatasetError(f"Missing hypothesis file {path}", item_id=file_id, path=path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise DatasetError(f"Malformed hypothesis file {path}: {e}", item_id=file_id, path=path) from e
    if not isinstance(data, dict):
        raise DatasetError(f"Hypothesis file {path} must contain a JSON object", item_id=file_id, path=path)
    return data


@as_result(DatasetError, OSError, ValueError)
def load_item(data_dir: Path | str, file_id: str) -> BenchmarkItem:
    """Load one item; failures come back as a Failure instead of raising."""
    data_dir = Path(data_dir)
    dictionary = read_dictionary(data_dir / f"{file_id}{DICTIONARY_SUFFIX}")
    reference = _read_reference(data_dir / f"{file_id}{REFERENCE_SUFFIX}")
    data = _read_hypothesis(data_dir / f"{file_id}{HYPOTHESIS_SUFFIX}", file_id)

    return BenchmarkItem(
        file_id=file_id,
        dictionary=dictionary,
        reference=reference,
        transcript=Transcript.from_dict(data),
        detections=tuple(detections_from_dicts(data.get("detections") or [])),
        audio_length=float(data.get("audioLength") or 0.0),
    )
