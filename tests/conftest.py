"""Shared fixtures for the benchmark tests."""
import json

import pytest


def write_item(root, file_id, dictionary, reference=None, hypothesis=None):
    (root / f"{file_id}.dictionary.txt").write_text(dictionary, encoding="utf-8")
    if reference is not None:
        (root / f"{file_id}.text.txt").write_text(reference, encoding="utf-8")
    if hypothesis is not None:
        (root / f"{file_id}.hypothesis.json").write_text(json.dumps(hypothesis), encoding="utf-8")


@pytest.fixture
def dataset_dir(tmp_path):
    """Four items: two scorable, one with an empty dictionary, one without a hypothesis."""
    root = tmp_path / "data"
    root.mkdir()
    write_item(
        root, "a", "Erikson\nAcme\n",
        reference="the report by Erikson Smith",
        hypothesis={
            "text": "the report by Erik Smith",
            "tokenTimings": [
                {"token": "▁the", "startTime": 0.0, "endTime": 0.2},
                {"token": "▁report", "startTime": 0.2, "endTime": 0.6},
            ],
            "detections": [{"term": "Erikson", "score": -2.0, "startTime": 1.0, "endTime": 1.5}],
            "audioLength": 4.0,
        },
    )
    write_item(
        root, "b", "Acme\n",
        reference="acme results were strong",
        hypothesis={"text": "Acme results were strong", "audioLength": 2.0},
    )
    write_item(root, "c", "")
    write_item(root, "d", "Zeta\n", reference="zeta")
    return root


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("KWS_DATA_DIR", "KWS_OUTPUT", "KWS_MAX_FILES", "KWS_MIN_SCORE", "KWS_NORMALIZER", "DEBUG", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
