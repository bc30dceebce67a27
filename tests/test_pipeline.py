"""Tests for the keyword benchmark pipeline."""
import json

import pytest

from config.config import BenchmarkConfig, NormalizationConfig
from correction import KeywordDetection
from evaluation.pipeline import BenchmarkReport, KeywordBenchmark, count_dictionary_hits, summarize, write_report
from evaluation.run_evaluation import main


@pytest.fixture
def report(dataset_dir):
    benchmark = KeywordBenchmark(BenchmarkConfig(data_dir=str(dataset_dir)), show_progress=False)
    return benchmark.run()


class TestKeywordBenchmark:

    def test_scores_loadable_items(self, report):
        assert [row["fileId"] for row in report.rows] == ["a", "b"]

    def test_correction_improves_wer(self, report):
        # Act
        row = report.rows[0]

        # Assert
        assert row["hypothesis"] == "the report by Erikson Smith"
        assert row["wer"] == 0.0
        assert row["werBaseline"] == 20.0

    def test_dictionary_counts(self, report):
        first, second = report.rows

        assert (first["dictFound"], first["dictTotal"]) == (1, 2)
        assert first["ctcDetections"][0]["source"] == "ctc"
        assert (second["dictFound"], second["dictTotal"]) == (1, 1)
        assert second["ctcDetections"] == [
            {"word": "Acme", "score": 0.0, "startTime": 0.0, "endTime": 0.0, "source": "hypothesis"}
        ]

    def test_summary(self, report):
        summary = report.summary

        assert summary["totalTests"] == 2
        assert summary["avgWer"] == 0.0
        assert summary["avgBaselineWer"] == 10.0
        assert summary["dictPass"] == 2
        assert summary["dictTotal"] == 3
        assert summary["dictRate"] == 66.67
        assert summary["totalAudioDuration"] == 6.0

    def test_max_files(self, dataset_dir):
        config = BenchmarkConfig(data_dir=str(dataset_dir), max_files=1)

        report = KeywordBenchmark(config, show_progress=False).run()

        assert len(report.rows) == 1

    def test_basic_normalizer(self, dataset_dir):
        benchmark = KeywordBenchmark(
            BenchmarkConfig(data_dir=str(dataset_dir)),
            NormalizationConfig(mode="basic"),
            show_progress=False,
        )

        assert benchmark.run().summary["avgWer"] == 0.0

    def test_empty_directory(self, tmp_path):
        report = KeywordBenchmark(BenchmarkConfig(data_dir=str(tmp_path)), show_progress=False).run()

        assert report.rows == []
        assert report.summary["totalTests"] == 0
        assert report.summary["rtfx"] == 0.0

    def test_dataframe(self, report):
        df = report.to_dataframe()

        assert list(df.index) == ["a", "b"]
        assert df.loc["a", "ctcDetections"] == 1


def test_dictionary_hits_not_double_counted():
    # Arrange
    detections = (KeywordDetection("Acme", 1.0), KeywordDetection("Zeta", -20.0))

    # Act
    found, details = count_dictionary_hits(("Acme", "Zeta"), detections, "acme and zeta")

    # Assert
    assert found == 2
    assert [d["source"] for d in details] == ["ctc", "ctc", "hypothesis"]


def test_dictionary_fallback_requires_whole_word():
    found, _ = count_dictionary_hits(("Acme",), (), "acmes everywhere")

    assert found == 0


def test_summarize_empty():
    assert summarize([])["avgWer"] == 0.0


def test_write_report(tmp_path, report):
    # Act
    path = write_report(report, tmp_path / "out" / "report.json")

    # Assert
    data = json.loads(path.read_text(encoding="utf-8"))
    assert set(data) == {"summary", "results"}
    assert data["summary"]["totalTests"] == 2
    assert data["results"][0]["fileId"] == "a"


def test_report_to_dict():
    report = BenchmarkReport(rows=[], summary={"totalTests": 0})

    assert report.to_dict() == {"summary": {"totalTests": 0}, "results": []}


class TestCommandLine:

    def test_main_writes_report(self, tmp_path, dataset_dir, clean_env):
        # Arrange
        output = tmp_path / "results.json"
        argv = ["--data-dir", str(dataset_dir), "--output", str(output), "--log-dir", str(tmp_path / "logs")]

        # Act
        code = main(argv, config_dir=tmp_path / "config")

        # Assert
        assert code == 0
        assert json.loads(output.read_text(encoding="utf-8"))["summary"]["totalTests"] == 2
        assert list((tmp_path / "logs").glob("*.log"))

    def test_main_fails_without_items(self, tmp_path, clean_env):
        empty = tmp_path / "empty"
        empty.mkdir()
        argv = ["--data-dir", str(empty), "--output", str(tmp_path / "r.json"), "--log-dir", str(tmp_path / "logs")]

        assert main(argv, config_dir=tmp_path / "config") == 1

    def test_main_rejects_bad_environment(self, tmp_path, clean_env):
        clean_env.setenv("KWS_MAX_FILES", "many")

        assert main([], config_dir=tmp_path / "config") == 2
