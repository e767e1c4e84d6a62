"""Tests for challenge metrics and their export."""

import csv
import json

import pytest

from cubepack.monitoring import (
    BatchMetrics,
    ChallengeMetrics,
    export_to_csv,
    export_to_json,
    format_summary,
)
from cubepack.runner.challenge import parse_challenge, solve


@pytest.fixture
def solved_metrics():
    request = parse_challenge("2 2 2 8")
    return ChallengeMetrics.from_result("c0", request, solve(request), runtime_ms=1.5)


@pytest.fixture
def unsolved_metrics():
    request = parse_challenge("3 3 3 1")
    return ChallengeMetrics.from_result("c1", request, solve(request), runtime_ms=0.5)


class TestChallengeMetrics:
    def test_from_result(self, solved_metrics):
        assert solved_metrics.cube_count == 8
        assert solved_metrics.placed_count == 8
        assert solved_metrics.fill_pct == pytest.approx(100.0)
        assert solved_metrics.order == "desc"
        assert solved_metrics.solved

    def test_to_dict_iso_timestamp(self, solved_metrics):
        d = solved_metrics.to_dict()
        assert isinstance(d["finished_at"], str)
        assert d["challenge_id"] == "c0"


class TestBatchMetrics:
    def test_aggregates(self, solved_metrics, unsolved_metrics):
        batch = BatchMetrics("b")
        batch.add(solved_metrics)
        batch.add(unsolved_metrics)
        assert batch.total_challenges == 2
        assert batch.solved_count == 1
        assert batch.total_cubes_placed == 9
        assert batch.avg_fill_pct == pytest.approx((100.0 + 100.0 / 27) / 2)
        assert batch.runtime_ms == pytest.approx(2.0)

    def test_export_json(self, solved_metrics, tmp_path):
        batch = BatchMetrics("b")
        batch.add(solved_metrics)
        path = tmp_path / "nested" / "b.json"
        export_to_json(batch, path)
        data = json.loads(path.read_text())
        assert data["batch_id"] == "b"
        assert data["challenges"][0]["placed_count"] == 8

    def test_export_csv_empty_has_header(self, tmp_path):
        path = tmp_path / "b.csv"
        export_to_csv(BatchMetrics("b"), path)
        with path.open() as f:
            rows = list(csv.reader(f))
        assert rows[0][0] == "challenge_id"
        assert len(rows) == 1

    def test_summary(self, solved_metrics):
        batch = BatchMetrics("b")
        batch.add(solved_metrics)
        summary = format_summary(batch)
        assert "Batch: b" in summary
        assert "Solved:     1" in summary
