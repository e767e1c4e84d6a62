"""Metrics tracking and export for packing challenges.

Provides dataclasses for per-challenge and per-batch metrics and utilities
for exporting results to JSON and CSV formats.
"""

from __future__ import annotations

import csv
import json
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from cubepack.runner.schemas import ChallengeRequest, ChallengeResult

CSV_FIELDS = [
    "challenge_id", "length", "width", "height", "order", "cube_count",
    "placed_count", "filled_volume", "unfilled_volume", "fill_pct",
    "passes", "solved", "runtime_ms", "finished_at",
]


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class ChallengeMetrics:
    """Metrics for a single packing challenge.

    Attributes:
        challenge_id: Identifier of the challenge within its batch.
        length, width, height: Container dimensions.
        order: Size order the cubes were packed in.
        cube_count: Number of cubes offered.
        placed_count: Number of cubes placed.
        filled_volume: Volume covered by placed cubes.
        unfilled_volume: Volume left empty.
        fill_pct: Filled volume percentage (0-100).
        passes: Packer passes needed.
        solved: Whether the container was filled completely.
        runtime_ms: Wall time spent packing.
        finished_at: Timestamp when packing finished.
    """

    challenge_id: str
    length: int
    width: int
    height: int
    order: str
    cube_count: int
    placed_count: int
    filled_volume: int
    unfilled_volume: int
    fill_pct: float
    passes: int
    solved: bool
    runtime_ms: float = 0.0
    finished_at: datetime = field(default_factory=_now)

    @classmethod
    def from_result(
        cls,
        challenge_id: str,
        request: ChallengeRequest,
        result: ChallengeResult,
        runtime_ms: float = 0.0,
    ) -> "ChallengeMetrics":
        volume = request.length * request.width * request.height
        return cls(
            challenge_id=challenge_id,
            length=request.length,
            width=request.width,
            height=request.height,
            order=request.order.value,
            cube_count=request.cube_count,
            placed_count=result.placed_count,
            filled_volume=result.filled_volume,
            unfilled_volume=result.unfilled_volume,
            fill_pct=100.0 * result.filled_volume / volume,
            passes=result.passes,
            solved=result.solved,
            runtime_ms=runtime_ms,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary with ISO timestamp."""
        d = asdict(self)
        d["finished_at"] = self.finished_at.isoformat()
        return d


@dataclass
class BatchMetrics:
    """Aggregate metrics for a batch of challenges."""

    batch_id: str
    total_challenges: int = 0
    solved_count: int = 0
    total_cubes_placed: int = 0
    avg_fill_pct: float = 0.0
    runtime_ms: float = 0.0
    started_at: datetime = field(default_factory=_now)
    challenges: list[ChallengeMetrics] = field(default_factory=list)

    def add(self, metrics: ChallengeMetrics) -> None:
        """Add one challenge's metrics to the batch.

        Example:
            >>> bm = BatchMetrics("batch_001")
            >>> bm.add(ChallengeMetrics("c0", 2, 2, 2, "desc", 8, 8, 8, 0, 100.0, 1, True))
            >>> bm.solved_count
            1
        """
        self.challenges.append(metrics)
        self.total_challenges += 1
        self.solved_count += int(metrics.solved)
        self.total_cubes_placed += metrics.placed_count
        self.runtime_ms += metrics.runtime_ms
        self.avg_fill_pct = sum(c.fill_pct for c in self.challenges) / self.total_challenges

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        d["started_at"] = self.started_at.isoformat()
        d["challenges"] = [c.to_dict() for c in self.challenges]
        return d


def export_to_json(metrics: BatchMetrics, output_path: Path | str) -> None:
    """Export batch metrics (including every challenge) to a JSON file."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with output_path.open("w") as f:
        json.dump(metrics.to_dict(), f, indent=2)


def export_to_csv(metrics: BatchMetrics, output_path: Path | str) -> None:
    """Export per-challenge metrics to a CSV file (header only if empty)."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with output_path.open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        writer.writeheader()
        for challenge in metrics.challenges:
            writer.writerow(challenge.to_dict())


def format_summary(metrics: BatchMetrics) -> str:
    """Human-readable summary of a batch run."""
    lines = [
        "=" * 60,
        f"Batch: {metrics.batch_id}",
        "=" * 60,
        f"Challenges: {metrics.total_challenges}",
        f"Solved:     {metrics.solved_count}",
        f"Cubes placed: {metrics.total_cubes_placed}",
        f"Average fill: {metrics.avg_fill_pct:.2f}%",
        f"Runtime: {metrics.runtime_ms:.1f} ms",
        "=" * 60,
    ]
    return "\n".join(lines)
