"""
Challenge runner — turns text challenges into packing runs.

A challenge line is whitespace-separated integers:

    <length> <width> <height> <count of 1³> <count of 2³> ...

e.g. ``4 4 4 0 0 0 1`` asks whether one 4³ cube fills a 4×4×4 box.

The answer is the number of cubes placed when the container is filled
completely and ``-1`` otherwise (or the count and both volumes with
``--report-volumes``).

Modes:
    cubepack                     interactive, one challenge per line
    cubepack 2 2 2 8             one-shot
    cubepack --batch file.yaml   batch, metrics exported to --results-dir
"""

from __future__ import annotations

import argparse
import sys
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, TextIO

import yaml
from pydantic import ValidationError

from cubepack.algorithms.first_fit import FirstFitPacker
from cubepack.config import RunnerConfig, load_config
from cubepack.core.models import Container
from cubepack.monitoring.metrics import (
    BatchMetrics,
    ChallengeMetrics,
    export_to_csv,
    export_to_json,
    format_summary,
)
from cubepack.runner.cubes import SORT_ORDERS, SortOrder, build_cubes
from cubepack.runner.schemas import ChallengeRequest, ChallengeResult
from cubepack.simulator.validator import validate_packing

UNSOLVED = -1


class ChallengeInputError(ValueError):
    """A challenge could not be understood."""


# ─────────────────────────────────────────────────────────────────────────────
# Parsing
# ─────────────────────────────────────────────────────────────────────────────

def _make_request(dims: List[int], counts: List[int], order: SortOrder) -> ChallengeRequest:
    if len(dims) != 3:
        raise ChallengeInputError(
            f"Missing arguments. Box size {len(dims)} is invalid. "
            f"Box must have [length, width, height]"
        )
    if not counts:
        raise ChallengeInputError(
            "Unsolvable problem due: missing arguments, cubes were not provided"
        )
    try:
        return ChallengeRequest(
            length=dims[0], width=dims[1], height=dims[2],
            counts=counts, order=order,
        )
    except ValidationError as e:
        raise ChallengeInputError(str(e)) from e


def parse_challenge(line: str, order: SortOrder = SortOrder.DESC) -> ChallengeRequest:
    """
    Parse one challenge line.

    Raises:
        ChallengeInputError: non-integer tokens, fewer than three box
                             dimensions, no cube counts, or values out of range.
    """
    tokens = line.split()
    try:
        numbers = [int(t) for t in tokens]
    except ValueError as e:
        raise ChallengeInputError(f"Challenge must contain integers only: {line.strip()!r}") from e
    return _make_request(numbers[:3], numbers[3:], order)


# ─────────────────────────────────────────────────────────────────────────────
# Solving and output
# ─────────────────────────────────────────────────────────────────────────────

def solve(request: ChallengeRequest, validate: bool = False, verbose: bool = False) -> ChallengeResult:
    """
    Pack the request's cubes into a fresh container.

    Args:
        request:  Validated challenge.
        validate: Re-check the finished container with the voxel validator.
        verbose:  Print per-pass progress.
    """
    container = Container(request.length, request.width, request.height)
    cubes = build_cubes(request.counts, request.order)
    result = FirstFitPacker(verbose=verbose).pack(container, cubes)
    if validate:
        validate_packing(container)
    return ChallengeResult.from_packing(result)


def format_result(result: ChallengeResult, report_volumes: bool = False) -> str:
    """Count when the container is full, ``-1`` otherwise; or the full report."""
    if report_volumes:
        return (
            f"{result.placed_count} "
            f"filled={result.filled_volume} unfilled={result.unfilled_volume}"
        )
    return str(result.placed_count if result.solved else UNSOLVED)


def answer(line: str, config: RunnerConfig) -> str:
    """Parse, solve and format a single challenge line."""
    request = parse_challenge(line, config.order)
    result = solve(request, validate=config.validate, verbose=config.verbose)
    return format_result(result, config.report_volumes)


def run_interactive(
    config: RunnerConfig,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> None:
    """Answer challenges line by line until end of input."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    print(config.prompt, file=stdout, flush=True)
    for line in stdin:
        if not line.strip():
            continue
        try:
            print(answer(line, config), file=stdout, flush=True)
        except ChallengeInputError as e:
            print(e, file=stdout, flush=True)


# ─────────────────────────────────────────────────────────────────────────────
# Batch mode
# ─────────────────────────────────────────────────────────────────────────────

def load_batch(path: Path | str, default_order: SortOrder = SortOrder.DESC) -> List[ChallengeRequest]:
    """
    Load challenges from a YAML file.

    Format:
        challenges:
          - box: [4, 4, 4]
            cubes: [0, 0, 0, 1]
          - box: [2, 2, 2]
            cubes: [8]
            order: asc

    Raises:
        ChallengeInputError: malformed file or challenge entry.
    """
    path = Path(path)
    with path.open() as f:
        data = yaml.safe_load(f) or {}
    entries = data.get("challenges") if isinstance(data, dict) else None
    if not isinstance(entries, list):
        raise ChallengeInputError(f"{path}: expected a 'challenges' list")

    requests = []
    for i, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ChallengeInputError(f"{path}: challenge {i} is not a mapping")
        box = entry.get("box", [])
        cubes = entry.get("cubes", [])
        if not isinstance(box, list) or not isinstance(cubes, list):
            raise ChallengeInputError(f"{path}: challenge {i} needs 'box' and 'cubes' lists")
        order_name = entry.get("order", default_order.value)
        if not isinstance(order_name, str) or order_name not in SORT_ORDERS:
            raise ChallengeInputError(f"{path}: challenge {i} has unknown order {order_name!r}")
        requests.append(_make_request(box, cubes, SORT_ORDERS[order_name]))
    return requests


def run_batch(path: Path | str, config: RunnerConfig) -> BatchMetrics:
    """Solve every challenge in a YAML batch file and export the metrics."""
    requests = load_batch(path, config.order)
    batch_id = f"batch_{datetime.now(timezone.utc).strftime('%Y%m%d_%H%M%S')}"
    metrics = BatchMetrics(batch_id=batch_id)

    for i, request in enumerate(requests):
        t0 = time.perf_counter()
        result = solve(request, validate=config.validate, verbose=config.verbose)
        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        metrics.add(ChallengeMetrics.from_result(f"challenge_{i:03d}", request, result, elapsed_ms))
        print(f"challenge_{i:03d}: {format_result(result, config.report_volumes)}")

    results_dir = Path(config.results_dir)
    export_to_json(metrics, results_dir / f"{batch_id}.json")
    export_to_csv(metrics, results_dir / f"{batch_id}_challenges.csv")
    print(format_summary(metrics))
    return metrics


# ─────────────────────────────────────────────────────────────────────────────
# CLI
# ─────────────────────────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cubepack",
        description="Pack cubes into a box with a greedy first-fit heuristic",
    )
    parser.add_argument(
        "challenge", nargs="*",
        help="One-shot challenge: length width height count1 count2 ...",
    )
    parser.add_argument("--config", help="YAML runner configuration")
    parser.add_argument(
        "--order", choices=list(SORT_ORDERS.keys()),
        help="Size order the cubes are packed in (default: desc)",
    )
    parser.add_argument(
        "--report-volumes", action="store_true", default=None,
        help="Print count and volumes instead of count / -1",
    )
    parser.add_argument(
        "--validate", action="store_true", default=None,
        help="Re-check every packing with the voxel validator",
    )
    parser.add_argument(
        "--verbose", action="store_true", default=None,
        help="Print packer progress per pass",
    )
    parser.add_argument("--batch", help="YAML file with a list of challenges")
    parser.add_argument("--results-dir", help="Directory for batch metrics (default: results)")
    return parser


def resolve_config(args: argparse.Namespace) -> RunnerConfig:
    """Config file values overridden by any flag given on the command line."""
    config = load_config(args.config) if args.config else RunnerConfig()
    overrides = {
        "order": args.order,
        "report_volumes": args.report_volumes,
        "validate": args.validate,
        "verbose": args.verbose,
        "results_dir": args.results_dir,
    }
    merged = config.to_dict()
    merged.update({k: v for k, v in overrides.items() if v is not None})
    return RunnerConfig.from_dict(merged)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = resolve_config(args)

    if args.batch:
        try:
            run_batch(args.batch, config)
        except ChallengeInputError as e:
            print(e, file=sys.stderr)
            return 2
        return 0

    if args.challenge:
        try:
            print(answer(" ".join(args.challenge), config))
        except ChallengeInputError as e:
            print(e, file=sys.stderr)
            return 2
        return 0

    run_interactive(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
