"""Monitoring module for cubepack.

Provides metrics tracking and export for packing challenge runs.
"""

from .metrics import (
    BatchMetrics,
    ChallengeMetrics,
    export_to_csv,
    export_to_json,
    format_summary,
)

__all__ = [
    "BatchMetrics",
    "ChallengeMetrics",
    "export_to_csv",
    "export_to_json",
    "format_summary",
]
