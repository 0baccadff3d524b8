"""Batch statistics and reporting for simulated War games."""

from honorwar.analysis.statistics import (
    BatchStatistics,
    compute_statistics,
)
from honorwar.analysis.report import (
    print_summary,
    save_json,
)

__all__ = [
    # Statistics
    "BatchStatistics",
    "compute_statistics",
    # Reporting
    "print_summary",
    "save_json",
]
