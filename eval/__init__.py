# -*- coding: utf-8 -*-
"""
Evaluation utilities: run metrics, environment statistics and text reports.
"""

from __future__ import annotations

from .metrics import (
    PerformanceMetrics,
    environment_stats,
    reachable_region_size,
    is_valid_path,
)
from .report import (
    ReportWriter,
    format_single_report,
    format_multi_report,
    write_report,
    SINGLE_REPORT_PATH,
    MULTI_REPORT_PATH,
)

__all__ = [
    # metrics
    "PerformanceMetrics", "environment_stats", "reachable_region_size", "is_valid_path",
    # reports
    "ReportWriter", "format_single_report", "format_multi_report", "write_report",
    "SINGLE_REPORT_PATH", "MULTI_REPORT_PATH",
]
