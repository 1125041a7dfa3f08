"""Shared input/output contracts for the end-of-day sales report."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

REQUIRED_COLUMNS = (
    "orderId",
    "customerId",
    "customerName",
    "product",
    "units",
    "unitPrice",
    "region",
    "createdAt",
)

REPORT_FILENAME = "report.txt"
SUMMARY_FILENAME = "summary.json"

TOP_CUSTOMERS_LIMIT = 10
WARNINGS_DISPLAY_LIMIT = 50
MAX_DISCOUNT_RATE = 0.25

DEFAULT_PROGRESS_EVERY = 250
PROGRESS_EVERY_ENV = "EOD_REPORT_PROGRESS_EVERY"

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


class ReportJobError(Exception):
    """A file-level or header-level problem that aborts the whole run."""

    def __init__(self, message: str, code: int = EXIT_FAILURE) -> None:
        super().__init__(message)
        self.code = code


def progress_interval() -> int:
    override = os.environ.get(PROGRESS_EVERY_ENV)
    if not override:
        return DEFAULT_PROGRESS_EVERY
    try:
        value = int(override)
    except ValueError:
        return DEFAULT_PROGRESS_EVERY
    return value if value > 0 else DEFAULT_PROGRESS_EVERY


def build_run_summary(
    *,
    tool: str,
    version: str,
    input_path: Path,
    outputs: dict[str, Path],
    metrics: dict[str, Any] | None = None,
    warnings: list[str] | None = None,
) -> dict[str, Any]:
    return {
        "tool": tool,
        "version": version,
        "status": "ok",
        "input_file": str(input_path),
        "output_files": {name: str(path) for name, path in outputs.items()},
        "warnings_count": len(warnings or []),
        "metrics": metrics or {},
    }
