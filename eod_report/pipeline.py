from __future__ import annotations

from typing import Callable, Sequence

from eod_report.aggregate import Aggregates, fold_row
from eod_report.contracts import DEFAULT_PROGRESS_EVERY, ReportJobError
from eod_report.discounts import discount_rate, line_amounts
from eod_report.header import build_header_index
from eod_report.rows import Rejected, parse_row

ProgressSink = Callable[[int], None]


class EmptyInputError(ReportJobError):
    def __init__(self) -> None:
        super().__init__("no data")


def run_job(
    lines: Sequence[str],
    progress: ProgressSink | None = None,
    progress_every: int = DEFAULT_PROGRESS_EVERY,
) -> Aggregates:
    """
    Fold non-blank input lines (header first) into a fresh Aggregates.

    Raises EmptyInputError when there is no data line and MissingHeaderError
    when a required column is absent. Per-row problems never raise.
    """
    if len(lines) < 2:
        raise EmptyInputError()

    header = build_header_index(lines[0])
    aggregates = Aggregates()

    for index in range(1, len(lines)):
        result = parse_row(lines[index], header, line_number=index + 1)
        if isinstance(result, Rejected):
            aggregates.record_rejection()
            continue

        aggregates.add_warnings(result.warnings)
        amounts = line_amounts(result.row, discount_rate(result.row))
        fold_row(aggregates, result.row, amounts)

        if progress is not None and index % progress_every == 0:
            progress(index)

    return aggregates
