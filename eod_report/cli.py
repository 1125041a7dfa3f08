from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from eod_report import __version__ as TOOL_VERSION
from eod_report.aggregate import Aggregates
from eod_report.contracts import (
    EXIT_FAILURE,
    EXIT_SUCCESS,
    REPORT_FILENAME,
    SUMMARY_FILENAME,
    ReportJobError,
    build_run_summary,
    progress_interval,
)
from eod_report.loader import read_nonblank_lines
from eod_report.pipeline import run_job
from eod_report.reporter import build_summary, render_report_text

USAGE = "usage: eod-report <input.csv> <outDir>"


class UsageError(ReportJobError):
    def __init__(self, detail: str | None = None) -> None:
        super().__init__(f"{USAGE}\n{detail}" if detail else USAGE)


class InputMissingError(ReportJobError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"input missing: {path}")
        self.path = path


class EodReportArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:
        raise UsageError(message)


def eprint(message: str) -> None:
    print(message, file=sys.stderr)


def emit_human(message: str, *, quiet: bool = False) -> None:
    if not quiet:
        eprint(message)


def json_dumps(payload: Any) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False)


def resolve_path(raw: str) -> Path:
    return Path.cwd() / Path(raw)


def ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def write_text(path: Path, payload: str) -> None:
    path.write_text(payload, encoding="utf-8")


def write_json(path: Path, payload: Any) -> None:
    write_text(path, json_dumps(payload))


def build_parser() -> argparse.ArgumentParser:
    parser = EodReportArgumentParser(
        prog="eod-report",
        description="Validate a sales order CSV and write an end-of-day report.",
    )
    parser.add_argument("input", nargs="?", help="Input CSV path")
    parser.add_argument("out_dir", nargs="?", help="Output directory for report.txt and summary.json")
    parser.add_argument("--json", action="store_true", help="Write a machine JSON run summary to stdout")
    parser.add_argument("-q", "--quiet", action="store_true", help="Suppress progress and completion logs")
    parser.add_argument("--version", action="store_true", help="Print version and exit")
    return parser


def write_outputs(aggregates: Aggregates, out_dir: Path) -> dict[str, Path]:
    ensure_dir(out_dir)
    report_path = out_dir / REPORT_FILENAME
    summary_path = out_dir / SUMMARY_FILENAME
    write_text(report_path, render_report_text(aggregates))
    write_json(summary_path, build_summary(aggregates))
    return {"report": report_path, "summary": summary_path}


def run_report(args: argparse.Namespace) -> int:
    if not args.input or not args.out_dir:
        raise UsageError()

    input_path = resolve_path(args.input)
    out_dir = resolve_path(args.out_dir)
    if not input_path.exists():
        raise InputMissingError(input_path)

    lines = read_nonblank_lines(input_path)
    aggregates = run_job(
        lines,
        progress=lambda count: emit_human(f"processed {count} rows...", quiet=args.quiet),
        progress_every=progress_interval(),
    )
    outputs = write_outputs(aggregates, out_dir)
    emit_human(f"done; wrote {outputs['report']} and {outputs['summary']}", quiet=args.quiet)

    if args.json:
        print(
            json_dumps(
                build_run_summary(
                    tool="eod-report",
                    version=TOOL_VERSION,
                    input_path=input_path,
                    outputs=outputs,
                    metrics={
                        "data_lines": len(lines) - 1,
                        "accepted_rows": aggregates.total_orders,
                        "bad_rows": aggregates.bad_rows,
                        "regions": len(aggregates.by_region),
                        "customers": len(aggregates.by_customer),
                    },
                    warnings=aggregates.warnings,
                )
            )
        )
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    try:
        args = build_parser().parse_args(argv)
        if args.version:
            print(TOOL_VERSION)
            return EXIT_SUCCESS
        return run_report(args)
    except ReportJobError as exc:
        eprint(str(exc))
        return exc.code
    except Exception as exc:
        eprint(f"failed: {exc}")
        return EXIT_FAILURE


if __name__ == "__main__":
    raise SystemExit(main())
