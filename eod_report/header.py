from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Sequence

from eod_report.contracts import REQUIRED_COLUMNS, ReportJobError


class MissingHeaderError(ReportJobError):
    def __init__(self, column: str) -> None:
        super().__init__(f"bad header: missing {column}")
        self.column = column


@dataclass(frozen=True)
class HeaderIndex:
    positions: Mapping[str, int]
    width: int

    def __getitem__(self, name: str) -> int:
        return self.positions[name]

    def __contains__(self, name: object) -> bool:
        return name in self.positions


def build_header_index(
    header_line: str,
    required: Sequence[str] = REQUIRED_COLUMNS,
) -> HeaderIndex:
    """
    Map trimmed column names to zero-based positions.

    A repeated name keeps its last position. Required names are checked in
    order and the first absent one raises MissingHeaderError.
    """
    fields = header_line.split(",")
    positions: dict[str, int] = {}
    for position, name in enumerate(fields):
        positions[name.strip()] = position

    for name in required:
        if name not in positions:
            raise MissingHeaderError(name)

    return HeaderIndex(positions=MappingProxyType(positions), width=len(fields))
