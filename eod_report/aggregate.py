"""Run-wide accumulator folded once per accepted row."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from eod_report.discounts import LineAmounts
from eod_report.rows import OrderRow

CustomerKey = tuple[str, str]


@dataclass
class Bucket:
    orders: int = 0
    units: int = 0
    gross: float = 0.0
    net: float = 0.0

    def add(self, units: int, amounts: LineAmounts) -> None:
        self.orders += 1
        self.units += units
        self.gross += amounts.gross
        self.net += amounts.net

    def as_dict(self) -> dict:
        return {"orders": self.orders, "units": self.units, "gross": self.gross, "net": self.net}


@dataclass
class Aggregates:
    total_orders: int = 0
    total_units: int = 0
    gross: float = 0.0
    net: float = 0.0
    discounted: float = 0.0
    bad_rows: int = 0
    by_region: dict[str, Bucket] = field(default_factory=dict)
    by_customer: dict[CustomerKey, Bucket] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)

    def region_bucket(self, region: str) -> Bucket:
        bucket = self.by_region.get(region)
        if bucket is None:
            bucket = self.by_region[region] = Bucket()
        return bucket

    def customer_bucket(self, customer_id: str, customer_name: str) -> Bucket:
        key = (customer_id, customer_name)
        bucket = self.by_customer.get(key)
        if bucket is None:
            bucket = self.by_customer[key] = Bucket()
        return bucket

    def record_rejection(self) -> None:
        self.bad_rows += 1

    def add_warnings(self, warnings: Iterable[str]) -> None:
        self.warnings.extend(warnings)


def fold_row(aggregates: Aggregates, row: OrderRow, amounts: LineAmounts) -> None:
    aggregates.total_orders += 1
    aggregates.total_units += row.units
    aggregates.gross += amounts.gross
    aggregates.net += amounts.net
    aggregates.discounted += amounts.discount

    aggregates.region_bucket(row.region).add(row.units, amounts)
    aggregates.customer_bucket(row.customer_id, row.customer_name).add(row.units, amounts)
