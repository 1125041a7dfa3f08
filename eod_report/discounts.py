from __future__ import annotations

from dataclasses import dataclass

from eod_report.contracts import MAX_DISCOUNT_RATE
from eod_report.rows import OrderRow

VIP_PREFIX = "VIP-"
VIP_RATE = 0.10
EU_REGION = "EU"
EU_RATE = 0.05
BULK_UNITS = 100
BULK_RATE = 0.07


@dataclass(frozen=True)
class LineAmounts:
    gross: float
    discount: float
    net: float


def discount_rate(row: OrderRow) -> float:
    """Sum of the VIP, EU and bulk rates that apply to `row`, capped."""
    rate = 0.0
    if row.customer_id.startswith(VIP_PREFIX):
        rate += VIP_RATE
    if row.region == EU_REGION:
        rate += EU_RATE
    if row.units >= BULK_UNITS:
        rate += BULK_RATE
    return min(rate, MAX_DISCOUNT_RATE)


def line_amounts(row: OrderRow, rate: float) -> LineAmounts:
    gross = row.units * row.unit_price
    discount = gross * rate
    return LineAmounts(gross=gross, discount=discount, net=gross - discount)
