"""
eod-report reporter.py

Projects the finalized Aggregates of one run into the plain-text report
lines and the JSON summary. Nothing here mutates the aggregates.

Regions are listed in ascending order, customers by net descending (ties
keep first-seen order), so output depends only on the input rows.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any

from eod_report.aggregate import Aggregates, Bucket
from eod_report.contracts import TOP_CUSTOMERS_LIMIT, WARNINGS_DISPLAY_LIMIT

BANNER = "EOD Sales Report"
CENTS = Decimal("0.01")
FIXED_POINT_LIMIT = 1e21


def _round_half_up(value: float) -> Decimal:
    # exact binary value, ties away from zero
    if value == 0:
        value = 0.0
    exact = Decimal(value)
    with localcontext() as ctx:
        ctx.prec = max(28, exact.adjusted() + 4)
        return exact.quantize(CENTS, rounding=ROUND_HALF_UP)


def format_money(value: float) -> str:
    """Two fixed decimals; at or above 1e21 in magnitude the shortest repr is kept."""
    if not math.isfinite(value):
        return "NaN" if math.isnan(value) else ("Infinity" if value > 0 else "-Infinity")
    if abs(value) >= FIXED_POINT_LIMIT:
        return repr(value)
    return f"{_round_half_up(value)}"


def round_money(value: float) -> float:
    if not math.isfinite(value) or abs(value) >= FIXED_POINT_LIMIT:
        return value
    return float(_round_half_up(value))


def heading(title: str, underline: str | None = None) -> list[str]:
    return [title, underline if underline is not None else "-" * len(title)]


def sorted_regions(aggregates: Aggregates) -> list[tuple[str, Bucket]]:
    return sorted(aggregates.by_region.items(), key=lambda item: item[0])


def top_customers(aggregates: Aggregates, limit: int = TOP_CUSTOMERS_LIMIT) -> list[tuple[str, str, Bucket]]:
    ranked = sorted(aggregates.by_customer.items(), key=lambda item: -item[1].net)
    return [(customer_id, name, bucket) for (customer_id, name), bucket in ranked[:limit]]


def render_summary_block(aggregates: Aggregates) -> list[str]:
    return [
        *heading("Summary"),
        f"Orders: {aggregates.total_orders}",
        f"Units: {aggregates.total_units}",
        f"Gross: ${format_money(aggregates.gross)}",
        f"Discounts: ${format_money(aggregates.discounted)}",
        f"Net: ${format_money(aggregates.net)}",
        f"Bad rows skipped: {aggregates.bad_rows}",
    ]


def render_region_block(aggregates: Aggregates) -> list[str]:
    lines = heading("By Region")
    for region, bucket in sorted_regions(aggregates):
        lines.append(
            f"{region} | orders={bucket.orders} units={bucket.units} "
            f"gross=${format_money(bucket.gross)} net=${format_money(bucket.net)}"
        )
    return lines


def render_customer_block(aggregates: Aggregates) -> list[str]:
    lines = heading("Top Customers (by net)")
    for rank, (customer_id, name, bucket) in enumerate(top_customers(aggregates), start=1):
        lines.append(
            f"{rank:02d}. {name or '(unknown)'} [{customer_id}] => "
            f"orders={bucket.orders} units={bucket.units} net=${format_money(bucket.net)}"
        )
    return lines


def render_warnings_block(warnings: list[str], limit: int = WARNINGS_DISPLAY_LIMIT) -> list[str]:
    lines = heading("Warnings")
    if not warnings:
        lines.append("(none)")
        return lines
    lines.extend(f"- {warning}" for warning in warnings[:limit])
    if len(warnings) > limit:
        lines.append(f"- (+{len(warnings) - limit} more)")
    return lines


def render_report_lines(aggregates: Aggregates) -> list[str]:
    return [
        *heading(BANNER, "=" * 15),
        "",
        *render_summary_block(aggregates),
        "",
        *render_region_block(aggregates),
        "",
        *render_customer_block(aggregates),
        "",
        *render_warnings_block(aggregates.warnings),
    ]


def render_report_text(aggregates: Aggregates) -> str:
    return "\n".join(render_report_lines(aggregates))


def build_summary(aggregates: Aggregates) -> dict[str, Any]:
    return {
        "totalOrders": aggregates.total_orders,
        "totalUnits": aggregates.total_units,
        "gross": round_money(aggregates.gross),
        "discounted": round_money(aggregates.discounted),
        "net": round_money(aggregates.net),
        "badRows": aggregates.bad_rows,
        "regions": {region: bucket.as_dict() for region, bucket in aggregates.by_region.items()},
    }
