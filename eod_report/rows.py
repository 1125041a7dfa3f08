"""
Row parsing and sanitizing.

Each raw data line becomes either Accepted (a validated OrderRow plus the
warnings it produced) or Rejected. Rejections never carry warnings; field
problems that can be defaulted are corrected in place and reported as
warnings instead.
"""

from __future__ import annotations

import math
import re
import warnings
from dataclasses import dataclass, field
from typing import Union

import pandas as pd

from eod_report.header import HeaderIndex

INT_PREFIX_RE = re.compile(r"[+-]?\d+")
FLOAT_PREFIX_RE = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

DEFAULT_UNITS = 1
DEFAULT_UNIT_PRICE = 0.0


@dataclass(frozen=True)
class OrderRow:
    order_id: str
    customer_id: str
    customer_name: str
    product: str
    region: str
    units: int
    unit_price: float
    created_at: str


@dataclass(frozen=True)
class Accepted:
    row: OrderRow
    line_number: int
    warnings: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Rejected:
    line_number: int
    reason: str


RowResult = Union[Accepted, Rejected]


def parse_int_prefix(text: str) -> int | None:
    """Leading integer of `text` ("12abc" -> 12, "10.5" -> 10), or None."""
    match = INT_PREFIX_RE.match(text)
    if match is None:
        return None
    value = int(match.group(0))
    try:
        float(value)
    except OverflowError:
        return None
    return value


def parse_float_prefix(text: str) -> float | None:
    """Leading decimal number of `text` ("2.5kg" -> 2.5), or None."""
    match = FLOAT_PREFIX_RE.match(text)
    if match is None:
        return None
    return float(match.group(0))


def is_parseable_datetime(text: str) -> bool:
    """
    Best-effort calendar check used only to decide the createdAt warning.

    Impossible calendar dates such as "2024-02-30" are not rolled over to the
    next month; they count as unparseable.
    """
    try:
        with warnings.catch_warnings():
            # format inference chatter for free-form strings
            warnings.simplefilter("ignore", UserWarning)
            parsed = pd.to_datetime(text, errors="coerce")
    except (ValueError, OverflowError, TypeError):
        return False
    return not pd.isna(parsed)


def _cell(parts: list[str], header: HeaderIndex, name: str) -> str:
    position = header[name]
    if position >= len(parts):
        return ""
    return parts[position].strip()


def parse_row(line: str, header: HeaderIndex, line_number: int) -> RowResult:
    parts = line.split(",")
    if len(parts) < header.width:
        return Rejected(line_number, f"expected {header.width} columns, found {len(parts)}")

    order_id = _cell(parts, header, "orderId")
    customer_id = _cell(parts, header, "customerId")
    customer_name = _cell(parts, header, "customerName")
    product = _cell(parts, header, "product")
    region = _cell(parts, header, "region").upper()
    created_at = _cell(parts, header, "createdAt")

    units = parse_int_prefix(_cell(parts, header, "units"))
    unit_price = parse_float_prefix(_cell(parts, header, "unitPrice"))

    if not order_id or not customer_id:
        return Rejected(line_number, "missing orderId or customerId")

    row_warnings: list[str] = []
    if not customer_name:
        row_warnings.append(f"row {line_number} missing customerName for {customer_id}")
    if not product:
        row_warnings.append(f"row {line_number} missing product for order {order_id}")
    if not region:
        row_warnings.append(f"row {line_number} missing region for order {order_id}")

    if units is None or units <= 0:
        units = DEFAULT_UNITS
        row_warnings.append(f"row {line_number} invalid units; defaulted to {DEFAULT_UNITS}")

    if unit_price is None or not math.isfinite(unit_price) or unit_price < 0:
        unit_price = DEFAULT_UNIT_PRICE
        row_warnings.append(f"row {line_number} invalid unitPrice; defaulted to 0")

    if not is_parseable_datetime(created_at):
        row_warnings.append(f"row {line_number} invalid createdAt: {created_at}")

    row = OrderRow(
        order_id=order_id,
        customer_id=customer_id,
        customer_name=customer_name,
        product=product,
        region=region,
        units=units,
        unit_price=unit_price,
        created_at=created_at,
    )
    return Accepted(row=row, line_number=line_number, warnings=row_warnings)
