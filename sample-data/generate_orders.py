#!/usr/bin/env python3
"""
generate_orders.py

Generates sample-data/orders_messy.csv — an end-of-day order export with the
kinds of damage real exports carry: blank lines, short rows, missing ids and
names, non-numeric units, negative prices, unparseable timestamps, lower-case
region codes and CRLF line endings.

Run: python sample-data/generate_orders.py [output.csv] [rows]
"""

import random
import sys
from pathlib import Path

OUT = Path(__file__).parent / "orders_messy.csv"
DEFAULT_ROWS = 600
SEED = 20240101

HEADER = "orderId,customerId,customerName,product,units,unitPrice,region,createdAt"
CUSTOMERS = [
    ("C100", "Acme Corp"),
    ("C101", "Globex"),
    ("C102", "Initech"),
    ("VIP-7", "Umbrella"),
    ("VIP-12", "Stark Industries"),
    ("C103", "Hooli"),
    ("C104", "Vandelay Imports"),
    ("C105", "Wonka"),
    ("C106", "Tyrell"),
    ("C107", "Cyberdyne"),
    ("C108", "Soylent"),
    ("VIP-30", "Wayne Enterprises"),
]
PRODUCTS = ["Widget", "Gadget", "Gizmo", "Doohickey", "Sprocket"]
REGIONS = ["EU", "eu", "US", "us ", "APAC", "LATAM"]


def build_lines(rows: int, rng: random.Random) -> list[str]:
    lines = [HEADER]
    for n in range(1, rows + 1):
        customer_id, name = rng.choice(CUSTOMERS)
        product = rng.choice(PRODUCTS)
        region = rng.choice(REGIONS)
        units = str(rng.choice([1, 2, 5, 10, 25, 100, 150, 240]))
        price = f"{rng.uniform(0.5, 80):.2f}"
        created = f"2024-03-{rng.randint(1, 28):02d}T{rng.randint(0, 23):02d}:15:00Z"

        roll = rng.random()
        if roll < 0.03:
            lines.append(f"O{n},{customer_id},{name}")             # cut-off export row
            continue
        if roll < 0.05:
            customer_id = ""                                        # unidentifiable
        elif roll < 0.09:
            name = ""
        elif roll < 0.12:
            units = rng.choice(["abc", "0", "-3", ""])
        elif roll < 0.14:
            price = rng.choice(["-1.00", "n/a", ""])
        elif roll < 0.16:
            created = rng.choice(["yesterday-ish", "32/13/2024", ""])
        elif roll < 0.17:
            region = ""
        elif roll < 0.18:
            product = ""

        lines.append(f"O{n},{customer_id},{name},{product},{units},{price},{region},{created}")
        if roll > 0.99:
            lines.append("   ")
    return lines


def main(argv: list[str]) -> int:
    out = Path(argv[1]) if len(argv) > 1 else OUT
    rows = int(argv[2]) if len(argv) > 2 else DEFAULT_ROWS
    lines = build_lines(rows, random.Random(SEED))
    out.write_bytes(("\r\n".join(lines) + "\r\n").encode("utf-8"))
    print(f"Generated: {out}")
    print(f"Total raw lines written: {len(lines)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv))
