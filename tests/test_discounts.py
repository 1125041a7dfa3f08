import unittest
from dataclasses import replace

from eod_report import discounts
from eod_report.discounts import discount_rate, line_amounts
from eod_report.rows import OrderRow

BASE = OrderRow(
    order_id="A1",
    customer_id="C1",
    customer_name="Alice",
    product="Widget",
    region="US",
    units=10,
    unit_price=2.5,
    created_at="2024-01-01",
)


class DiscountRuleTests(unittest.TestCase):
    def test_no_rule_applies(self):
        self.assertEqual(discount_rate(BASE), 0.0)

    def test_eu_row_amounts(self):
        row = replace(BASE, region="EU")
        rate = discount_rate(row)
        amounts = line_amounts(row, rate)

        self.assertAlmostEqual(rate, 0.05)
        self.assertAlmostEqual(amounts.gross, 25.0)
        self.assertAlmostEqual(amounts.discount, 1.25)
        self.assertAlmostEqual(amounts.net, 23.75)

    def test_vip_bulk_row(self):
        row = replace(BASE, customer_id="VIP-9", units=150, region="US")

        self.assertAlmostEqual(discount_rate(row), 0.17)

    def test_bulk_threshold_is_inclusive(self):
        self.assertAlmostEqual(discount_rate(replace(BASE, units=100)), 0.07)
        self.assertEqual(discount_rate(replace(BASE, units=99)), 0.0)

    def test_vip_prefix_is_case_sensitive(self):
        self.assertEqual(discount_rate(replace(BASE, customer_id="vip-1")), 0.0)
        self.assertEqual(discount_rate(replace(BASE, customer_id="VIP1")), 0.0)

    def test_all_rules_stack(self):
        row = replace(BASE, customer_id="VIP-1", region="EU", units=500)

        self.assertAlmostEqual(discount_rate(row), 0.22)

    def test_rate_is_capped(self):
        original = discounts.VIP_RATE
        discounts.VIP_RATE = 0.2
        try:
            row = replace(BASE, customer_id="VIP-1", region="EU", units=500)
            self.assertEqual(discount_rate(row), 0.25)
        finally:
            discounts.VIP_RATE = original

    def test_line_amounts_balance(self):
        for units, price, rate in [(3, 19.99, 0.17), (1, 0.0, 0.05), (250, 1.1, 0.22)]:
            with self.subTest(units=units, price=price, rate=rate):
                amounts = line_amounts(replace(BASE, units=units, unit_price=price), rate)
                self.assertAlmostEqual(amounts.gross, amounts.net + amounts.discount, delta=1e-9)
                self.assertGreaterEqual(amounts.discount, 0.0)
                self.assertLessEqual(amounts.discount, 0.25 * amounts.gross)


if __name__ == "__main__":
    unittest.main()
