import unittest

from eod_report.contracts import REQUIRED_COLUMNS
from eod_report.header import MissingHeaderError, build_header_index

HEADER = "orderId,customerId,customerName,product,units,unitPrice,region,createdAt"


class HeaderIndexTests(unittest.TestCase):
    def test_positions_follow_header_order(self):
        header = build_header_index(HEADER)

        self.assertEqual(header.width, 8)
        self.assertEqual(header["orderId"], 0)
        self.assertEqual(header["createdAt"], 7)

    def test_names_are_trimmed_and_extra_columns_ignored(self):
        header = build_header_index(
            " region , createdAt,notes,orderId ,customerId,customerName,product,units,unitPrice"
        )

        self.assertEqual(header.width, 9)
        self.assertEqual(header["region"], 0)
        self.assertEqual(header["orderId"], 3)
        self.assertIn("notes", header)

    def test_repeated_name_keeps_last_position(self):
        header = build_header_index(HEADER + ",region")

        self.assertEqual(header["region"], 8)

    def test_first_missing_required_column_is_reported(self):
        with self.assertRaises(MissingHeaderError) as ctx:
            build_header_index("orderId,customerName,product,units,unitPrice,createdAt")

        self.assertEqual(ctx.exception.column, "customerId")
        self.assertEqual(str(ctx.exception), "bad header: missing customerId")
        self.assertEqual(ctx.exception.code, 1)

    def test_every_required_column_is_checked(self):
        for missing in REQUIRED_COLUMNS:
            names = [name for name in REQUIRED_COLUMNS if name != missing]
            with self.subTest(missing=missing):
                with self.assertRaises(MissingHeaderError) as ctx:
                    build_header_index(",".join(names))
                self.assertEqual(ctx.exception.column, missing)

    def test_index_is_read_only(self):
        header = build_header_index(HEADER)

        with self.assertRaises(TypeError):
            header.positions["orderId"] = 5


if __name__ == "__main__":
    unittest.main()
