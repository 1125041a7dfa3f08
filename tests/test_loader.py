import tempfile
import unittest
from pathlib import Path

from eod_report.loader import read_nonblank_lines


def read_bytes_as_lines(payload: bytes) -> list[str]:
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "orders.csv"
        path.write_bytes(payload)
        return read_nonblank_lines(path)


class LoaderTests(unittest.TestCase):
    def test_blank_lines_are_dropped_everywhere(self):
        payload = b"\n  \nheader,a\r\n\r\nrow1,x\n\t\nrow2,y\n\n"

        self.assertEqual(read_bytes_as_lines(payload), ["header,a", "row1,x", "row2,y"])

    def test_crlf_is_split_without_leaving_carriage_returns(self):
        self.assertEqual(read_bytes_as_lines(b"a,b\r\nc,d\r\n"), ["a,b", "c,d"])

    def test_lone_carriage_return_is_not_a_line_break(self):
        self.assertEqual(read_bytes_as_lines(b"a,b\rc,d\n"), ["a,b\rc,d"])

    def test_bom_and_crlf_together(self):
        self.assertEqual(read_bytes_as_lines(b"\xef\xbb\xbfh,i\r\n1,2\r\n"), ["h,i", "1,2"])

    def test_utf8_bom_is_stripped(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "bom.csv"
            path.write_bytes(b"\xef\xbb\xbforderId,customerId\nA1,C1\n")
            lines = read_nonblank_lines(path)

        self.assertEqual(lines, ["orderId,customerId", "A1,C1"])

    def test_latin1_line_is_decoded(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "latin.csv"
            path.write_bytes("name,city\nPaul,Montréal\n".encode("latin-1"))
            lines = read_nonblank_lines(path)

        self.assertEqual(len(lines), 2)
        self.assertTrue(lines[1].startswith("Paul,Montr"))

    def test_null_bytes_are_removed(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "nulls.csv"
            path.write_bytes(b"a,b\nx\x00,y\n")
            lines = read_nonblank_lines(path)

        self.assertEqual(lines, ["a,b", "x,y"])

    def test_missing_file_raises(self):
        with self.assertRaises(FileNotFoundError):
            read_nonblank_lines(Path(tempfile.gettempdir()) / "definitely-not-here-eod.csv")

    def test_empty_file_has_no_lines(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "empty.csv"
            path.write_bytes(b"")

            self.assertEqual(read_nonblank_lines(path), [])


if __name__ == "__main__":
    unittest.main()
