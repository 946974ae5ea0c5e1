import os
import tempfile
import unittest

from trustnet.core.io import RecordParseError, read_records, read_csv_rows, format_score
from trustnet.core.utils import to_float
from trustnet.datasource.schema import RatingRecord


class TestReadRecords(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmp.name, "ratings.csv")

    def tearDown(self):
        self.tmp.cleanup()

    def _write(self, text):
        with open(self.path, "w") as f:
            f.write(text)

    def test_reads_in_file_order(self):
        self._write("6,2,4,1289241911\n6,5,2,1289241941\n\n1,15,1,1289243140\n")
        records = read_records(self.path)
        self.assertEqual(records, [
            RatingRecord(6, 2, 4, 1289241911),
            RatingRecord(6, 5, 2, 1289241941),
            RatingRecord(1, 15, 1, 1289243140),
        ])

    def test_negative_ratings_and_spaces(self):
        self._write("13, 16, -10, 1289609080\n")
        self.assertEqual(read_records(self.path), [RatingRecord(13, 16, -10, 1289609080)])

    def test_wrong_column_count(self):
        self._write("1,2,3,4\n1,2,3\n")
        with self.assertRaises(RecordParseError) as ctx:
            read_records(self.path)
        self.assertEqual(ctx.exception.line, 2)
        self.assertIsInstance(ctx.exception, ValueError)

    def test_non_integer_field(self):
        self._write("1,2,x,4\n")
        with self.assertRaises(RecordParseError) as ctx:
            read_records(self.path)
        self.assertEqual(ctx.exception.line, 1)
        self.assertIn(self.path, str(ctx.exception))


class TestScoreCells(unittest.TestCase):

    def test_format_score(self):
        self.assertEqual(format_score(float("inf")), "inf")
        self.assertEqual(format_score(0.0), "0.0")
        self.assertEqual(float(format_score(0.03125)), 0.03125)

    def test_to_float(self):
        self.assertEqual(to_float("inf"), float("inf"))
        self.assertEqual(to_float("0.5"), 0.5)
        self.assertIsNone(to_float("abc"))
        self.assertIsNone(to_float(None))
        self.assertEqual(to_float("", 1.0), 1.0)

    def test_read_csv_rows_empty(self):
        with tempfile.TemporaryDirectory() as d:
            p = os.path.join(d, "empty.csv")
            open(p, "w").close()
            header, rows = read_csv_rows(p)
            self.assertIsNone(header)
            self.assertEqual(rows, [])


if __name__ == '__main__':
    unittest.main()
