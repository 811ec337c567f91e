import contextlib
import csv
import io
import os
import tempfile
import unittest

from data_generation import NameTableGenerator
from number_names import number_to_name, supported_values


def _read_rows(path):
    with open(path, newline="", encoding="utf-8") as handle:
        return [row for row in csv.reader(handle) if row]


class TestNameTableGeneration(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.temp_dir = tempfile.TemporaryDirectory()
        generator = NameTableGenerator(output_dir=os.path.join(cls.temp_dir.name, "out"))
        with contextlib.redirect_stdout(io.StringIO()):
            cls.path = generator.generate_all()
        cls.rows = _read_rows(cls.path)

    @classmethod
    def tearDownClass(cls):
        cls.temp_dir.cleanup()

    def test_writes_names_csv(self):
        self.assertEqual(os.path.basename(self.path), "names.csv")
        self.assertTrue(os.path.isfile(self.path))

    def test_rows_cover_supported_values(self):
        values = [int(row[0]) for row in self.rows]
        self.assertEqual(values, supported_values())

    def test_rows_match_converter(self):
        for value_str, name, length_str in self.rows:
            with self.subTest(value=value_str):
                self.assertEqual(name, number_to_name(int(value_str)))
                self.assertEqual(len(name), int(length_str))

    def test_first_and_last_rows(self):
        self.assertEqual(self.rows[0], ["1", "one", "3"])
        self.assertEqual(self.rows[-1], ["9000", "nine thousand", "13"])

    def test_explicit_values(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            generator = NameTableGenerator(output_dir=temp_dir, values=[40, 700])
            output = io.StringIO()
            with contextlib.redirect_stdout(output):
                path = generator.generate_all()
            self.assertEqual(output.getvalue().strip(), "Wrote names.csv with 2 rows.")
            self.assertEqual(
                _read_rows(path),
                [["40", "fourty", "6"], ["700", "seven hundred", "13"]],
            )


if __name__ == "__main__":
    unittest.main()
