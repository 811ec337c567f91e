import csv
import os

from number_names import NumberToNameConverter, TableUnitNameRetriever, supported_values


class NameTableGenerator:
    def __init__(self, output_dir="data", converter=None, values=None):
        self.output_dir = output_dir
        if converter is None:
            converter = NumberToNameConverter(TableUnitNameRetriever())
        self.converter = converter
        self.values = supported_values() if values is None else list(values)

    def _write_csv(self, path, rows):
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        with open(path, "w", newline="", encoding="utf-8") as handle:
            writer = csv.writer(handle)
            writer.writerows(rows)

    def _row_for_value(self, value):
        name = self.converter.get_name(value)
        return (str(value), name, str(len(name)))

    def generate_all(self, filename="names.csv"):
        rows = [self._row_for_value(value) for value in self.values]
        path = os.path.join(self.output_dir, filename)
        self._write_csv(path, rows)
        print(f"Wrote {filename} with {len(rows)} rows.")
        return path
