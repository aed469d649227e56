import json
import os
import tempfile
import unittest
from NDintegration.report import Report, Stat, dump_reports, load_reports


class TestReport(unittest.TestCase):
    def setUp(self):
        self.reports = [
            Report(Stat(7500, 1200), Stat(6, 30)),
            Report(Stat(195000, 45000), Stat(49, 900)),
        ]
        self.tmpdir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmpdir.name, "report.json")

    def tearDown(self):
        self.tmpdir.cleanup()

    def test_to_dict(self):
        self.assertEqual(
            self.reports[0].to_dict(),
            {
                "MonteCarlo": {"invokeCount": 7500, "executionTimeNanos": 1200},
                "Quadrature": {"invokeCount": 6, "executionTimeNanos": 30},
            },
        )

    def test_dump(self):
        dump_reports(self.reports, self.path)
        with open(self.path) as fp:
            data = json.load(fp)
        self.assertIsInstance(data, list)
        self.assertEqual(len(data), 2)
        self.assertEqual(data[1]["MonteCarlo"]["invokeCount"], 195000)
        self.assertEqual(data[1]["Quadrature"]["executionTimeNanos"], 900)

    def test_load(self):
        dump_reports(self.reports, self.path)
        self.assertEqual(load_reports(self.path), self.reports)

    def test_dump_empty(self):
        dump_reports([], self.path)
        with open(self.path) as fp:
            self.assertEqual(json.load(fp), [])


if __name__ == "__main__":
    unittest.main()
