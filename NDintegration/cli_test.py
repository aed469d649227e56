import json
import os
import tempfile
import unittest
from unittest.mock import patch
from absl import app, flags
from absl.testing import flagsaver
from NDintegration import cli
from NDintegration.report import Report, Stat

FLAGS = flags.FLAGS


class TestMain(unittest.TestCase):
    def setUp(self):
        FLAGS.mark_as_parsed()
        self.tmpdir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmpdir.name, "report.json")

    def tearDown(self):
        self.tmpdir.cleanup()

    @patch("NDintegration.cli.run_case")
    def test_writes_one_report_per_case(self, mock_run_case):
        mock_run_case.side_effect = lambda ndims, generator=None: Report(
            Stat(ndims, 1), Stat(ndims * 10, 2)
        )
        with flagsaver.flagsaver(output=self.path, max_ndims=3, seed=1):
            cli.main(["ndintegration"])

        self.assertEqual(
            [c.args[0] for c in mock_run_case.call_args_list], [1, 2, 3]
        )
        with open(self.path) as fp:
            data = json.load(fp)
        self.assertEqual(len(data), 3)
        self.assertEqual(data[2]["Quadrature"]["invokeCount"], 30)

    def test_run_single_case(self):
        with flagsaver.flagsaver(output=self.path, max_ndims=1, seed=42):
            cli.main(["ndintegration"])
        with open(self.path) as fp:
            data = json.load(fp)
        self.assertEqual(data[0]["MonteCarlo"]["invokeCount"], 7500)
        self.assertEqual(data[0]["Quadrature"]["invokeCount"], 6)

    def test_too_many_arguments(self):
        with self.assertRaises(app.UsageError):
            cli.main(["ndintegration", "extra"])

    def test_flag_bounds(self):
        with flagsaver.flagsaver():
            with self.assertRaises(flags.IllegalFlagValueError):
                FLAGS.max_ndims = 10


if __name__ == "__main__":
    unittest.main()
