# cli.py
# Command-line driver: runs the benchmark cases for 1..max_ndims dimensions
# and writes one report per case to a JSON file.
#
#   ndintegration --output=report.json --max_ndims=4 --seed=42

from absl import app, flags, logging
from NDintegration.benchmark import MAX_NDIMS, run_case
from NDintegration.report import dump_reports
from NDintegration.utils import make_generator

FLAGS = flags.FLAGS
flags.DEFINE_string("output", "report.json", "Output path of the JSON report")
flags.DEFINE_integer(
    "max_ndims",
    4,
    "Run the cases with 1..max_ndims dimensions",
    lower_bound=1,
    upper_bound=MAX_NDIMS,
)
flags.DEFINE_integer("seed", None, "Seed of the Monte Carlo sampler")


def main(argv):
    if len(argv) > 1:
        raise app.UsageError("Too many command-line arguments.")

    generator = make_generator(FLAGS.seed)
    reports = []
    for ndims in range(1, FLAGS.max_ndims + 1):
        reports.append(run_case(ndims, generator=generator))

    dump_reports(reports, FLAGS.output)
    logging.info("wrote %d reports to %s", len(reports), FLAGS.output)


def run():
    app.run(main)


if __name__ == "__main__":
    run()
