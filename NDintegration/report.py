# report.py
# Per-method statistics of one benchmark case and their JSON form.
#
# A report file is a JSON array with one object per case:
#   [{"MonteCarlo": {"invokeCount": 7500, "executionTimeNanos": 1234},
#     "Quadrature": {"invokeCount": 6, "executionTimeNanos": 567}}, ...]

import json
from dataclasses import dataclass


@dataclass(frozen=True)
class Stat:
    invoke_count: int
    execution_time_ns: int

    def to_dict(self):
        return {
            "invokeCount": self.invoke_count,
            "executionTimeNanos": self.execution_time_ns,
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            invoke_count=int(data["invokeCount"]),
            execution_time_ns=int(data["executionTimeNanos"]),
        )


@dataclass(frozen=True)
class Report:
    monte_carlo: Stat
    quadrature: Stat

    def to_dict(self):
        return {
            "MonteCarlo": self.monte_carlo.to_dict(),
            "Quadrature": self.quadrature.to_dict(),
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            monte_carlo=Stat.from_dict(data["MonteCarlo"]),
            quadrature=Stat.from_dict(data["Quadrature"]),
        )


def dump_reports(reports, path):
    """
    Write reports to path as a JSON array, in order.

    Args:
        reports (list[Report]): Reports to write
        path (str or os.PathLike): Output file, overwritten if it exists
    """
    with open(path, "w") as fp:
        json.dump([r.to_dict() for r in reports], fp)


def load_reports(path):
    """
    Read a JSON array written by dump_reports.

    Returns:
        list[Report]: The reports, in file order
    """
    with open(path) as fp:
        return [Report.from_dict(d) for d in json.load(fp)]
