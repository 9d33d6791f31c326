"""Shared fixtures for the report tests."""

import json

import pytest

from metrics_report.config import ReportConfig
from metrics_report.models import (
    ClassMetrics,
    Dependency,
    FileMetrics,
    Metrics,
    PackageMetrics,
    ProjectMetrics,
    Violation,
)


CORE_MATCH = r"^App\\Core"


def make_metrics():
    """Two packages, three classes (one interface), three violations."""
    return Metrics(
        classes=[
            ClassMetrics(
                name="App\\Core\\User",
                loc=100, cloc=20, lloc=60, nb_methods=5,
                ccn=4, wmc=9, mi=80, bugs=0.2, lcom=1,
                afferent_coupling=2, efferent_coupling=3, instability=0.6,
                externals=["App\\Core\\UserInterface"],
                violations=[Violation("Blob", "error", "Too many methods")],
            ),
            ClassMetrics(
                name="App\\Core\\UserInterface",
                interface=True,
                loc=20, cloc=5, lloc=10, nb_methods=2,
                ccn=1, wmc=2, mi=100,
            ),
            ClassMetrics(
                name="App\\Web\\Controller",
                loc=50, cloc=10, lloc=30, nb_methods=3,
                ccn=7, wmc=12, mi=60, bugs=0.4, lcom=2,
                afferent_coupling=0, efferent_coupling=4, instability=1.0,
                externals=["App\\Core\\User"],
                violations=[
                    Violation("Too complex method code", "warning"),
                    Violation("Probably bugged", "critical"),
                ],
            ),
        ],
        files=[
            FileMetrics(name="src/Core/User.php", loc=120, cloc=25, lloc=70),
            FileMetrics(name="src/Web/Controller.php", loc=50, cloc=10, lloc=30),
        ],
        packages=[
            PackageMetrics(
                name="App\\Core",
                classes=["App\\Core\\User", "App\\Core\\UserInterface"],
                distance=0.2,
                incoming_class_dependencies=1,
            ),
            PackageMetrics(
                name="App\\Web",
                classes=["App\\Web\\Controller"],
                distance=0.4,
                outgoing_class_dependencies=1,
                outgoing_package_dependencies=["App\\Core"],
            ),
        ],
        projects=[
            ProjectMetrics(
                name="composer",
                dependencies=[
                    Dependency("twig/twig", "^3.0", "3.8.0", "3.8.0", ["BSD-3-Clause"]),
                ],
            ),
        ],
    )


@pytest.fixture
def metrics():
    return make_metrics()


@pytest.fixture
def report_dir(tmp_path):
    return str(tmp_path / "report")


@pytest.fixture
def config(report_dir):
    return ReportConfig(report_html=report_dir, verbose=False)


def write_history_record(path, data):
    with open(path, "w", encoding="utf-8") as fh:
        json.dump(data, fh)
