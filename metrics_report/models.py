"""Data models for the measurement set fed into the report."""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Callable, Iterator, List, Optional


VIOLATION_LEVELS = ("information", "warning", "error", "critical")


# ---------------------------------------------------------------------------
# Violations
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Violation:
    name: str
    level: str = "warning"  # information | warning | error | critical
    description: str = ""

    def to_dict(self) -> dict:
        return asdict(self)


# ---------------------------------------------------------------------------
# Class-level metrics
# ---------------------------------------------------------------------------

@dataclass
class ClassMetrics:
    name: str
    interface: bool = False
    abstract: bool = False
    # size
    loc: int = 0
    cloc: int = 0
    lloc: int = 0
    nb_methods: int = 0
    # complexity
    ccn: float = 0.0
    ccn_method_max: int = 0
    wmc: int = 0
    bugs: float = 0.0
    kan_defect: float = 0.0
    relative_system_complexity: float = 0.0
    relative_data_complexity: float = 0.0
    relative_structural_complexity: float = 0.0
    volume: float = 0.0
    difficulty: float = 0.0
    comment_weight: float = 0.0
    intelligent_content: float = 0.0
    mi: float = 0.0
    # coupling / object orientation
    lcom: float = 0.0
    instability: float = 0.0
    afferent_coupling: int = 0
    efferent_coupling: int = 0
    depth_of_inheritance: int = 0
    page_rank: float = 0.0
    externals: List[str] = field(default_factory=list)
    parents: List[str] = field(default_factory=list)
    violations: List[Violation] = field(default_factory=list)

    def to_dict(self) -> dict:
        d = asdict(self)
        for k, v in d.items():
            if isinstance(v, float):
                d[k] = round(v, 2)
        return d


# ---------------------------------------------------------------------------
# File-level metrics
# ---------------------------------------------------------------------------

@dataclass
class FileMetrics:
    name: str  # relative file path
    loc: int = 0
    cloc: int = 0
    lloc: int = 0

    def to_dict(self) -> dict:
        return asdict(self)


# ---------------------------------------------------------------------------
# Package-level metrics
# ---------------------------------------------------------------------------

@dataclass
class PackageMetrics:
    name: str
    classes: List[str] = field(default_factory=list)
    abstraction: float = 0.0
    instability: float = 0.0
    distance: float = 0.0
    normalized_distance: float = 0.0
    incoming_class_dependencies: int = 0
    outgoing_class_dependencies: int = 0
    incoming_package_dependencies: int = 0
    outgoing_package_dependencies: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        d = asdict(self)
        for k, v in d.items():
            if isinstance(v, float):
                d[k] = round(v, 2)
        return d


# ---------------------------------------------------------------------------
# Project-level metrics
# ---------------------------------------------------------------------------

@dataclass
class Dependency:
    """One entry of the project's dependency manifest."""
    name: str
    required: str = ""
    installed: str = ""
    latest: str = ""
    license: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class ProjectMetrics:
    name: str
    dependencies: List[Dependency] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "dependencies": [dep.to_dict() for dep in self.dependencies],
        }


# ---------------------------------------------------------------------------
# Measurement set
# ---------------------------------------------------------------------------

class Metrics:
    """Container for every analysed unit of a run."""

    def __init__(
        self,
        classes: Optional[List[ClassMetrics]] = None,
        files: Optional[List[FileMetrics]] = None,
        packages: Optional[List[PackageMetrics]] = None,
        projects: Optional[List[ProjectMetrics]] = None,
    ):
        self.classes: List[ClassMetrics] = list(classes or [])
        self.files: List[FileMetrics] = list(files or [])
        self.packages: List[PackageMetrics] = list(packages or [])
        self.projects: List[ProjectMetrics] = list(projects or [])

    def all(self) -> Iterator:
        yield from self.classes
        yield from self.files
        yield from self.packages
        yield from self.projects

    def subset(self, predicate: Callable[[object], bool]) -> "Metrics":
        """Return a new set holding only the units accepted by *predicate*."""
        return Metrics(
            classes=[c for c in self.classes if predicate(c)],
            files=[f for f in self.files if predicate(f)],
            packages=[p for p in self.packages if predicate(p)],
            projects=[p for p in self.projects if predicate(p)],
        )

    def __len__(self) -> int:
        return (
            len(self.classes) + len(self.files)
            + len(self.packages) + len(self.projects)
        )
