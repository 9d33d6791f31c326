"""Consolidation of a measurement set into the aggregates shown by the report."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Tuple

from ..models import VIOLATION_LEVELS, Metrics
from .stats import mean, total


# Class-level metrics averaged across every class record
CLASS_AVG_KEYS = (
    "ccn",
    "bugs",
    "kan_defect",
    "relative_system_complexity",
    "relative_data_complexity",
    "relative_structural_complexity",
    "volume",
    "comment_weight",
    "intelligent_content",
    "lcom",
    "instability",
    "afferent_coupling",
    "efferent_coupling",
    "difficulty",
    "mi",
    "wmc",
)

# Package-level metrics averaged across every package record
PACKAGE_AVG_KEYS = (
    "distance",
    "incoming_class_dependencies",
    "outgoing_class_dependencies",
    "incoming_package_dependencies",
    "outgoing_package_dependencies",
    "classes_per_package",
)

SUM_KEYS = (
    "loc",
    "cloc",
    "lloc",
    "nb_methods",
    "nb_classes",
    "nb_interfaces",
    "nb_packages",
)


def freeze(value: Any) -> Any:
    """Return a read-only copy of nested dicts and lists."""
    if isinstance(value, Mapping):
        return MappingProxyType({k: freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(v) for v in value)
    return value


def thaw(value: Any) -> Any:
    """Inverse of :func:`freeze`, producing JSON-serialisable data."""
    if isinstance(value, Mapping):
        return {k: thaw(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [thaw(v) for v in value]
    return value


@dataclass(frozen=True)
class Consolidated:
    """Read-only aggregate view over one scope of the measurement set."""
    sum: Mapping[str, Any]
    avg: Mapping[str, Any]
    classes: Tuple[Mapping[str, Any], ...]
    files: Tuple[Mapping[str, Any], ...]
    project: Mapping[str, Any]
    packages: Tuple[Mapping[str, Any], ...]

    def snapshot_data(self) -> dict:
        """Plain ``{"avg": ..., "sum": ...}`` data for the history store."""
        return {"avg": thaw(self.avg), "sum": thaw(self.sum)}


def consolidate(metrics: Metrics) -> Consolidated:
    """Aggregate sums, averages and flattened listings for *metrics*.

    An empty set yields zero-valued aggregates.
    """
    classes = metrics.classes
    packages = metrics.packages
    nb_interfaces = sum(1 for c in classes if c.interface)

    sums = {
        "loc": total(c.loc for c in classes),
        "cloc": total(c.cloc for c in classes),
        "lloc": total(c.lloc for c in classes),
        "nb_methods": total(c.nb_methods for c in classes),
        "nb_classes": len(classes) - nb_interfaces,
        "nb_interfaces": nb_interfaces,
        "nb_packages": len(packages),
    }

    # Violations by level
    violations = {"total": 0}
    violations.update({level: 0 for level in VIOLATION_LEVELS})
    for c in classes:
        for v in c.violations:
            if v.level in violations:
                violations[v.level] += 1
            violations["total"] += 1
    sums["violations"] = violations

    avgs = {
        key: mean(getattr(c, key) for c in classes)
        for key in CLASS_AVG_KEYS
    }
    avgs["distance"] = mean(p.distance for p in packages)
    avgs["incoming_class_dependencies"] = mean(
        p.incoming_class_dependencies for p in packages
    )
    avgs["outgoing_class_dependencies"] = mean(
        p.outgoing_class_dependencies for p in packages
    )
    avgs["incoming_package_dependencies"] = mean(
        p.incoming_package_dependencies for p in packages
    )
    avgs["outgoing_package_dependencies"] = mean(
        len(p.outgoing_package_dependencies) for p in packages
    )
    avgs["classes_per_package"] = mean(len(p.classes) for p in packages)

    return Consolidated(
        sum=freeze(sums),
        avg=freeze(avgs),
        classes=freeze([c.to_dict() for c in classes]),
        files=freeze([f.to_dict() for f in metrics.files]),
        project=freeze({p.name: p.to_dict() for p in metrics.projects}),
        packages=freeze([p.to_dict() for p in packages]),
    )
