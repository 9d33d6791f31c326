"""Read an already-computed measurement set from its JSON form."""

from __future__ import annotations

import json
from typing import Any, Dict, List

from .errors import MetricsLoadError
from .models import (
    ClassMetrics,
    Dependency,
    FileMetrics,
    Metrics,
    PackageMetrics,
    ProjectMetrics,
    Violation,
)


def load_metrics(path: str) -> Metrics:
    """Load a ``{"classes", "files", "packages", "project"}`` document."""
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = json.load(fh)
    except OSError as e:
        raise MetricsLoadError(path, str(e)) from e
    except json.JSONDecodeError as e:
        raise MetricsLoadError(path, f"invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise MetricsLoadError(path, "expected a JSON object")
    try:
        return metrics_from_dict(data)
    except (AttributeError, TypeError, ValueError) as e:
        raise MetricsLoadError(path, f"unexpected document shape: {e}") from e


def metrics_from_dict(data: Dict[str, Any]) -> Metrics:
    metrics = Metrics(
        classes=[_class_from_dict(c) for c in data.get("classes", [])],
        files=[_file_from_dict(f) for f in data.get("files", [])],
        packages=[_package_from_dict(p) for p in data.get("packages", [])],
    )
    project = data.get("project")
    if project:
        metrics.projects.append(ProjectMetrics(
            name=project.get("name", "project"),
            dependencies=[
                Dependency(
                    name=d.get("name", ""),
                    required=d.get("required", ""),
                    installed=d.get("installed", ""),
                    latest=d.get("latest", ""),
                    license=list(d.get("license", [])),
                )
                for d in project.get("dependencies", [])
            ],
        ))
    return metrics


def _class_from_dict(c: Dict[str, Any]) -> ClassMetrics:
    return ClassMetrics(
        name=c.get("name", ""),
        interface=bool(c.get("interface", False)),
        abstract=bool(c.get("abstract", False)),
        loc=_number(c, "loc"),
        cloc=_number(c, "cloc"),
        lloc=_number(c, "lloc"),
        nb_methods=_number(c, "nb_methods"),
        ccn=_number(c, "ccn"),
        ccn_method_max=_number(c, "ccn_method_max"),
        wmc=_number(c, "wmc"),
        bugs=_number(c, "bugs"),
        kan_defect=_number(c, "kan_defect"),
        relative_system_complexity=_number(c, "relative_system_complexity"),
        relative_data_complexity=_number(c, "relative_data_complexity"),
        relative_structural_complexity=_number(c, "relative_structural_complexity"),
        volume=_number(c, "volume"),
        difficulty=_number(c, "difficulty"),
        comment_weight=_number(c, "comment_weight"),
        intelligent_content=_number(c, "intelligent_content"),
        mi=_number(c, "mi"),
        lcom=_number(c, "lcom"),
        instability=_number(c, "instability"),
        afferent_coupling=_number(c, "afferent_coupling"),
        efferent_coupling=_number(c, "efferent_coupling"),
        depth_of_inheritance=_number(c, "depth_of_inheritance"),
        page_rank=_number(c, "page_rank"),
        externals=list(c.get("externals", [])),
        parents=list(c.get("parents", [])),
        violations=_violations_from_list(c.get("violations", [])),
    )


def _number(record: Dict[str, Any], key: str) -> float:
    value = record.get(key, 0)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{key} must be a number, got {value!r}")
    return value


def _violations_from_list(items: List[Dict[str, Any]]) -> List[Violation]:
    return [
        Violation(
            name=v.get("name", ""),
            level=v.get("level", "warning"),
            description=v.get("description", ""),
        )
        for v in items
    ]


def _file_from_dict(f: Dict[str, Any]) -> FileMetrics:
    return FileMetrics(
        name=f.get("name", ""),
        loc=_number(f, "loc"),
        cloc=_number(f, "cloc"),
        lloc=_number(f, "lloc"),
    )


def _package_from_dict(p: Dict[str, Any]) -> PackageMetrics:
    return PackageMetrics(
        name=p.get("name", ""),
        classes=list(p.get("classes", [])),
        abstraction=_number(p, "abstraction"),
        instability=_number(p, "instability"),
        distance=_number(p, "distance"),
        normalized_distance=_number(p, "normalized_distance"),
        incoming_class_dependencies=_number(p, "incoming_class_dependencies"),
        outgoing_class_dependencies=_number(p, "outgoing_class_dependencies"),
        incoming_package_dependencies=_number(p, "incoming_package_dependencies"),
        outgoing_package_dependencies=list(p.get("outgoing_package_dependencies", [])),
    )
