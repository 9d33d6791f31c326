"""Configuration loading and validation for report generation."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Optional

import yaml

from .errors import ConfigError
from .groups import Group, build_groups


DEFAULT_TEMPLATE_DIR = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), "templates", "html_report"
)


# ---------------------------------------------------------------------------
# Group config
# ---------------------------------------------------------------------------

@dataclass
class GroupConfig:
    name: str = ""
    match: str = ""


# ---------------------------------------------------------------------------
# Top-level Config
# ---------------------------------------------------------------------------

@dataclass
class ReportConfig:
    version: str = "1.0"
    report_html: str = ""  # empty: no HTML report
    template_dir: str = DEFAULT_TEMPLATE_DIR
    groups: List[GroupConfig] = field(default_factory=list)
    verbose: bool = True

    def build_groups(self) -> List[Group]:
        return build_groups([
            {"name": g.name, "match": g.match} for g in self.groups
        ])


# ---------------------------------------------------------------------------
# Loader
# ---------------------------------------------------------------------------

def _apply_dict(obj, data: dict):
    """Apply dictionary values to a dataclass instance, recursively."""
    if not isinstance(data, dict):
        return
    for key, value in data.items():
        if hasattr(obj, key):
            current = getattr(obj, key)
            if hasattr(current, '__dataclass_fields__') and isinstance(value, dict):
                _apply_dict(current, value)
            else:
                setattr(obj, key, value)


def _parse_groups(raw) -> List[GroupConfig]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ConfigError("groups", raw, "expected a list of {name, match}")
    groups = []
    for i, item in enumerate(raw):
        if not isinstance(item, dict):
            raise ConfigError(f"groups[{i}]", item, "expected a mapping")
        group = GroupConfig()
        _apply_dict(group, item)
        groups.append(group)
    return groups


def parse_group_option(value: str) -> GroupConfig:
    """Parse a ``NAME=REGEX`` command line group definition."""
    name, sep, match = value.partition("=")
    if not sep or not name:
        raise ConfigError("--group", value, "expected NAME=REGEX")
    return GroupConfig(name=name, match=match)


def load_config(config_path: Optional[str] = None, repo_root: Optional[str] = None) -> ReportConfig:
    """Load report configuration from YAML file.

    Search order when *config_path* is None:
      1. ``metrics-report.yaml`` in *repo_root*
      2. ``.metrics-report.yaml`` in *repo_root*

    *repo_root* defaults to cwd. Relative paths are resolved against the
    directory of the configuration file.
    """
    if repo_root is None:
        repo_root = os.getcwd()

    config = ReportConfig()

    if config_path is None:
        candidates = [
            os.path.join(repo_root, "metrics-report.yaml"),
            os.path.join(repo_root, ".metrics-report.yaml"),
        ]
        for candidate in candidates:
            if os.path.isfile(candidate):
                config_path = candidate
                break
    elif not os.path.isfile(config_path):
        raise ConfigError("config", config_path, "file not found")

    base_dir = repo_root
    if config_path:
        base_dir = os.path.dirname(os.path.abspath(config_path))
        try:
            with open(config_path, "r", encoding="utf-8") as fh:
                data = yaml.safe_load(fh) or {}
        except yaml.YAMLError as e:
            raise ConfigError("config", config_path, f"invalid YAML: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError("config", config_path, "expected a mapping at top level")

        if "version" in data:
            config.version = str(data["version"])
        if "report_html" in data:
            config.report_html = data["report_html"] or ""
        if "template_dir" in data:
            config.template_dir = data["template_dir"]
        if "groups" in data:
            config.groups = _parse_groups(data["groups"])

    if not isinstance(config.report_html, str):
        raise ConfigError("report_html", config.report_html, "expected a path")
    if not isinstance(config.template_dir, str) or not config.template_dir:
        raise ConfigError("template_dir", config.template_dir, "expected a path")

    # Resolve paths to absolute
    if config.report_html and not os.path.isabs(config.report_html):
        config.report_html = os.path.normpath(os.path.join(base_dir, config.report_html))
    if not os.path.isabs(config.template_dir):
        config.template_dir = os.path.normpath(os.path.join(base_dir, config.template_dir))

    # Fail early on duplicated names / invalid expressions
    config.build_groups()

    return config
