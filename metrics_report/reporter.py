"""Reporter: orchestrates consolidation, history, page rendering and assets."""

from __future__ import annotations

import os
from typing import Dict, List, Optional

from .aggregation.consolidator import Consolidated, consolidate
from .config import ReportConfig
from .errors import ReportError
from .metrics.history import append_snapshot, load_history
from .models import Metrics
from .output.assets import publish_assets
from .output.html_writer import RenderContext, ensure_directory, render_all


def generate_report(metrics: Metrics, config: ReportConfig) -> Optional[str]:
    """Generate the HTML report for *metrics*.

    Does nothing (and returns None) when no destination is configured.
    Returns the destination directory otherwise.
    """
    if not config.report_html:
        return None

    verbose = config.verbose
    destination = config.report_html.rstrip("/\\") or config.report_html
    ensure_directory(destination)

    # 1. Consolidate
    groups = config.build_groups()
    consolidated = consolidate(metrics)
    consolidated_groups: Dict[str, Consolidated] = {}
    for group in groups:
        consolidated_groups[group.name] = consolidate(group.reduce(metrics))

    if verbose:
        print(f"[report] Destination: {destination}")
        print(f"[report] Classes: {len(consolidated.classes)}, groups: {len(groups)}")

    # 2. History of builds
    history = tuple(load_history(destination))
    if verbose:
        print(f"[report] History snapshots: {len(history)}")

    # 3. Static assets
    publish_assets(config.template_dir, destination)

    # 4. Global report, then the snapshot it showed
    written: List[str] = render_all(
        RenderContext(
            destination=destination,
            consolidated=consolidated,
            history=history,
            config=config,
        ),
        config.template_dir,
    )
    snapshot = append_snapshot(destination, consolidated.snapshot_data())
    if verbose:
        print(f"[report] Stored snapshot #{snapshot.sequence}")

    # 5. Groups, without trends or history of their own
    for name, group_consolidated in consolidated_groups.items():
        written.extend(render_all(
            RenderContext(
                destination=_group_destination(destination, name),
                consolidated=group_consolidated,
                history=history,
                config=config,
                group=name,
                asset_path="../",
            ),
            config.template_dir,
        ))
        if verbose:
            print(f"  - group {name}: {len(group_consolidated.classes)} classes")

    if verbose:
        print(f"[report] Files written: {len(written)}")
        print(f'HTML report generated in "{destination}" directory')
    return destination


def _group_destination(destination: str, name: str) -> str:
    """Directory of group *name*, which must sit directly under *destination*."""
    path = os.path.join(destination, name)
    resolved = os.path.realpath(path)
    if os.path.dirname(resolved) != os.path.realpath(destination):
        raise ReportError(path, "group directory must be a subdirectory of the report")
    return path
