"""HTML report generator.

Renders the fixed set of report pages from Jinja2 templates, plus the
``classes.js`` data file consumed by the client-side scripts.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
    TemplateNotFound,
    select_autoescape,
)

from ..aggregation.consolidator import Consolidated, thaw
from ..errors import RenderError, ReportError
from ..metrics.history import HistorySnapshot
from ..metrics.trend import TrendCalculator


# Page name -> context fields its template consumes
PAGES: Dict[str, Tuple[str, ...]] = {
    "index": ("sum", "avg", "project", "history"),
    "loc": ("sum", "avg", "classes", "files"),
    "relations": ("classes",),
    "coupling": ("avg", "classes"),
    "all": ("classes",),
    "oop": ("sum", "avg", "classes"),
    "complexity": ("avg", "classes"),
    "panel": ("sum", "avg", "history"),
    "violations": ("sum", "classes", "config"),
    "packages": ("sum", "avg", "packages"),
    "package_relations": ("packages",),
    "composer": ("project",),
}

PAGE_TITLES = {
    "index": "Overview",
    "loc": "Size & volume",
    "relations": "Relations",
    "coupling": "Coupling",
    "all": "All classes",
    "oop": "Object orientation",
    "complexity": "Complexity",
    "panel": "Panel",
    "violations": "Violations",
    "packages": "Packages",
    "package_relations": "Package relations",
    "composer": "Dependencies",
}

CLASSES_JS = "classes.js"


@dataclass(frozen=True)
class RenderContext:
    """Everything one render call needs, built fresh for each scope."""
    destination: str
    consolidated: Consolidated
    history: Tuple[HistorySnapshot, ...]
    config: Any
    group: Optional[str] = None
    asset_path: str = ""

    @property
    def is_home(self) -> bool:
        return self.group is None

    def fields(self) -> Dict[str, Any]:
        c = self.consolidated
        return {
            "sum": c.sum,
            "avg": c.avg,
            "classes": c.classes,
            "files": c.files,
            "project": c.project,
            "packages": c.packages,
            "history": [s.to_dict() for s in self.history],
            "config": self.config,
        }


def create_environment(template_dir: str) -> Environment:
    env = Environment(
        loader=FileSystemLoader(template_dir),
        autoescape=select_autoescape(enabled_extensions=("html", "html.j2")),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    return env


def render_page(env: Environment, page: str, context: RenderContext) -> str:
    """Render *page* into the context destination.

    Returns path to the written file.
    """
    try:
        consumed = PAGES[page]
    except KeyError:
        raise RenderError(page, "unknown page")

    available = context.fields()
    calculator = TrendCalculator(
        current={"sum": context.consolidated.sum, "avg": context.consolidated.avg},
        history=list(context.history),
        enabled=context.is_home,
    )
    variables = {name: available[name] for name in consumed}
    variables.update({
        "page": page,
        "pages": list(PAGES),
        "titles": PAGE_TITLES,
        "group": context.group,
        "asset_path": context.asset_path,
        "trend": calculator.trend,
        "generated_at": datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M UTC"),
    })

    try:
        template = env.get_template(f"{page}.html.j2")
        html = template.render(**variables)
    except TemplateNotFound as e:
        raise RenderError(page, f"template not found: {e.name}") from e
    except TemplateError as e:
        raise RenderError(page, str(e)) from e

    path = os.path.join(context.destination, f"{page}.html")
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(html)
    return path


def write_classes_js(classes, destination: str) -> str:
    """Write the class listing as a script-loadable ``var classes``."""
    path = os.path.join(destination, CLASSES_JS)
    data = json.dumps(thaw(classes), indent=2, ensure_ascii=False)
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(f"var classes = {data};\n")
    return path


def ensure_directory(path: str) -> str:
    """Create *path* if needed and check it can be written to."""
    try:
        os.makedirs(path, exist_ok=True)
    except (OSError, ValueError) as e:
        raise ReportError(path, str(e)) from e
    if not os.access(path, os.W_OK):
        raise ReportError(path)
    return path


def render_all(context: RenderContext, template_dir: str) -> List[str]:
    """Render every page of :data:`PAGES` and the class data file.

    Returns the list of written files.
    """
    destination = ensure_directory(context.destination)

    env = create_environment(template_dir)
    written = [render_page(env, page, context) for page in PAGES]
    written.append(write_classes_js(context.consolidated.classes, destination))
    return written
