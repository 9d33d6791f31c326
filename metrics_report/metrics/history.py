"""History of report snapshots.

Each generation of the global report appends one ``{sequence, avg, sum}``
record under ``<destination>/js/``; ``latest.json`` mirrors the newest one.
Records are never edited or removed.
"""

from __future__ import annotations

import glob
import json
import os
import re
from dataclasses import dataclass, field
from typing import List, Optional

from ..errors import HistoryError


HISTORY_DIR = "js"
LATEST_FILE = "latest.json"

_HISTORY_RE = re.compile(r"^history-(\d+)\.json$")


# ---------------------------------------------------------------------------
# Snapshot model
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class HistorySnapshot:
    """Averages and sums of one past report generation."""
    sequence: int
    avg: dict = field(default_factory=dict)
    sum: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "sequence": self.sequence,
            "avg": self.avg,
            "sum": self.sum,
        }


# ---------------------------------------------------------------------------
# Load
# ---------------------------------------------------------------------------

def history_files(destination: str) -> List[str]:
    """List history record paths, ordered by their numeric suffix."""
    pattern = os.path.join(destination, HISTORY_DIR, "history-*.json")
    files = [p for p in glob.glob(pattern) if _HISTORY_RE.match(os.path.basename(p))]
    return sorted(files, key=_file_number)


def load_snapshot(path: str) -> HistorySnapshot:
    """Load one history record; any defect raises :class:`HistoryError`."""
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = json.load(fh)
    except OSError as e:
        raise HistoryError(path, f"unreadable: {e}") from e
    except json.JSONDecodeError as e:
        raise HistoryError(path, f"invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise HistoryError(path, "expected a JSON object")
    for key in ("avg", "sum"):
        if not isinstance(data.get(key), dict):
            raise HistoryError(path, f'missing or invalid "{key}"')

    sequence = data.get("sequence", _file_number(path))
    if isinstance(sequence, bool) or not isinstance(sequence, int) or sequence < 1:
        raise HistoryError(path, f"invalid sequence {sequence!r}")

    return HistorySnapshot(sequence=sequence, avg=data["avg"], sum=data["sum"])


def load_history(destination: str) -> List[HistorySnapshot]:
    """Load every snapshot stored under *destination*, oldest first.

    Sequences must run 1..N without gaps or duplicates.
    """
    snapshots = [load_snapshot(path) for path in history_files(destination)]
    snapshots.sort(key=lambda s: s.sequence)

    for expected, snap in enumerate(snapshots, start=1):
        if snap.sequence != expected:
            raise HistoryError(
                os.path.join(destination, HISTORY_DIR),
                f"expected sequence {expected}, found {snap.sequence}",
            )
    return snapshots


def get_latest_snapshot(history: List[HistorySnapshot]) -> Optional[HistorySnapshot]:
    """Return the highest-sequence snapshot (if any)."""
    if not history:
        return None
    return max(history, key=lambda s: s.sequence)


# ---------------------------------------------------------------------------
# Append
# ---------------------------------------------------------------------------

def append_snapshot(destination: str, data: dict) -> HistorySnapshot:
    """Store *data* (``{"avg": ..., "sum": ...}``) as the next snapshot.

    Writes ``history-<count + 1>.json`` and overwrites ``latest.json`` with
    identical content. Returns the stored snapshot.
    """
    history_dir = os.path.join(destination, HISTORY_DIR)
    os.makedirs(history_dir, exist_ok=True)

    snapshot = HistorySnapshot(
        sequence=len(history_files(destination)) + 1,
        avg=data.get("avg", {}),
        sum=data.get("sum", {}),
    )
    content = json.dumps(snapshot.to_dict(), indent=2, ensure_ascii=False)

    path = os.path.join(history_dir, f"history-{snapshot.sequence}.json")
    if os.path.exists(path):
        raise HistoryError(path, "record already exists")
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(content)
    with open(os.path.join(history_dir, LATEST_FILE), "w", encoding="utf-8") as fh:
        fh.write(content)

    return snapshot


def _file_number(path: str) -> int:
    m = _HISTORY_RE.match(os.path.basename(path))
    return int(m.group(1)) if m else 0
