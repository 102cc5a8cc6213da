from __future__ import annotations

import json
import os
import threading
from typing import Any, Dict, List, Optional, TextIO


class TelemetryLogger:
    """Structured JSONL logger for simulation runs.

    Append-only, one JSON object per line. Every record carries an ``event``
    field ("step" or "summary"). Usable as a context manager.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
        self._lock = threading.Lock()
        self._fp: Optional[TextIO] = open(self.path, "a", encoding="utf-8")

    def _write(self, record: Dict[str, Any]) -> None:
        if self._fp is None:
            return
        line = json.dumps(record, separators=(",", ":"))
        with self._lock:
            self._fp.write(line + "\n")
            self._fp.flush()

    def log_step(self, record: Dict[str, Any]) -> None:
        """Append one executed command (index, command, outcome, pose)."""
        self._write({"event": "step", **record})

    def log_summary(self, record: Dict[str, Any]) -> None:
        """Append the end-of-run summary."""
        self._write({"event": "summary", **record})

    def close(self) -> None:
        if self._fp is not None:
            self._fp.close()
            self._fp = None

    def __enter__(self) -> "TelemetryLogger":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()


def read_records(path: str) -> List[Dict[str, Any]]:
    """Load every record of a JSONL telemetry file."""
    with open(path, "r", encoding="utf-8") as f:
        return [json.loads(line) for line in f if line.strip()]
