"""
Structured JSON logger: append-only, one object per line (.jsonl).

Usage:
    from tripwise.modules.observability.logger import StructuredLogger

    slog = StructuredLogger()
    slog.log("weather_sweep_20261019T060000", "WEATHER_ADJUSTED", {"trip_id": "t1", "day": 2})
    slog.read("weather_sweep_20261019T060000")   # -> [ {...}, ... ]

Logs are written to  <LOGS_DIR>/<session_id>.jsonl  (config.LOGS_DIR).

configure_logging() sets up the stdlib root logger for scripts; library code
only ever calls logging.getLogger(__name__).
"""

from __future__ import annotations

import json
import logging
import os
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from tripwise import config

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Root logger at *level* (default config.LOG_LEVEL)."""
    logging.basicConfig(
        level=(level or config.LOG_LEVEL).upper(),
        format=_LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )


class StructuredLogger:
    """Thread-safe, append-only JSONL event log, one file per session id."""

    def __init__(self, logs_dir: Path | str | None = None) -> None:
        self._logs_dir = Path(logs_dir) if logs_dir else config.LOGS_DIR
        self._lock = threading.Lock()
        self._handles: dict[str, object] = {}  # session_id -> file handle

    @property
    def logs_dir(self) -> Path:
        return self._logs_dir

    # ── writing ───────────────────────────────────────────────────────────

    def log(self, session_id: str, event_type: str, payload: dict) -> None:
        """Append one event to ``<session_id>.jsonl``."""
        record = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "session_id": session_id,
            "event_type": event_type,
            "payload": payload,
        }
        # dates and enums in payloads serialise via str()
        line = json.dumps(record, default=str, ensure_ascii=False) + "\n"

        with self._lock:
            fh = self._handles.get(session_id) or self._open(session_id)
            fh.write(line)  # type: ignore[union-attr]
            fh.flush()  # type: ignore[union-attr]

    def close(self, session_id: str | None = None) -> None:
        """Close one session's handle, or all of them."""
        with self._lock:
            if session_id:
                fh = self._handles.pop(session_id, None)
                if fh:
                    fh.close()  # type: ignore[union-attr]
                return
            for fh in self._handles.values():
                fh.close()  # type: ignore[union-attr]
            self._handles.clear()

    # ── reading ───────────────────────────────────────────────────────────

    def sessions(self) -> list[str]:
        """Session ids with a log file, sorted by name."""
        if not self._logs_dir.exists():
            return []
        return sorted(p.stem for p in self._logs_dir.glob("*.jsonl"))

    def read(self, session_id: str, event_type: str | None = None) -> list[dict]:
        """Events logged for *session_id*, oldest first, optionally one type only."""
        path = self._logs_dir / f"{session_id}.jsonl"
        if not path.exists():
            return []
        records: list[dict] = []
        with open(path, "r", encoding="utf-8") as fh:
            for line in fh:
                line = line.strip()
                if not line:
                    continue
                record = json.loads(line)
                if event_type is None or record.get("event_type") == event_type:
                    records.append(record)
        return records

    # ── internals ─────────────────────────────────────────────────────────

    def _open(self, session_id: str):  # noqa: ANN202
        os.makedirs(self._logs_dir, exist_ok=True)
        fh = open(self._logs_dir / f"{session_id}.jsonl", "a", encoding="utf-8")  # noqa: SIM115
        self._handles[session_id] = fh
        return fh
