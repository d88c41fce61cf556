"""Chat telemetry: one JSON object per line, plus the reader behind /api/admin/telemetry.

Writes are best effort. A failing disk must never cost the user a reply.
"""

import json
import os
from collections import Counter, deque
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Iterator, Optional

from text_utils import normalize_whitespace

_BACKEND_DIR = Path(__file__).resolve().parent

CHAT_TELEMETRY_PATH = _BACKEND_DIR / (os.getenv("CHAT_TELEMETRY_LOG") or "chat_telemetry.log")

EVENT_REPLY = "chat_reply"
EVENT_ENGINE_ERROR = "engine_error"


def _env_bool(name: str, default: bool) -> bool:
    raw = (os.getenv(name) or "").strip().lower()
    if not raw:
        return default
    return raw in ("1", "true", "yes", "on")


def telemetry_enabled() -> bool:
    return _env_bool("CHAT_TELEMETRY_ENABLED", True)


def append_chat_telemetry(event: str, payload: Optional[dict] = None) -> None:
    if not telemetry_enabled():
        return
    line = json.dumps(
        {
            "ts": datetime.now(timezone.utc).isoformat(),
            "event": normalize_whitespace(event) or "event",
            "payload": payload or {},
        },
        ensure_ascii=False,
    )
    try:
        CHAT_TELEMETRY_PATH.parent.mkdir(parents=True, exist_ok=True)
        with open(CHAT_TELEMETRY_PATH, "a", encoding="utf-8") as fh:
            fh.write(line + "\n")
    except OSError as exc:
        print(f"[telemetry] write skipped: {exc}")


def _as_utc(raw) -> Optional[datetime]:
    try:
        ts = datetime.fromisoformat(str(raw).replace("Z", "+00:00"))
    except ValueError:
        return None
    return ts if ts.tzinfo else ts.replace(tzinfo=timezone.utc)


def _iter_lines(path: Path) -> Iterator[Optional[dict]]:
    """Yield each decoded event, or ``None`` for a line that is not valid JSON."""
    with open(path, "r", encoding="utf-8") as fh:
        for line in fh:
            line = line.strip()
            if not line:
                continue
            try:
                item = json.loads(line)
            except ValueError:
                yield None
                continue
            yield item if isinstance(item, dict) else None


def read_chat_telemetry_summary(hours: int = 24, limit: int = 6) -> dict:
    """Counters over the last *hours* (1-168) and the *limit* (1-25) newest events."""
    window = max(1, min(168, int(hours or 24)))
    keep = max(1, min(25, int(limit or 6)))
    now = datetime.now(timezone.utc)
    cutoff = now - timedelta(hours=window)

    events: Counter = Counter()
    paths: Counter = Counter()
    intents: Counter = Counter()
    recent: deque = deque(maxlen=keep)
    bad_lines = 0

    exists = CHAT_TELEMETRY_PATH.exists()
    if exists:
        try:
            for item in _iter_lines(CHAT_TELEMETRY_PATH):
                if item is None:
                    bad_lines += 1
                    continue
                ts = _as_utc(item.get("ts"))
                if ts is None or ts < cutoff:
                    continue
                name = normalize_whitespace(str(item.get("event") or "")) or "event"
                payload = item.get("payload")
                payload = payload if isinstance(payload, dict) else {}
                events[name] += 1
                if name == EVENT_REPLY:
                    paths[str(payload.get("path") or "unknown")] += 1
                    intents[str(payload.get("intent") or "unknown")] += 1
                recent.append({"ts": ts.isoformat(), "event": name, "payload": payload})
        except OSError as exc:
            print(f"[telemetry] read failed: {exc}")

    answered = events[EVENT_REPLY] + events[EVENT_ENGINE_ERROR]
    error_rate = round(100.0 * events[EVENT_ENGINE_ERROR] / answered, 2) if answered else 0.0

    return {
        "status": "ok",
        "now_utc": now.isoformat(),
        "window_hours": window,
        "telemetry_enabled": telemetry_enabled(),
        "file_exists": exists,
        "file_path": CHAT_TELEMETRY_PATH.name,
        "counts": dict(events),
        "path_counts": dict(paths),
        "intent_counts": dict(intents),
        "engine_error_rate_percent": error_rate,
        "recent": list(recent),
        "parse_errors": bad_lines,
    }
