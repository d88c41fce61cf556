"""Aggregations over logged interactions for the admin dashboard.

Every function takes the plain dicts produced by
``interaction_log.load_interactions`` and is free of I/O.
"""

import re
from datetime import datetime, timezone
from typing import Iterable, Optional

from text_utils import keyword_tokens

SENTIMENT_TREND_THRESHOLD = 0.2
ENTITY_TYPES = ("tecnologias", "empresas", "temas")


def normalize_question(text: str) -> str:
    return " ".join(re.sub(r"[^\w\s]", "", (text or "").lower()).split())


def _parse_ts(raw) -> Optional[datetime]:
    if isinstance(raw, datetime):
        ts = raw
    else:
        try:
            ts = datetime.fromisoformat(str(raw).replace("Z", "+00:00"))
        except Exception:
            return None
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts


def _ranked(counts: dict[str, int], limit: int) -> list[tuple[str, int]]:
    # sorted() is stable, so ties keep first-seen order
    return sorted(counts.items(), key=lambda kv: kv[1], reverse=True)[: max(0, limit)]


def most_common_questions(records: Iterable[dict], limit: int = 10) -> list[dict]:
    counts: dict[str, int] = {}
    for rec in records:
        q = normalize_question(rec.get("user_message") or "")
        if q:
            counts[q] = counts.get(q, 0) + 1
    return [{"question": q, "count": c} for q, c in _ranked(counts, limit)]


def most_common_intents(records: Iterable[dict], limit: int = 10) -> list[dict]:
    counts: dict[str, int] = {}
    for rec in records:
        intent = rec.get("detected_intent") or "unknown"
        counts[intent] = counts.get(intent, 0) + 1
    return [{"intent": i, "count": c} for i, c in _ranked(counts, limit)]


def keyword_frequency(records: Iterable[dict], limit: int = 20) -> list[dict]:
    counts: dict[str, int] = {}
    for rec in records:
        for word in keyword_tokens(rec.get("user_message") or ""):
            counts[word] = counts.get(word, 0) + 1
    return [{"keyword": k, "count": c} for k, c in _ranked(counts, limit)]


def top_keywords(text: str, limit: int = 5) -> list[str]:
    counts: dict[str, int] = {}
    for word in keyword_tokens(text):
        counts[word] = counts.get(word, 0) + 1
    return [k for k, _ in _ranked(counts, limit)]


def _group_by_session(records: Iterable[dict]) -> dict[str, list[dict]]:
    sessions: dict[str, list[dict]] = {}
    for rec in records:
        sessions.setdefault(rec.get("session_id") or "unknown", []).append(rec)
    return sessions


def _by_time(rows: list[dict]) -> list[dict]:
    epoch = datetime.min.replace(tzinfo=timezone.utc)
    return sorted(rows, key=lambda r: _parse_ts(r.get("timestamp")) or epoch)


def sentiment_trends(records: Iterable[dict]) -> list[dict]:
    """First vs. last sentiment per session; sessions with one message are skipped."""
    out = []
    for session_id, rows in _group_by_session(records).items():
        if len(rows) < 2:
            continue
        ordered = _by_time(rows)
        start = float(ordered[0].get("user_sentiment") or 0.0)
        end = float(ordered[-1].get("user_sentiment") or 0.0)
        diff = end - start
        trend = "stable"
        if diff > SENTIMENT_TREND_THRESHOLD:
            trend = "improving"
        elif diff < -SENTIMENT_TREND_THRESHOLD:
            trend = "declining"
        out.append(
            {"session_id": session_id, "sentiment_start": start, "sentiment_end": end, "trend": trend}
        )
    return out


def time_distribution(records: Iterable[dict]) -> dict[str, int]:
    """Messages per UTC hour, keyed "00" through "23"."""
    hours = {f"{h:02d}": 0 for h in range(24)}
    for rec in records:
        ts = _parse_ts(rec.get("timestamp"))
        if ts is None:
            continue
        hours[f"{ts.astimezone(timezone.utc).hour:02d}"] += 1
    return hours


def entity_trends(records: Iterable[dict], limit: int = 10) -> dict[str, list[dict]]:
    per_type: dict[str, dict[str, int]] = {t: {} for t in ENTITY_TYPES}
    for rec in records:
        entities = rec.get("detected_entities") or {}
        if not isinstance(entities, dict):
            continue
        for etype, values in entities.items():
            if etype not in per_type:
                continue
            bucket = per_type[etype]
            for value in values or []:
                bucket[value] = bucket.get(value, 0) + 1
    return {
        etype: [{"entity": e, "count": c} for e, c in _ranked(counts, limit)]
        for etype, counts in per_type.items()
    }


def average_response_time(records: Iterable[dict]) -> float:
    times = [float(r["processing_time_ms"]) for r in records if (r.get("processing_time_ms") or 0) > 0]
    if not times:
        return 0.0
    return sum(times) / len(times)


def message_length_stats(records: list[dict]) -> dict:
    if not records:
        return {
            "avg_user_message_length": 0.0,
            "avg_ai_response_length": 0.0,
            "shortest_user_message": "",
            "longest_user_message": "",
        }
    user_lengths = [len(r.get("user_message") or "") for r in records]
    ai_lengths = [len(r.get("ai_response") or "") for r in records]
    # first occurrence wins on equal length
    shortest = min(range(len(records)), key=lambda i: user_lengths[i])
    longest = max(range(len(records)), key=lambda i: user_lengths[i])
    return {
        "avg_user_message_length": sum(user_lengths) / len(records),
        "avg_ai_response_length": sum(ai_lengths) / len(records),
        "shortest_user_message": records[shortest].get("user_message") or "",
        "longest_user_message": records[longest].get("user_message") or "",
    }


def most_active_sessions(records: Iterable[dict], limit: int = 5) -> list[dict]:
    out = []
    for session_id, rows in _group_by_session(records).items():
        stamps = sorted(ts for ts in (_parse_ts(r.get("timestamp")) for r in rows) if ts is not None)
        duration = (stamps[-1] - stamps[0]).total_seconds() / 60.0 if len(stamps) > 1 else 0.0
        user_name = next((r.get("user_name") for r in rows if r.get("user_name")), None)
        out.append(
            {
                "session_id": session_id,
                "user_name": user_name,
                "count": len(rows),
                "duration_minutes": round(duration, 2),
                "keywords": top_keywords(" ".join(r.get("user_message") or "" for r in rows), 5),
            }
        )
    out.sort(key=lambda s: s["count"], reverse=True)
    return out[: max(0, limit)]


def build_summary(records: list[dict], limit: int = 10) -> dict:
    n = max(1, min(50, int(limit or 10)))
    return {
        "total_interactions": len(records),
        "unique_sessions": len({r.get("session_id") for r in records}),
        "most_common_questions": most_common_questions(records, n),
        "most_common_intents": most_common_intents(records, n),
        "keyword_frequency": keyword_frequency(records, n * 2),
        "sentiment_trends": sentiment_trends(records),
        "time_distribution": time_distribution(records),
        "entity_trends": entity_trends(records, n),
        "average_response_time_ms": round(average_response_time(records), 2),
        "message_length_stats": message_length_stats(records),
        "most_active_sessions": most_active_sessions(records, 5),
    }
