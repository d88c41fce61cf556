"""Persist, read, export and reset chat interaction records."""

import csv
import io
from datetime import datetime, timedelta, timezone
from typing import Optional

from sqlalchemy.orm import Session

from intent import analyze_sentiment, extract_entities
from models import Interaction

CSV_HEADER = ("sessionId", "timestamp", "userMessage", "aiResponse")


def _as_utc(ts: Optional[datetime]) -> Optional[datetime]:
    if ts is None:
        return None
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc)


def log_interaction(
    db: Session,
    session_id: str,
    user_message: str,
    ai_response: str,
    detected_intent: Optional[str],
    processing_time_ms: Optional[float] = None,
    user_name: Optional[str] = None,
    user_agent: Optional[str] = None,
    timestamp: Optional[datetime] = None,
) -> Optional[Interaction]:
    """Store one exchange. Returns ``None`` (after a rollback) if the write fails."""
    row = Interaction(
        session_id=session_id,
        user_name=user_name,
        user_message=user_message,
        ai_response=ai_response,
        detected_intent=detected_intent,
        detected_entities=extract_entities(user_message),
        timestamp=timestamp or datetime.now(timezone.utc),
        processing_time_ms=processing_time_ms,
        user_sentiment=analyze_sentiment(user_message),
        user_agent=(user_agent or "")[:255] or None,
    )
    try:
        db.add(row)
        db.commit()
        db.refresh(row)
    except Exception as exc:
        db.rollback()
        print(f"[db] interaction log failed: {exc}")
        return None
    return row


def interaction_to_dict(row: Interaction) -> dict:
    ts = _as_utc(row.timestamp)
    return {
        "id": row.id,
        "session_id": row.session_id,
        "user_name": row.user_name,
        "user_message": row.user_message,
        "ai_response": row.ai_response,
        "detected_intent": row.detected_intent,
        "detected_entities": row.detected_entities or {},
        "timestamp": ts.isoformat() if ts else None,
        "processing_time_ms": row.processing_time_ms,
        "user_sentiment": row.user_sentiment,
        "user_agent": row.user_agent,
    }


def load_interactions(db: Session, days: Optional[int] = 30) -> list[dict]:
    """Records from the last *days* days (all of them when *days* is falsy), oldest first."""
    query = db.query(Interaction)
    if days:
        cutoff = datetime.now(timezone.utc) - timedelta(days=max(1, int(days)))
        query = query.filter(Interaction.timestamp >= cutoff)
    rows = query.order_by(Interaction.timestamp.asc(), Interaction.id.asc()).all()
    return [interaction_to_dict(r) for r in rows]


def export_csv(records: list[dict]) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for rec in records:
        writer.writerow(
            [
                rec.get("session_id") or "",
                rec.get("timestamp") or "",
                rec.get("user_message") or "",
                rec.get("ai_response") or "",
            ]
        )
    return buf.getvalue()


def reset_interactions(db: Session) -> int:
    removed = db.query(Interaction).delete(synchronize_session=False)
    db.commit()
    return int(removed or 0)
