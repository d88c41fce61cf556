"""Public chat route: validation, session cookie, engine call, interaction logging."""

import os
import time
import uuid
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from sqlalchemy.orm import Session

from deps import get_chat_engine, get_context_store, get_db
from engine import ChatEngine
from interaction_log import log_interaction
from memory_service import ContextStore
from schemas import ChatRequest, ChatResponse
from telemetry import append_chat_telemetry
from text_utils import normalize_whitespace


def _env_int(name: str, default: int, min_value: int, max_value: int) -> int:
    raw = os.getenv(name)
    try:
        value = int(raw) if raw not in (None, "") else default
    except Exception:
        value = default
    return max(min_value, min(max_value, value))


MAX_MESSAGE_CHARS = _env_int("MAX_MESSAGE_CHARS", 500, 50, 4000)
SESSION_COOKIE = "sessionId"
SESSION_COOKIE_MAX_AGE = 86400
MAX_SESSION_ID_CHARS = 64

APOLOGY_REPLY = (
    "Lo siento, tuve un problema al procesar tu mensaje. "
    "¿Podrías intentarlo de nuevo en un momento?"
)

router = APIRouter(prefix="/api", tags=["chat"])


def _resolve_session_id(body_value: Optional[str], request: Request) -> str:
    for candidate in (body_value, request.cookies.get(SESSION_COOKIE)):
        sid = (candidate or "").strip()
        if sid:
            return sid[:MAX_SESSION_ID_CHARS]
    return str(uuid.uuid4())


@router.post("/chat", response_model=ChatResponse)
def chat(
    body: ChatRequest,
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
    engine: ChatEngine = Depends(get_chat_engine),
    store: ContextStore = Depends(get_context_store),
):
    if body.message is None:
        raise HTTPException(status_code=400, detail="No message provided")
    if not body.message.strip():
        raise HTTPException(status_code=400, detail="Message cannot be empty")

    message = body.message[:MAX_MESSAGE_CHARS]
    user_name = normalize_whitespace(body.user_name or "") or None
    session_id = _resolve_session_id(body.session_id, request)

    started = time.perf_counter()
    try:
        result = engine.respond(message, user_name=user_name, context=store.get(session_id))
    except Exception as exc:
        print(f"[chat] engine failure session={session_id}: {exc!r}")
        append_chat_telemetry(
            "engine_error",
            {"session_id": session_id, "error": type(exc).__name__, "detail": str(exc)[:300]},
        )
        reply, segments, intent = APOLOGY_REPLY, [APOLOGY_REPLY], "error"
    else:
        store.put(session_id, result.context)
        reply, segments, intent = result.reply, result.segments, result.trace.intent
        append_chat_telemetry(
            "chat_reply",
            {"session_id": session_id, **result.trace.as_payload()},
        )
    elapsed_ms = (time.perf_counter() - started) * 1000.0

    log_interaction(
        db,
        session_id=session_id,
        user_message=message,
        ai_response=reply,
        detected_intent=intent,
        processing_time_ms=elapsed_ms,
        user_name=user_name,
        user_agent=request.headers.get("user-agent"),
    )

    response.set_cookie(
        SESSION_COOKIE,
        session_id,
        max_age=SESSION_COOKIE_MAX_AGE,
        path="/",
        samesite="strict",
        httponly=True,
    )
    return ChatResponse(reply=reply, segments=segments, session_id=session_id, intent=intent)
