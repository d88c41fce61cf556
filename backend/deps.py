"""Shared FastAPI dependencies used across route modules."""

from database import SessionLocal
from auth import get_current_admin_factory
from engine import ChatEngine
from memory_service import ContextStore

_chat_engine = ChatEngine()
_context_store = ContextStore()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_chat_engine() -> ChatEngine:
    return _chat_engine


def get_context_store() -> ContextStore:
    return _context_store


get_current_admin = get_current_admin_factory()
