from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Any


# Chat Schemas
class ChatRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    # Optional so a missing message gets the 400 below instead of a generic 422.
    message: Optional[str] = None
    user_name: Optional[str] = Field(default=None, alias="userName", max_length=120)
    # Longer ids are trimmed by the chat route.
    session_id: Optional[str] = None


class ChatResponse(BaseModel):
    reply: str
    segments: list[str]
    session_id: str
    intent: str


# Admin Schemas
class AdminLoginRequest(BaseModel):
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"


class ResetResponse(BaseModel):
    removed: int


class AnalyticsResponse(BaseModel):
    days: int
    generated_at: str
    summary: dict[str, Any]
