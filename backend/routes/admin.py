"""Admin routes: login, analytics summary, export, reset, telemetry."""

import json
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import Response
from sqlalchemy.orm import Session

from analytics import build_summary
from auth import ADMIN_SUBJECT, check_admin_password, create_access_token
from deps import get_current_admin, get_db
from interaction_log import export_csv, load_interactions, reset_interactions
from schemas import AdminLoginRequest, AnalyticsResponse, ResetResponse, TokenResponse
from telemetry import read_chat_telemetry_summary

router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.post("/login", response_model=TokenResponse)
def admin_login(body: AdminLoginRequest):
    if not check_admin_password(body.password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return TokenResponse(access_token=create_access_token(ADMIN_SUBJECT))


@router.get("/analytics", response_model=AnalyticsResponse)
def admin_analytics(
    days: int = Query(30, ge=1, le=365),
    limit: int = Query(10, ge=1, le=50),
    db: Session = Depends(get_db),
    _admin: str = Depends(get_current_admin),
):
    records = load_interactions(db, days)
    return AnalyticsResponse(
        days=days,
        generated_at=datetime.now(timezone.utc).isoformat(),
        summary=build_summary(records, limit),
    )


@router.get("/export")
def admin_export(
    format: str = Query("json", pattern="^(json|csv)$"),
    days: int = Query(30, ge=1, le=365),
    db: Session = Depends(get_db),
    _admin: str = Depends(get_current_admin),
):
    records = load_interactions(db, days)
    stamp = datetime.now(timezone.utc).strftime("%Y-%m-%d")
    if format == "csv":
        return Response(
            content=export_csv(records),
            media_type="text/csv; charset=utf-8",
            headers={"Content-Disposition": f'attachment; filename="sobremia-interactions-{stamp}.csv"'},
        )
    return Response(
        content=json.dumps(records, ensure_ascii=False, indent=2),
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="sobremia-interactions-{stamp}.json"'},
    )


@router.post("/reset", response_model=ResetResponse)
def admin_reset(
    db: Session = Depends(get_db),
    _admin: str = Depends(get_current_admin),
):
    removed = reset_interactions(db)
    print(f"[admin] interaction log reset, removed={removed}")
    return ResetResponse(removed=removed)


@router.get("/telemetry")
def admin_telemetry(
    hours: int = 24,
    limit: int = 6,
    _admin: str = Depends(get_current_admin),
):
    """Return telemetry counters and recent events for the chat engine."""
    return read_chat_telemetry_summary(hours=hours, limit=limit)
