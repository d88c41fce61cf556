import os
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials


def _env_int(name: str, default: int, min_value: int, max_value: int) -> int:
    raw = os.getenv(name)
    try:
        value = int(raw) if raw not in (None, "") else default
    except Exception:
        value = default
    return max(min_value, min(max_value, value))


# JWT settings
SECRET_KEY = os.getenv("ADMIN_SECRET_KEY", "change-me-admin-secret")  # set ADMIN_SECRET_KEY in production
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = _env_int("ADMIN_TOKEN_EXPIRE_MINUTES", 60, 5, 7 * 24 * 60)
ADMIN_SUBJECT = "admin"

security = HTTPBearer(auto_error=False)


def admin_password() -> Optional[str]:
    return os.getenv("ADMIN_PASSWORD") or None


def check_admin_password(candidate: str) -> bool:
    """Constant-time comparison. Raises 503 when no admin password is configured."""
    expected = admin_password()
    if not expected:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Admin login is disabled",
        )
    return secrets.compare_digest((candidate or "").encode("utf-8"), expected.encode("utf-8"))


def create_access_token(subject: str = ADMIN_SUBJECT, expires_delta: Optional[timedelta] = None) -> str:
    issued = datetime.now(timezone.utc)
    lifetime = expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    claims = {"sub": subject, "iat": issued, "exp": issued + lifetime}
    return jwt.encode(claims, SECRET_KEY, algorithm=ALGORITHM)


def verify_token(token: str) -> Optional[dict]:
    """Decoded claims, or None when the token does not verify."""
    try:
        return jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        return None


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_admin_factory():
    """get_current_admin dependency factory"""
    def get_current_admin(
        credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    ) -> str:
        if credentials is None:
            raise _unauthorized("Not authenticated")
        payload = verify_token(credentials.credentials)
        if payload is None:
            raise _unauthorized("Invalid authentication credentials")
        subject = payload.get("sub")
        if subject != ADMIN_SUBJECT:
            raise _unauthorized("Invalid authentication credentials")
        return subject

    return get_current_admin
