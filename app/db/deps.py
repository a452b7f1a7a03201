import uuid
from typing import Optional
from fastapi import Depends, HTTPException, Request, Response, status
from app.core.config import settings
from app.core.security import decode_access_token
from app.db import session
from app.db.storage import IStorage
from app.models.models import User
from app.services.otp_service import OtpStore, TwilioSmsSender

SESSION_COOKIE = "sessionId"
ACCESS_TOKEN_COOKIE = "access_token"

_otp_store = OtpStore()

# Dependency to get the storage engine
def get_storage() -> IStorage:
    return session.storage

def get_otp_store() -> OtpStore:
    return _otp_store

def get_sms_sender() -> TwilioSmsSender:
    return TwilioSmsSender()

def set_session_cookie(response: Response, session_id: str, max_age_days: int):
    response.set_cookie(
        SESSION_COOKIE,
        session_id,
        httponly=True,
        max_age=max_age_days * 24 * 60 * 60,
    )

def _lookup_session_id(request: Request) -> Optional[str]:
    return request.headers.get("authorization") or request.cookies.get(SESSION_COOKIE)

# Session id from the Authorization header or cookie, minted on first contact
def get_session_id(request: Request, response: Response) -> str:
    session_id = _lookup_session_id(request)
    if not session_id:
        session_id = str(uuid.uuid4())
        set_session_cookie(response, session_id, settings.CART_SESSION_MAX_AGE_DAYS)
    return session_id

# Same lookup for endpoints that make no sense without an existing session
def require_session_id(request: Request) -> str:
    session_id = _lookup_session_id(request)
    if not session_id:
        raise HTTPException(status_code=400, detail="No session ID provided")
    return session_id

def get_optional_user(request: Request, storage: IStorage = Depends(get_storage)) -> Optional[User]:
    token = request.cookies.get(ACCESS_TOKEN_COOKIE)
    if not token:
        return None
    payload = decode_access_token(token)
    if not payload or payload.get("sub") is None:
        return None
    try:
        return storage.get_user(int(payload["sub"]))
    except (TypeError, ValueError):
        return None

def get_current_user(user: Optional[User] = Depends(get_optional_user)) -> User:
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    return user

# Admin endpoints are open unless REQUIRE_ADMIN_AUTH is switched on.
# Admin rights come from the seeded account record, never from a username.
def require_admin(user: Optional[User] = Depends(get_optional_user)):
    if not settings.REQUIRE_ADMIN_AUTH:
        return
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    if not user.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")
