# app/api/routes_auth.py
# Username/password, guest, phone OTP and (optional) Google sign-in.
# A signed access token in an httpOnly cookie marks the signed-in user;
# the cart stays keyed by the session id either way.

import logging
import uuid
from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from fastapi.responses import RedirectResponse

from app.core.config import settings
from app.core.exceptions import OAuthError, SmsDeliveryError, UsernameTakenError
from app.core.security import create_access_token, hash_password, verify_password
from app.db.deps import (
    ACCESS_TOKEN_COOKIE,
    get_current_user,
    get_otp_store,
    get_session_id,
    get_sms_sender,
    get_storage,
    set_session_cookie,
)
from app.db.storage import IStorage
from app.models.models import User
from app.schemas.schemas import (
    CartOut,
    GuestSession,
    LoginResponse,
    PhoneOtpRequest,
    PhoneOtpVerify,
    UserCreate,
    UserLogin,
    UserOut,
)
from app.services.google_oauth_service import GoogleOAuthService
from app.services.otp_service import OtpStore, OtpVerification, TwilioSmsSender

logger = logging.getLogger(__name__)

router = APIRouter()

OAUTH_STATE_COOKIE = "oauth_state"


def issue_login_cookie(response: Response, user: User):
    token = create_access_token(data={"sub": str(user.id)})
    response.set_cookie(
        ACCESS_TOKEN_COOKIE,
        token,
        httponly=True,
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    )


@router.post("/register", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def register(data: UserCreate, response: Response, storage: IStorage = Depends(get_storage)):
    try:
        user = storage.register_user({
            "username": data.username,
            "password": hash_password(data.password),
            "email": data.email,
        })
    except UsernameTakenError:
        raise HTTPException(status_code=400, detail="Username already exists")

    issue_login_cookie(response, user)
    logger.info(f"User {user.id} registered as {user.username}")
    return user


@router.post("/login", response_model=LoginResponse)
def login(
    data: UserLogin,
    response: Response,
    session_id: str = Depends(get_session_id),
    storage: IStorage = Depends(get_storage),
):
    user = storage.get_user_by_username(data.username)
    if not user or not verify_password(data.password, user.password):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    issue_login_cookie(response, user)
    return LoginResponse(
        id=user.id,
        username=user.username,
        message="Login successful",
        cart=storage.get_cart_summary(session_id),
    )


@router.post("/guest", response_model=GuestSession)
def guest_session(response: Response):
    """Fresh, short-lived session with an empty cart"""
    set_session_cookie(response, str(uuid.uuid4()), settings.GUEST_SESSION_MAX_AGE_DAYS)
    return GuestSession(message="Guest session created", cart=CartOut())


@router.post("/logout")
def logout(response: Response):
    response.delete_cookie(ACCESS_TOKEN_COOKIE)
    return {"message": "Logged out"}


@router.get("/user", response_model=UserOut)
def current_user(user: User = Depends(get_current_user)):
    return user


# 👇 Phone sign-in

@router.post("/phone/send-otp")
def send_otp(
    data: PhoneOtpRequest,
    otp_store: OtpStore = Depends(get_otp_store),
    sms_sender: TwilioSmsSender = Depends(get_sms_sender),
):
    if not sms_sender.configured:
        raise HTTPException(status_code=503, detail="Phone authentication is not configured")

    code = otp_store.issue(data.phone_number)
    try:
        sms_sender.send(data.phone_number, f"Your OTP is: {code}")
    except SmsDeliveryError as e:
        otp_store.revoke(data.phone_number)
        logger.error(f"Failed to send OTP: {e.message}")
        raise HTTPException(status_code=500, detail="Failed to send OTP")

    return {"message": "OTP sent successfully"}


@router.post("/phone/verify-otp")
def verify_otp(
    data: PhoneOtpVerify,
    response: Response,
    otp_store: OtpStore = Depends(get_otp_store),
    storage: IStorage = Depends(get_storage),
):
    result = otp_store.verify(data.phone_number, data.otp)
    if result == OtpVerification.EXPIRED:
        raise HTTPException(status_code=400, detail="OTP expired or invalid")
    if result == OtpVerification.MISMATCH:
        logger.warning(f"Wrong OTP entered for {data.phone_number}")
        raise HTTPException(status_code=400, detail="Invalid OTP")

    user = storage.get_user_by_phone(data.phone_number)
    if not user:
        user = storage.create_user_with_unique_username({
            "username": f"user_{data.phone_number[-4:]}",
            "phone_number": data.phone_number,
        })
        logger.info(f"User {user.id} created from phone sign-in")

    issue_login_cookie(response, user)
    return {"message": "Authentication successful", "user": UserOut.model_validate(user)}


def find_or_create_google_user(storage: IStorage, profile: dict) -> User:
    """Match on Google id, then email; otherwise create a user named after the profile"""
    user = storage.get_user_by_google_id(profile["id"]) or storage.get_user_by_email(profile["email"])
    if not user:
        user = storage.create_user_with_unique_username({
            "username": profile["name"],
            "email": profile["email"],
            "google_id": profile["id"],
        })
        logger.info(f"User {user.id} created from Google sign-in")
    return user


# 👇 Google sign-in, only wired up when credentials are present

if settings.google_configured:

    @router.get("/google")
    def google_login():
        state = uuid.uuid4().hex
        redirect = RedirectResponse(GoogleOAuthService().authorization_url(state))
        redirect.set_cookie(OAUTH_STATE_COOKIE, state, httponly=True, max_age=600)
        return redirect

    @router.get("/google/callback")
    def google_callback(request: Request, code: str = "", state: str = "", storage: IStorage = Depends(get_storage)):
        if not code or state != request.cookies.get(OAUTH_STATE_COOKIE):
            return RedirectResponse("/login")

        try:
            profile = GoogleOAuthService().fetch_profile(code)
        except OAuthError as e:
            logger.warning(e.message)
            return RedirectResponse("/login")

        user = find_or_create_google_user(storage, profile)

        redirect = RedirectResponse("/")
        redirect.delete_cookie(OAUTH_STATE_COOKIE)
        issue_login_cookie(redirect, user)
        return redirect
