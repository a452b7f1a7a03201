# app/core/config.py - Storefront settings

from pydantic_settings import BaseSettings
from typing import Optional

class Settings(BaseSettings):
    # Auth
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 7 * 24 * 60  # 7 days
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: Optional[str] = None  # no admin account is seeded without it
    REQUIRE_ADMIN_AUTH: bool = False

    # Sessions
    CART_SESSION_MAX_AGE_DAYS: int = 30
    GUEST_SESSION_MAX_AGE_DAYS: int = 1

    # Complaint attachments
    UPLOAD_DIR: str = "uploads"
    MAX_ATTACHMENT_SIZE: int = 5 * 1024 * 1024  # 5MB
    allowed_attachment_types: str = (
        "image/jpeg,image/png,application/pdf,application/msword,"
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
    )

    # Catalog
    SEARCH_MIN_QUERY_LENGTH: int = 2

    # Phone OTP (Twilio)
    TWILIO_ACCOUNT_SID: Optional[str] = None
    TWILIO_AUTH_TOKEN: Optional[str] = None
    TWILIO_PHONE_NUMBER: Optional[str] = None
    OTP_EXPIRY_MINUTES: int = 5

    # Google OAuth
    GOOGLE_CLIENT_ID: Optional[str] = None
    GOOGLE_CLIENT_SECRET: Optional[str] = None
    GOOGLE_REDIRECT_URI: str = "http://localhost:8000/api/auth/google/callback"

    CORS_ORIGINS: str = "*"
    LOG_LEVEL: str = "INFO"

    @property
    def attachment_types(self) -> list:
        return [t.strip() for t in self.allowed_attachment_types.split(",") if t.strip()]

    @property
    def twilio_configured(self) -> bool:
        return bool(self.TWILIO_ACCOUNT_SID and self.TWILIO_AUTH_TOKEN)

    @property
    def google_configured(self) -> bool:
        return bool(self.GOOGLE_CLIENT_ID and self.GOOGLE_CLIENT_SECRET)

    class Config:
        env_file = ".env"
        case_sensitive = False  # Allow lowercase env vars
        extra = "ignore"

settings = Settings()
