# app/services/otp_service.py
# One-time passcodes for phone sign-in, delivered through Twilio.

import random
import threading
import time
import logging
import requests
from dataclasses import dataclass
from typing import Dict, Optional

from app.core.config import settings
from app.core.exceptions import SmsDeliveryError, SmsNotConfiguredError

logger = logging.getLogger(__name__)


@dataclass
class PendingOtp:
    code: str
    expires_at: float


class OtpVerification:
    OK = "ok"
    EXPIRED = "expired"   # also covers "never issued"
    MISMATCH = "mismatch"


class OtpStore:
    """In-memory code store keyed by phone number. Codes are single-use."""

    def __init__(self, ttl_seconds: Optional[int] = None, clock=time.time):
        self.ttl_seconds = ttl_seconds if ttl_seconds is not None else settings.OTP_EXPIRY_MINUTES * 60
        self._clock = clock
        self._codes: Dict[str, PendingOtp] = {}
        self._lock = threading.Lock()

    def issue(self, phone_number: str) -> str:
        code = f"{random.randint(100000, 999999)}"
        with self._lock:
            self._codes[phone_number] = PendingOtp(code=code, expires_at=self._clock() + self.ttl_seconds)
        return code

    def revoke(self, phone_number: str):
        with self._lock:
            self._codes.pop(phone_number, None)

    def verify(self, phone_number: str, code: str) -> str:
        with self._lock:
            pending = self._codes.get(phone_number)
            if pending is None or pending.expires_at < self._clock():
                return OtpVerification.EXPIRED
            if pending.code != code:
                return OtpVerification.MISMATCH
            del self._codes[phone_number]
            return OtpVerification.OK


class TwilioSmsSender:
    """Minimal client for the Twilio Messages REST endpoint"""

    def __init__(self):
        self.account_sid = settings.TWILIO_ACCOUNT_SID
        self.auth_token = settings.TWILIO_AUTH_TOKEN
        self.from_number = settings.TWILIO_PHONE_NUMBER
        self.base_url = f"https://api.twilio.com/2010-04-01/Accounts/{self.account_sid}/Messages.json"

    @property
    def configured(self) -> bool:
        return bool(self.account_sid and self.auth_token)

    def send(self, to: str, body: str):
        if not self.configured:
            raise SmsNotConfiguredError()

        try:
            response = requests.post(
                self.base_url,
                data={"To": to, "From": self.from_number, "Body": body},
                auth=(self.account_sid, self.auth_token),
                timeout=30,
            )
        except requests.RequestException as e:
            raise SmsDeliveryError(to, str(e))

        if response.status_code >= 400:
            raise SmsDeliveryError(to, f"HTTP {response.status_code}: {response.text[:200]}")
        logger.info(f"OTP SMS queued for {to}")
