# tests/test_services/test_otp_service.py

import pytest

from app.core.exceptions import SmsNotConfiguredError
from app.core.config import settings
from app.services.otp_service import OtpStore, OtpVerification, TwilioSmsSender


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


def test_issued_code_is_six_digits():
    code = OtpStore(ttl_seconds=60).issue("9876543210")
    assert len(code) == 6 and code.isdigit()


def test_verify_accepts_code_once():
    store = OtpStore(ttl_seconds=60)
    code = store.issue("9876543210")

    assert store.verify("9876543210", code) == OtpVerification.OK
    assert store.verify("9876543210", code) == OtpVerification.EXPIRED


def test_wrong_code_keeps_the_pending_one():
    store = OtpStore(ttl_seconds=60)
    code = store.issue("9876543210")
    wrong = "000000" if code != "000000" else "111111"

    assert store.verify("9876543210", wrong) == OtpVerification.MISMATCH
    assert store.verify("9876543210", code) == OtpVerification.OK


def test_code_expires():
    clock = FakeClock()
    store = OtpStore(ttl_seconds=300, clock=clock)
    code = store.issue("9876543210")

    clock.now += 301
    assert store.verify("9876543210", code) == OtpVerification.EXPIRED


def test_reissue_replaces_previous_code():
    store = OtpStore(ttl_seconds=60)
    store.issue("9876543210")
    latest = store.issue("9876543210")
    assert store.verify("9876543210", latest) == OtpVerification.OK


def test_unknown_phone_is_treated_as_expired():
    assert OtpStore(ttl_seconds=60).verify("9000000000", "123456") == OtpVerification.EXPIRED


def test_default_ttl_comes_from_settings():
    assert OtpStore().ttl_seconds == settings.OTP_EXPIRY_MINUTES * 60


def test_unconfigured_sender_refuses_to_send(monkeypatch):
    monkeypatch.setattr(settings, "TWILIO_ACCOUNT_SID", None)
    monkeypatch.setattr(settings, "TWILIO_AUTH_TOKEN", None)

    sender = TwilioSmsSender()
    assert sender.configured is False
    with pytest.raises(SmsNotConfiguredError):
        sender.send("9876543210", "Your OTP is: 123456")
