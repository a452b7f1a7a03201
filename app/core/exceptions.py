"""
Custom exceptions for the storefront backend
"""


class StorefrontException(Exception):
    """Base exception for all storefront errors"""
    def __init__(self, message: str, code: str = "STOREFRONT_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class UsernameTakenError(StorefrontException):
    """Raised when registering a username that already exists"""
    def __init__(self, username: str):
        self.username = username
        super().__init__(
            message=f"Username '{username}' already exists",
            code="USERNAME_TAKEN"
        )


class AttachmentRejectedError(StorefrontException):
    """Raised when a complaint attachment fails type or size checks"""
    def __init__(self, message: str):
        super().__init__(message=message, code="ATTACHMENT_REJECTED")


class SmsNotConfiguredError(StorefrontException):
    def __init__(self):
        super().__init__(
            message="Phone authentication is not configured",
            code="SMS_NOT_CONFIGURED"
        )


class SmsDeliveryError(StorefrontException):
    """Raised when the SMS provider refuses or fails to send a message"""
    def __init__(self, phone_number: str, reason: str):
        self.phone_number = phone_number
        self.reason = reason
        super().__init__(
            message=f"Failed to send SMS to {phone_number}: {reason}",
            code="SMS_DELIVERY_FAILED"
        )


class OAuthError(StorefrontException):
    """Raised when the identity provider exchange fails"""
    def __init__(self, provider: str, reason: str):
        self.provider = provider
        super().__init__(
            message=f"{provider} sign-in failed: {reason}",
            code="OAUTH_ERROR"
        )
