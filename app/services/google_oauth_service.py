import logging
import requests
from typing import Dict
from urllib.parse import urlencode

from app.core.config import settings
from app.core.exceptions import OAuthError

logger = logging.getLogger(__name__)

class GoogleOAuthService:
    """Authorization-code flow against Google's OAuth 2.0 endpoints"""

    AUTH_URL = "https://accounts.google.com/o/oauth2/v2/auth"
    TOKEN_URL = "https://oauth2.googleapis.com/token"
    USERINFO_URL = "https://openidconnect.googleapis.com/v1/userinfo"
    SCOPES = ["openid", "profile", "email"]

    def __init__(self):
        self.client_id = settings.GOOGLE_CLIENT_ID
        self.client_secret = settings.GOOGLE_CLIENT_SECRET
        self.redirect_uri = settings.GOOGLE_REDIRECT_URI

    def authorization_url(self, state: str) -> str:
        params = {
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "response_type": "code",
            "scope": " ".join(self.SCOPES),
            "state": state,
            "access_type": "online",
        }
        return f"{self.AUTH_URL}?{urlencode(params)}"

    def fetch_profile(self, code: str) -> Dict:
        """Exchange the callback code and return {id, name, email}"""
        try:
            token_response = requests.post(self.TOKEN_URL, data={
                "code": code,
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "redirect_uri": self.redirect_uri,
                "grant_type": "authorization_code",
            }, timeout=30)
            if token_response.status_code != 200:
                raise OAuthError("Google", f"token exchange returned {token_response.status_code}")
            access_token = token_response.json().get("access_token")

            profile_response = requests.get(
                self.USERINFO_URL,
                headers={"Authorization": f"Bearer {access_token}"},
                timeout=30,
            )
            if profile_response.status_code != 200:
                raise OAuthError("Google", f"userinfo returned {profile_response.status_code}")
            profile = profile_response.json()
        except requests.RequestException as e:
            raise OAuthError("Google", str(e))

        if not profile.get("sub"):
            raise OAuthError("Google", "profile has no subject id")
        if not profile.get("email"):
            raise OAuthError("Google", "profile has no email address")

        return {
            "id": profile["sub"],
            "name": profile.get("name") or profile["email"].split("@")[0],
            "email": profile["email"],
        }
