"""
JWT token handler.
Issues session tokens and validates them on the way back in.
"""

import logging
from typing import Optional, Dict, Any
from datetime import datetime, timedelta, timezone
from jose import JWTError, ExpiredSignatureError, jwt as jose_jwt

from app.config import Settings, get_settings
from app.domain.models.base import AuthenticationError

logger = logging.getLogger(__name__)


class JWTHandler:
    """Handles JWT token issuance, validation and claim extraction."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.jwt_secret = self.settings.access_token_secret
        self.jwt_algorithm = self.settings.jwt_algorithm
        self.expires_minutes = self.settings.jwt_access_token_expire_minutes

    def issue_token(self, claims: Dict[str, Any]) -> str:
        """
        Sign a claim payload into a session token.

        Args:
            claims: Arbitrary claims; must carry the caller's email

        Returns:
            JWT token string valid for the configured lifetime

        Raises:
            AuthenticationError: If the claims carry no email
        """
        if not claims.get("email"):
            raise AuthenticationError("Token claims must include an email")

        now = datetime.now(timezone.utc)
        expire = now + timedelta(minutes=self.expires_minutes)

        payload = dict(claims)
        payload["iat"] = int(now.timestamp())
        payload["exp"] = int(expire.timestamp())

        return jose_jwt.encode(payload, self.jwt_secret, algorithm=self.jwt_algorithm)

    def verify_token(self, token: Optional[str]) -> Dict[str, Any]:
        """
        Verify and decode a session token.

        Args:
            token: JWT token string

        Returns:
            Dict containing token payload

        Raises:
            AuthenticationError: If token is missing, invalid or expired
        """
        if not token:
            raise AuthenticationError("Missing token")

        try:
            payload = jose_jwt.decode(
                token,
                self.jwt_secret,
                algorithms=[self.jwt_algorithm],
                options={"verify_exp": True, "require_exp": True}
            )
        except ExpiredSignatureError:
            logger.debug("Rejected expired token")
            raise AuthenticationError("Token has expired")
        except JWTError as e:
            logger.debug(f"Rejected invalid token: {e}")
            raise AuthenticationError("Invalid token")

        if not payload.get("email"):
            raise AuthenticationError("Token missing email claim")

        return payload
