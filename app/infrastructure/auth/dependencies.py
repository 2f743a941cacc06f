"""
Authentication dependencies for FastAPI.
Provides token verification and role guard dependencies.
"""

import logging
from typing import Optional, Annotated, Any, Dict
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from app.domain.models.base import AuthenticationError
from app.domain.models.user import UserRole
from app.domain.repositories import Repositories
from app.domain.services.role_resolver import RoleResolver
from app.infrastructure.auth.jwt_handler import JWTHandler
from app.infrastructure.db.database import get_repositories
from app.infrastructure.web.middleware.error_handler import (
    ForbiddenException,
    UnauthorizedException,
)

logger = logging.getLogger(__name__)

# Security scheme; missing credentials are reported by get_current_claims as 401
security = HTTPBearer(auto_error=False)

# Global instances
jwt_handler = JWTHandler()


def get_jwt_handler() -> JWTHandler:
    """Dependency to get JWT handler."""
    return jwt_handler


def get_role_resolver(
    repositories: Annotated[Repositories, Depends(get_repositories)]
) -> RoleResolver:
    """Dependency to get a role resolver over the user store."""
    return RoleResolver(repositories.users)


async def get_current_claims(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)],
    jwt_handler: Annotated[JWTHandler, Depends(get_jwt_handler)]
) -> Dict[str, Any]:
    """
    FastAPI dependency to get the verified claims of the caller's token.

    Args:
        credentials: Bearer token credentials, None when the header is absent
        jwt_handler: JWT handler instance

    Returns:
        Token payload dictionary, carrying at least `email`

    Raises:
        UnauthorizedException: If the token is missing, invalid or expired
    """
    if credentials is None:
        raise UnauthorizedException()

    try:
        return jwt_handler.verify_token(credentials.credentials)
    except AuthenticationError:
        raise UnauthorizedException()


class RoleChecker:
    """Dependency class admitting only callers whose stored role matches."""

    def __init__(self, required_role: UserRole):
        """
        Initialize role checker.

        Args:
            required_role: Role the caller must currently hold
        """
        self.required_role = required_role

    async def __call__(
        self,
        claims: Annotated[Dict[str, Any], Depends(get_current_claims)],
        resolver: Annotated[RoleResolver, Depends(get_role_resolver)]
    ) -> Dict[str, Any]:
        """
        Check the caller's stored role against the required one.

        Returns:
            The verified claims if admitted

        Raises:
            ForbiddenException: If no user exists or the role differs
        """
        email = claims.get("email")
        role = await resolver.resolve_role(email)

        if role != self.required_role:
            logger.warning(
                f"Denied {email}: requires {self.required_role.value}, "
                f"has {role.value if role else 'no account'}"
            )
            raise ForbiddenException()

        return claims


def require_role(role: UserRole) -> RoleChecker:
    """
    Dependency factory for role checking.

    Args:
        role: Required role for access

    Returns:
        Dependency instance
    """
    return RoleChecker(role)


# Pre-configured guards
require_tenant = require_role(UserRole.TENANT)
require_owner = require_role(UserRole.OWNER)
require_admin = require_role(UserRole.ADMIN)
