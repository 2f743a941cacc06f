"""
Authentication infrastructure module.
Handles JWT issuance and validation and role-based authorization.
"""

from .jwt_handler import JWTHandler
from .dependencies import (
    get_jwt_handler,
    get_role_resolver,
    get_current_claims,
    RoleChecker,
    require_role,
    require_tenant,
    require_owner,
    require_admin,
)

__all__ = [
    "JWTHandler",
    "get_jwt_handler",
    "get_role_resolver",
    "get_current_claims",
    "RoleChecker",
    "require_role",
    "require_tenant",
    "require_owner",
    "require_admin",
]
