"""
User router.
Handles registration, role lookups and promotion to Admin.
"""

from typing import Annotated, Any, Dict, List
from fastapi import APIRouter, Depends

from app.application.dto.user_dto import CreateUserRequestDTO, UserRoleResponseDTO
from app.application.use_cases.user_use_cases import (
    CheckOwnRoleUseCase,
    GetUserRoleUseCase,
    ListUsersUseCase,
    PromoteUserToAdminUseCase,
    RegisterUserUseCase,
)
from app.domain.models.user import UserRole
from app.domain.repositories import Repositories
from app.domain.services.role_resolver import RoleResolver
from app.infrastructure.auth import get_current_claims, get_role_resolver, require_admin
from app.infrastructure.db.database import get_repositories


router = APIRouter()


@router.get("", dependencies=[Depends(require_admin)])
async def list_users(
    repositories: Annotated[Repositories, Depends(get_repositories)]
) -> List[Dict[str, Any]]:
    """List every user. Admin only."""
    return await ListUsersUseCase(repositories.users).execute()


@router.get("/verify/{email}", response_model=UserRoleResponseDTO)
async def verify_user_role(
    email: str,
    repositories: Annotated[Repositories, Depends(get_repositories)]
):
    """Report the role stored for an email; null when there is none."""
    return await GetUserRoleUseCase(repositories.users).execute(email)


async def _check_own_role(
    email: str,
    claims: Dict[str, Any],
    resolver: RoleResolver,
    role: UserRole
) -> bool:
    return await CheckOwnRoleUseCase(resolver).execute(claims.get("email"), email, role)


@router.get("/owner/{email}")
async def is_owner(
    email: str,
    claims: Annotated[Dict[str, Any], Depends(get_current_claims)],
    resolver: Annotated[RoleResolver, Depends(get_role_resolver)]
) -> Dict[str, bool]:
    """Whether the caller, asking about themselves, is an Owner."""
    return {"owner": await _check_own_role(email, claims, resolver, UserRole.OWNER)}


@router.get("/tenant/{email}")
async def is_tenant(
    email: str,
    claims: Annotated[Dict[str, Any], Depends(get_current_claims)],
    resolver: Annotated[RoleResolver, Depends(get_role_resolver)]
) -> Dict[str, bool]:
    """Whether the caller, asking about themselves, is a Tenant."""
    return {"tenant": await _check_own_role(email, claims, resolver, UserRole.TENANT)}


@router.get("/admin/{email}")
async def is_admin(
    email: str,
    claims: Annotated[Dict[str, Any], Depends(get_current_claims)],
    resolver: Annotated[RoleResolver, Depends(get_role_resolver)]
) -> Dict[str, bool]:
    """Whether the caller, asking about themselves, is an Admin."""
    return {"admin": await _check_own_role(email, claims, resolver, UserRole.ADMIN)}


@router.post("")
async def register_user(
    request: CreateUserRequestDTO,
    repositories: Annotated[Repositories, Depends(get_repositories)]
) -> Dict[str, Any]:
    """
    Register a user.

    Registering an email that already exists inserts nothing and answers
    with an "already exists" message.
    """
    return await RegisterUserUseCase(repositories.users).execute(request.to_document())


@router.patch("/{user_id}", dependencies=[Depends(require_admin)])
async def promote_user(
    user_id: str,
    repositories: Annotated[Repositories, Depends(get_repositories)]
) -> Dict[str, Any]:
    """Promote a user to Admin. Admin only."""
    result = await PromoteUserToAdminUseCase(repositories.users).execute(user_id)
    return result.to_dict()
