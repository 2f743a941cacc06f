"""
Rented house router.
Records confirmed rentals.
"""

from typing import Annotated, Any, Dict, List
from fastapi import APIRouter, Body, Depends

from app.application.use_cases.document_use_cases import (
    CreateDocumentUseCase,
    DeleteDocumentUseCase,
    ListDocumentsUseCase,
)
from app.domain.repositories import Repositories
from app.infrastructure.auth import get_current_claims, require_admin
from app.infrastructure.db.database import get_repositories


router = APIRouter()


@router.get("", dependencies=[Depends(get_current_claims)])
async def list_rented_houses(
    repositories: Annotated[Repositories, Depends(get_repositories)]
) -> List[Dict[str, Any]]:
    return await ListDocumentsUseCase(repositories.rented_houses).execute()


@router.get("/{email}", dependencies=[Depends(get_current_claims)])
async def list_renter_houses(
    email: str,
    repositories: Annotated[Repositories, Depends(get_repositories)]
) -> List[Dict[str, Any]]:
    """List the rentals of one renter."""
    return await ListDocumentsUseCase(repositories.rented_houses).execute("renterEmail", email)


@router.post("", dependencies=[Depends(get_current_claims)])
async def record_rented_house(
    rented_house: Annotated[Dict[str, Any], Body(...)],
    repositories: Annotated[Repositories, Depends(get_repositories)]
) -> Dict[str, Any]:
    result = await CreateDocumentUseCase(repositories.rented_houses).execute(rented_house)
    return result.to_dict()


@router.delete("/{rented_house_id}", dependencies=[Depends(require_admin)])
async def delete_rented_house(
    rented_house_id: str,
    repositories: Annotated[Repositories, Depends(get_repositories)]
) -> Dict[str, Any]:
    """Delete a rental record. Admin only."""
    result = await DeleteDocumentUseCase(repositories.rented_houses).execute(rented_house_id)
    return result.to_dict()
