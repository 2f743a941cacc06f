"""
Testimonial router.
"""

from typing import Annotated, Any, Dict, List
from fastapi import APIRouter, Body, Depends

from app.application.use_cases.document_use_cases import (
    CreateDocumentUseCase,
    ListDocumentsUseCase,
)
from app.domain.repositories import Repositories
from app.infrastructure.db.database import get_repositories


router = APIRouter()


@router.get("")
async def list_testimonials(
    repositories: Annotated[Repositories, Depends(get_repositories)]
) -> List[Dict[str, Any]]:
    return await ListDocumentsUseCase(repositories.testimonials).execute()


@router.post("")
async def create_testimonial(
    testimonial: Annotated[Dict[str, Any], Body(...)],
    repositories: Annotated[Repositories, Depends(get_repositories)]
) -> Dict[str, Any]:
    result = await CreateDocumentUseCase(repositories.testimonials).execute(testimonial)
    return result.to_dict()
