"""
Agent router. Agents are maintained outside the API and only read here.
"""

from typing import Annotated, Any, Dict, List
from fastapi import APIRouter, Depends

from app.application.use_cases.document_use_cases import ListDocumentsUseCase
from app.domain.repositories import Repositories
from app.infrastructure.db.database import get_repositories


router = APIRouter()


@router.get("")
async def list_agents(
    repositories: Annotated[Repositories, Depends(get_repositories)]
) -> List[Dict[str, Any]]:
    return await ListDocumentsUseCase(repositories.agents).execute()
