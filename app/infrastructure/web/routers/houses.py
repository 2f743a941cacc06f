"""
House listing router.
Handles browsing, owner management and status changes of houses.
"""

from typing import Annotated, Any, Dict, List, Optional
from fastapi import APIRouter, Body, Depends, Query

from app.application.dto.house_dto import UpdateHouseStatusRequestDTO
from app.application.use_cases.document_use_cases import (
    CreateDocumentUseCase,
    DeleteDocumentUseCase,
)
from app.application.use_cases.house_use_cases import (
    GetHouseByIdUseCase,
    ListHousesUseCase,
    ListOwnerHousesUseCase,
    UpdateHouseDetailsUseCase,
    UpdateHouseStatusUseCase,
)
from app.domain.repositories import Repositories
from app.infrastructure.auth import get_current_claims, require_owner
from app.infrastructure.db.database import get_repositories


router = APIRouter()


@router.get("")
async def list_houses(
    repositories: Annotated[Repositories, Depends(get_repositories)],
    city: Optional[str] = Query(None, description="Only houses in this city")
) -> List[Dict[str, Any]]:
    """List houses, all of them unless a city is given."""
    return await ListHousesUseCase(repositories.houses).execute(city)


@router.get("/user", dependencies=[Depends(require_owner)])
async def list_owner_houses(
    repositories: Annotated[Repositories, Depends(get_repositories)],
    email: Optional[str] = Query(None, description="Owner email")
) -> List[Dict[str, Any]]:
    """List the houses of an owner. Owner only."""
    return await ListOwnerHousesUseCase(repositories.houses).execute(email)


@router.get("/{house_id}")
async def get_house(
    house_id: str,
    repositories: Annotated[Repositories, Depends(get_repositories)]
) -> Optional[Dict[str, Any]]:
    """Get one house; null when it does not exist."""
    return await GetHouseByIdUseCase(repositories.houses).execute(house_id)


@router.post("", dependencies=[Depends(require_owner)])
async def create_house(
    house: Annotated[Dict[str, Any], Body(...)],
    repositories: Annotated[Repositories, Depends(get_repositories)]
) -> Dict[str, Any]:
    """List a new house. Owner only."""
    result = await CreateDocumentUseCase(repositories.houses).execute(house)
    return result.to_dict()


@router.patch("/status/{house_id}", dependencies=[Depends(get_current_claims)])
async def update_house_status(
    house_id: str,
    request: UpdateHouseStatusRequestDTO,
    repositories: Annotated[Repositories, Depends(get_repositories)]
) -> Dict[str, Any]:
    """Change a house's status. Any authenticated caller may do this."""
    result = await UpdateHouseStatusUseCase(repositories.houses).execute(house_id, request.status)
    return result.to_dict()


@router.patch("/{house_id}", dependencies=[Depends(require_owner)])
async def update_house(
    house_id: str,
    house: Annotated[Dict[str, Any], Body(...)],
    repositories: Annotated[Repositories, Depends(get_repositories)]
) -> Dict[str, Any]:
    """
    Replace the editable details of a house. Owner only.

    - **houseName**, **bedroomNumber**, **livingroomNumber**, **dineNumber**,
      **kitchenNumber**, **bathroomNumber**, **floorNumber**, **rentPrice**

    Other fields in the body are ignored.
    """
    result = await UpdateHouseDetailsUseCase(repositories.houses).execute(house_id, house)
    return result.to_dict()


@router.delete("/{house_id}", dependencies=[Depends(require_owner)])
async def delete_house(
    house_id: str,
    repositories: Annotated[Repositories, Depends(get_repositories)]
) -> Dict[str, Any]:
    """Delete a house. Owner only; related payments and rentals stay."""
    result = await DeleteDocumentUseCase(repositories.houses).execute(house_id)
    return result.to_dict()
