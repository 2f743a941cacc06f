"""
House use cases for the application layer.
Implements listing queries and owner edits for houses.
"""

from typing import Any, List, Mapping, Optional

from app.application.use_cases.base_use_case import CommandUseCase, QueryUseCase
from app.domain.models.base import Document, UpdateResult
from app.domain.models.house import editable_fields


class ListHousesUseCase(QueryUseCase):
    """Use case for listing houses, optionally in one city."""

    async def execute(self, city: Optional[str] = None) -> List[Document]:
        if city:
            return await self.repository.find_all({"city": city})
        return await self.repository.find_all()


class ListOwnerHousesUseCase(QueryUseCase):
    """Use case for listing the houses of one owner. No email lists nothing."""

    async def execute(self, owner_email: Optional[str]) -> List[Document]:
        if not owner_email:
            return []
        return await self.repository.find_all({"ownerEmail": owner_email})


class GetHouseByIdUseCase(QueryUseCase):
    """Use case for fetching a single house; None when there is no such house."""

    async def execute(self, house_id: str) -> Optional[Document]:
        return await self.repository.find_by_id(house_id)


class UpdateHouseDetailsUseCase(CommandUseCase):
    """Use case for replacing the editable details of a house."""

    async def execute(self, house_id: str, submitted: Mapping[str, Any]) -> UpdateResult:
        return await self.repository.update_by_id(house_id, editable_fields(submitted))


class UpdateHouseStatusUseCase(CommandUseCase):
    """Use case for changing only the status flag of a house."""

    async def execute(self, house_id: str, status: Any) -> UpdateResult:
        result = await self.repository.update_by_id(house_id, {"status": status})
        self.logger.info(f"House {house_id} status set to {status!r}")
        return result
