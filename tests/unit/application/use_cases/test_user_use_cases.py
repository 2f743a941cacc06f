"""
Unit tests for user use cases.
"""

import pytest

from app.application.use_cases.user_use_cases import (
    USER_EXISTS_MESSAGE,
    CheckOwnRoleUseCase,
    GetUserRoleUseCase,
    PromoteUserToAdminUseCase,
    RegisterUserUseCase,
)
from app.domain.models.base import ValidationError
from app.domain.models.user import UserRole
from app.domain.services.role_resolver import RoleResolver
from conftest import InMemoryUserRepository


class TestRegisterUserUseCase:
    """Test cases for RegisterUserUseCase."""

    def setup_method(self):
        """Set up test fixtures."""
        self.users = InMemoryUserRepository()
        self.use_case = RegisterUserUseCase(self.users)

    @pytest.mark.asyncio
    async def test_register_new_user(self):
        """Test that a new email is inserted."""
        result = await self.use_case.execute({"email": "a@x.com", "name": "A"})

        assert result["acknowledged"] is True
        assert result["insertedId"]
        stored = await self.users.find_by_email("a@x.com")
        assert stored["name"] == "A"

    @pytest.mark.asyncio
    async def test_register_twice_keeps_one_record(self):
        """Test that registering the same email twice is a no-op the second time."""
        await self.use_case.execute({"email": "a@x.com"})

        second = await self.use_case.execute({"email": "a@x.com", "name": "Changed"})

        assert second == {"message": USER_EXISTS_MESSAGE}
        assert second["message"] == "Users Already Exists..."
        users = await self.users.find_all({"email": "a@x.com"})
        assert len(users) == 1
        assert "name" not in users[0]


class TestGetUserRoleUseCase:
    """Test cases for GetUserRoleUseCase."""

    @pytest.mark.asyncio
    async def test_reports_stored_role(self):
        """Test the stored role is reported verbatim."""
        users = InMemoryUserRepository([{"email": "a@x.com", "role": "Owner"}])

        assert await GetUserRoleUseCase(users).execute("a@x.com") == {"role": "Owner"}

    @pytest.mark.asyncio
    async def test_unknown_user_has_no_role(self):
        """Test that an unknown email reports a null role."""
        users = InMemoryUserRepository()

        assert await GetUserRoleUseCase(users).execute("ghost@x.com") == {"role": None}


class TestCheckOwnRoleUseCase:
    """Test cases for CheckOwnRoleUseCase."""

    def setup_method(self):
        """Set up test fixtures."""
        self.users = InMemoryUserRepository([{"email": "a@x.com", "role": "Admin"}])
        self.use_case = CheckOwnRoleUseCase(RoleResolver(self.users))

    @pytest.mark.asyncio
    async def test_self_with_role(self):
        """Test a caller asking about their own matching role."""
        assert await self.use_case.execute("a@x.com", "a@x.com", UserRole.ADMIN) is True

    @pytest.mark.asyncio
    async def test_self_without_role(self):
        """Test a caller asking about a role they do not hold."""
        assert await self.use_case.execute("a@x.com", "a@x.com", UserRole.OWNER) is False

    @pytest.mark.asyncio
    async def test_asking_about_someone_else(self):
        """Test that asking about another email is always False."""
        assert await self.use_case.execute("b@x.com", "a@x.com", UserRole.ADMIN) is False


class TestPromoteUserToAdminUseCase:
    """Test cases for PromoteUserToAdminUseCase."""

    @pytest.mark.asyncio
    async def test_promote(self):
        """Test that promotion sets the Admin role."""
        users = InMemoryUserRepository([{"email": "a@x.com", "role": "Tenant"}])
        user = await users.find_by_email("a@x.com")

        result = await PromoteUserToAdminUseCase(users).execute(user["_id"])

        assert result.matched_count == 1
        assert result.modified_count == 1
        assert (await users.find_by_email("a@x.com"))["role"] == "Admin"

    @pytest.mark.asyncio
    async def test_promote_malformed_id(self):
        """Test that a malformed id is rejected."""
        with pytest.raises(ValidationError):
            await PromoteUserToAdminUseCase(InMemoryUserRepository()).execute("nope")
