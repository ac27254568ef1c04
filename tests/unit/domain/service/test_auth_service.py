"""Unit tests for AuthService."""

import pytest

from askit.domain.error import (
    AuthenticationError,
    BusinessRuleViolationError,
    ForbiddenError,
    ValidationError,
)
from askit.domain.repository import UserRepository
from askit.domain.service import AuthService
from askit.util.jwt import JWTError
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

PASSWORD = "Secret123"


class TestRegister:
    @pytest.mark.asyncio
    async def test_register_hashes_password_and_issues_token(self, unit_env):
        # Arrange
        auth_service = await unit_env.get(AuthService)

        # Act
        result = await auth_service.register("alice", "Alice@Example.com", PASSWORD)

        # Assert
        assert result.user.email == "alice@example.com"
        assert result.user.password_hash != PASSWORD
        assert result.user.reputation == 0
        assert auth_service.jwt_service.verify_token(result.token).user_id == str(
            result.user.id
        )

    @pytest.mark.asyncio
    async def test_duplicate_email_rejected(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        await auth_service.register("alice", "alice@example.com", PASSWORD)

        with pytest.raises(BusinessRuleViolationError, match="email already exists"):
            await auth_service.register("alice2", "ALICE@example.com", PASSWORD)

    @pytest.mark.asyncio
    async def test_duplicate_username_rejected(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        await auth_service.register("alice", "alice@example.com", PASSWORD)

        with pytest.raises(BusinessRuleViolationError, match="Username already taken"):
            await auth_service.register("alice", "other@example.com", PASSWORD)

    @pytest.mark.parametrize("password", ["Ab1", "alllowercase1", "NOLOWER123", "NoDigits"])
    @pytest.mark.asyncio
    async def test_weak_passwords_rejected(self, unit_env, password):
        auth_service = await unit_env.get(AuthService)

        with pytest.raises(ValidationError):
            await auth_service.register("alice", "alice@example.com", password)


class TestLogin:
    @pytest.mark.asyncio
    async def test_login_with_correct_password(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        registered = await auth_service.register("alice", "alice@example.com", PASSWORD)

        result = await auth_service.login("alice@example.com", PASSWORD)

        assert result.user.id == registered.user.id

    @pytest.mark.asyncio
    async def test_wrong_password_rejected(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        await auth_service.register("alice", "alice@example.com", PASSWORD)

        with pytest.raises(AuthenticationError, match="Invalid credentials"):
            await auth_service.login("alice@example.com", "Wrong1234")

    @pytest.mark.asyncio
    async def test_unknown_email_rejected(self, unit_env):
        auth_service = await unit_env.get(AuthService)

        with pytest.raises(AuthenticationError, match="Invalid credentials"):
            await auth_service.login("nobody@example.com", PASSWORD)

    @pytest.mark.asyncio
    async def test_banned_user_cannot_login(self, unit_env):
        # Arrange
        auth_service = await unit_env.get(AuthService)
        user_repo = await unit_env.get(UserRepository)
        registered = await auth_service.register("alice", "alice@example.com", PASSWORD)
        await user_repo.save(registered.user.set_banned(True))

        # Act & Assert
        with pytest.raises(ForbiddenError, match="banned"):
            await auth_service.login("alice@example.com", PASSWORD)


class TestAuthenticate:
    @pytest.mark.asyncio
    async def test_token_resolves_to_user(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        registered = await auth_service.register("alice", "alice@example.com", PASSWORD)

        user = await auth_service.authenticate(registered.token)

        assert user.id == registered.user.id

    @pytest.mark.asyncio
    async def test_garbage_token_rejected(self, unit_env):
        auth_service = await unit_env.get(AuthService)

        with pytest.raises(JWTError):
            await auth_service.authenticate("not-a-token")

    @pytest.mark.asyncio
    async def test_token_of_deleted_user_rejected(self, unit_env):
        # Arrange
        auth_service = await unit_env.get(AuthService)
        user_repo = await unit_env.get(UserRepository)
        registered = await auth_service.register("alice", "alice@example.com", PASSWORD)
        await user_repo.save(registered.user.soft_delete())

        # Act & Assert
        with pytest.raises(AuthenticationError, match="User not found"):
            await auth_service.authenticate(registered.token)


class TestChangePassword:
    @pytest.mark.asyncio
    async def test_change_password_then_login_with_new_one(self, unit_env):
        # Arrange
        auth_service = await unit_env.get(AuthService)
        registered = await auth_service.register("alice", "alice@example.com", PASSWORD)

        # Act
        await auth_service.change_password(registered.user, PASSWORD, "Newpass456")

        # Assert
        await auth_service.login("alice@example.com", "Newpass456")
        with pytest.raises(AuthenticationError):
            await auth_service.login("alice@example.com", PASSWORD)

    @pytest.mark.asyncio
    async def test_wrong_current_password_rejected(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        registered = await auth_service.register("alice", "alice@example.com", PASSWORD)

        with pytest.raises(ValidationError, match="Current password is incorrect"):
            await auth_service.change_password(registered.user, "Wrong1234", "Newpass456")
