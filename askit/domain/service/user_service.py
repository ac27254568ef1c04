"""User domain service."""

from dataclasses import dataclass

import logfire

from askit.domain.error import BusinessRuleViolationError, NotFoundError
from askit.domain.model import User
from askit.domain.repository import (
    AnswerRepository,
    QuestionFilter,
    QuestionRepository,
    UserRepository,
    UserSortOrder,
)
from askit.domain.value import Role, UserId


@dataclass
class UserStats:
    """Activity counters for a user profile."""

    question_count: int
    answer_count: int
    accepted_answer_count: int
    total_votes: int
    reputation: int


class UserService:
    """Domain service for user operations."""

    def __init__(
        self,
        user_repository: UserRepository,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            question_repository: Question repository, for profile stats
            answer_repository: Answer repository, for profile stats
        """
        self.user_repository = user_repository
        self.question_repository = question_repository
        self.answer_repository = answer_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_by_username(self, username: str) -> User:
        """Get user by username.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_username", username=username):
            user = await self.user_repository.find_by_username(username)
            if not user:
                logfire.warn("User not found", username=username)
                raise NotFoundError("User", username)
            return user

    async def update_profile(
        self,
        user: User,
        username: str | None = None,
        bio: str | None = None,
        avatar_url: str | None = None,
    ) -> User:
        """Update the public profile of a user.

        Raises:
            BusinessRuleViolationError: If the new username belongs to someone else
        """
        with logfire.span("user_service.update_profile", user_id=str(user.id)):
            if username is not None and username != user.username:
                taken = await self.user_repository.find_by_username(username)
                if taken and taken.id != user.id:
                    logfire.warn("Username already taken", username=username)
                    raise BusinessRuleViolationError("Username already taken")

            updated = user.update_profile(username=username, bio=bio, avatar_url=avatar_url)
            saved = await self.user_repository.save(updated)
            logfire.info("Profile updated", user_id=str(user.id))
            return saved

    async def get_stats(self, user_id: UserId) -> UserStats:
        """Count a user's questions, answers, accepted answers and votes received."""
        with logfire.span("user_service.get_stats", user_id=str(user_id)):
            user = await self.get_by_id(user_id)
            question_count = await self.question_repository.count(
                QuestionFilter(author_id=user_id)
            )
            answer_count = await self.answer_repository.count_by_author(user_id)
            accepted_count = await self.answer_repository.count_by_author(
                user_id, accepted_only=True
            )
            question_votes = await self.question_repository.sum_votes_by_author(user_id)
            answer_votes = await self.answer_repository.sum_votes_by_author(user_id)

            return UserStats(
                question_count=question_count,
                answer_count=answer_count,
                accepted_answer_count=accepted_count,
                total_votes=question_votes + answer_votes,
                reputation=user.reputation,
            )

    async def list_users(
        self,
        sort: UserSortOrder = UserSortOrder.REPUTATION,
        search: str | None = None,
        role: Role | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[list[User], int]:
        with logfire.span("user_service.list_users", sort=sort.value, search=search):
            users = await self.user_repository.find_all(
                sort=sort, search=search, role=role, limit=limit, offset=offset
            )
            total = await self.user_repository.count(search=search, role=role)
            return users, total

    async def set_banned(self, user: User, banned: bool) -> User:
        """Ban or unban a user. Admins cannot be banned."""
        with logfire.span("user_service.set_banned", user_id=str(user.id), banned=banned):
            if user.is_admin and banned:
                logfire.warn("Attempt to ban admin", user_id=str(user.id))
                raise BusinessRuleViolationError("Cannot ban an admin user")

            saved = await self.user_repository.save(user.set_banned(banned))
            logfire.info("User banned" if banned else "User unbanned", user_id=str(user.id))
            return saved

    async def change_role(self, user: User, role: Role, actor: User) -> User:
        """Change a user's role. Admins cannot change their own role."""
        with logfire.span("user_service.change_role", user_id=str(user.id), role=role.value):
            if user.id == actor.id:
                raise BusinessRuleViolationError("You cannot change your own role")

            saved = await self.user_repository.save(user.change_role(role))
            logfire.info("User role changed", user_id=str(user.id), role=role.value)
            return saved

    async def delete_user(self, user: User) -> None:
        """Soft-delete a user. Admins cannot be deleted."""
        with logfire.span("user_service.delete_user", user_id=str(user.id)):
            if user.is_admin:
                logfire.warn("Attempt to delete admin", user_id=str(user.id))
                raise BusinessRuleViolationError("Cannot delete an admin user")

            await self.user_repository.save(user.soft_delete())
            logfire.info("User deleted", user_id=str(user.id))
