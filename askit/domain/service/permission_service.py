"""Capability checks: bans, roles, ownership and reputation gates."""

import logfire

from askit.config import ReputationSettings
from askit.domain.error import (
    ForbiddenError,
    InsufficientReputationError,
    NotAuthorizedError,
)
from askit.domain.model import User
from askit.domain.value import UserId

from .base import Service


class PermissionService(Service):
    """Domain service answering "may this user do that?".

    Every ``require_*`` method raises a ``ForbiddenError`` subclass and
    returns nothing on success. The ``can_*`` methods are the boolean forms
    used to report capabilities to clients.
    """

    def __init__(self, reputation: ReputationSettings) -> None:
        """Initialize permission service.

        Args:
            reputation: Reputation thresholds for gated actions
        """
        self.reputation = reputation

    def ensure_active(self, user: User) -> None:
        if user.is_banned:
            logfire.warn("Banned user rejected", user_id=str(user.id))
            raise ForbiddenError("Your account has been banned")

    def can_vote(self, user: User) -> bool:
        return user.reputation >= self.reputation.vote

    def can_comment(self, user: User) -> bool:
        return user.reputation >= self.reputation.comment

    def can_create_tags(self, user: User) -> bool:
        return user.reputation >= self.reputation.create_tag

    def can_moderate(self, user: User) -> bool:
        return user.is_admin or user.reputation >= self.reputation.moderate

    def can_close_questions(self, user: User) -> bool:
        return user.is_admin or user.reputation >= self.reputation.close_question

    def capabilities(self, user: User) -> dict[str, bool]:
        """All capability flags for a user."""
        return {
            "can_vote": self.can_vote(user),
            "can_comment": self.can_comment(user),
            "can_create_tags": self.can_create_tags(user),
            "can_moderate": self.can_moderate(user),
            "can_close_questions": self.can_close_questions(user),
        }

    def _require_reputation(self, user: User, minimum: int, action: str) -> None:
        self.ensure_active(user)
        if user.reputation < minimum:
            logfire.warn(
                "Insufficient reputation",
                user_id=str(user.id),
                action=action,
                reputation=user.reputation,
                required=minimum,
            )
            raise InsufficientReputationError(action, minimum)

    def require_can_vote(self, user: User) -> None:
        self._require_reputation(user, self.reputation.vote, "vote")

    def require_can_comment(self, user: User) -> None:
        self._require_reputation(user, self.reputation.comment, "comment")

    def require_can_create_tags(self, user: User) -> None:
        self._require_reputation(user, self.reputation.create_tag, "create tags")

    def require_admin(self, user: User) -> None:
        self.ensure_active(user)
        if not user.is_admin:
            logfire.warn("Admin action rejected", user_id=str(user.id))
            raise ForbiddenError("Admin access required")

    def require_owner_or_admin(
        self, user: User, owner_id: UserId | None, resource: str, resource_id: str
    ) -> None:
        """Only the owner of a resource or an admin may change it.

        Raises:
            NotAuthorizedError: If the user is neither
        """
        self.ensure_active(user)
        if user.is_admin or (owner_id is not None and owner_id == user.id):
            return
        raise NotAuthorizedError(resource, resource_id, str(user.id))

    def require_owner_or_moderator(
        self, user: User, owner_id: UserId, resource: str, resource_id: str
    ) -> None:
        """Like ``require_owner_or_admin`` but also admits moderators."""
        self.ensure_active(user)
        if owner_id == user.id or self.can_moderate(user):
            return
        raise NotAuthorizedError(resource, resource_id, str(user.id))

    def require_can_close(self, user: User, owner_id: UserId, question_id: str) -> None:
        """Question authors, admins and high-reputation users may close questions."""
        self.ensure_active(user)
        if owner_id == user.id or self.can_close_questions(user):
            return
        raise NotAuthorizedError("question", question_id, str(user.id))
