"""Unit tests for PermissionService."""

from uuid import uuid4

import pytest

from askit.config import ReputationSettings
from askit.domain.error import (
    ForbiddenError,
    InsufficientReputationError,
    NotAuthorizedError,
)
from askit.domain.service import PermissionService
from askit.domain.value import Role, UserId
from tests.factories import make_user


@pytest.fixture
def permissions() -> PermissionService:
    return PermissionService(ReputationSettings())


class TestReputationGates:
    @pytest.mark.parametrize(
        "reputation, can_vote, can_comment, can_create_tags",
        [
            (0, False, False, False),
            (15, True, False, False),
            (50, True, True, False),
            (100, True, True, True),
        ],
    )
    def test_capabilities_follow_thresholds(
        self, permissions, reputation, can_vote, can_comment, can_create_tags
    ):
        user = make_user(reputation=reputation)

        capabilities = permissions.capabilities(user)

        assert capabilities["can_vote"] is can_vote
        assert capabilities["can_comment"] is can_comment
        assert capabilities["can_create_tags"] is can_create_tags

    def test_low_reputation_vote_rejected_with_threshold(self, permissions):
        with pytest.raises(InsufficientReputationError, match="at least 15 reputation"):
            permissions.require_can_vote(make_user(reputation=14))

    def test_banned_user_rejected_before_reputation_check(self, permissions):
        banned = make_user(reputation=10_000, is_banned=True)

        with pytest.raises(ForbiddenError, match="banned"):
            permissions.require_can_vote(banned)

    def test_admins_always_moderate_and_close(self, permissions):
        admin = make_user(role=Role.ADMIN)

        assert permissions.can_moderate(admin)
        assert permissions.can_close_questions(admin)


class TestOwnership:
    def test_owner_passes(self, permissions):
        user = make_user()

        permissions.require_owner_or_admin(user, user.id, "question", "q1")

    def test_admin_passes(self, permissions):
        permissions.require_owner_or_admin(
            make_user(role=Role.ADMIN), UserId(uuid4()), "question", "q1"
        )

    def test_stranger_rejected(self, permissions):
        with pytest.raises(NotAuthorizedError):
            permissions.require_owner_or_admin(
                make_user(), UserId(uuid4()), "question", "q1"
            )

    def test_moderator_may_remove_others_comments(self, permissions):
        moderator = make_user(reputation=2000)

        permissions.require_owner_or_moderator(moderator, UserId(uuid4()), "comment", "c1")

    def test_close_needs_owner_or_high_reputation(self, permissions):
        owner_id = UserId(uuid4())

        permissions.require_can_close(make_user(reputation=3000), owner_id, "q1")
        with pytest.raises(NotAuthorizedError):
            permissions.require_can_close(make_user(reputation=2999), owner_id, "q1")

    def test_require_admin(self, permissions):
        permissions.require_admin(make_user(role=Role.ADMIN))
        with pytest.raises(ForbiddenError, match="Admin access required"):
            permissions.require_admin(make_user())
