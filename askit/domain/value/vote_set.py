"""Vote set value object shared by questions and answers."""

from pydantic import model_validator

from askit.domain.value.common import ValueObject
from askit.domain.value.identifiers import UserId
from askit.domain.value.types import VoteType


class VoteSet(ValueObject):
    """Two disjoint sets of voters.

    The vote count is derived (upvoters minus downvoters) and never stored.
    Casting the same vote twice retracts it; casting the opposite vote moves
    the voter to the other set.
    """

    upvoters: frozenset[UserId] = frozenset()
    downvoters: frozenset[UserId] = frozenset()

    @model_validator(mode="after")
    def validate_disjoint(self) -> "VoteSet":
        """A user may hold at most one vote."""
        overlap = self.upvoters & self.downvoters
        if overlap:
            raise ValueError(
                f"Users cannot both upvote and downvote: {sorted(map(str, overlap))}"
            )
        return self

    @property
    def count(self) -> int:
        return len(self.upvoters) - len(self.downvoters)

    @property
    def total(self) -> int:
        """Number of votes cast in either direction."""
        return len(self.upvoters) + len(self.downvoters)

    def vote_of(self, user_id: UserId) -> VoteType | None:
        """Return the user's current vote, if any."""
        if user_id in self.upvoters:
            return VoteType.UPVOTE
        if user_id in self.downvoters:
            return VoteType.DOWNVOTE
        return None

    def resolve(self, user_id: UserId, vote_type: VoteType) -> VoteType | None:
        """Work out the user's vote after casting ``vote_type``.

        Returns None when the cast retracts an existing vote of the same type.
        """
        if self.vote_of(user_id) == vote_type:
            return None
        return vote_type

    def with_vote(self, user_id: UserId, vote: VoteType | None) -> "VoteSet":
        """Return a copy where the user's membership is exactly ``vote``."""
        upvoters = self.upvoters - {user_id}
        downvoters = self.downvoters - {user_id}
        if vote == VoteType.UPVOTE:
            upvoters = upvoters | {user_id}
        elif vote == VoteType.DOWNVOTE:
            downvoters = downvoters | {user_id}
        return VoteSet(upvoters=upvoters, downvoters=downvoters)

    def cast(self, user_id: UserId, vote_type: VoteType) -> "VoteSet":
        """Apply a vote with toggle / switch semantics."""
        return self.with_vote(user_id, self.resolve(user_id, vote_type))
