"""Question aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from askit.domain.model.common import DomainModel, utcnow
from askit.domain.value import AnswerId, QuestionId, TagId, UserId, VoteSet, VoteType


class Question(DomainModel):
    """Question aggregate root.

    Business rules:
    - 1 to 5 tags
    - At most one accepted answer, referenced by ``accepted_answer_id``
    - The author cannot vote on their own question (enforced by the vote service)
    """

    id: QuestionId
    title: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1)
    author_id: UserId
    tag_ids: list[TagId] = Field(min_length=1, max_length=5)
    votes: VoteSet = Field(default_factory=VoteSet)
    accepted_answer_id: Optional[AnswerId] = None
    is_closed: bool = False
    is_deleted: bool = False
    views: int = Field(default=0, ge=0)
    answer_count: int = Field(default=0, ge=0)
    last_activity: datetime = Field(default_factory=utcnow)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @property
    def vote_count(self) -> int:
        return self.votes.count

    def is_owned_by(self, user_id: UserId) -> bool:
        return self.author_id == user_id

    def cast_vote(self, user_id: UserId, vote_type: VoteType) -> "Question":
        """Apply a vote (toggle / switch) and bump activity."""
        return self.model_copy(
            update={
                "votes": self.votes.cast(user_id, vote_type),
                "last_activity": utcnow(),
            }
        )

    def edit(
        self,
        title: str | None = None,
        description: str | None = None,
        tag_ids: list[TagId] | None = None,
    ) -> "Question":
        """Return a validated copy with the given fields replaced."""
        data = self.model_dump()
        if title is not None:
            data["title"] = title
        if description is not None:
            data["description"] = description
        if tag_ids is not None:
            data["tag_ids"] = tag_ids
        now = utcnow()
        data["updated_at"] = now
        data["last_activity"] = now
        return Question.model_validate(data)

    def accept(self, answer_id: AnswerId) -> "Question":
        return self.model_copy(
            update={"accepted_answer_id": answer_id, "last_activity": utcnow()}
        )

    def clear_accepted(self) -> "Question":
        return self.model_copy(
            update={"accepted_answer_id": None, "last_activity": utcnow()}
        )

    def set_closed(self, closed: bool) -> "Question":
        now = utcnow()
        return self.model_copy(
            update={"is_closed": closed, "updated_at": now, "last_activity": now}
        )

    def soft_delete(self) -> "Question":
        return self.model_copy(update={"is_deleted": True, "updated_at": utcnow()})
