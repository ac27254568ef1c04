"""Answer entity with its embedded comments."""

from datetime import datetime

from pydantic import Field

from askit.domain.model.common import DomainModel, utcnow
from askit.domain.value import AnswerId, CommentId, QuestionId, UserId, VoteSet, VoteType


class Comment(DomainModel):
    """Short remark attached to an answer.

    Comments have no life of their own; they are stored inside the answer.
    """

    id: CommentId
    content: str = Field(min_length=1, max_length=1000)
    author_id: UserId
    created_at: datetime = Field(default_factory=utcnow)


class Answer(DomainModel):
    """Answer entity.

    Business rules:
    - One undeleted answer per user per question (enforced by the answer service)
    - ``is_accepted`` is set by the acceptance flow only
    """

    id: AnswerId
    question_id: QuestionId
    author_id: UserId
    content: str = Field(min_length=1, max_length=10000)
    votes: VoteSet = Field(default_factory=VoteSet)
    is_accepted: bool = False
    comments: tuple[Comment, ...] = ()
    is_deleted: bool = False
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @property
    def vote_count(self) -> int:
        return self.votes.count

    def is_owned_by(self, user_id: UserId) -> bool:
        return self.author_id == user_id

    def cast_vote(self, user_id: UserId, vote_type: VoteType) -> "Answer":
        return self.model_copy(update={"votes": self.votes.cast(user_id, vote_type)})

    def edit(self, content: str) -> "Answer":
        data = self.model_dump()
        data["content"] = content
        data["updated_at"] = utcnow()
        return Answer.model_validate(data)

    def set_accepted(self, accepted: bool) -> "Answer":
        return self.model_copy(update={"is_accepted": accepted})

    def find_comment(self, comment_id: CommentId) -> Comment | None:
        return next((c for c in self.comments if c.id == comment_id), None)

    def add_comment(self, comment: Comment) -> "Answer":
        return self.model_copy(update={"comments": (*self.comments, comment)})

    def remove_comment(self, comment_id: CommentId) -> "Answer":
        return self.model_copy(
            update={
                "comments": tuple(c for c in self.comments if c.id != comment_id)
            }
        )

    def soft_delete(self) -> "Answer":
        return self.model_copy(update={"is_deleted": True, "updated_at": utcnow()})
