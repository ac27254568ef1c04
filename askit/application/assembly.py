"""Read-side assembly of API views.

Questions and answers reference their authors and tags by ID. The assembler
batch-fetches every referenced user and tag for a page of results in one
query each and builds the views returned by the use cases.
"""

from datetime import datetime
from math import ceil
from typing import Iterable

import logfire
from pydantic import BaseModel

from askit.domain.model import Answer, Comment, Notification, Question, Tag, User
from askit.domain.repository import TagRepository, UserRepository
from askit.domain.value import NotificationPayload, NotificationType, Role, UserId, VoteType


class Pagination(BaseModel):
    """Paging metadata for list responses."""

    page: int
    limit: int
    total: int
    pages: int

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "Pagination":
        return cls(page=page, limit=limit, total=total, pages=ceil(total / limit) if limit else 0)


def page_offset(page: int, limit: int) -> int:
    return (max(page, 1) - 1) * limit


class AuthorSummary(BaseModel):
    """Public summary of a user shown next to their content."""

    id: str
    username: str
    avatar_url: str | None
    reputation: int

    @classmethod
    def from_user(cls, user: User) -> "AuthorSummary":
        return cls(
            id=str(user.id),
            username=user.username,
            avatar_url=user.avatar_url,
            reputation=user.reputation,
        )


class TagSummary(BaseModel):
    id: str
    name: str
    color: str


class TagView(BaseModel):
    """Full tag details."""

    id: str
    name: str
    description: str
    color: str
    question_count: int
    is_official: bool
    created_by: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_tag(cls, tag: Tag) -> "TagView":
        return cls(
            id=str(tag.id),
            name=tag.name.root,
            description=tag.description,
            color=tag.color,
            question_count=tag.question_count,
            is_official=tag.is_official,
            created_by=str(tag.created_by) if tag.created_by else None,
            created_at=tag.created_at,
            updated_at=tag.updated_at,
        )


class CommentView(BaseModel):
    id: str
    content: str
    author: AuthorSummary | None
    created_at: datetime


class AnswerView(BaseModel):
    """Answer with its author, comments and the viewer's vote."""

    id: str
    question_id: str
    content: str
    author: AuthorSummary | None
    vote_count: int
    user_vote: VoteType | None
    is_accepted: bool
    comments: list[CommentView]
    created_at: datetime
    updated_at: datetime


class QuestionView(BaseModel):
    """Question with its author, tags and the viewer's vote."""

    id: str
    title: str
    description: str
    author: AuthorSummary | None
    tags: list[TagSummary]
    vote_count: int
    user_vote: VoteType | None
    accepted_answer_id: str | None
    is_closed: bool
    views: int
    answer_count: int
    last_activity: datetime
    created_at: datetime
    updated_at: datetime


class UserView(BaseModel):
    """Private view of a user, returned to the user themself and to admins."""

    id: str
    username: str
    email: str
    role: Role
    reputation: int
    bio: str
    avatar_url: str | None
    is_banned: bool
    last_active: datetime
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserView":
        return cls(
            id=str(user.id),
            username=user.username,
            email=user.email,
            role=user.role,
            reputation=user.reputation,
            bio=user.bio,
            avatar_url=user.avatar_url,
            is_banned=user.is_banned,
            last_active=user.last_active,
            created_at=user.created_at,
        )


class PublicUserView(BaseModel):
    id: str
    username: str
    reputation: int
    bio: str
    avatar_url: str | None
    role: Role
    last_active: datetime
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "PublicUserView":
        return cls(
            id=str(user.id),
            username=user.username,
            reputation=user.reputation,
            bio=user.bio,
            avatar_url=user.avatar_url,
            role=user.role,
            last_active=user.last_active,
            created_at=user.created_at,
        )


class NotificationView(BaseModel):
    id: str
    type: NotificationType
    title: str
    message: str
    payload: NotificationPayload
    url: str | None
    is_read: bool
    read_at: datetime | None
    created_at: datetime

    @classmethod
    def from_notification(cls, notification: Notification) -> "NotificationView":
        return cls(
            id=str(notification.id),
            type=notification.type,
            title=notification.title,
            message=notification.message,
            payload=notification.payload,
            url=notification.url,
            is_read=notification.is_read,
            read_at=notification.read_at,
            created_at=notification.created_at,
        )


class ViewAssembler:
    """Builds question and answer views with their references populated."""

    def __init__(
        self, user_repository: UserRepository, tag_repository: TagRepository
    ) -> None:
        """Initialize assembler.

        Args:
            user_repository: User repository, for authors
            tag_repository: Tag repository, for question tags
        """
        self.user_repository = user_repository
        self.tag_repository = tag_repository

    async def _authors(self, user_ids: Iterable[UserId]) -> dict[UserId, AuthorSummary]:
        users = await self.user_repository.find_by_ids(list(set(user_ids)))
        return {user.id: AuthorSummary.from_user(user) for user in users}

    async def questions(
        self, questions: list[Question], viewer_id: UserId | None = None
    ) -> list[QuestionView]:
        """Build views for a page of questions.

        Deleted authors or tags are left out rather than failing the page.
        """
        with logfire.span("view_assembler.questions", count=len(questions)):
            authors = await self._authors(q.author_id for q in questions)
            tags = await self.tag_repository.find_by_ids(
                list({tag_id for q in questions for tag_id in q.tag_ids})
            )
            tags_by_id = {
                tag.id: TagSummary(id=str(tag.id), name=tag.name.root, color=tag.color)
                for tag in tags
            }

            return [
                QuestionView(
                    id=str(q.id),
                    title=q.title,
                    description=q.description,
                    author=authors.get(q.author_id),
                    tags=[tags_by_id[t] for t in q.tag_ids if t in tags_by_id],
                    vote_count=q.vote_count,
                    user_vote=q.votes.vote_of(viewer_id) if viewer_id else None,
                    accepted_answer_id=(
                        str(q.accepted_answer_id) if q.accepted_answer_id else None
                    ),
                    is_closed=q.is_closed,
                    views=q.views,
                    answer_count=q.answer_count,
                    last_activity=q.last_activity,
                    created_at=q.created_at,
                    updated_at=q.updated_at,
                )
                for q in questions
            ]

    async def question(
        self, question: Question, viewer_id: UserId | None = None
    ) -> QuestionView:
        return (await self.questions([question], viewer_id))[0]

    async def answers(
        self, answers: list[Answer], viewer_id: UserId | None = None
    ) -> list[AnswerView]:
        """Build views for answers, including their comment authors."""
        with logfire.span("view_assembler.answers", count=len(answers)):
            author_ids = {a.author_id for a in answers}
            author_ids.update(c.author_id for a in answers for c in a.comments)
            authors = await self._authors(author_ids)

            return [
                AnswerView(
                    id=str(a.id),
                    question_id=str(a.question_id),
                    content=a.content,
                    author=authors.get(a.author_id),
                    vote_count=a.vote_count,
                    user_vote=a.votes.vote_of(viewer_id) if viewer_id else None,
                    is_accepted=a.is_accepted,
                    comments=[self._comment(c, authors) for c in a.comments],
                    created_at=a.created_at,
                    updated_at=a.updated_at,
                )
                for a in answers
            ]

    async def answer(self, answer: Answer, viewer_id: UserId | None = None) -> AnswerView:
        return (await self.answers([answer], viewer_id))[0]

    async def comment(self, comment: Comment) -> CommentView:
        return self._comment(comment, await self._authors([comment.author_id]))

    @staticmethod
    def _comment(comment: Comment, authors: dict[UserId, AuthorSummary]) -> CommentView:
        return CommentView(
            id=str(comment.id),
            content=comment.content,
            author=authors.get(comment.author_id),
            created_at=comment.created_at,
        )


class VoteView(BaseModel):
    """Vote count after a vote and the voter's resulting vote."""

    vote_count: int
    user_vote: VoteType | None
