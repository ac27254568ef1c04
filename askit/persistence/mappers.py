"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Iterable, Sequence
from uuid import UUID

from askit.domain.model import Answer, Comment, Notification, Question, Tag, User
from askit.domain.value import (
    AnswerId,
    CommentId,
    NotificationId,
    NotificationPayload,
    NotificationType,
    QuestionId,
    Role,
    TagId,
    TagName,
    UserId,
    VoteSet,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _user_ids(values: Iterable[Any] | None) -> frozenset[UserId]:
    return frozenset(UserId(_uuid(v)) for v in values or ())


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=row["username"],
        email=row["email"],
        password_hash=row["password_hash"],
        role=Role(row["role"]),
        reputation=row["reputation"],
        bio=row.get("bio") or "",
        avatar_url=row.get("avatar_url"),
        is_banned=row["is_banned"],
        is_deleted=row["is_deleted"],
        last_active=row["last_active"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = user.model_dump()
    data["role"] = user.role.value
    return data


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model."""
    return Tag(
        id=TagId(_uuid(row["id"])),
        name=TagName(row["name"]),
        description=row.get("description") or "",
        color=row["color"],
        question_count=max(row["question_count"], 0),
        is_official=row["is_official"],
        created_by=UserId(_uuid(row["created_by"])) if row.get("created_by") else None,
        is_deleted=row["is_deleted"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def tag_to_dict(tag: Tag) -> Dict[str, Any]:
    """Convert Tag domain model to database dict."""
    data = tag.model_dump()
    data["name"] = tag.name.root
    return data


def row_to_question(row: Dict[str, Any]) -> Question:
    """Convert database row to Question domain model."""
    accepted = row.get("accepted_answer_id")
    return Question(
        id=QuestionId(_uuid(row["id"])),
        title=row["title"],
        description=row["description"],
        author_id=UserId(_uuid(row["author_id"])),
        tag_ids=[TagId(_uuid(t)) for t in row["tag_ids"] or []],
        votes=VoteSet(
            upvoters=_user_ids(row.get("upvoters")),
            downvoters=_user_ids(row.get("downvoters")),
        ),
        accepted_answer_id=AnswerId(_uuid(accepted)) if accepted else None,
        is_closed=row["is_closed"],
        is_deleted=row["is_deleted"],
        views=row["views"],
        answer_count=max(row["answer_count"], 0),
        last_activity=row["last_activity"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    """Convert Question domain model to database dict (vote sets flattened)."""
    data = question.model_dump(exclude={"votes"})
    data["tag_ids"] = list(question.tag_ids)
    data["upvoters"] = list(question.votes.upvoters)
    data["downvoters"] = list(question.votes.downvoters)
    return data


def comment_to_json(comment: Comment) -> Dict[str, Any]:
    """Convert an embedded comment to its JSONB form."""
    return comment.model_dump(mode="json")


def comments_to_json(comments: Sequence[Comment]) -> list[Dict[str, Any]]:
    return [comment_to_json(c) for c in comments]


def json_to_comment(data: Dict[str, Any]) -> Comment:
    return Comment(
        id=CommentId(_uuid(data["id"])),
        content=data["content"],
        author_id=UserId(_uuid(data["author_id"])),
        created_at=data["created_at"],
    )


def row_to_answer(row: Dict[str, Any]) -> Answer:
    """Convert database row to Answer domain model."""
    return Answer(
        id=AnswerId(_uuid(row["id"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        votes=VoteSet(
            upvoters=_user_ids(row.get("upvoters")),
            downvoters=_user_ids(row.get("downvoters")),
        ),
        is_accepted=row["is_accepted"],
        comments=tuple(json_to_comment(c) for c in row.get("comments") or []),
        is_deleted=row["is_deleted"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def answer_to_dict(answer: Answer) -> Dict[str, Any]:
    """Convert Answer domain model to database dict."""
    data = answer.model_dump(exclude={"votes", "comments"})
    data["upvoters"] = list(answer.votes.upvoters)
    data["downvoters"] = list(answer.votes.downvoters)
    data["comments"] = comments_to_json(answer.comments)
    return data


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model."""
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        recipient_id=UserId(_uuid(row["recipient_id"])),
        type=NotificationType(row["type"]),
        title=row["title"],
        message=row["message"],
        payload=NotificationPayload.model_validate(row.get("payload") or {}),
        is_read=row["is_read"],
        read_at=row.get("read_at"),
        is_deleted=row["is_deleted"],
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict."""
    data = notification.model_dump(exclude={"payload"})
    data["type"] = notification.type.value
    data["payload"] = notification.payload.model_dump(mode="json", exclude_none=True)
    return data
