"""Tag entity for categorizing questions."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from askit.domain.model.common import DomainModel, utcnow
from askit.domain.value import TagId, TagName, UserId

DEFAULT_TAG_COLOR = "#3b82f6"


class Tag(DomainModel):
    """Tag entity for categorizing questions.

    Tags are created on demand when a question references an unknown name.
    ``question_count`` is a usage counter kept by atomic increments in the
    repository and never goes below zero.
    """

    id: TagId
    name: TagName  # Unique, lowercase, alphanumeric + hyphens
    description: str = Field(default="", max_length=500)
    color: str = Field(default=DEFAULT_TAG_COLOR, pattern=r"^#[0-9A-Fa-f]{6}$")
    question_count: int = Field(default=0, ge=0)
    is_official: bool = False
    created_by: Optional[UserId] = None
    is_deleted: bool = False
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    def is_owned_by(self, user_id: UserId) -> bool:
        return self.created_by == user_id

    def edit(
        self, description: str | None = None, color: str | None = None
    ) -> "Tag":
        data = self.model_dump()
        if description is not None:
            data["description"] = description
        if color is not None:
            data["color"] = color
        data["updated_at"] = utcnow()
        return Tag.model_validate(data)

    def set_official(self, official: bool) -> "Tag":
        return self.model_copy(update={"is_official": official, "updated_at": utcnow()})

    def soft_delete(self) -> "Tag":
        return self.model_copy(update={"is_deleted": True, "updated_at": utcnow()})
