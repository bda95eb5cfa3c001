import uuid
from datetime import datetime
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from app.models.link import CharacterLink, ClassLink, LinkedTo, Unlinked


# 🔹 요청 바디의 대상(target): kind로 구분되는 태그드 유니온
class ClassTarget(BaseModel):
    kind: Literal["class"]
    id: uuid.UUID

    def to_link(self) -> LinkedTo:
        return ClassLink(self.id)


class CharacterTarget(BaseModel):
    kind: Literal["character"]
    id: uuid.UUID

    def to_link(self) -> LinkedTo:
        return CharacterLink(self.id)


class NoTarget(BaseModel):
    kind: Literal["none"] = "none"

    def to_link(self) -> LinkedTo:
        return Unlinked()


ContentTarget = Annotated[Union[ClassTarget, CharacterTarget], Field(discriminator="kind")]
AnyTarget = Annotated[Union[ClassTarget, CharacterTarget, NoTarget], Field(discriminator="kind")]


class ProgressRecordRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    target: ContentTarget
    is_completed: Optional[bool] = None
    reading_progress: Optional[int] = Field(default=None, ge=0, le=100)


class ProgressUpdateRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    is_completed: Optional[bool] = None
    reading_progress: Optional[int] = Field(default=None, ge=0, le=100)


class ProgressResponse(BaseModel):
    id: uuid.UUID
    user_id: uuid.UUID
    class_id: Optional[uuid.UUID]
    character_id: Optional[uuid.UUID]
    is_completed: bool
    reading_progress: int
    completed_at: Optional[datetime]
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class BookmarkCreateRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    target: ContentTarget


class BookmarkResponse(BaseModel):
    id: uuid.UUID
    user_id: uuid.UUID
    class_id: Optional[uuid.UUID]
    character_id: Optional[uuid.UUID]
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class NoteCreateRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    target: AnyTarget = Field(default_factory=NoTarget)
    content: str = Field(..., min_length=1)
    is_private: bool = True


class NoteUpdateRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    content: Optional[str] = Field(default=None, min_length=1)
    is_private: Optional[bool] = None


class NoteResponse(BaseModel):
    id: uuid.UUID
    user_id: uuid.UUID
    class_id: Optional[uuid.UUID]
    character_id: Optional[uuid.UUID]
    content: str
    is_private: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
