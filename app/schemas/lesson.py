import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ClassCreateRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., min_length=1, max_length=255)
    content: str
    section: str = Field(..., min_length=1, max_length=255)
    order: int = Field(..., examples=[1])
    estimated_time: int = Field(..., ge=0, examples=[45])
    activities: int = Field(default=0, ge=0)
    is_published: bool = False


# 수정 가능한 필드만 나열. 알 수 없는 필드는 422
class ClassUpdateRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    content: Optional[str] = None
    section: Optional[str] = Field(default=None, min_length=1, max_length=255)
    order: Optional[int] = None
    estimated_time: Optional[int] = Field(default=None, ge=0)
    activities: Optional[int] = Field(default=None, ge=0)
    is_published: Optional[bool] = None

    def changes(self) -> dict:
        # null은 "변경 없음"으로 취급 (모든 컬럼이 NOT NULL)
        return self.model_dump(exclude_unset=True, exclude_none=True)


class ClassResponse(BaseModel):
    id: uuid.UUID
    title: str
    content: str
    section: str
    order: int
    estimated_time: int
    activities: int
    is_published: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CharacterCreateRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, max_length=255)
    title: str = Field(..., min_length=1, max_length=255)
    content: str
    image_url: Optional[str] = None
    is_published: bool = False


class CharacterUpdateRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    content: Optional[str] = None
    image_url: Optional[str] = None
    is_published: Optional[bool] = None

    def changes(self) -> dict:
        # image_url만 null로 비울 수 있음
        data = self.model_dump(exclude_unset=True)
        return {k: v for k, v in data.items() if v is not None or k == "image_url"}


class CharacterResponse(BaseModel):
    id: uuid.UUID
    name: str
    title: str
    content: str
    image_url: Optional[str]
    is_published: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
