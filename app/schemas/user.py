import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict

from app.models.user import Role


# 🔹 SUPER_ADMIN role 변경 요청용
class RoleUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    role: Role


# 🔹 유저 응답용 (password_hash 제외)
class UserResponse(BaseModel):
    id: uuid.UUID
    email: str
    name: str
    role: Role
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


# 🔹 /auth/me 응답: 유저 정보 + 학습 통계
class UserWithStatsResponse(UserResponse):
    completed_classes: int
    in_progress_classes: int
    total_bookmarks: int
    total_notes: int
    progress_percentage: int
