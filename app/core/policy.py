"""
policy.py

접근 정책(Access Policy): (principal, action, owner_id) → 허용 / 예외.

HTTP나 DB에 의존하지 않는 순수 판단 함수만 둔다.
라우터와 app.core.deps 가 이 함수를 호출하여 권한을 검증한다.

규칙:
- principal 이 없으면(토큰 없음/무효) UnauthorizedError
- 개인 기록(진도/북마크/노트)은 소유자 본인만. 관리자도 예외 없음
- 수업/인물 생성·수정·삭제, 관리자 통계는 ADMIN 이상
- 전체 회원 목록, 타인 권한 변경은 SUPER_ADMIN 만
- 공개 콘텐츠 읽기는 인증만 필요

"""

import uuid
from enum import Enum

from app.core.exceptions import ForbiddenError, UnauthorizedError
from app.models.user import Role, User


class Action(str, Enum):
    READ_CONTENT = "read_content"
    ACCESS_OWN_DATA = "access_own_data"
    MANAGE_CONTENT = "manage_content"
    VIEW_ADMIN_STATS = "view_admin_stats"
    LIST_USERS = "list_users"
    SET_ROLE = "set_role"


ROLE_LEVEL = {
    Role.USER: 0,
    Role.ADMIN: 1,
    Role.SUPER_ADMIN: 2,
}

REQUIRED_ROLE = {
    Action.READ_CONTENT: Role.USER,
    Action.ACCESS_OWN_DATA: Role.USER,
    Action.MANAGE_CONTENT: Role.ADMIN,
    Action.VIEW_ADMIN_STATS: Role.ADMIN,
    Action.LIST_USERS: Role.SUPER_ADMIN,
    Action.SET_ROLE: Role.SUPER_ADMIN,
}


def has_min_role(principal: User, min_role: Role) -> bool:
    return ROLE_LEVEL[principal.role] >= ROLE_LEVEL[min_role]


def authorize(principal: User | None, action: Action, owner_id: uuid.UUID | None = None) -> None:
    if principal is None:
        raise UnauthorizedError()

    if action == Action.ACCESS_OWN_DATA:
        if owner_id is None or principal.id != owner_id:
            raise ForbiddenError("Not the owner of this record")
        return

    min_role = REQUIRED_ROLE[action]
    if not has_min_role(principal, min_role):
        raise ForbiddenError(f"Requires role >= {min_role.value}")
