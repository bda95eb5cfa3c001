"""
services/admin.py

회원 관리 관련 비즈니스 로직(Service) 모음.

주요 기능:
- 권한(Role) 변경 정책 및 로그 기록
- 최초 SUPER_ADMIN 계정 생성(bootstrap)

설계 원칙:
- HTTP / FastAPI 의존성 없음
- 트랜잭션 제어는 라우터에서 수행

관련 파일:
- app.models.user        : User / Role 모델
- app.routers.admin      : 관리자 API
- scripts.create_superadmin

"""

import logging
import uuid

from app.core.exceptions import ConflictError, InvalidInputError, NotFoundError
from app.core.security import get_password_hash
from app.models.admin_log import AdminAction
from app.models.user import Role, User
from app.repositories.store import StudyStore
from app.services.admin_log import write_admin_log

logger = logging.getLogger(__name__)


def has_any_admin(store: StudyStore) -> bool:
    return store.users.count(User.role.in_([Role.ADMIN, Role.SUPER_ADMIN])) > 0


"""
권한 변경

- 대상 사용자가 없으면 NotFound
- 자기 자신 권한 변경 금지 (마지막 SUPER_ADMIN 잠금 방지)
- 이미 같은 권한이면 InvalidInput

"""

def set_role(store: StudyStore, *, actor: User, user_id: uuid.UUID, role: Role) -> User:
    user = store.users.get(user_id)
    if user is None:
        raise NotFoundError("User not found")

    if user.id == actor.id:
        raise InvalidInputError("Cannot change your own role")

    if user.role == role:
        raise InvalidInputError(f"User already {role.value}")

    before = user.role
    user = store.users.update(user_id, {"role": role})
    write_admin_log(
        store.session,
        actor_id=actor.id,
        action=AdminAction.SET_ROLE,
        target_user_id=user.id,
        before=before.value,
        after=role.value,
    )
    logger.info("role changed user=%s %s -> %s by %s", user.id, before.value, role.value, actor.id)
    return user


def create_user(store: StudyStore, *, email: str, password: str, name: str, role: Role = Role.USER) -> User:
    if store.users.get_by_email(email) is not None:
        raise ConflictError("Email already registered")

    user = store.users.create(
        {
            "email": email,
            "password_hash": get_password_hash(password),
            "name": name,
            "role": role,
        }
    )
    logger.info("user created id=%s role=%s", user.id, role.value)
    return user


"""
최초 관리자 생성

- ADMIN 또는 SUPER_ADMIN이 이미 있으면 Conflict
- 생성되는 계정은 SUPER_ADMIN

"""

def bootstrap_super_admin(store: StudyStore, *, email: str, password: str, name: str) -> User:
    if has_any_admin(store):
        raise ConflictError("Admin already exists")
    return create_user(store, email=email, password=password, name=name, role=Role.SUPER_ADMIN)
