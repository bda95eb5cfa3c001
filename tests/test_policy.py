"""
접근 정책(authorize) 단위 테스트.
DB 없이 User 객체만 만들어 판단 결과를 검증한다.

"""

import uuid

import pytest

from app.core.exceptions import ForbiddenError, UnauthorizedError
from app.core.policy import Action, authorize
from app.models.user import Role, User


def _user(role: Role) -> User:
    return User(id=uuid.uuid4(), email=f"{role.value}@test.com", name="x", password_hash="x", role=role)


def test_missing_principal_is_unauthorized():
    with pytest.raises(UnauthorizedError):
        authorize(None, Action.READ_CONTENT)


def test_owner_only_even_for_super_admin():
    owner = _user(Role.USER)
    authorize(owner, Action.ACCESS_OWN_DATA, owner_id=owner.id)

    with pytest.raises(ForbiddenError):
        authorize(_user(Role.USER), Action.ACCESS_OWN_DATA, owner_id=owner.id)

    with pytest.raises(ForbiddenError):
        authorize(_user(Role.SUPER_ADMIN), Action.ACCESS_OWN_DATA, owner_id=owner.id)


@pytest.mark.parametrize(
    "role, action, allowed",
    [
        (Role.USER, Action.READ_CONTENT, True),
        (Role.USER, Action.MANAGE_CONTENT, False),
        (Role.USER, Action.VIEW_ADMIN_STATS, False),
        (Role.ADMIN, Action.MANAGE_CONTENT, True),
        (Role.ADMIN, Action.VIEW_ADMIN_STATS, True),
        (Role.ADMIN, Action.LIST_USERS, False),
        (Role.ADMIN, Action.SET_ROLE, False),
        (Role.SUPER_ADMIN, Action.MANAGE_CONTENT, True),
        (Role.SUPER_ADMIN, Action.LIST_USERS, True),
        (Role.SUPER_ADMIN, Action.SET_ROLE, True),
    ],
)
def test_role_thresholds(role, action, allowed):
    principal = _user(role)
    if allowed:
        authorize(principal, action)
    else:
        with pytest.raises(ForbiddenError):
            authorize(principal, action)
