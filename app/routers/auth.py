"""
auth.py

인증(Authentication) 및 계정 관리 API 모음.

회원 가입, 로그인, 내 정보(학습 통계 포함) 조회,
프로필 수정 및 비밀번호 변경을 담당한다.
JWT Access Token(Bearer) 방식을 사용한다.

주요 기능:
- 회원 가입 (기본 권한 user, 가입 즉시 토큰 발급)
- 로그인 및 토큰 발급
- 내 정보 + 학습 통계 조회
- 이름 수정 / 비밀번호 변경 (현재 비밀번호 확인 필수)

관련 파일:
- app.core.security        : 비밀번호 해시 / JWT 생성·검증
- app.core.deps            : 인증 의존성(get_current_user)
- app.services.progress    : 학습 통계 계산

"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError

from app.core.deps import get_aggregator, get_current_user, get_store
from app.core.exceptions import ConflictError, InvalidInputError, UnauthorizedError
from app.core.security import create_access_token, get_password_hash, verify_password
from app.models.user import User
from app.repositories.store import StudyStore
from app.schemas.auth import (
    AuthResponse,
    ChangePasswordRequest,
    EditProfileRequest,
    LoginRequest,
    RegisterRequest,
)
from app.schemas.user import UserResponse, UserWithStatsResponse
from app.services.admin import create_user
from app.services.progress import ProgressAggregator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def _auth_response(user: User) -> AuthResponse:
    return AuthResponse(
        user=UserResponse.model_validate(user),
        access_token=create_access_token(subject=str(user.id)),
    )


"""
회원 가입 API

- 이메일 중복이면 409
- 가입 시 기본 권한은 user
- 가입 즉시 access token 발급

"""

@router.post("/register", response_model=AuthResponse)
def register(data: RegisterRequest, store: StudyStore = Depends(get_store)):
    try:
        user = create_user(store, email=data.email, password=data.password, name=data.name)
        store.commit()
    except IntegrityError:
        store.rollback()
        raise ConflictError("Email already registered")

    logger.info("user registered id=%s", user.id)
    return _auth_response(user)


@router.post("/login", response_model=AuthResponse)
def login(data: LoginRequest, store: StudyStore = Depends(get_store)):
    user = store.users.get_by_email(data.email)

    if not user or not verify_password(data.password, user.password_hash):
        raise UnauthorizedError("Invalid credentials")

    return _auth_response(user)


"""
내 정보 + 학습 통계 조회 API

- 통계는 저장하지 않고 요청 시점에 재계산

"""

@router.get("/me", response_model=UserWithStatsResponse)
def me(
    user: User = Depends(get_current_user),
    aggregator: ProgressAggregator = Depends(get_aggregator),
):
    stats = aggregator.compute_user_stats(user.id)
    return UserWithStatsResponse(
        **UserResponse.model_validate(user).model_dump(),
        **stats.model_dump(),
    )


@router.patch("/me", response_model=UserResponse)
def edit_profile(
    data: EditProfileRequest,
    store: StudyStore = Depends(get_store),
    user: User = Depends(get_current_user),
):
    # 변경 사항 없으면 수정 x
    if data.name is None:
        raise InvalidInputError("No changes provided")

    if not verify_password(data.current_password, user.password_hash):
        raise UnauthorizedError("Invalid password")

    user = store.users.update(user.id, {"name": data.name})
    store.commit()
    return user


"""
비밀번호 변경 API

- 현재 비밀번호 확인 필수
- 새 비밀번호는 기존 비밀번호와 달라야 함

"""

@router.patch("/password")
def change_password(
    data: ChangePasswordRequest,
    store: StudyStore = Depends(get_store),
    user: User = Depends(get_current_user),
):
    if not verify_password(data.current_password, user.password_hash):
        raise UnauthorizedError("Invalid password")

    if data.new_password != data.confirm_password:
        raise InvalidInputError("Passwords do not match")

    if verify_password(data.new_password, user.password_hash):
        raise InvalidInputError("New password must be different")

    store.users.update(user.id, {"password_hash": get_password_hash(data.new_password)})
    store.commit()

    return {"message": "Password updated"}
