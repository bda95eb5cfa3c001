from typing import Generator

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from app.core.exceptions import UnauthorizedError
from app.core.policy import Action, authorize
from app.core.security import verify_token
from app.db.session import SessionLocal
from app.models.user import User
from app.repositories.store import StudyStore
from app.services.progress import ProgressAggregator

# Swagger Authorize에서 "Bearer 토큰" 입력받는 스키마
bearer_scheme = HTTPBearer(auto_error=False)


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_store(db: Session = Depends(get_db)) -> StudyStore:
    return StudyStore(db)


# 진도 upsert 잠금은 앱 단위 상태(app.state.progress_locks)를 공유
def get_aggregator(request: Request, store: StudyStore = Depends(get_store)) -> ProgressAggregator:
    return ProgressAggregator(store, request.app.state.progress_locks)


def get_current_user(
    cred: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    store: StudyStore = Depends(get_store),
) -> User:
    if cred is None:
        raise UnauthorizedError("Not authenticated")

    claims = verify_token(cred.credentials)
    if claims is None:
        raise UnauthorizedError("Could not validate credentials")

    user = store.users.get(claims.user_id)
    if not user:
        raise UnauthorizedError("User not found")

    return user


def require_action(action: Action):
    def _checker(current_user: User = Depends(get_current_user)) -> User:
        authorize(current_user, action)
        return current_user
    return _checker

get_current_admin = require_action(Action.MANAGE_CONTENT)
get_stats_viewer = require_action(Action.VIEW_ADMIN_STATS)
get_current_super_admin = require_action(Action.LIST_USERS)
get_role_manager = require_action(Action.SET_ROLE)
