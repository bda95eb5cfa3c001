import uuid

from fastapi import APIRouter, Depends

from app.core.deps import get_current_user, get_store
from app.core.exceptions import ConflictError, NotFoundError
from app.core.policy import Action, authorize
from app.models.link import link_columns
from app.models.user import User
from app.repositories.store import StudyStore
from app.schemas.study import BookmarkCreateRequest, BookmarkResponse
from app.services.content import ensure_link_target

router = APIRouter(prefix="/bookmarks", tags=["bookmarks"])


@router.get("", response_model=list[BookmarkResponse])
def my_bookmarks(
    store: StudyStore = Depends(get_store),
    user: User = Depends(get_current_user),
):
    return store.bookmarks.list_for_user(user.id)


"""
북마크 추가 API

- 같은 대상에 대한 북마크가 이미 있으면 409

"""

@router.post("", response_model=BookmarkResponse)
def create_bookmark(
    body: BookmarkCreateRequest,
    store: StudyStore = Depends(get_store),
    user: User = Depends(get_current_user),
):
    link = body.target.to_link()
    ensure_link_target(store, link)

    if store.bookmarks.find_for(user.id, link) is not None:
        raise ConflictError("Already bookmarked")

    bookmark = store.bookmarks.create({"user_id": user.id, **link_columns(link)})
    store.commit()

    return bookmark


@router.delete("/{bookmark_id}")
def delete_bookmark(
    bookmark_id: uuid.UUID,
    store: StudyStore = Depends(get_store),
    user: User = Depends(get_current_user),
):
    bookmark = store.bookmarks.get(bookmark_id)
    if not bookmark:
        raise NotFoundError("Bookmark not found")

    authorize(user, Action.ACCESS_OWN_DATA, owner_id=bookmark.user_id)

    store.bookmarks.delete(bookmark_id)
    store.commit()
    return {"message": "Bookmark deleted"}
