"""
북마크 / 노트 API 테스트.
- 중복 북마크 409, 본인 것만 삭제 가능
- 노트 필터(class_id / character_id), 연결 없는 노트 허용
- 다른 회원 노트 조회/수정/삭제 403 (관리자도 동일)

"""

import uuid

from app.models.user import Role
from tests.helpers import auth_header, create_character_in_db, create_class_in_db, register, token_for


def test_bookmark_create_duplicate_delete(client, db_session):
    c1 = create_class_in_db(db_session)
    _, token = register(client)
    _, other_token = register(client, name="other")
    h = auth_header(token)
    target = {"kind": "class", "id": str(c1.id)}

    created = client.post("/bookmarks", headers=h, json={"target": target})
    assert created.status_code == 200, created.text
    bookmark_id = created.json()["id"]

    dup = client.post("/bookmarks", headers=h, json={"target": target})
    assert dup.status_code == 409

    # 다른 회원은 같은 대상 북마크 가능
    assert client.post("/bookmarks", headers=auth_header(other_token), json={"target": target}).status_code == 200

    assert client.delete(f"/bookmarks/{bookmark_id}", headers=auth_header(other_token)).status_code == 403
    assert client.delete(f"/bookmarks/{bookmark_id}", headers=h).status_code == 200
    assert client.delete(f"/bookmarks/{bookmark_id}", headers=h).status_code == 404

    assert client.get("/bookmarks", headers=h).json() == []
    me = client.get("/auth/me", headers=h).json()
    assert me["total_bookmarks"] == 0


def test_bookmark_target_must_exist(client):
    _, token = register(client)

    r = client.post(
        "/bookmarks",
        headers=auth_header(token),
        json={"target": {"kind": "character", "id": str(uuid.uuid4())}},
    )
    assert r.status_code == 404
    assert r.json()["detail"] == "Character not found"


def test_notes_filter_and_unlinked(client, db_session):
    c1 = create_class_in_db(db_session)
    moses = create_character_in_db(db_session)
    user_id, token = register(client)
    h = auth_header(token)

    client.post("/notes", headers=h, json={"target": {"kind": "class", "id": str(c1.id)}, "content": "class note"})
    client.post("/notes", headers=h, json={"target": {"kind": "character", "id": str(moses.id)}, "content": "moses note"})
    free = client.post("/notes", headers=h, json={"content": "free note", "is_private": False})
    assert free.status_code == 200, free.text
    assert free.json()["class_id"] is None
    assert free.json()["character_id"] is None
    assert free.json()["is_private"] is False

    assert len(client.get("/notes", headers=h).json()) == 3
    by_class = client.get("/notes", headers=h, params={"class_id": str(c1.id)}).json()
    assert [n["content"] for n in by_class] == ["class note"]
    by_character = client.get("/notes", headers=h, params={"character_id": str(moses.id)}).json()
    assert [n["content"] for n in by_character] == ["moses note"]

    assert len(client.get(f"/users/{user_id}/notes", headers=h).json()) == 3
    assert client.get("/auth/me", headers=h).json()["total_notes"] == 3


def test_note_owner_only(client, db_session):
    _, owner_token = register(client, name="owner")
    other_id, other_token = register(client, name="other")
    _, admin_token = token_for(client, db_session, Role.SUPER_ADMIN)

    note = client.post("/notes", headers=auth_header(owner_token), json={"content": "secret"}).json()
    note_url = f"/notes/{note['id']}"

    assert client.get(note_url, headers=auth_header(owner_token)).status_code == 200

    for token in (other_token, admin_token):
        h = auth_header(token)
        assert client.get(note_url, headers=h).status_code == 403
        assert client.patch(note_url, headers=h, json={"content": "hacked"}).status_code == 403
        assert client.delete(note_url, headers=h).status_code == 403

    assert client.get(f"/users/{other_id}/notes", headers=auth_header(owner_token)).status_code == 403
    assert client.get(f"/users/{other_id}/bookmarks", headers=auth_header(owner_token)).status_code == 403

    updated = client.patch(note_url, headers=auth_header(owner_token), json={"content": "edited"})
    assert updated.status_code == 200
    assert updated.json()["content"] == "edited"

    assert client.patch(note_url, headers=auth_header(owner_token), json={}).status_code == 400
    assert client.patch(note_url, headers=auth_header(owner_token), json={"user_id": other_id}).status_code == 422

    assert client.delete(note_url, headers=auth_header(owner_token)).status_code == 200
    assert client.get(note_url, headers=auth_header(owner_token)).status_code == 404
