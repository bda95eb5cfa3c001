"""
수업 / 성경 인물 콘텐츠 API 테스트.
- 공개 목록 / 상세 (비공개는 404), 카탈로그 순서
- ADMIN 생성·수정·삭제, 일반 회원 403, 알 수 없는 필드 422
- 삭제 시 연결된 진도 / 북마크 / 노트 cascade 삭제 + 관리자 로그

"""

import uuid

from app.models.user import Role
from tests.helpers import auth_header, create_character_in_db, create_class_in_db, token_for

CLASS_PAYLOAD = {
    "title": "Class 1: Foundations",
    "content": "# Foundations",
    "section": "Foundations of Faith",
    "order": 1,
    "estimated_time": 45,
    "activities": 3,
    "is_published": True,
}


def test_published_classes_in_catalog_order(client, db_session):
    create_class_in_db(db_session, order=3, title="third")
    create_class_in_db(db_session, order=1, title="first")
    create_class_in_db(db_session, order=2, title="draft", is_published=False)
    _, token = token_for(client, db_session)

    r = client.get("/classes", headers=auth_header(token))
    assert r.status_code == 200, r.text
    assert [c["title"] for c in r.json()] == ["first", "third"]


def test_unpublished_or_missing_class_is_404(client, db_session):
    draft = create_class_in_db(db_session, is_published=False)
    _, token = token_for(client, db_session)

    assert client.get(f"/classes/{draft.id}", headers=auth_header(token)).status_code == 404
    missing = client.get(f"/classes/{uuid.uuid4()}", headers=auth_header(token))
    assert missing.status_code == 404
    assert missing.json()["detail"] == "Class not found"


def test_admin_class_crud(client, db_session):
    _, admin_token = token_for(client, db_session, Role.ADMIN)

    created = client.post("/classes", headers=auth_header(admin_token), json=CLASS_PAYLOAD)
    assert created.status_code == 200, created.text
    class_id = created.json()["id"]

    updated = client.patch(f"/classes/{class_id}", headers=auth_header(admin_token), json={"title": "Renamed"})
    assert updated.status_code == 200, updated.text
    assert updated.json()["title"] == "Renamed"
    assert updated.json()["section"] == CLASS_PAYLOAD["section"]

    # 수정 불가 / 알 수 없는 필드는 422
    bad = client.patch(f"/classes/{class_id}", headers=auth_header(admin_token), json={"id": str(uuid.uuid4())})
    assert bad.status_code == 422

    deleted = client.delete(f"/classes/{class_id}", headers=auth_header(admin_token))
    assert deleted.status_code == 200, deleted.text

    again = client.delete(f"/classes/{class_id}", headers=auth_header(admin_token))
    assert again.status_code == 404

    logs = client.get("/admin/logs", headers=auth_header(admin_token)).json()["data"]
    assert [log["action"] for log in logs] == ["DELETE_CLASS", "UPDATE_CLASS", "CREATE_CLASS"]
    assert logs[1]["before"] == CLASS_PAYLOAD["title"]
    assert logs[1]["after"] == "Renamed"


def test_user_cannot_manage_content(client, db_session):
    study_class = create_class_in_db(db_session)
    _, token = token_for(client, db_session)

    assert client.post("/classes", headers=auth_header(token), json=CLASS_PAYLOAD).status_code == 403
    assert client.patch(f"/classes/{study_class.id}", headers=auth_header(token), json={"title": "x"}).status_code == 403
    assert client.delete(f"/classes/{study_class.id}", headers=auth_header(token)).status_code == 403
    assert client.post(
        "/characters",
        headers=auth_header(token),
        json={"name": "Ruth", "title": "Loyal", "content": "..."},
    ).status_code == 403


def test_admin_character_crud_and_clear_image(client, db_session):
    _, admin_token = token_for(client, db_session, Role.ADMIN)

    created = client.post(
        "/characters",
        headers=auth_header(admin_token),
        json={"name": "Ruth", "title": "Loyal", "content": "...", "image_url": "https://img/ruth.png", "is_published": True},
    )
    assert created.status_code == 200, created.text
    character_id = created.json()["id"]

    cleared = client.patch(f"/characters/{character_id}", headers=auth_header(admin_token), json={"image_url": None})
    assert cleared.status_code == 200
    assert cleared.json()["image_url"] is None
    assert cleared.json()["name"] == "Ruth"

    listed = client.get("/characters", headers=auth_header(admin_token)).json()
    assert [c["name"] for c in listed] == ["Ruth"]

    assert client.delete(f"/characters/{character_id}", headers=auth_header(admin_token)).status_code == 200
    assert client.get(f"/characters/{character_id}", headers=auth_header(admin_token)).status_code == 404


def test_delete_class_cascades_personal_records(client, db_session):
    study_class = create_class_in_db(db_session)
    other = create_class_in_db(db_session, order=2)
    _, admin_token = token_for(client, db_session, Role.ADMIN)
    _, token = token_for(client, db_session)
    h = auth_header(token)

    target = {"kind": "class", "id": str(study_class.id)}
    assert client.post("/progress", headers=h, json={"target": target, "reading_progress": 30}).status_code == 200
    assert client.post("/bookmarks", headers=h, json={"target": target}).status_code == 200
    assert client.post("/notes", headers=h, json={"target": target, "content": "메모"}).status_code == 200
    assert client.post(
        "/progress", headers=h, json={"target": {"kind": "class", "id": str(other.id)}, "reading_progress": 10}
    ).status_code == 200

    r = client.delete(f"/classes/{study_class.id}", headers=auth_header(admin_token))
    assert r.status_code == 200, r.text
    assert r.json()["removed"] == {"progress": 1, "bookmarks": 1, "notes": 1}

    progress = client.get("/progress", headers=h).json()
    assert [p["class_id"] for p in progress] == [str(other.id)]
    assert client.get("/bookmarks", headers=h).json() == []
    assert client.get("/notes", headers=h).json() == []


def test_delete_character_cascades_bookmarks(client, db_session):
    character = create_character_in_db(db_session)
    _, admin_token = token_for(client, db_session, Role.ADMIN)
    _, token = token_for(client, db_session)

    target = {"kind": "character", "id": str(character.id)}
    assert client.post("/bookmarks", headers=auth_header(token), json={"target": target}).status_code == 200

    r = client.delete(f"/characters/{character.id}", headers=auth_header(admin_token))
    assert r.status_code == 200
    assert r.json()["removed"]["bookmarks"] == 1
    assert client.get("/bookmarks", headers=auth_header(token)).json() == []
