"""
진도 기록 API 통합 테스트.
- 같은 수업에 두 번 기록해도 레코드는 1개 (두 번째 값으로 병합)
- 완료 처리 시 reading_progress=100, completed_at 기록
- 수업 2개 중 1개 완료 → 완료율 50%
- 섹션 상태 / 타인 기록 접근 403

"""

import uuid

from tests.helpers import auth_header, create_character_in_db, create_class_in_db, register


def _class_target(study_class) -> dict:
    return {"kind": "class", "id": str(study_class.id)}


def test_record_then_complete_keeps_single_record(client, db_session):
    c1 = create_class_in_db(db_session)
    _, token = register(client)
    h = auth_header(token)

    first = client.post("/progress", headers=h, json={"target": _class_target(c1), "reading_progress": 40})
    assert first.status_code == 200, first.text
    assert first.json()["reading_progress"] == 40
    assert first.json()["is_completed"] is False
    assert first.json()["completed_at"] is None

    second = client.post("/progress", headers=h, json={"target": _class_target(c1), "is_completed": True})
    assert second.status_code == 200, second.text
    assert second.json()["id"] == first.json()["id"]

    records = client.get("/progress", headers=h).json()
    assert len(records) == 1
    assert records[0]["is_completed"] is True
    assert records[0]["reading_progress"] == 100
    assert records[0]["completed_at"] is not None


def test_complete_ignores_passed_reading_progress(client, db_session):
    c1 = create_class_in_db(db_session)
    _, token = register(client)

    r = client.post(
        "/progress",
        headers=auth_header(token),
        json={"target": _class_target(c1), "is_completed": True, "reading_progress": 10},
    )
    assert r.status_code == 200
    assert r.json()["reading_progress"] == 100


def test_progress_percentage_half(client, db_session):
    c1 = create_class_in_db(db_session, order=1)
    create_class_in_db(db_session, order=2)
    _, token = register(client)
    h = auth_header(token)

    client.post("/progress", headers=h, json={"target": _class_target(c1), "is_completed": True})

    me = client.get("/auth/me", headers=h).json()
    assert me["completed_classes"] == 1
    assert me["in_progress_classes"] == 0
    assert me["progress_percentage"] == 50


def test_progress_validation_and_missing_target(client, db_session):
    c1 = create_class_in_db(db_session)
    _, token = register(client)
    h = auth_header(token)

    over = client.post("/progress", headers=h, json={"target": _class_target(c1), "reading_progress": 101})
    assert over.status_code == 422

    unlinked = client.post("/progress", headers=h, json={"target": {"kind": "none"}, "reading_progress": 10})
    assert unlinked.status_code == 422

    missing = client.post(
        "/progress", headers=h, json={"target": {"kind": "class", "id": str(uuid.uuid4())}, "reading_progress": 10}
    )
    assert missing.status_code == 404


def test_draft_content_cannot_be_recorded(client, db_session):
    published = create_class_in_db(db_session, order=1)
    draft = create_class_in_db(db_session, order=2, is_published=False)
    hidden = create_character_in_db(db_session, name="Hidden", is_published=False)
    _, token = register(client)
    h = auth_header(token)

    for target in (_class_target(draft), {"kind": "character", "id": str(hidden.id)}):
        progress = client.post("/progress", headers=h, json={"target": target, "is_completed": True})
        assert progress.status_code == 404
        bookmark = client.post("/bookmarks", headers=h, json={"target": target})
        assert bookmark.status_code == 404
        note = client.post("/notes", headers=h, json={"target": target, "content": "draft note"})
        assert note.status_code == 404

    assert client.post("/progress", headers=h, json={"target": _class_target(published), "is_completed": True}).status_code == 200

    me = client.get("/auth/me", headers=h).json()
    assert me["completed_classes"] == 1
    assert me["progress_percentage"] == 100
    assert me["total_bookmarks"] == 0
    assert me["total_notes"] == 0
    assert client.get("/progress", headers=h).json()[0]["class_id"] == str(published.id)


def test_character_progress_is_not_counted_as_class(client, db_session):
    create_class_in_db(db_session)
    moses = create_character_in_db(db_session)
    _, token = register(client)
    h = auth_header(token)

    r = client.post(
        "/progress", headers=h, json={"target": {"kind": "character", "id": str(moses.id)}, "is_completed": True}
    )
    assert r.status_code == 200
    assert r.json()["character_id"] == str(moses.id)
    assert r.json()["class_id"] is None

    me = client.get("/auth/me", headers=h).json()
    assert me["completed_classes"] == 0
    assert me["progress_percentage"] == 0


def test_patch_progress_owner_only(client, db_session):
    c1 = create_class_in_db(db_session)
    owner_id, owner_token = register(client, name="owner")
    _, other_token = register(client, name="other")

    created = client.post(
        "/progress", headers=auth_header(owner_token), json={"target": _class_target(c1), "is_completed": True}
    ).json()

    forbidden = client.patch(
        f"/progress/{created['id']}", headers=auth_header(other_token), json={"reading_progress": 5}
    )
    assert forbidden.status_code == 403

    # 완료된 기록은 reading_progress 100 유지
    still_done = client.patch(
        f"/progress/{created['id']}", headers=auth_header(owner_token), json={"reading_progress": 5}
    )
    assert still_done.status_code == 200
    assert still_done.json()["reading_progress"] == 100

    reopened = client.patch(
        f"/progress/{created['id']}",
        headers=auth_header(owner_token),
        json={"is_completed": False, "reading_progress": 60},
    )
    assert reopened.status_code == 200
    assert reopened.json()["is_completed"] is False
    assert reopened.json()["reading_progress"] == 60
    assert reopened.json()["completed_at"] is None

    empty = client.patch(f"/progress/{created['id']}", headers=auth_header(owner_token), json={})
    assert empty.status_code == 400

    assert client.get(f"/users/{owner_id}/progress", headers=auth_header(owner_token)).status_code == 200
    assert client.get(f"/users/{owner_id}/progress", headers=auth_header(other_token)).status_code == 403


def test_section_overview(client, db_session):
    a1 = create_class_in_db(db_session, order=1, section="A")
    a2 = create_class_in_db(db_session, order=2, section="A")
    b1 = create_class_in_db(db_session, order=3, section="B")
    create_class_in_db(db_session, order=4, section="C")
    _, token = register(client)
    h = auth_header(token)

    for c in (a1, a2):
        client.post("/progress", headers=h, json={"target": _class_target(c), "is_completed": True})
    client.post("/progress", headers=h, json={"target": _class_target(b1), "reading_progress": 20})

    sections = client.get("/classes/sections", headers=h).json()
    assert [(s["section"], s["status"], s["completed_classes"], s["total_classes"]) for s in sections] == [
        ("A", "complete", 2, 2),
        ("B", "in_progress", 0, 1),
        ("C", "not_started", 0, 1),
    ]
