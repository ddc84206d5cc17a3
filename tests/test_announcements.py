from datetime import timedelta

import pytest

from cityhall.announcements.service import (
    create_announcement,
    deactivate_announcement,
    get_all_announcements,
    get_announcements_for_user,
    get_urgent_announcements,
)
from cityhall.errors import NotFoundError, PermissionDeniedError
from cityhall.models.enums import UserRole
from cityhall.schemas.announcement import AnnouncementCreate
from cityhall.utils.clock import utcnow


def _announce(db, author, title="Office closed Friday", target_roles=None, is_urgent=False, expires_at=None):
    body = AnnouncementCreate(
        title=title,
        content=f"{title}.",
        target_roles=target_roles,
        is_urgent=is_urgent,
        expires_at=expires_at,
    )
    return create_announcement(db, body, author.id)


@pytest.fixture()
def secretary(make_user):
    return make_user(role=UserRole.SECRETARY)


@pytest.fixture()
def mayor(make_user):
    return make_user(role=UserRole.MAYOR)


@pytest.fixture()
def head(make_user):
    return make_user(role=UserRole.DEPARTMENT_HEAD, department="Public Works")


def _ids(rows):
    return [a.id for a in rows]


def test_create_defaults(db, mayor):
    ann = _announce(db, mayor, target_roles=[UserRole.SECRETARY, UserRole.DEPARTMENT_HEAD])
    assert ann.is_active is True
    assert ann.is_urgent is False
    assert ann.roles == [UserRole.SECRETARY, UserRole.DEPARTMENT_HEAD]


def test_create_empty_target_list_means_everyone(db, mayor):
    ann = _announce(db, mayor, target_roles=[])
    assert ann.target_roles is None
    for role in UserRole:
        assert _ids(get_announcements_for_user(db, role)) == [ann.id]


def test_create_unknown_author(db):
    class Ghost:
        id = 31337

    with pytest.raises(NotFoundError, match="Author not found"):
        _announce(db, Ghost())


def test_targeted_urgent_announcement_scenario(db, secretary, mayor):
    general = _announce(db, mayor, "General")
    targeted = _announce(db, mayor, "Secretaries only", target_roles=[UserRole.SECRETARY], is_urgent=True)

    assert _ids(get_announcements_for_user(db, UserRole.SECRETARY)) == [targeted.id, general.id]
    assert _ids(get_announcements_for_user(db, UserRole.MAYOR)) == [general.id]


def test_role_set_restricts_visibility(db, mayor):
    ann = _announce(db, mayor, target_roles=[UserRole.MAYOR, UserRole.DEPARTMENT_HEAD])
    assert _ids(get_announcements_for_user(db, UserRole.MAYOR)) == [ann.id]
    assert _ids(get_announcements_for_user(db, UserRole.DEPARTMENT_HEAD)) == [ann.id]
    assert get_announcements_for_user(db, UserRole.SECRETARY) == []


def test_expired_hidden_from_every_role_read(db, mayor):
    now = utcnow()
    _announce(db, mayor, "Expired", is_urgent=True, expires_at=now - timedelta(hours=1))
    live = _announce(db, mayor, "Still on", is_urgent=True, expires_at=now + timedelta(days=1))

    for role in UserRole:
        assert _ids(get_announcements_for_user(db, role)) == [live.id]
        assert _ids(get_urgent_announcements(db, role)) == [live.id]


def test_inactive_hidden_everywhere(db, mayor):
    ann = _announce(db, mayor, is_urgent=True)
    deactivate_announcement(db, ann.id, mayor.id)

    assert get_all_announcements(db) == []
    assert get_announcements_for_user(db, UserRole.MAYOR) == []
    assert get_urgent_announcements(db, UserRole.MAYOR) == []


def test_ordering_urgent_first_then_newest(db, mayor):
    old = _announce(db, mayor, "old")
    old_urgent = _announce(db, mayor, "old urgent", is_urgent=True)
    new = _announce(db, mayor, "new")
    new_urgent = _announce(db, mayor, "new urgent", is_urgent=True)

    expected = [new_urgent.id, old_urgent.id, new.id, old.id]
    assert _ids(get_announcements_for_user(db, UserRole.SECRETARY)) == expected
    assert _ids(get_all_announcements(db)) == expected


def test_urgent_only_returns_urgent_for_role(db, mayor, head):
    _announce(db, mayor, "routine")
    for_heads = _announce(db, mayor, "storm", target_roles=[UserRole.DEPARTMENT_HEAD], is_urgent=True)
    _announce(db, mayor, "mayor only", target_roles=[UserRole.MAYOR], is_urgent=True)

    assert _ids(get_urgent_announcements(db, head.role)) == [for_heads.id]


def test_get_all_ignores_roles(db, mayor):
    a = _announce(db, mayor, target_roles=[UserRole.MAYOR])
    b = _announce(db, mayor, target_roles=[UserRole.SECRETARY])
    assert set(_ids(get_all_announcements(db))) == {a.id, b.id}


class TestDeactivate:

    def test_author_may_deactivate(self, db, secretary):
        ann = _announce(db, secretary)
        before = ann.updated_at
        done = deactivate_announcement(db, ann.id, secretary.id)
        assert done.is_active is False
        assert done.updated_at > before

    def test_mayor_may_deactivate_any(self, db, secretary, mayor):
        ann = _announce(db, secretary)
        assert deactivate_announcement(db, ann.id, mayor.id).is_active is False

    def test_others_are_refused(self, db, secretary, head):
        ann = _announce(db, secretary)
        with pytest.raises(PermissionDeniedError, match="Insufficient permissions"):
            deactivate_announcement(db, ann.id, head.id)
        assert get_all_announcements(db)[0].is_active is True

    def test_idempotent(self, db, mayor):
        ann = _announce(db, mayor)
        deactivate_announcement(db, ann.id, mayor.id)
        assert deactivate_announcement(db, ann.id, mayor.id).is_active is False

    def test_missing_announcement_or_user(self, db, mayor):
        with pytest.raises(NotFoundError, match="Announcement not found"):
            deactivate_announcement(db, 404, mayor.id)
        ann = _announce(db, mayor)
        with pytest.raises(NotFoundError, match="User not found"):
            deactivate_announcement(db, ann.id, 404)


def test_announcement_procedures(client, mayor, secretary):
    r = client.post("/announcements/create", json={
        "title": "Road works",
        "content": "Rue de la République closed",
        "target_roles": ["Secretary"],
        "is_urgent": True,
        "expires_at": None,
        "authorId": mayor.id,
    })
    assert r.status_code == 200
    ann = r.json()
    assert ann["target_roles"] == ["Secretary"]

    r = client.get("/announcements/getForUser", params={"role": "Secretary"})
    assert [a["id"] for a in r.json()] == [ann["id"]]
    r = client.get("/announcements/getUrgent", params={"role": "Department Head"})
    assert r.json() == []

    r = client.post("/announcements/deactivate", json={"announcementId": ann["id"], "userId": secretary.id})
    assert r.status_code == 403
    assert "Insufficient permissions" in r.json()["detail"]

    r = client.post("/announcements/create", json={
        "title": "x", "content": "y", "target_roles": None, "authorId": 999,
    })
    assert r.status_code == 404
    assert r.json()["detail"] == "Author not found"
