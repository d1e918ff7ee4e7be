import pytest

from taskboard.core.errors import ConflictError, NotFoundError, ValidationError
from taskboard.models.user import User
from taskboard.schemas.user import UserUpdate
from taskboard.services.user_service import UserService


@pytest.fixture()
def users(db):
    ana = User(name="Ana", email="ana@example.com", password_hash="x")
    bia = User(name="Bia", email="bia@example.com", password_hash="x")
    db.add_all([ana, bia])
    db.commit()
    return ana, bia


def test_list_and_get_skip_soft_deleted(db, users):
    ana, bia = users
    service = UserService(db)

    service.soft_delete(bia.id)

    assert [u.id for u in service.list()] == [ana.id]
    with pytest.raises(NotFoundError):
        service.get(bia.id)
    with pytest.raises(NotFoundError):
        service.soft_delete(bia.id)
    # Row is kept
    assert db.query(User).count() == 2


def test_update_partial(db, users):
    ana, _ = users

    updated = UserService(db).update(ana.id, UserUpdate(name="Ana Maria"))

    assert updated.name == "Ana Maria"
    assert updated.email == "ana@example.com"


def test_update_email_taken_conflicts(db, users):
    ana, _ = users

    with pytest.raises(ConflictError):
        UserService(db).update(ana.id, UserUpdate(email="bia@example.com"))


def test_update_rejects_empty_name(db, users):
    ana, _ = users

    with pytest.raises(ValidationError):
        UserService(db).update(ana.id, UserUpdate(name=""))


def test_update_missing_user(db):
    with pytest.raises(NotFoundError):
        UserService(db).update(7, UserUpdate(name="x"))


def test_update_rejects_blank_name(db, users):
    ana, _ = users

    with pytest.raises(ValidationError):
        UserService(db).update(ana.id, UserUpdate(name="   "))
    assert UserService(db).get(ana.id).name == "Ana"


def test_update_keeps_email_as_sent(db, users):
    ana, _ = users

    updated = UserService(db).update(ana.id, UserUpdate(email="Ana@Example.COM"))

    assert updated.email == "Ana@Example.COM"
