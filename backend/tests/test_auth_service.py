import pytest

from taskboard.core.errors import AuthenticationError, ConflictError, ValidationError
from taskboard.core.security import decode_access_token
from taskboard.models.user import User
from taskboard.services.auth_service import AuthService
from taskboard.services.user_service import UserService


def test_register_returns_token_for_new_user(db):
    service = AuthService(db)

    token = service.register("Ana", "ana@example.com", "s3cret")

    assert token
    user = db.query(User).filter(User.email == "ana@example.com").one()
    assert user.name == "Ana"
    assert user.password_hash != "s3cret"
    payload = decode_access_token(token)
    assert payload["sub"] == str(user.id)
    assert payload["email"] == "ana@example.com"


@pytest.mark.parametrize("name, email, password", [
    (None, "ana@example.com", "pw"),
    ("Ana", None, "pw"),
    ("Ana", "ana@example.com", None),
    ("", "ana@example.com", "pw"),
    ("   ", "ana@example.com", "pw"),
])
def test_register_requires_all_fields(db, name, email, password):
    with pytest.raises(ValidationError):
        AuthService(db).register(name, email, password)
    assert db.query(User).count() == 0


def test_register_same_email_twice_conflicts(db):
    service = AuthService(db)
    service.register("Ana", "ana@example.com", "pw")

    with pytest.raises(ConflictError):
        service.register("Other Ana", "ana@example.com", "pw2")
    assert db.query(User).count() == 1


def test_email_is_case_sensitive(db):
    service = AuthService(db)
    service.register("Ana", "ana@example.com", "pw")
    service.register("Ana", "Ana@example.com", "pw")
    assert db.query(User).count() == 2


def test_soft_deleted_email_still_blocks_registration(db):
    service = AuthService(db)
    service.register("Ana", "ana@example.com", "pw")
    user = db.query(User).one()
    UserService(db).soft_delete(user.id)

    with pytest.raises(ConflictError):
        service.register("Ana", "ana@example.com", "pw")


def test_login_returns_token_with_user_claims(db):
    service = AuthService(db)
    service.register("Ana", "ana@example.com", "s3cret")
    user = db.query(User).one()

    payload = decode_access_token(service.login("ana@example.com", "s3cret"))

    assert payload["sub"] == str(user.id)
    assert payload["email"] == "ana@example.com"


def test_login_failures_are_indistinguishable(db):
    service = AuthService(db)
    service.register("Ana", "ana@example.com", "s3cret")

    with pytest.raises(AuthenticationError) as wrong_password:
        service.login("ana@example.com", "wrong")
    with pytest.raises(AuthenticationError) as unknown_email:
        service.login("nobody@example.com", "s3cret")

    assert wrong_password.value.message == unknown_email.value.message


def test_login_rejects_soft_deleted_user(db):
    service = AuthService(db)
    service.register("Ana", "ana@example.com", "s3cret")
    UserService(db).soft_delete(db.query(User).one().id)

    with pytest.raises(AuthenticationError):
        service.login("ana@example.com", "s3cret")
