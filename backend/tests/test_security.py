from datetime import timedelta

from taskboard.core.security import (
    create_access_token,
    decode_access_token,
    get_password_hash,
    verify_password,
)


def test_password_hash_is_salted_and_verifies():
    first = get_password_hash("hunter2")
    second = get_password_hash("hunter2")

    assert first != "hunter2"
    # Same password, different salt
    assert first != second
    assert verify_password("hunter2", first)
    assert verify_password("hunter2", second)
    assert not verify_password("hunter3", first)


def test_password_hash_uses_cost_factor_10():
    # bcrypt hashes look like $2b$10$<salt+hash>
    assert get_password_hash("pw").split("$")[2] == "10"


def test_token_round_trip_keeps_claims():
    token = create_access_token({"sub": "42", "email": "a@b.com"})
    payload = decode_access_token(token)

    assert payload["sub"] == "42"
    assert payload["email"] == "a@b.com"
    assert "exp" in payload


def test_expired_token_is_rejected():
    token = create_access_token({"sub": "1"}, expires_delta=timedelta(seconds=-10))
    assert decode_access_token(token) is None


def test_tampered_and_garbage_tokens_are_rejected():
    token = create_access_token({"sub": "1"})
    header, payload, signature = token.split(".")
    tampered = ".".join([header, payload, signature[::-1]])

    assert decode_access_token(tampered) is None
    assert decode_access_token("not-a-token") is None
