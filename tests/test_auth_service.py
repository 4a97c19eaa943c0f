"""Sign-up, sign-in and password recovery services."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from budgetpulse.services import auth

PASSWORD = "correct-horse"


@pytest.fixture
def account(users):
    return auth.sign_up(email=" Casey@Example.com ", password=PASSWORD, name=" Casey ", users=users)


def test_sign_up_normalizes_and_hashes(account):
    assert account.email == "casey@example.com"
    assert account.name == "Casey"
    assert account.password_hash != PASSWORD
    assert account.password_hash.startswith("$argon2")


@pytest.mark.parametrize(
    ("email", "password", "message"),
    [
        ("casey", PASSWORD, "valid email"),
        ("", PASSWORD, "valid email"),
        ("casey@example.com", "short", "at least 8"),
    ],
)
def test_sign_up_rejects_bad_input(users, email, password, message):
    with pytest.raises(auth.AuthError, match=message):
        auth.sign_up(email=email, password=password, name="Casey", users=users)


def test_sign_up_rejects_duplicate_email(users, account):
    with pytest.raises(auth.AuthError, match="already exists"):
        auth.sign_up(email="CASEY@example.com", password=PASSWORD, name="Again", users=users)


def test_sign_in_returns_user_and_notifies(users, account):
    events = auth.SessionEvents()
    seen = []
    events.subscribe(lambda event, user: seen.append((event, user.id)))

    user = auth.sign_in(email="casey@example.com", password=PASSWORD, users=users, events=events)

    assert user.id == account.id
    assert user.last_login is not None
    assert seen == [(auth.SIGNED_IN, account.id)]


@pytest.mark.parametrize(
    ("email", "password"),
    [
        ("casey@example.com", "wrong-password"),
        ("nobody@example.com", PASSWORD),
        ("casey@example.com", ""),
    ],
)
def test_sign_in_rejects_bad_credentials(users, account, email, password):
    with pytest.raises(auth.AuthError, match="Invalid login credentials"):
        auth.sign_in(email=email, password=password, users=users)


def test_get_current_user(users, account):
    assert auth.get_current_user(account.id, users=users).email == account.email
    assert auth.get_current_user(None, users=users) is None
    assert auth.get_current_user("missing", users=users) is None


def test_unsubscribe_stops_notifications():
    events = auth.SessionEvents()
    seen = []
    unsubscribe = events.subscribe(lambda event, user: seen.append(event))

    events.notify(auth.SIGNED_OUT, None)
    unsubscribe()
    unsubscribe()
    events.notify(auth.SIGNED_OUT, None)

    assert seen == [auth.SIGNED_OUT]


def test_failing_listener_does_not_block_others():
    events = auth.SessionEvents()
    seen = []

    def broken(event, user):
        raise RuntimeError("listener bug")

    events.subscribe(broken)
    events.subscribe(lambda event, user: seen.append(event))

    events.notify(auth.USER_UPDATED, None)

    assert seen == [auth.USER_UPDATED]


def test_reset_for_unknown_email_returns_none(users):
    assert auth.request_password_reset("ghost@example.com", users=users) is None


def test_password_reset_flow(users, account):
    token = auth.request_password_reset("casey@example.com", users=users)

    stored = users.get_by_id(account.id)
    assert token
    assert stored.reset_token_hash and stored.reset_token_hash != token
    assert auth.verify_reset_token(token, users=users).id == account.id

    auth.reset_password_with_token(token, "brand-new-pass", users=users)

    assert auth.sign_in(email="casey@example.com", password="brand-new-pass", users=users)
    with pytest.raises(auth.AuthError):
        auth.sign_in(email="casey@example.com", password=PASSWORD, users=users)
    with pytest.raises(auth.AuthError, match="expired"):
        auth.verify_reset_token(token, users=users)


def test_expired_reset_token_is_rejected(users, account):
    issued = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
    token = auth.request_password_reset(
        "casey@example.com", users=users, ttl_minutes=30, now=issued
    )

    assert auth.verify_reset_token(token, users=users, now=issued + timedelta(minutes=29))
    with pytest.raises(auth.AuthError, match="may have expired"):
        auth.verify_reset_token(token, users=users, now=issued + timedelta(minutes=31))


@pytest.mark.parametrize("token", ["", "not-a-real-token"])
def test_unknown_reset_token_is_rejected(users, account, token):
    with pytest.raises(auth.AuthError, match="may have expired"):
        auth.reset_password_with_token(token, "brand-new-pass", users=users)


def test_update_password_enforces_length(users, account):
    with pytest.raises(auth.AuthError, match="at least 8"):
        auth.update_password(account, "short", users=users)
