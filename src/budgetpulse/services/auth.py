"""Authentication and session services."""

from __future__ import annotations

import hashlib
import secrets
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHash, VerificationError, VerifyMismatchError

from ..domain.repositories import UserRepository
from ..logging_config import get_logger
from ..models.user import User

logger = get_logger(__name__)

_hasher = PasswordHasher()

MIN_PASSWORD_LENGTH = 8

SIGNED_IN = "SIGNED_IN"
SIGNED_OUT = "SIGNED_OUT"
USER_UPDATED = "USER_UPDATED"

SessionListener = Callable[[str, Optional[User]], None]


class AuthError(ValueError):
    """Raised with a user-facing message when an auth operation is refused."""


class SessionEvents:
    """Subscribers notified whenever a session starts, ends or changes."""

    def __init__(self) -> None:
        self._listeners: list[SessionListener] = []

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register ``listener`` and return a callable that removes it."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def notify(self, event: str, user: Optional[User]) -> None:
        for listener in list(self._listeners):
            try:
                listener(event, user)
            except Exception:
                logger.exception("Session listener failed", extra={"event": event})


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes even when aware ones were stored.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def _hash_token(token: str) -> str:
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def _check_password_strength(password: str) -> None:
    if len(password or "") < MIN_PASSWORD_LENGTH:
        raise AuthError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long")


def get_current_user(user_id: Optional[str], *, users: UserRepository) -> Optional[User]:
    """Resolve the user behind a session id, if it still exists."""

    if not user_id:
        return None
    return users.get_by_id(user_id)


def sign_up(*, email: str, password: str, name: str, users: UserRepository) -> User:
    """Register a new account; the caller decides whether to sign it in."""

    email = normalize_email(email)
    if not email or "@" not in email:
        raise AuthError("Enter a valid email address")
    _check_password_strength(password)
    if users.get_by_email(email) is not None:
        raise AuthError("An account with this email already exists")

    user = User(email=email, password_hash=_hasher.hash(password), name=(name or "").strip())
    try:
        created = users.create(user)
    except ValueError as exc:
        raise AuthError(str(exc)) from exc
    logger.info("User signed up", extra={"user_id": created.id})
    return created


def sign_in(
    *,
    email: str,
    password: str,
    users: UserRepository,
    events: SessionEvents | None = None,
) -> User:
    """Validate credentials and return the user when correct."""

    invalid = AuthError("Invalid login credentials")
    email = normalize_email(email)
    if not email or not password:
        raise invalid
    user = users.get_by_email(email)
    if user is None:
        raise invalid
    try:
        _hasher.verify(user.password_hash, password)
    except (VerifyMismatchError, InvalidHash, VerificationError):
        logger.info("Rejected sign-in attempt", extra={"user_id": user.id})
        raise invalid from None

    user.last_login = _utcnow()
    user = users.update(user)
    logger.info("User signed in", extra={"user_id": user.id})
    if events is not None:
        events.notify(SIGNED_IN, user)
    return user


def sign_out(user: Optional[User], *, events: SessionEvents | None = None) -> None:
    if user is not None:
        logger.info("User signed out", extra={"user_id": user.id})
    if events is not None:
        events.notify(SIGNED_OUT, None)


def request_password_reset(
    email: str,
    *,
    users: UserRepository,
    ttl_minutes: int = 60,
    now: datetime | None = None,
) -> Optional[str]:
    """Issue a one-time reset token for ``email``.

    Returns the plain token so the caller can deliver the reset link, or
    ``None`` when no account matches. Callers must not reveal which case
    occurred.
    """

    user = users.get_by_email(normalize_email(email))
    if user is None:
        logger.info("Password reset requested for unknown email")
        return None
    token = secrets.token_urlsafe(32)
    user.reset_token_hash = _hash_token(token)
    user.reset_expires_at = (now or _utcnow()) + timedelta(minutes=ttl_minutes)
    users.update(user)
    logger.info("Password reset requested", extra={"user_id": user.id})
    return token


def verify_reset_token(
    token: str, *, users: UserRepository, now: datetime | None = None
) -> User:
    """Return the user owning an unexpired reset token."""

    expired = AuthError("Your password reset link may have expired. Please request a new one.")
    if not token:
        raise expired
    user = users.get_by_reset_token_hash(_hash_token(token))
    if user is None or user.reset_expires_at is None:
        raise expired
    if _as_utc(user.reset_expires_at) < (now or _utcnow()):
        raise expired
    return user


def update_password(
    user: User,
    password: str,
    *,
    users: UserRepository,
    events: SessionEvents | None = None,
) -> User:
    """Replace the password of ``user``."""

    _check_password_strength(password)
    user.password_hash = _hasher.hash(password)
    user.reset_token_hash = None
    user.reset_expires_at = None
    user = users.update(user)
    logger.info("Password updated", extra={"user_id": user.id})
    if events is not None:
        events.notify(USER_UPDATED, user)
    return user


def reset_password_with_token(
    token: str,
    password: str,
    *,
    users: UserRepository,
    events: SessionEvents | None = None,
    now: datetime | None = None,
) -> User:
    """Redeem a reset token and store the new password."""

    user = verify_reset_token(token, users=users, now=now)
    return update_password(user, password, users=users, events=events)


__all__ = [
    "AuthError",
    "MIN_PASSWORD_LENGTH",
    "SessionEvents",
    "get_current_user",
    "request_password_reset",
    "reset_password_with_token",
    "sign_in",
    "sign_out",
    "sign_up",
    "update_password",
    "verify_reset_token",
]
