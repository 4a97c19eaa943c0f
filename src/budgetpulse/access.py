"""Session loading and route access control."""

from __future__ import annotations

from typing import Optional

from flask import Flask, g, redirect, request, session

from .logging_config import get_logger
from .models.user import User

logger = get_logger(__name__)

SESSION_USER_KEY = "user_id"

PROTECTED_PREFIXES = ("/dashboard", "/account")
AUTH_PATHS = frozenset({"/login", "/signup", "/forgot-password", "/reset-password"})

LOGIN_PATH = "/login"
DASHBOARD_PATH = "/dashboard"


def resolve_redirect(path: str, authenticated: bool) -> Optional[str]:
    """Return where a request for ``path`` must be sent, or ``None`` to serve it."""

    if authenticated and path in AUTH_PATHS:
        return DASHBOARD_PATH
    if not authenticated and path.startswith(PROTECTED_PREFIXES):
        return LOGIN_PATH
    return None


def login_user(user: User) -> None:
    """Bind ``user`` to the browser session."""

    session.clear()
    session[SESSION_USER_KEY] = user.id
    g.user = user


def logout_user() -> None:
    session.clear()
    g.user = None


def current_user() -> Optional[User]:
    return g.get("user")


def require_user() -> User:
    """Return the signed-in user; the gate guarantees one on protected pages."""

    user = current_user()
    if user is None:  # pragma: no cover - the gate redirects first
        raise RuntimeError("No active session")
    return user


def init_app(app: Flask) -> None:
    """Install the per-request session loader and access gate."""

    from .extensions import get_backend
    from .services import auth

    @app.before_request
    def _load_session_and_gate():
        user_id = session.get(SESSION_USER_KEY)
        g.user = auth.get_current_user(user_id, users=get_backend().users)
        if user_id and g.user is None:
            # Account vanished since the cookie was issued.
            session.pop(SESSION_USER_KEY, None)

        target = resolve_redirect(request.path, g.user is not None)
        if target is not None:
            logger.debug("Redirecting %s to %s", request.path, target)
            return redirect(target)
        return None

    @app.context_processor
    def _inject_user():
        return {"current_user": g.get("user")}


__all__ = [
    "current_user",
    "init_app",
    "login_user",
    "logout_user",
    "require_user",
    "resolve_redirect",
]
