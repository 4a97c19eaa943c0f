"""Authentication forms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ...services.auth import MIN_PASSWORD_LENGTH, normalize_email
from ..forms import BaseForm


def _looks_like_email(value: str) -> bool:
    local, _, domain = value.partition("@")
    return bool(local) and "." in domain and not domain.startswith(".")


@dataclass(slots=True)
class LoginForm(BaseForm):
    FIELDS: ClassVar[tuple[str, ...]] = ("email", "password")

    email: str = ""
    password: str = ""

    def validate(self) -> bool:
        self.errors.clear()
        self.email = normalize_email(self.value("email"))
        self.password = self.value("password")
        if not self.email:
            self._add_error("email", "Email is required")
        if not self.password:
            self._add_error("password", "Password is required")
        return not self.errors


@dataclass(slots=True)
class SignupForm(BaseForm):
    FIELDS: ClassVar[tuple[str, ...]] = ("name", "email", "password")

    name: str = ""
    email: str = ""
    password: str = ""

    def validate(self) -> bool:
        self.errors.clear()
        self.name = self.value("name").strip()
        self.email = normalize_email(self.value("email"))
        self.password = self.value("password")
        if not self.name:
            self._add_error("name", "Name is required")
        if not _looks_like_email(self.email):
            self._add_error("email", "Enter a valid email address")
        if len(self.password) < MIN_PASSWORD_LENGTH:
            self._add_error(
                "password", f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
            )
        return not self.errors


@dataclass(slots=True)
class ForgotPasswordForm(BaseForm):
    FIELDS: ClassVar[tuple[str, ...]] = ("email",)

    email: str = ""

    def validate(self) -> bool:
        self.errors.clear()
        self.email = normalize_email(self.value("email"))
        if not _looks_like_email(self.email):
            self._add_error("email", "Enter a valid email address")
        return not self.errors


@dataclass(slots=True)
class ResetPasswordForm(BaseForm):
    """New password plus confirmation, checked in that order."""

    FIELDS: ClassVar[tuple[str, ...]] = ("token", "password", "confirm_password")

    token: str = ""
    password: str = ""

    def validate(self) -> bool:
        self.errors.clear()
        self.token = self.value("token").strip()
        self.password = self.value("password")
        if self.password != self.value("confirm_password"):
            self._add_error("confirm_password", "Passwords do not match")
        elif len(self.password) < MIN_PASSWORD_LENGTH:
            self._add_error(
                "password", f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
            )
        return not self.errors
