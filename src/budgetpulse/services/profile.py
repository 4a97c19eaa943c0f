"""Profile lookups with sign-up name and currency fallbacks."""

from __future__ import annotations

from dataclasses import dataclass

from ..constants.currencies import DEFAULT_CURRENCY, currency_symbol, format_amount
from ..domain.repositories import ProfileRepository
from ..logging_config import get_logger
from ..models.user import User

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ProfileView:
    """What pages need to know about the signed-in user's preferences."""

    id: str
    name: str
    currency: str = DEFAULT_CURRENCY

    @property
    def symbol(self) -> str:
        return currency_symbol(self.currency)

    def format(self, amount: float) -> str:
        return format_amount(amount, self.currency)


def load_profile(user: User, *, profiles: ProfileRepository) -> ProfileView:
    """Return the stored profile, or one derived from the user record."""

    stored = profiles.get(user.id)
    if stored is None:
        return ProfileView(id=user.id, name=user.name or "")
    return ProfileView(
        id=stored.id,
        name=stored.name or user.name or "",
        currency=stored.currency or DEFAULT_CURRENCY,
    )


def save_profile(
    user: User, *, name: str, currency: str, profiles: ProfileRepository
) -> ProfileView:
    stored = profiles.upsert(user_id=user.id, name=name, currency=currency)
    logger.info("Profile saved", extra={"user_id": user.id, "currency": stored.currency})
    return ProfileView(id=stored.id, name=stored.name, currency=stored.currency)


__all__ = ["ProfileView", "load_profile", "save_profile"]
