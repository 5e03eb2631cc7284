"""User aggregate: the profile record kept next to the identity provider."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone

from storefront.domain.exceptions import ValidationError

_EMAIL = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass
class User:
    id: str
    email: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    first_name: str | None = None
    last_name: str | None = None
    address: str | None = None
    phone: str | None = None
    is_admin: bool = False

    @staticmethod
    def create(
        id: str,
        email: str,
        first_name: str | None = None,
        last_name: str | None = None,
        address: str | None = None,
        phone: str | None = None,
    ) -> User:
        email = (email or "").strip().lower()
        if not _EMAIL.match(email):
            raise ValidationError(f"Invalid email address: '{email}'")
        return User(
            id=id,
            email=email,
            first_name=_clean(first_name),
            last_name=_clean(last_name),
            address=_clean(address),
            phone=_clean(phone),
        )

    @property
    def display_name(self) -> str:
        full = " ".join(part for part in (self.first_name, self.last_name) if part)
        return full or self.email or "Anonymous"

    def grant_admin(self) -> bool:
        """Mark the user as an administrator. Returns False if already one."""
        if self.is_admin:
            return False
        self.is_admin = True
        return True


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None
