"""Application service: Register User use case.

Creates the profile record for a new account. Credentials themselves are
held by the identity provider and never reach this layer.
"""

from __future__ import annotations

import uuid

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.user import User
from storefront.domain.repository.user_repository import UserRepository


class RegisterUserHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(
        self,
        email: str,
        first_name: str | None = None,
        last_name: str | None = None,
        address: str | None = None,
        phone: str | None = None,
    ) -> User:
        user = User.create(
            id=uuid.uuid4().hex[:20],
            email=email,
            first_name=first_name,
            last_name=last_name,
            address=address,
            phone=phone,
        )
        if self._user_repo.get_by_email(user.email) is not None:
            raise ValidationError(f"An account for '{user.email}' already exists")
        self._user_repo.save(user)
        return user
