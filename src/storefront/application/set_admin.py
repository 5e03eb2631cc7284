"""Application service: Set Admin use case."""

from __future__ import annotations

import logging

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.user_repository import UserRepository

logger = logging.getLogger(__name__)


class SetAdminHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self, email: str) -> bool:
        """Grant admin rights to the account with this email.

        Returns False if the user was already an admin.
        """
        user = self._user_repo.get_by_email(email)
        if user is None:
            raise EntityNotFoundError(f"No user with email '{email}'")
        if not user.grant_admin():
            return False
        self._user_repo.save(user)
        logger.info("Granted admin rights to %s", user.email)
        return True
