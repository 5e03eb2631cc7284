"""JSON-file-backed implementation of UserRepository."""

from __future__ import annotations

from datetime import datetime

from storefront.domain.model.user import User
from storefront.domain.repository.user_repository import UserRepository
from storefront.infrastructure.persistence.json_document_store import JsonDocumentStore


class JsonUserRepository(JsonDocumentStore, UserRepository):

    def get_by_id(self, user_id: str) -> User | None:
        for raw in self._load_raw():
            if raw["id"] == user_id:
                return self._to_domain(raw)
        return None

    def get_by_email(self, email: str) -> User | None:
        needle = email.strip().lower()
        for raw in self._load_raw():
            if raw["email"].lower() == needle:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[User]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, user: User) -> None:
        self._upsert_raw("id", self._to_raw(user))

    @staticmethod
    def _to_raw(user: User) -> dict:
        return {
            "id": user.id,
            "email": user.email,
            "createdAt": user.created_at.isoformat(),
            "firstName": user.first_name,
            "lastName": user.last_name,
            "address": user.address,
            "phone": user.phone,
            "isAdmin": user.is_admin,
        }

    @staticmethod
    def _to_domain(raw: dict) -> User:
        return User(
            id=raw["id"],
            email=raw["email"],
            created_at=datetime.fromisoformat(raw["createdAt"]),
            first_name=raw.get("firstName"),
            last_name=raw.get("lastName"),
            address=raw.get("address"),
            phone=raw.get("phone"),
            is_admin=raw.get("isAdmin", False),
        )
