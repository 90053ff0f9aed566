"""Shared pytest fixtures."""

import copy
from types import SimpleNamespace
from typing import Any
from uuid import UUID

import pytest
import pytest_asyncio
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from mesto.core.modules.session.tokens import TokenService
from mesto.core.modules.user.passwords import PasswordHasher
from mesto.core.modules.user.service import UserService
from mesto.core.modules.user.store import UserStore

TEST_SECRET = "test-secret-key"


class FakeCursor:
    """Async iterable over a snapshot of documents."""

    def __init__(self, docs: list[dict[str, Any]]) -> None:
        self._docs = docs

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        for doc in self._docs:
            yield doc


class FakeCollection:
    """In-memory stand-in for the parts of AsyncCollection the user store uses.

    Supports equality queries, exclusion projections, $set updates and
    unique single-field indexes.
    """

    def __init__(self) -> None:
        self.docs: list[dict[str, Any]] = []
        self.unique_fields: set[str] = set()

    async def create_index(self, keys: list[tuple[str, int]], unique: bool = False) -> str:
        if unique:
            self.unique_fields.update(field for field, _ in keys)
        return "_".join(f"{field}_{direction}" for field, direction in keys)

    async def insert_one(self, doc: dict[str, Any]) -> SimpleNamespace:
        for field in self.unique_fields:
            if any(existing.get(field) == doc.get(field) for existing in self.docs):
                raise DuplicateKeyError(f"E11000 duplicate key error collection: users index: {field}_1", 11000)
        self.docs.append(copy.deepcopy(doc))
        return SimpleNamespace(inserted_id=doc["_id"])

    async def find_one(self, query: dict[str, Any], projection: dict[str, int] | None = None) -> dict[str, Any] | None:
        doc = self._match_first(query)
        return None if doc is None else self._project(doc, projection)

    def find(self, query: dict[str, Any], projection: dict[str, int] | None = None) -> FakeCursor:
        return FakeCursor([self._project(doc, projection) for doc in self.docs if self._matches(doc, query)])

    async def find_one_and_update(
        self,
        query: dict[str, Any],
        update: dict[str, Any],
        projection: dict[str, int] | None = None,
        return_document: bool = ReturnDocument.BEFORE,
    ) -> dict[str, Any] | None:
        doc = self._match_first(query)
        if doc is None:
            return None
        before = self._project(doc, projection)
        doc.update(copy.deepcopy(update["$set"]))
        return self._project(doc, projection) if return_document == ReturnDocument.AFTER else before

    def _match_first(self, query: dict[str, Any]) -> dict[str, Any] | None:
        return next((doc for doc in self.docs if self._matches(doc, query)), None)

    @staticmethod
    def _matches(doc: dict[str, Any], query: dict[str, Any]) -> bool:
        return all(doc.get(key) == value for key, value in query.items())

    @staticmethod
    def _project(doc: dict[str, Any], projection: dict[str, int] | None) -> dict[str, Any]:
        excluded = {field for field, flag in (projection or {}).items() if not flag}
        return {key: copy.deepcopy(value) for key, value in doc.items() if key not in excluded}


class FakeDatabase:
    def __init__(self) -> None:
        self.collections: dict[str, FakeCollection] = {}

    def get_collection(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection())


@pytest.fixture
def collection():
    return FakeCollection()


@pytest.fixture
def store(collection):
    return UserStore(collection)


@pytest.fixture
def hasher():
    """Hasher with the lowest bcrypt cost to keep tests fast."""
    return PasswordHasher(rounds=4)


@pytest.fixture
def tokens():
    return TokenService(TEST_SECRET)


@pytest_asyncio.fixture
async def user_service(hasher, tokens):
    """UserService wired to an in-memory collection with indexes created."""
    service = UserService(FakeDatabase())
    service.set_core(SimpleNamespace(hasher=hasher, tokens=tokens))
    await service.on_start()
    return service


@pytest.fixture
def unknown_user_id():
    return UUID("87654321-4321-8765-4321-876543218765")
