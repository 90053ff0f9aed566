from typing import Any
from uuid import UUID

from pymongo import ReturnDocument
from pymongo.asynchronous.collection import AsyncCollection

from mesto.core.db import RecordNotFoundError, parse_id
from mesto.core.modules.user.models import ProfileUpdate, User, UserCredentials

# Projection that keeps the password hash inside the database
PUBLIC_PROJECTION = {"password_hash": 0}


class UserStore:
    """MongoDB persistence for users.

    Failures are raised as-is: ``DuplicateKeyError`` for a taken email,
    ``pydantic.ValidationError`` for badly shaped fields, ``MalformedIdError``
    for ids that are not UUIDs and ``RecordNotFoundError`` from fail-if-absent
    operations. Mapping them to domain errors is the caller's job.
    """

    def __init__(self, collection: AsyncCollection[dict[str, Any]]) -> None:
        self._collection = collection

    async def ensure_indexes(self) -> None:
        await self._collection.create_index([("email", 1)], unique=True)

    async def create(self, fields: dict[str, Any]) -> User:
        """Validate and insert a new user, returning it without the hash."""
        # Unset optional fields fall back to model defaults
        user = UserCredentials.model_validate({k: v for k, v in fields.items() if v is not None})
        await self._collection.insert_one(user.to_mongo())
        return user.to_public()

    async def find_by_id(self, user_id: UUID | str, fail_if_absent: bool = False) -> User | None:
        doc = await self._collection.find_one({"_id": parse_id(user_id)}, PUBLIC_PROJECTION)
        return self._public_or_absent(doc, fail_if_absent)

    async def find_public(self, query: dict[str, Any], fail_if_absent: bool = False) -> User | None:
        doc = await self._collection.find_one(query, PUBLIC_PROJECTION)
        return self._public_or_absent(doc, fail_if_absent)

    async def find_with_credential(self, query: dict[str, Any]) -> UserCredentials | None:
        """Find a user including the password hash. Only the login check may use this."""
        doc = await self._collection.find_one(query)
        if doc is None:
            return None
        return UserCredentials.model_validate(doc)

    async def find_all(self) -> list[User]:
        return await User.list_cursor(self._collection.find({}, PUBLIC_PROJECTION))

    async def update_by_id(
        self,
        user_id: UUID | str,
        fields: dict[str, Any],
        validate: bool = True,
        return_updated: bool = True,
        fail_if_absent: bool = True,
    ) -> User | None:
        """Set fields on a user and return the document after (or before) the update."""
        object_id = parse_id(user_id)
        if validate:
            fields = ProfileUpdate.model_validate(fields).model_dump(exclude_unset=True)
        changes = {k: v for k, v in fields.items() if v is not None}
        if not changes:
            # Mongo rejects an empty $set
            doc = await self._collection.find_one({"_id": object_id}, PUBLIC_PROJECTION)
            return self._public_or_absent(doc, fail_if_absent)

        doc = await self._collection.find_one_and_update(
            {"_id": object_id},
            {"$set": changes},
            projection=PUBLIC_PROJECTION,
            return_document=ReturnDocument.AFTER if return_updated else ReturnDocument.BEFORE,
        )
        return self._public_or_absent(doc, fail_if_absent)

    @staticmethod
    def _public_or_absent(doc: dict[str, Any] | None, fail_if_absent: bool) -> User | None:
        if doc is None:
            if fail_if_absent:
                raise RecordNotFoundError("No matching user document")
            return None
        return User.model_validate(doc)
