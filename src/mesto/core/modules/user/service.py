from typing import Any, cast
from uuid import UUID

import structlog
from pymongo.asynchronous.database import AsyncDatabase

from mesto.core.core import Service
from mesto.core.failures import translate_failures
from mesto.core.modules.user.models import LoginResult, RegisteredUserView, User, UserView
from mesto.core.modules.user.store import UserStore
from mesto.core.modules.user.validators import normalize_email, validate_password
from mesto.errors import AuthenticationError

logger = structlog.get_logger(__name__)

# Same message for unknown email and wrong password, so logins don't reveal which accounts exist
INVALID_CREDENTIALS = "Incorrect email or password"
INVALID_DATA = "Invalid user data"


class UserService(Service):
    """Registers, authenticates and updates users."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        super().__init__(database)
        self.store = UserStore(database.get_collection("users"))

    async def on_start(self) -> None:
        await self.store.ensure_indexes()
        logger.debug("user_service_started")

    async def register(
        self,
        email: str,
        password: str,
        name: str | None = None,
        about: str | None = None,
        avatar: str | None = None,
    ) -> RegisteredUserView:
        """Create user with hashed password. Omitted profile fields get defaults."""
        validate_password(password)
        password_hash = await self.core.hasher.hash_async(password)
        with translate_failures(invalid=INVALID_DATA):
            user = await self.store.create(
                {"name": name, "about": about, "avatar": avatar, "email": email, "password_hash": password_hash}
            )
        logger.info("user_registered", user_id=str(user.id))
        return RegisteredUserView.from_domain(user)

    async def login(self, email: str, password: str) -> LoginResult:
        """Check credentials and issue a session token."""
        with translate_failures(invalid=INVALID_CREDENTIALS, invalid_error=AuthenticationError):
            # Registration stores the normalized address, so look up the same form
            user = await self.store.find_with_credential({"email": normalize_email(email)})

        if user is None or not await self.core.hasher.verify_async(password, user.password_hash):
            logger.info("login_failed")
            raise AuthenticationError(INVALID_CREDENTIALS)

        issued = self.core.tokens.issue(user.id)
        return LoginResult(user=UserView.from_domain(user.to_public()), token=issued.token, max_age=issued.max_age)

    async def get_current_user(self, user_id: UUID | str) -> UserView:
        with translate_failures(not_found="User not found", invalid=INVALID_DATA):
            user = await self._find_existing(user_id)
        return UserView.from_domain(user)

    async def get_user_by_id(self, user_id: UUID | str) -> UserView:
        with translate_failures(not_found=f"User '{user_id}' not found", invalid=INVALID_DATA):
            user = await self._find_existing(user_id)
        return UserView.from_domain(user)

    async def list_users(self) -> list[UserView]:
        users = await self.store.find_all()
        return [UserView.from_domain(user) for user in users]

    async def update_profile(self, user_id: UUID | str, name: str, about: str) -> UserView:
        """Update name and about, validated like registration."""
        return await self._update(user_id, {"name": name, "about": about})

    async def update_avatar(self, user_id: UUID | str, avatar: str) -> UserView:
        return await self._update(user_id, {"avatar": avatar})

    async def _update(self, user_id: UUID | str, fields: dict[str, Any]) -> UserView:
        with translate_failures(not_found="User not found", invalid=INVALID_DATA):
            updated = await self.store.update_by_id(user_id, fields, validate=True, return_updated=True)
        # fail_if_absent guarantees a document
        user = cast(User, updated)
        logger.info("user_updated", user_id=str(user.id), fields=sorted(fields))
        return UserView.from_domain(user)

    async def _find_existing(self, user_id: UUID | str) -> User:
        return cast(User, await self.store.find_by_id(user_id, fail_if_absent=True))
