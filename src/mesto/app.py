from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from uuid import UUID

from mesto.config import Config
from mesto.core.core import Core
from mesto.core.modules.session.models import AuthToken
from mesto.core.modules.user.models import LoginResult, RegisteredUserView, UserView
from mesto.errors import AuthenticationError


class App:
    """Facade for all application operations, authenticates callers before delegating to Core."""

    def __init__(self, config: Config) -> None:
        self._core = Core(config)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Application lifespan management - delegates to Core."""
        async with self._core.lifespan():
            yield

    def authenticate(self, auth_token: AuthToken) -> UUID:
        """Return the user id carried by a valid token. Raises InvalidTokenError otherwise."""
        return self._core.tokens.verify(auth_token)

    def is_auth_token_valid(self, auth_token: AuthToken) -> bool:
        try:
            self.authenticate(auth_token)
        except AuthenticationError:
            return False
        return True

    async def register(
        self, email: str, password: str, name: str | None = None, about: str | None = None, avatar: str | None = None
    ) -> RegisteredUserView:
        """Create a new user account (public)."""
        return await self._core.services.user.register(email, password, name=name, about=about, avatar=avatar)

    async def login(self, email: str, password: str) -> LoginResult:
        """Authenticate user and issue a session token (public)."""
        return await self._core.services.user.login(email, password)

    async def get_all_users(self, auth_token: AuthToken) -> list[UserView]:
        self.authenticate(auth_token)
        return await self._core.services.user.list_users()

    async def get_current_user(self, auth_token: AuthToken) -> UserView:
        """Get current authenticated user profile."""
        user_id = self.authenticate(auth_token)
        return await self._core.services.user.get_current_user(user_id)

    async def get_user_by_id(self, auth_token: AuthToken, user_id: str) -> UserView:
        self.authenticate(auth_token)
        return await self._core.services.user.get_user_by_id(user_id)

    async def update_profile(self, auth_token: AuthToken, name: str, about: str) -> UserView:
        """Update name and about of the current user."""
        user_id = self.authenticate(auth_token)
        return await self._core.services.user.update_profile(user_id, name, about)

    async def update_avatar(self, auth_token: AuthToken, avatar: str) -> UserView:
        """Update avatar of the current user."""
        user_id = self.authenticate(auth_token)
        return await self._core.services.user.update_avatar(user_id, avatar)
