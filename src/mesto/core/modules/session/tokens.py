from datetime import datetime, timedelta
from uuid import UUID

from jose import JWTError, jwt

from mesto.core.modules.session.models import AuthToken, IssuedToken
from mesto.errors import InvalidTokenError
from mesto.utils import now as utc_now

ALGORITHM = "HS256"


class TokenService:
    """Issues and verifies stateless signed session tokens.

    Tokens are JWTs carrying the user id in ``sub`` and an ``exp`` claim.
    There is no server-side session store, so a token stays valid until it
    expires.
    """

    def __init__(self, secret: str, lifetime: timedelta = timedelta(days=7)) -> None:
        if not secret:
            raise ValueError("Token secret must not be empty")
        self._secret = secret
        self.lifetime = lifetime

    def issue(self, user_id: UUID, now: datetime | None = None) -> IssuedToken:
        """Create a signed token for user_id expiring one lifetime after now."""
        issued_at = now or utc_now()
        expires_at = issued_at + self.lifetime
        payload = {"sub": str(user_id), "iat": issued_at, "exp": expires_at}
        token = jwt.encode(payload, self._secret, algorithm=ALGORITHM)
        return IssuedToken(
            token=AuthToken(token), max_age=int(self.lifetime.total_seconds()), expires_at=expires_at
        )

    def verify(self, token: str) -> UUID:
        """Return the user id carried by token.

        Raises:
            InvalidTokenError: If the token is malformed, forged, expired or has no valid subject.
        """
        try:
            payload = jwt.decode(token, self._secret, algorithms=[ALGORITHM], options={"require_exp": True})
        except JWTError as e:
            raise InvalidTokenError from e

        subject = payload.get("sub")
        if not isinstance(subject, str):
            raise InvalidTokenError
        try:
            return UUID(subject)
        except ValueError as e:
            raise InvalidTokenError from e
