"""Session token models."""

from datetime import datetime
from typing import NewType

from pydantic import BaseModel

AuthToken = NewType("AuthToken", str)


class IssuedToken(BaseModel):
    """Signed session token with its lifetime, as handed to the HTTP layer."""

    token: AuthToken
    max_age: int  # seconds, used for the cookie Max-Age
    expires_at: datetime
