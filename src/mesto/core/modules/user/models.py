from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field

from mesto.core.db import MongoModel

DEFAULT_NAME = "Jacques-Yves Cousteau"
DEFAULT_ABOUT = "Explorer"
DEFAULT_AVATAR = "https://pictures.s3.yandex.net/resources/jacques-cousteau_1604399756.png"

URL_PATTERN = r"^https?://(www\.)?[\w\-.~:/?#\[\]@!$&'()*+,;=]+#?$"

Name = Annotated[str, Field(min_length=2, max_length=30)]
About = Annotated[str, Field(min_length=2, max_length=30)]
AvatarUrl = Annotated[str, Field(pattern=URL_PATTERN)]


class User(MongoModel):
    """User domain model without credentials (public representation)."""

    name: Name = DEFAULT_NAME
    about: About = DEFAULT_ABOUT
    avatar: AvatarUrl = DEFAULT_AVATAR
    email: EmailStr


class UserCredentials(User):
    """User with the stored password hash, used only by the login check."""

    password_hash: str  # bcrypt hash

    def to_public(self) -> User:
        return User.model_validate(self.model_dump(exclude={"password_hash"}))


class ProfileUpdate(BaseModel):
    """Mutable profile fields, validated with the same constraints as creation."""

    name: Name | None = None
    about: About | None = None
    avatar: AvatarUrl | None = None


class UserView(BaseModel):
    """User profile (API representation)."""

    id: UUID = Field(..., description="User ID")
    name: str = Field(..., description="Display name")
    about: str = Field(..., description="Short bio")
    avatar: str = Field(..., description="Avatar URL")
    email: str = Field(..., description="Email address, used as login")

    @classmethod
    def from_domain(cls, user: User) -> "UserView":
        """Create view model from domain model."""
        return cls(id=user.id, name=user.name, about=user.about, avatar=user.avatar, email=user.email)


class RegisteredUserView(BaseModel):
    """Registration result; id is not disclosed."""

    name: str = Field(..., description="Display name")
    about: str = Field(..., description="Short bio")
    avatar: str = Field(..., description="Avatar URL")
    email: str = Field(..., description="Email address, used as login")

    @classmethod
    def from_domain(cls, user: User) -> "RegisteredUserView":
        return cls(name=user.name, about=user.about, avatar=user.avatar, email=user.email)


class LoginResult(BaseModel):
    """Authenticated user together with the issued session token."""

    user: UserView
    token: str
    max_age: int  # seconds
