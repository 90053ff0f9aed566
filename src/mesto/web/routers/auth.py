from fastapi import APIRouter, Response
from pydantic import BaseModel, Field

from mesto.core.modules.user.models import RegisteredUserView, UserView
from mesto.web.deps import TOKEN_COOKIE, AppDep, ConfigDep
from mesto.web.openapi import ErrorResponse

router = APIRouter(tags=["auth"])


class SignupRequest(BaseModel):
    """Registration request. Profile fields are optional and fall back to defaults."""

    email: str = Field(..., description="Email address, used as login")
    password: str = Field(..., min_length=1, description="Password")
    name: str | None = Field(None, description="Display name, 2 to 30 characters")
    about: str | None = Field(None, description="Short bio, 2 to 30 characters")
    avatar: str | None = Field(None, description="Avatar URL")

    model_config = {
        "json_schema_extra": {
            "examples": [{"email": "cousteau@example.com", "password": "calypso1950", "name": "Jacques"}]
        }
    }


class SigninRequest(BaseModel):
    """Authentication request."""

    email: str = Field(..., description="Email address")
    password: str = Field(..., description="Password")


class SigninResponse(UserView):
    """Authenticated user profile with the session token."""

    token: str = Field(..., description="Session token, also set as the jwt cookie")


@router.post(
    "/signup",
    summary="Register user",
    description="Create a new user account.",
    operation_id="signup",
    status_code=201,
    responses={
        201: {"description": "User created"},
        400: {"model": ErrorResponse, "description": "Invalid user data"},
        409: {"model": ErrorResponse, "description": "Email already registered"},
    },
)
async def signup(req: SignupRequest, app: AppDep) -> RegisteredUserView:
    return await app.register(req.email, req.password, name=req.name, about=req.about, avatar=req.avatar)


@router.post(
    "/signin",
    summary="Authenticate user",
    description="Authenticate with email and password. The session token is returned and set as an HTTP-only cookie.",
    operation_id="signin",
    responses={
        200: {"description": "Successfully authenticated"},
        401: {"model": ErrorResponse, "description": "Incorrect email or password"},
    },
)
async def signin(req: SigninRequest, app: AppDep, config: ConfigDep, response: Response) -> SigninResponse:
    result = await app.login(req.email, req.password)

    # The frontend lives on another origin, hence SameSite=None
    response.set_cookie(
        key=TOKEN_COOKIE,
        value=result.token,
        httponly=True,
        secure=config.cookie_secure,
        samesite="none",
        max_age=result.max_age,
    )

    return SigninResponse(**result.user.model_dump(), token=result.token)


@router.post(
    "/signout",
    summary="End session",
    description="Remove the session cookie. Tokens are stateless and stay valid until they expire.",
    operation_id="signout",
    status_code=204,
    responses={204: {"description": "Cookie removed"}},
)
async def signout(config: ConfigDep, response: Response) -> None:
    response.delete_cookie(TOKEN_COOKIE, httponly=True, secure=config.cookie_secure, samesite="none")
