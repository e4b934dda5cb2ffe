"""Auth schemas."""

from pydantic import EmailStr, Field

from poloclub.schemas.common import BaseSchema


class SignUpRequest(BaseSchema):
    """Sign-up request."""

    email: EmailStr
    password: str = Field(..., min_length=8, max_length=72)
    player_id: int | None = None


class SignInRequest(BaseSchema):
    """E-mail/password sign-in request."""

    email: EmailStr
    password: str


class TokenResponse(BaseSchema):
    """Issued access token."""

    access_token: str
    token_type: str = "bearer"
    is_admin: bool = False


class UserResponse(BaseSchema):
    """Signed-in identity."""

    id: int
    email: str
    player_id: int | None = None
    roles: list[str] = Field(default_factory=list)
    is_admin: bool = False
