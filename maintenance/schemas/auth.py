"""Request/response schemas for registration, login and token claims."""

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """Registration payload. Personal fields use camelCase on the wire."""

    model_config = {"extra": "ignore", "populate_by_name": True}

    username: str = Field(..., description="Unique username")
    password: str = Field(..., description="Plain password; stored only as a bcrypt hash")
    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")
    email: str = Field(default="")


class LoginCredentials(BaseModel):
    """Username and password pair; used for login and account deletion, never persisted."""

    model_config = {"extra": "ignore"}

    username: str
    password: str


class Claims(BaseModel):
    """Decoded token payload attached to authenticated requests."""

    model_config = {"extra": "ignore"}

    username: str
    iss: str | None = None
    iat: int | float | None = None
    exp: int | float
