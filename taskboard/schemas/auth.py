"""Request/response schemas for signup, login and the session identity."""

from pydantic import BaseModel, ConfigDict, Field


class SignupRequest(BaseModel):
    """New account fields. Missing fields arrive as empty strings and are rejected by the repository."""

    username: str = Field(default="", description="Unique username")
    password: str = Field(default="", description="Plain-text password, hashed before storage")
    full_name: str = Field(default="", description="Display name")
    email: str = Field(default="", description="Contact email (format not checked)")


class LoginRequest(BaseModel):
    """Credentials for login."""

    username: str = Field(default="", description="Username")
    password: str = Field(default="", description="Password")


class IdentitySnapshot(BaseModel):
    """Authenticated user captured at login and cached in the session."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    full_name: str
    email: str


class ProfileUpdateRequest(BaseModel):
    """New profile values. Both are written as given, even when absent."""

    full_name: str | None = None
    email: str | None = None


class SuccessResponse(BaseModel):
    """Body of every successful mutation: a short message (or the next URL after login)."""

    success: str


class ErrorResponse(BaseModel):
    """Body of every failed request."""

    error: str
