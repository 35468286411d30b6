"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Credentials for login."""

    username: str = Field(..., min_length=1, max_length=255, description="Username")
    password: str = Field(..., min_length=1, max_length=128, description="Password")


class TokenResponse(BaseModel):
    """JWT returned after successful login; send it as Authorization: Bearer <token>."""

    token: str = Field(..., description="JWT access token")


class CurrentUser(BaseModel):
    """Identity taken from a verified token, attached to the request for handlers."""

    username: str

