"""Pydantic schemas for authentication endpoints."""

from pydantic import BaseModel, Field


class SignupRequest(BaseModel):
    """Request schema for registering a user."""

    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=3, max_length=320, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(..., min_length=6, max_length=128)


class LoginRequest(BaseModel):
    """Request schema for signing in."""

    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    """Response schema carrying a freshly issued bearer token."""

    status: bool = True
    message: str
    token: str
