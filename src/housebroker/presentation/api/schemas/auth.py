"""Authentication schemas for request/response models."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class RegisterRequest(BaseModel):
    """Request schema for user registration.

    Email format and password strength are checked by the identity service
    so that every violated rule is reported together.
    """

    email: str = Field(..., max_length=256, description="User's email address")
    password: str = Field(..., max_length=128)
    role: str = Field(..., description="Requested role: Broker or Seeker")
    first_name: str = Field(default="", max_length=100)
    last_name: str = Field(default="", max_length=100)
    phone_number: str | None = Field(default=None, max_length=32)
    bio: str | None = Field(default=None, max_length=500)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "broker@example.com",
                "password": "secret1",
                "role": "Broker",
                "first_name": "Anna",
                "last_name": "Berg",
            },
        },
    )


class LoginRequest(BaseModel):
    """Request schema for user login."""

    email: str
    password: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "broker@example.com",
                "password": "secret1",
            },
        },
    )


class MessageResponse(BaseModel):
    message: str


class TokenResponse(BaseModel):
    """Response schema for an issued session token."""

    token: str
    token_type: str = Field(default="bearer")
    expires_in: int = Field(..., description="Token lifetime in seconds")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "token_type": "bearer",
                "expires_in": 43200,
            },
        },
    )


class PrincipalResponse(BaseModel):
    """Claims of the presented session token."""

    user_id: UUID
    email: str
    name: str
    role: str
    issued_at: datetime
    expires_at: datetime


class RolesResponse(BaseModel):
    roles: list[str]
