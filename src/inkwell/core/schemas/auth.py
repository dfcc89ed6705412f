"""
Authentication and authorization schemas.

These schemas define the API contracts for user authentication,
registration, and JWT token management.
"""

import uuid
from datetime import datetime
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator


# trimmed before the length check
Username = Annotated[str, StringConstraints(strip_whitespace=True, min_length=3, max_length=50)]


def _check_username(v: str) -> str:
    if not v.replace('_', '').replace('-', '').isalnum():
        raise ValueError('Username can only contain letters, numbers, hyphens, and underscores')
    return v


class LoginRequest(BaseModel):
    """User login request schema."""

    username: str = Field(min_length=1, max_length=50, description="Username")
    password: str = Field(min_length=1, max_length=128, description="User password")

    model_config = ConfigDict(
        json_schema_extra={"example": {"username": "writer", "password": "ink4ever"}}
    )


class RegisterRequest(BaseModel):
    """User registration request schema."""

    username: Username = Field(description="Unique username")
    password: str = Field(min_length=4, max_length=128, description="User password")

    @field_validator('username')
    @classmethod
    def validate_username(cls, v):
        """Validate username format."""
        return _check_username(v)

    model_config = ConfigDict(
        json_schema_extra={"example": {"username": "writer", "password": "ink4ever"}}
    )


class UserResponse(BaseModel):
    """User information response schema."""

    id: uuid.UUID = Field(description="User unique identifier")
    username: str = Field(description="Username")
    is_active: bool = Field(description="Whether user account is active")
    created_at: datetime = Field(description="Account creation timestamp")
    updated_at: Optional[datetime] = Field(default=None, description="Last update timestamp")
    notes_count: Optional[int] = Field(default=None, description="Notes outside the trash")

    model_config = ConfigDict(from_attributes=True)


class TokenResponse(BaseModel):
    """JWT token response schema."""

    access_token: str = Field(description="JWT access token")
    refresh_token: str = Field(description="Opaque refresh token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(description="Token expiration time in seconds")
    user: UserResponse = Field(description="User information")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "access_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "refresh_token": "q0P2x8kQ...",
                "token_type": "bearer",
                "expires_in": 3600,
                "user": {
                    "id": "123e4567-e89b-12d3-a456-426614174000",
                    "username": "writer",
                    "is_active": True,
                    "created_at": "2026-03-01T10:30:00Z",
                },
            }
        }
    )


class RefreshTokenRequest(BaseModel):
    """Refresh token request schema."""

    refresh_token: str = Field(min_length=1, description="Refresh token")


class PasswordChangeRequest(BaseModel):
    """Password change request schema."""

    current_password: str = Field(min_length=1, description="Current password")
    new_password: str = Field(min_length=4, max_length=128, description="New password")
