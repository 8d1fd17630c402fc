"""
WEB 420 API: User Signup / Login Schemas
========================================

What:  Request and response contracts for POST /api/signup and POST /api/login.

Security:
    UserResponse has no password field, so the bcrypt hash never leaves
    the server even though the ORM row carries it.
"""

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import AliasChoices, Field, field_validator

from web420.schemas.common import CamelModel

# bcrypt only reads the first 72 bytes of its input; longer passwords are
# rejected instead of being silently truncated.
BCRYPT_MAX_PASSWORD_BYTES = 72


class EmailAddress(CamelModel):
    """
    One contact record. Stored as sent: unknown keys are kept and the
    address itself is not format-checked.
    """

    email: Optional[str] = Field(default=None, description="Email address")

    model_config = {**CamelModel.model_config, "extra": "allow"}


class SignupRequest(CamelModel):
    """Body of POST /api/signup."""

    username: str = Field(min_length=1, description="Desired login name")
    password: str = Field(min_length=1, description="Plaintext password (hashed before storage)")
    email_addresses: List[EmailAddress] = Field(
        default_factory=list,
        # emailAddress (singular) is what older clients send
        validation_alias=AliasChoices("emailAddresses", "emailAddress", "email_addresses"),
        description="Contact email records",
    )

    @field_validator("password")
    @classmethod
    def validate_password_length(cls, v: str) -> str:
        if len(v.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
            raise ValueError(
                f"Password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes when UTF-8 encoded"
            )
        return v


class LoginRequest(CamelModel):
    """Body of POST /api/login."""

    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class UserResponse(CamelModel):
    """A registered user as returned by signup."""

    id: uuid.UUID = Field(description="Unique user identifier")
    username: str = Field(description="Login name")
    email_addresses: List[EmailAddress] = Field(description="Contact email records")
    created_at: datetime = Field(description="Registration time (UTC)")
