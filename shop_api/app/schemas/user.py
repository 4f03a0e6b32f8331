"""
Pydantic models for user data.

The plaintext password only ever appears in ``UserCreate``.  It is
hashed by the service before the user is stored, and ``UserRead``
has no password field at all, so neither the plaintext nor the
digest can reach a response body.
"""

from pydantic import BaseModel, EmailStr, Field

from ..core.security import MIN_PASSWORD_LENGTH


class UserCreate(BaseModel):
    """Schema for registering a user."""

    username: str = Field(..., examples=["alice"])
    password: str = Field(..., min_length=MIN_PASSWORD_LENGTH, examples=["s3cret!"])
    email: EmailStr = Field(..., examples=["alice@example.com"])

    model_config = {
        "strict": True,
    }


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: str
    username: str
    email: str
