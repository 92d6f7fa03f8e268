"""
Pydantic models for user data.

Registration and login take the same payload: an e‑mail and a
password.  The password is never returned through the API; login
answers with a signed token only.
"""

from pydantic import BaseModel, Field


class UserCredentials(BaseModel):
    """Schema for registering or authenticating a user."""

    email: str = Field(..., min_length=1, examples=["user@example.com"])
    password: str = Field(..., min_length=1, examples=["strongpassword"])


class LoginRead(BaseModel):
    """Result of a successful login."""

    token: str
