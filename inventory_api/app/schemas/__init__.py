"""
Pydantic schema definitions for API payloads.

Users and products each define their own models for request and
response bodies.  ``ErrorRead`` is the body of every error response.
"""

from pydantic import BaseModel


class ErrorRead(BaseModel):
    """Error body returned by every failing route."""

    error: str
