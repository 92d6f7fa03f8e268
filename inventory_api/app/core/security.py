"""
Security helpers for password hashing and JWT authentication.

This module implements a lightweight JSON Web Token (JWT) mechanism
using HMAC‑SHA256 signatures and base64url encoding.  Login tokens
carry the user's e‑mail as audience (``aud``) and the issuance time
(``iat``); they have no expiration claim and stay valid for as long
as the signing secret is unchanged.  The secret is passed in by the
caller rather than read from settings, so each ``UserService`` signs
with the key it was constructed with.

Passwords are hashed with PBKDF2‑HMAC‑SHA256 and a random salt and
compared in constant time.
"""

import base64
import binascii
import hashlib
import hmac
import json
import os
import time
from typing import Any, Dict, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .errors import TokenSigningError

ALGORITHM = "HS256"
PBKDF2_ITERATIONS = 100_000

_HEADER = {"alg": ALGORITHM, "typ": "JWT"}


def login_claims(email: str) -> Dict[str, Any]:
    """Claims of a login token: the e‑mail as audience and the issuance time."""
    return {"aud": [email], "iat": int(time.time())}


def _b64_url_encode(data: bytes) -> str:
    """Base64‑url encode bytes without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    """Decode base64‑url encoded string, adding padding if necessary."""
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes, secret: str) -> bytes:
    """Compute HMAC‑SHA256 signature of a message using the given secret."""
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def create_access_token(claims: Dict[str, Any], secret: str) -> str:
    """Create a signed JWT carrying ``claims``.

    The token is a string of the form ``header.payload.signature``,
    where each part is base64url encoded.  Clients must include it in
    the ``Authorization`` header as ``Bearer <token>``.

    Parameters
    ----------
    claims : dict
        Claims to embed, e.g. ``{"aud": ["user@example.com"], "iat": 1653800217}``.
    secret : str
        Shared HMAC key.

    Raises
    ------
    TokenSigningError
        If the claims cannot be serialised or the secret is unusable.
    """
    try:
        header_b64 = _b64_url_encode(json.dumps(_HEADER, separators=(",", ":")).encode("utf-8"))
        payload_b64 = _b64_url_encode(json.dumps(claims, separators=(",", ":")).encode("utf-8"))
        signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
        signature_b64 = _b64_url_encode(_sign(signing_input, secret))
    except (TypeError, ValueError) as exc:
        raise TokenSigningError(f"sign string: {exc}") from exc
    return f"{header_b64}.{payload_b64}.{signature_b64}"


def decode_access_token(token: str, secret: str) -> Optional[Dict[str, Any]]:
    """Verify and decode a JWT.

    Splits the token into header, payload and signature, checks that
    the header announces HS256 and verifies the HMAC signature.  No
    time‑based claim is checked.  Returns the payload dictionary on
    success, otherwise ``None``.
    """
    parts = token.split(".")
    if len(parts) != 3:
        return None
    header_b64, payload_b64, signature_b64 = parts
    try:
        header = json.loads(_b64_url_decode(header_b64).decode("utf-8"))
        if not isinstance(header, dict) or header.get("alg") != ALGORITHM:
            return None
        signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
        expected_sig = _sign(signing_input, secret)
        actual_sig = _b64_url_decode(signature_b64)
        # Constant‑time comparison to prevent timing attacks
        if not hmac.compare_digest(expected_sig, actual_sig):
            return None
        payload = json.loads(_b64_url_decode(payload_b64).decode("utf-8"))
    except (binascii.Error, UnicodeError, ValueError, RecursionError):
        return None
    if not isinstance(payload, dict):
        return None
    return payload


security = HTTPBearer(auto_error=False)


def get_bearer_token(credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)) -> str:
    """Dependency returning the raw bearer token of the request.

    Raises HTTP 401 when the ``Authorization`` header is missing or
    does not use the ``Bearer`` scheme.  Signature checks are left to
    ``UserService.validate_token``.
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return credentials.credentials


def hash_password(password: str) -> str:
    """Hash a password using PBKDF2‑HMAC with SHA‑256.

    A 16‑byte random salt is generated for each password.  The
    resulting string contains the salt and hash separated by a
    ``$`` (salt in hex, then hash in hex).
    """
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return f"{salt.hex()}${dk.hex()}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a stored salt+hash string."""
    try:
        salt_hex, hash_hex = hashed_password.split("$", 1)
        salt = bytes.fromhex(salt_hex)
        stored_hash = bytes.fromhex(hash_hex)
    except ValueError:
        return False
    dk = hashlib.pbkdf2_hmac("sha256", plain_password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return hmac.compare_digest(dk, stored_hash)
