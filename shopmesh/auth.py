"""Bearer-token check applied by the gateway to every request."""

from __future__ import annotations

from typing import Any

import jwt

HMAC_ALGORITHMS = ("HS256", "HS384", "HS512")


class AuthError(Exception):
    """Raised when a request carries no usable bearer token."""


def authorize(header: str | None, secret: str | bytes) -> dict[str, Any]:
    """Validate an ``Authorization`` header value and return the token's claims.

    The header must be exactly ``Bearer <token>``, and the token must be an
    HMAC-signed JWT that verifies against ``secret`` and has not expired.
    """
    if not header:
        raise AuthError("Authorization header required")

    parts = header.split(" ")
    if len(parts) != 2 or parts[0] != "Bearer":
        raise AuthError("Invalid authorization header")

    try:
        return jwt.decode(
            parts[1],
            secret,
            algorithms=list(HMAC_ALGORITHMS),
            options={"verify_aud": False, "verify_iat": False},
        )
    except jwt.PyJWTError as exc:
        raise AuthError("Invalid or expired token") from exc