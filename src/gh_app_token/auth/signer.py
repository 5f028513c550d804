"""GitHub App JWT construction.

GitHub accepts app JWTs that expire at most ten minutes after they were
issued. ``iat`` is backdated to absorb clock drift between this host and
GitHub, so the signed window is slightly longer than ``JWT_TTL_SECONDS``.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path

import jwt
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey

from gh_app_token.errors import SigningError

from .keys import load_private_key

logger = logging.getLogger(__name__)

CLOCK_SKEW_SECONDS = 60
JWT_TTL_SECONDS = 10 * 60
JWT_ALGORITHM = "RS256"


def build_claims(app_id: int, now: float | None = None) -> dict[str, object]:
    issued = int(time.time() if now is None else now)
    return {
        "iat": issued - CLOCK_SKEW_SECONDS,
        "exp": issued + JWT_TTL_SECONDS,
        "iss": str(app_id),
    }


def generate_jwt(app_id: int, private_key: RSAPrivateKey, *, now: float | None = None) -> str:
    if app_id <= 0:
        raise SigningError(f"app ID must be a positive integer (got {app_id})")
    claims = build_claims(app_id, now)
    try:
        token = jwt.encode(claims, private_key, algorithm=JWT_ALGORITHM)
    except (jwt.PyJWTError, ValueError, TypeError) as exc:
        raise SigningError(f"failed to sign JWT for app {app_id}: {exc}") from exc
    logger.debug("Signed app JWT for app %s (exp=%s)", app_id, claims["exp"])
    return token


def sign(app_id: int, private_key_path: str | Path, *, now: float | None = None) -> str:
    """Load the key at ``private_key_path`` and return a signed app JWT."""
    return generate_jwt(app_id, load_private_key(private_key_path), now=now)
