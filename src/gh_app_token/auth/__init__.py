from .keys import load_private_key, parse_private_key
from .signer import CLOCK_SKEW_SECONDS, JWT_TTL_SECONDS, build_claims, generate_jwt, sign

__all__ = [
    "CLOCK_SKEW_SECONDS",
    "JWT_TTL_SECONDS",
    "build_claims",
    "generate_jwt",
    "load_private_key",
    "parse_private_key",
    "sign",
]
