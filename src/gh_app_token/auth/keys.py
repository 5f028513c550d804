from __future__ import annotations

import base64
import binascii
import re
from pathlib import Path

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey

from gh_app_token.errors import KeyLoadError, KeyParseError

_PEM_BLOCK_RE = re.compile(
    rb"-----BEGIN (?P<label>[A-Z0-9 ]+)-----(?P<body>.*?)-----END (?P=label)-----",
    re.DOTALL,
)


def _decode_pem_block(data: bytes, *, source: str) -> str:
    match = _PEM_BLOCK_RE.search(data)
    if match is None:
        raise KeyLoadError(f"failed to decode PEM block in {source}")
    # Legacy encrypted PKCS#1 blocks carry "Proc-Type:" / "DEK-Info:" headers.
    lines = [
        line.strip()
        for line in match.group("body").splitlines()
        if line.strip() and b":" not in line
    ]
    try:
        payload = base64.b64decode(b"".join(lines), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise KeyLoadError(f"failed to decode PEM block in {source}") from exc
    if not payload:
        raise KeyLoadError(f"PEM block in {source} is empty")
    return match.group("label").decode("ascii")


def parse_private_key(data: bytes, *, source: str = "private key") -> RSAPrivateKey:
    """Parse PEM bytes (PKCS#1 or PKCS#8) into an RSA private key."""
    label = _decode_pem_block(data, source=source)
    try:
        key = serialization.load_pem_private_key(data, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise KeyParseError(f"failed to parse private key from {source}: {exc}") from exc
    if not isinstance(key, RSAPrivateKey):
        raise KeyParseError(
            f"private key in {source} is not an RSA key ({label}, {type(key).__name__})"
        )
    return key


def load_private_key(path: str | Path) -> RSAPrivateKey:
    key_path = Path(path)
    try:
        data = key_path.read_bytes()
    except OSError as exc:
        raise KeyLoadError(f"failed to read private key file {key_path}: {exc}") from exc
    return parse_private_key(data, source=str(key_path))
