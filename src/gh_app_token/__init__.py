"""Issue GitHub App installation access tokens."""

from ._version import __version__
from .errors import (
    EmptyTokenError,
    ExchangeError,
    GhAppTokenError,
    InstallationLookupError,
    InvalidRepoFormat,
    KeyLoadError,
    KeyParseError,
    SelectorConflict,
    SelectorMissing,
    SigningError,
)
from .resolver import (
    exchange_for_token,
    get_installation_token,
    issue_installation_token,
    resolve_installation_id,
)

__all__ = [
    "EmptyTokenError",
    "ExchangeError",
    "GhAppTokenError",
    "InstallationLookupError",
    "InvalidRepoFormat",
    "KeyLoadError",
    "KeyParseError",
    "SelectorConflict",
    "SelectorMissing",
    "SigningError",
    "__version__",
    "exchange_for_token",
    "get_installation_token",
    "issue_installation_token",
    "resolve_installation_id",
]
