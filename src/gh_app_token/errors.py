from __future__ import annotations

from dataclasses import dataclass


class GhAppTokenError(Exception):
    """Base class for every failure surfaced by gh-app-token."""


class ConfigError(GhAppTokenError):
    pass


class SelectorError(GhAppTokenError):
    pass


class SelectorMissing(SelectorError):
    def __init__(self) -> None:
        super().__init__("--installation-id, --org, --repo, or --user is required")


class SelectorConflict(SelectorError):
    def __init__(self, given: list[str]) -> None:
        self.given = list(given)
        flags = ", ".join(f"--{name.replace('_', '-')}" for name in self.given)
        super().__init__(f"{flags} cannot be used together")


class EmptyOrgName(SelectorError):
    def __init__(self) -> None:
        super().__init__("org name is required")


class EmptyUserName(SelectorError):
    def __init__(self) -> None:
        super().__init__("user name is required")


class InvalidRepoFormat(SelectorError):
    def __init__(self, repo: str, reason: str = "repo must be in format 'owner/repo'") -> None:
        self.repo = repo
        super().__init__(f"{reason} (got {repo!r})")


class EmptyRepoOwner(InvalidRepoFormat):
    def __init__(self, repo: str) -> None:
        super().__init__(repo, "repo owner is required")


class EmptyRepoName(InvalidRepoFormat):
    def __init__(self, repo: str) -> None:
        super().__init__(repo, "repo name is required")


class KeyLoadError(GhAppTokenError):
    pass


class KeyParseError(GhAppTokenError):
    pass


class SigningError(GhAppTokenError):
    pass


@dataclass
class RemoteCallError(GhAppTokenError):
    operation: str
    endpoint: str
    detail: str
    status_code: int | None = None

    def __str__(self) -> str:
        where = f"{self.endpoint} (HTTP {self.status_code})" if self.status_code else self.endpoint
        return f"{self.operation}: {where}: {self.detail}"


class InstallationLookupError(RemoteCallError):
    pass


class ExchangeError(RemoteCallError):
    pass


class EmptyTokenError(ExchangeError):
    pass
