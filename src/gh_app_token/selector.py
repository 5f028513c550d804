from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .errors import (
    EmptyOrgName,
    EmptyRepoName,
    EmptyRepoOwner,
    EmptyUserName,
    InvalidRepoFormat,
    SelectorConflict,
    SelectorError,
    SelectorMissing,
)


@dataclass(frozen=True)
class InstallationIdSelector:
    installation_id: int


@dataclass(frozen=True)
class OrgSelector:
    org: str


@dataclass(frozen=True)
class RepoSelector:
    owner: str
    name: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"


@dataclass(frozen=True)
class UserSelector:
    user: str


TargetSelector = Union[InstallationIdSelector, OrgSelector, RepoSelector, UserSelector]


def parse_repo(repo: str) -> RepoSelector:
    """Split an ``owner/name`` string, rejecting anything else before any I/O."""
    parts = repo.split("/")
    if len(parts) != 2:
        raise InvalidRepoFormat(repo)
    owner, name = parts
    if not owner:
        raise EmptyRepoOwner(repo)
    if not name:
        raise EmptyRepoName(repo)
    return RepoSelector(owner=owner, name=name)


def validate_selector(selector: TargetSelector) -> TargetSelector:
    """Re-check a selector that may have been built by hand."""
    if isinstance(selector, InstallationIdSelector):
        if selector.installation_id <= 0:
            raise SelectorError(f"installation id must be positive (got {selector.installation_id})")
    elif isinstance(selector, OrgSelector):
        if not selector.org:
            raise EmptyOrgName()
    elif isinstance(selector, UserSelector):
        if not selector.user:
            raise EmptyUserName()
    elif isinstance(selector, RepoSelector):
        parse_repo(selector.full_name)
    else:
        raise TypeError(f"Unsupported selector: {selector!r}")
    return selector


def build_selector(
    *,
    installation_id: int | None = None,
    org: str | None = None,
    repo: str | None = None,
    user: str | None = None,
) -> TargetSelector:
    """Build exactly one selector from the nullable front-end values.

    Zero, ``None`` and empty strings all count as "not given".
    """
    given = [
        name
        for name, value in (
            ("installation_id", installation_id),
            ("org", org),
            ("repo", repo),
            ("user", user),
        )
        if value
    ]
    if not given:
        raise SelectorMissing()
    if len(given) > 1:
        raise SelectorConflict(given)

    if installation_id:
        return validate_selector(InstallationIdSelector(installation_id=installation_id))
    if org:
        return OrgSelector(org=org)
    if repo:
        return parse_repo(repo)
    return UserSelector(user=user or "")


def describe_selector(selector: TargetSelector) -> str:
    if isinstance(selector, InstallationIdSelector):
        return f"installation {selector.installation_id}"
    if isinstance(selector, OrgSelector):
        return f"org {selector.org}"
    if isinstance(selector, RepoSelector):
        return f"repo {selector.full_name}"
    return f"user {selector.user}"
