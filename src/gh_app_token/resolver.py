"""Resolve a target selector to an installation and exchange it for a token.

The sequence is strictly linear: at most one lookup call, then exactly one
exchange call. Nothing is retried and nothing is cached between calls.
"""

from __future__ import annotations

import logging

import httpx

from .api.client import DEFAULT_TIMEOUT_S, GitHubAppClient
from .api.models import InstallationAccessToken
from .auth.signer import sign
from .config.models import AppTokenConfig
from .errors import EmptyTokenError
from .selector import (
    InstallationIdSelector,
    OrgSelector,
    RepoSelector,
    TargetSelector,
    describe_selector,
    validate_selector,
)

logger = logging.getLogger(__name__)


def resolve_installation_id(client: GitHubAppClient, selector: TargetSelector) -> int:
    selector = validate_selector(selector)
    if isinstance(selector, InstallationIdSelector):
        return selector.installation_id
    if isinstance(selector, OrgSelector):
        installation = client.find_org_installation(selector.org)
    elif isinstance(selector, RepoSelector):
        installation = client.find_repo_installation(selector.owner, selector.name)
    else:
        installation = client.find_user_installation(selector.user)
    logger.info("Resolved %s to installation %d", describe_selector(selector), installation.id)
    return installation.id


def exchange_for_token(client: GitHubAppClient, installation_id: int) -> InstallationAccessToken:
    result = client.create_installation_token(installation_id)
    if not result.token:
        raise EmptyTokenError(
            operation="failed to create installation token",
            endpoint=f"app/installations/{installation_id}/access_tokens",
            detail="response did not include a token",
        )
    if result.expires_at is not None:
        logger.info("Installation token expires at %s", result.expires_at.isoformat())
    return result


def get_installation_token(
    jwt_token: str,
    selector: TargetSelector,
    *,
    host: str | None = None,
    timeout_s: float = DEFAULT_TIMEOUT_S,
    transport: httpx.BaseTransport | None = None,
) -> InstallationAccessToken:
    """Run lookup (when needed) and exchange with one short-lived client."""
    selector = validate_selector(selector)
    with GitHubAppClient(jwt_token, host=host, timeout_s=timeout_s, transport=transport) as client:
        installation_id = resolve_installation_id(client, selector)
        return exchange_for_token(client, installation_id)


def issue_installation_token(
    config: AppTokenConfig,
    *,
    transport: httpx.BaseTransport | None = None,
) -> InstallationAccessToken:
    selector = config.selector()
    jwt_token = sign(config.app_id, config.private_key_path)
    return get_installation_token(
        jwt_token,
        selector,
        host=config.host,
        timeout_s=config.timeout_s,
        transport=transport,
    )
